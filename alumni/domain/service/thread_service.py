"""Thread assembly service.

Builds depth-bounded reply trees under comments, annotating every node
with whether the requesting user likes it.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import logfire

from alumni.domain.model import Comment, Reply
from alumni.domain.repository import ReplyRepository
from alumni.domain.value import CommentId, LikeableType, ReplyId, TargetId, UserId

from .base import Service
from .like_service import LikeService


@dataclass
class ReplyNode:
    """A reply and the visible part of its subtree."""

    reply: Reply
    is_liked: bool
    children: list["ReplyNode"] = field(default_factory=list)


@dataclass
class CommentThread:
    """A top-level comment with its reply tree."""

    comment: Comment
    is_liked: bool
    replies: list[ReplyNode] = field(default_factory=list)


class ThreadService(Service):
    """Domain service assembling comment threads.

    One query fetches the replies of each parent node, and one batched
    lookup resolves like state for each sibling set. Siblings are always
    oldest first. Only active replies are descended into, so anything
    below a hidden or deleted reply is not rendered.
    """

    def __init__(
        self,
        reply_repository: ReplyRepository,
        like_service: LikeService,
    ) -> None:
        """Initialize thread service.

        Args:
            reply_repository: Reply repository
            like_service: Like lookups for annotations
        """
        self.reply_repository = reply_repository
        self.like_service = like_service

    async def build_threads(
        self,
        comments: Sequence[Comment],
        user_id: Optional[UserId],
        include_replies: bool = True,
        max_depth: int = 3,
    ) -> list[CommentThread]:
        """Annotate comments and attach their reply trees.

        Args:
            comments: Page of top-level comments, in display order
            user_id: Requesting user, or None for anonymous callers
            include_replies: Whether to attach reply trees at all
            max_depth: Number of reply levels to include

        Returns:
            One thread per comment, in the same order
        """
        with logfire.span(
            "thread_service.build_threads",
            comment_count=len(comments),
            include_replies=include_replies,
            max_depth=max_depth,
        ):
            liked = await self.like_service.get_liked_ids(
                user_id,
                LikeableType.COMMENT,
                [TargetId(comment.id) for comment in comments if comment.id],
            )

            threads = []
            for comment in comments:
                replies: list[ReplyNode] = []
                if include_replies and comment.id is not None:
                    replies = await self.get_direct_replies(
                        comment.id, max_depth, user_id
                    )
                threads.append(
                    CommentThread(
                        comment=comment,
                        is_liked=comment.id in liked,
                        replies=replies,
                    )
                )
            return threads

    async def get_direct_replies(
        self,
        comment_id: CommentId,
        max_depth: int,
        user_id: Optional[UserId] = None,
    ) -> list[ReplyNode]:
        """Reply tree under a comment, ``max_depth`` levels deep.

        Returns an empty list when ``max_depth`` is zero or negative.
        """
        if max_depth <= 0:
            return []
        replies = await self.reply_repository.find_direct_replies(comment_id)
        return await self._build_nodes(replies, max_depth, user_id)

    async def get_nested_replies(
        self,
        parent_reply_id: ReplyId,
        max_depth: int,
        user_id: Optional[UserId] = None,
    ) -> list[ReplyNode]:
        """Reply tree under a reply, ``max_depth`` levels deep."""
        if max_depth <= 0:
            return []
        replies = await self.reply_repository.find_children(parent_reply_id)
        return await self._build_nodes(replies, max_depth, user_id)

    async def _build_nodes(
        self,
        replies: list[Reply],
        max_depth: int,
        user_id: Optional[UserId],
    ) -> list[ReplyNode]:
        liked = await self.like_service.get_liked_ids(
            user_id,
            LikeableType.REPLY,
            [TargetId(reply.id) for reply in replies if reply.id],
        )

        nodes = []
        for reply in replies:
            children: list[ReplyNode] = []
            if reply.id is not None:
                children = await self.get_nested_replies(
                    reply.id, max_depth - 1, user_id
                )
            nodes.append(
                ReplyNode(reply=reply, is_liked=reply.id in liked, children=children)
            )
        return nodes
