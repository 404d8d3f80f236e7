"""Counter maintenance service.

Denormalized counters are recomputed from source rows after every
mutation instead of being incremented. Recomputing is idempotent and
converges even when earlier updates were lost.

Each recompute, reads and write together, runs inside one savepoint. A
failed recompute rolls back to that savepoint, is logged and returns
``None``, leaving the caller's own writes intact.
"""

from typing import Optional

import logfire

from alumni.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    TargetRepository,
    TransactionManager,
)
from alumni.domain.value import (
    CommentableType,
    CommentId,
    LikeableType,
    ReplyId,
    TargetId,
    TargetType,
)

from .base import Service


class CounterService(Service):
    """Domain service recomputing like, reply and comment counters."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        target_repository: TargetRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository
        self.target_repository = target_repository
        self.transaction_manager = transaction_manager

    async def recompute_comment_count(
        self, kind: CommentableType, target_id: TargetId
    ) -> Optional[int]:
        """Recompute a target's comment count.

        The count covers active comments on the target plus active replies
        (at any depth) under those comments.

        Args:
            kind: Commentable type
            target_id: Target ID

        Returns:
            The new count, or None if the recompute failed
        """
        with logfire.span(
            "counter_service.recompute_comment_count",
            kind=kind.value,
            target_id=target_id,
        ):
            try:
                async with self.transaction_manager.savepoint():
                    comment_ids = (
                        await self.comment_repository.find_active_ids_by_target(
                            kind, target_id
                        )
                    )
                    reply_total = await self.reply_repository.count_active_by_comments(
                        comment_ids
                    )
                    count = len(comment_ids) + reply_total
                    await self.target_repository.set_comment_count(
                        TargetType(kind.value), target_id, count
                    )
            except Exception as e:
                logfire.error(
                    "Comment count recompute failed",
                    kind=kind.value,
                    target_id=target_id,
                    error=str(e),
                )
                return None

            logfire.info(
                "Comment count updated", kind=kind.value, target_id=target_id, count=count
            )
            return count

    async def recompute_reply_count(self, comment_id: CommentId) -> Optional[int]:
        """Recompute a comment's count of active direct replies."""
        with logfire.span(
            "counter_service.recompute_reply_count", comment_id=comment_id
        ):
            try:
                async with self.transaction_manager.savepoint():
                    count = await self.reply_repository.count_direct_replies(comment_id)
                    await self.comment_repository.set_reply_count(comment_id, count)
            except Exception as e:
                logfire.error(
                    "Reply count recompute failed", comment_id=comment_id, error=str(e)
                )
                return None
            return count

    async def recompute_nested_reply_count(
        self, parent_reply_id: ReplyId
    ) -> Optional[int]:
        """Recompute a reply's count of active child replies."""
        with logfire.span(
            "counter_service.recompute_nested_reply_count",
            parent_reply_id=parent_reply_id,
        ):
            try:
                async with self.transaction_manager.savepoint():
                    count = await self.reply_repository.count_children(parent_reply_id)
                    await self.reply_repository.set_reply_count(parent_reply_id, count)
            except Exception as e:
                logfire.error(
                    "Nested reply count recompute failed",
                    parent_reply_id=parent_reply_id,
                    error=str(e),
                )
                return None
            return count

    async def recompute_like_count(
        self, kind: LikeableType, likeable_id: TargetId
    ) -> Optional[int]:
        """Recompute the like count of any likeable entity.

        Args:
            kind: Likeable type
            likeable_id: ID of the liked entity

        Returns:
            The new count, or None if the recompute failed
        """
        with logfire.span(
            "counter_service.recompute_like_count",
            kind=kind.value,
            likeable_id=likeable_id,
        ):
            try:
                async with self.transaction_manager.savepoint():
                    count = await self.like_repository.count_by_likeable(
                        kind, likeable_id
                    )
                    await self._write_like_count(kind, likeable_id, count)
            except Exception as e:
                logfire.error(
                    "Like count recompute failed",
                    kind=kind.value,
                    likeable_id=likeable_id,
                    error=str(e),
                )
                return None
            return count

    async def _write_like_count(
        self, kind: LikeableType, likeable_id: TargetId, count: int
    ) -> None:
        if kind is LikeableType.COMMENT:
            await self.comment_repository.set_like_count(CommentId(likeable_id), count)
        elif kind is LikeableType.REPLY:
            await self.reply_repository.set_like_count(ReplyId(likeable_id), count)
        else:
            await self.target_repository.set_like_count(
                TargetType(kind.value), likeable_id, count
            )
