"""Reply domain service."""

from datetime import datetime
from typing import Optional

import logfire

from alumni.config import DiscussionSettings
from alumni.domain.error import DepthExceededError, NotFoundError, ValidationError
from alumni.domain.model import Identity, Reply
from alumni.domain.repository import ReplyRepository
from alumni.domain.validation import validate_content
from alumni.domain.value import CommentId, ContentStatus, ReplyId, UserId

from .comment_service import CommentService
from .counter_service import CounterService
from .discussion import DiscussionService


class ReplyService(DiscussionService):
    """Domain service for reply operations.

    Every reply belongs to a root comment. Replies to replies inherit that
    root and sit one level deeper than their parent, up to
    ``max_reply_depth``.
    """

    resource = "Reply"

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_service: CommentService,
        counter_service: CounterService,
        settings: DiscussionSettings,
    ) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
            comment_service: Comment lookups for root comments
            counter_service: Counter recomputation
            settings: Discussion limits
        """
        super().__init__(settings)
        self.reply_repository = reply_repository
        self.comment_service = comment_service
        self.counter_service = counter_service

    async def create_reply(
        self,
        content: str,
        author_id: UserId,
        comment_id: Optional[CommentId] = None,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> Reply:
        """Reply to a comment, or to another reply when a parent is given.

        Args:
            content: Reply text (trimmed before storing)
            author_id: Author user ID
            comment_id: Comment replied to directly
            parent_reply_id: Reply replied to; takes precedence over comment_id

        Returns:
            Created reply

        Raises:
            ValidationError: If the content is invalid or no parent is given
            NotFoundError: If the parent comment or reply is not active
            DepthExceededError: If the reply would nest too deeply
        """
        with logfire.span(
            "reply_service.create_reply",
            comment_id=comment_id,
            parent_reply_id=parent_reply_id,
            author_id=author_id,
        ):
            text = validate_content(content, self.settings.reply_max_length)

            if parent_reply_id is not None:
                parent = await self.reply_repository.find_by_id(parent_reply_id)
                if parent is None or not parent.is_active:
                    logfire.warn(
                        "Parent reply not found", parent_reply_id=parent_reply_id
                    )
                    raise NotFoundError("Parent reply", str(parent_reply_id))

                depth = parent.depth + 1
                if depth > self.settings.max_reply_depth:
                    logfire.warn(
                        "Reply depth limit reached",
                        parent_reply_id=parent_reply_id,
                        depth=depth,
                    )
                    raise DepthExceededError(self.settings.max_reply_depth)
                root_comment_id = parent.comment_id
            elif comment_id is not None:
                comment = await self.comment_service.get_active_comment(comment_id)
                depth = 0
                root_comment_id = CommentId(comment.id)
            else:
                raise ValidationError(
                    "Either commentId or parentReplyId is required", "commentId"
                )

            now = datetime.now()
            reply = Reply(
                comment_id=root_comment_id,
                parent_reply_id=parent_reply_id,
                author_id=author_id,
                content=text,
                depth=depth,
                status=ContentStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            saved = await self.reply_repository.save(reply)

            await self._recompute_counts(saved)

            logfire.info(
                "Reply created",
                reply_id=saved.id,
                comment_id=root_comment_id,
                depth=depth,
            )
            return saved

    async def update_reply(
        self,
        reply_id: ReplyId,
        identity: Identity,
        content: Optional[str] = None,
        status: Optional[ContentStatus] = None,
    ) -> Reply:
        """Edit a reply's content and/or change its status.

        Raises:
            NotFoundError: If the reply is missing or deleted
            NotAuthorizedError: If the caller may not make the change
            ValidationError: If the new content is invalid
        """
        with logfire.span(
            "reply_service.update_reply",
            reply_id=reply_id,
            user_id=identity.user_id,
            status=status.value if status else None,
        ):
            reply = self.ensure_visible(
                await self.reply_repository.find_by_id(reply_id), reply_id
            )
            updates = self.plan_update(
                reply,
                reply_id,
                identity,
                content,
                status,
                self.settings.reply_max_length,
            )
            if not updates:
                return reply

            updated = await self.reply_repository.save(
                reply.model_copy(update={**updates, "updated_at": datetime.now()})
            )
            if "status" in updates:
                await self._recompute_counts(updated)

            logfire.info("Reply updated", reply_id=reply_id, fields=sorted(updates))
            return updated

    async def delete_reply(self, reply_id: ReplyId, identity: Identity) -> None:
        """Soft-delete a reply.

        Descendants keep their status; they simply stop being reachable
        when the thread is rendered.

        Raises:
            NotFoundError: If the reply is missing or already deleted
            NotAuthorizedError: If the caller is neither author nor moderator
        """
        with logfire.span(
            "reply_service.delete_reply", reply_id=reply_id, user_id=identity.user_id
        ):
            reply = self.ensure_visible(
                await self.reply_repository.find_by_id(reply_id), reply_id
            )
            self.ensure_can_delete(reply, reply_id, identity)

            deleted = await self.reply_repository.save(
                reply.model_copy(
                    update={
                        "status": ContentStatus.DELETED,
                        "updated_at": datetime.now(),
                    }
                )
            )
            await self._recompute_counts(deleted)
            logfire.info("Reply deleted", reply_id=reply_id)

    async def _recompute_counts(self, reply: Reply) -> None:
        """Refresh the parent's reply count and the target's comment count."""
        if reply.is_nested:
            await self.counter_service.recompute_nested_reply_count(
                reply.parent_reply_id
            )
        else:
            await self.counter_service.recompute_reply_count(reply.comment_id)

        comment = await self.comment_service.get_comment_by_id(reply.comment_id)
        if comment is not None:
            await self.counter_service.recompute_comment_count(
                comment.commentable_type, comment.commentable_id
            )
