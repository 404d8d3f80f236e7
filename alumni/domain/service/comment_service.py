"""Comment domain service."""

from datetime import datetime
from typing import Optional

import logfire

from alumni.config import DiscussionSettings
from alumni.domain.error import NotFoundError
from alumni.domain.model import Comment, Identity
from alumni.domain.repository import CommentRepository
from alumni.domain.validation import validate_content
from alumni.domain.value import (
    CommentableType,
    CommentId,
    CommentQuery,
    ContentStatus,
    TargetId,
    TargetType,
    UserId,
)

from .counter_service import CounterService
from .discussion import DiscussionService
from .target_service import TargetService


class CommentService(DiscussionService):
    """Domain service for comment operations."""

    resource = "Comment"

    def __init__(
        self,
        comment_repository: CommentRepository,
        target_service: TargetService,
        counter_service: CounterService,
        settings: DiscussionSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            target_service: Target lookups for the commented entity
            counter_service: Counter recomputation
            settings: Discussion limits
        """
        super().__init__(settings)
        self.comment_repository = comment_repository
        self.target_service = target_service
        self.counter_service = counter_service

    async def create_comment(
        self,
        kind: CommentableType,
        target_id: TargetId,
        content: str,
        author_id: UserId,
    ) -> Comment:
        """Create a comment on a gallery or blog.

        Args:
            kind: Commentable type
            target_id: ID of the commented entity
            content: Comment text (trimmed before storing)
            author_id: Author user ID

        Returns:
            Created comment

        Raises:
            ValidationError: If the content is invalid
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            kind=kind.value,
            target_id=target_id,
            author_id=author_id,
        ):
            text = validate_content(content, self.settings.comment_max_length)
            await self.target_service.require_target(TargetType(kind.value), target_id)

            now = datetime.now()
            comment = Comment(
                commentable_type=kind,
                commentable_id=target_id,
                author_id=author_id,
                content=text,
                status=ContentStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            await self.counter_service.recompute_comment_count(kind, target_id)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                kind=kind.value,
                target_id=target_id,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment by ID, whatever its status.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_active_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment that can be replied to.

        Raises:
            NotFoundError: If the comment is missing or not active
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or not comment.is_active:
            logfire.warn("Active comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_comments(
        self,
        kind: CommentableType,
        target_id: TargetId,
        query: CommentQuery,
    ) -> tuple[list[Comment], int]:
        """Get one page of active comments on a target.

        Args:
            kind: Commentable type
            target_id: Target ID
            query: Page, page size and sort order

        Returns:
            The comments on the page and the total number of active comments
        """
        with logfire.span(
            "comment_service.list_comments",
            kind=kind.value,
            target_id=target_id,
            page=query.page,
            page_size=query.page_size,
            sort_order=query.sort_order.value,
        ):
            comments = await self.comment_repository.find_by_target(
                kind,
                target_id,
                sort_order=query.sort_order,
                limit=query.page_size,
                offset=query.offset,
            )
            total = await self.comment_repository.count_by_target(kind, target_id)
            logfire.info(
                "Comments retrieved for target",
                kind=kind.value,
                target_id=target_id,
                count=len(comments),
                total=total,
            )
            return comments, total

    async def update_comment(
        self,
        comment_id: CommentId,
        identity: Identity,
        content: Optional[str] = None,
        status: Optional[ContentStatus] = None,
    ) -> Comment:
        """Edit a comment's content and/or change its status.

        Args:
            comment_id: Comment ID
            identity: The caller
            content: New text (author only)
            status: New status (author or elevated role)

        Returns:
            The comment after the update

        Raises:
            NotFoundError: If the comment is missing or deleted
            NotAuthorizedError: If the caller may not make the change
            ValidationError: If the new content is invalid
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            user_id=identity.user_id,
            status=status.value if status else None,
        ):
            comment = self.ensure_visible(
                await self.comment_repository.find_by_id(comment_id), comment_id
            )
            updates = self.plan_update(
                comment,
                comment_id,
                identity,
                content,
                status,
                self.settings.comment_max_length,
            )
            if not updates:
                return comment

            updated = await self.comment_repository.save(
                comment.model_copy(update={**updates, "updated_at": datetime.now()})
            )

            if "status" in updates:
                await self.counter_service.recompute_comment_count(
                    updated.commentable_type, updated.commentable_id
                )

            logfire.info(
                "Comment updated", comment_id=comment_id, fields=sorted(updates)
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, identity: Identity) -> None:
        """Soft-delete a comment.

        Replies under the comment are left untouched but stop counting
        towards the target's comment count.

        Raises:
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the caller is neither author nor moderator
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=identity.user_id,
        ):
            comment = self.ensure_visible(
                await self.comment_repository.find_by_id(comment_id), comment_id
            )
            self.ensure_can_delete(comment, comment_id, identity)

            await self.comment_repository.save(
                comment.model_copy(
                    update={
                        "status": ContentStatus.DELETED,
                        "updated_at": datetime.now(),
                    }
                )
            )
            await self.counter_service.recompute_comment_count(
                comment.commentable_type, comment.commentable_id
            )
            logfire.info("Comment deleted", comment_id=comment_id)
