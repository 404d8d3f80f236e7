"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from alumni.domain.model.comment import Comment
from alumni.domain.value import CommentableType, CommentId, SortOrder, TargetId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, whatever its status.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of active comments on a target.

        Comments are ordered by creation time, ties broken by ID in the
        same direction.

        Args:
            commentable_type: Type of target (gallery or blog)
            commentable_id: ID of the target
            sort_order: Chronological direction
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of active comments
        """
        pass

    @abstractmethod
    async def count_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> int:
        """Count active comments on a target."""
        pass

    @abstractmethod
    async def find_active_ids_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> List[CommentId]:
        """IDs of every active comment on a target."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        A comment without an ID is inserted and returned with the assigned
        ID; otherwise the stored row is updated.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def set_like_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized like count."""
        pass

    @abstractmethod
    async def set_reply_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized direct reply count."""
        pass
