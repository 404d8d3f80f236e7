"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from alumni.domain.model.comment import Comment
from alumni.domain.repository.comment import CommentRepository
from alumni.domain.value import CommentableType, CommentId, SortOrder, TargetId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _active_on_target(
        self, commentable_type: CommentableType, commentable_id: TargetId
    ) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.commentable_type == commentable_type
            and c.commentable_id == commentable_id
            and c.is_active
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of active comments on a target."""
        comments = self._active_on_target(commentable_type, commentable_id)
        comments.sort(
            key=lambda c: (c.created_at, c.id),
            reverse=sort_order is SortOrder.DESC,
        )
        return comments[offset : offset + limit]

    async def count_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> int:
        """Count active comments on a target."""
        return len(self._active_on_target(commentable_type, commentable_id))

    async def find_active_ids_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> list[CommentId]:
        """IDs of every active comment on a target."""
        return [
            CommentId(c.id)
            for c in self._active_on_target(commentable_type, commentable_id)
        ]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment, assigning an ID on first save."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

    async def set_like_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized like count."""
        if comment_id in self._comments:
            self._comments[comment_id] = self._comments[comment_id].model_copy(
                update={"like_count": count}
            )

    async def set_reply_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized direct reply count."""
        if comment_id in self._comments:
            self._comments[comment_id] = self._comments[comment_id].model_copy(
                update={"reply_count": count}
            )
