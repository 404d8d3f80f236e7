"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, asc, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Comment
from alumni.domain.repository import CommentRepository
from alumni.domain.value import (
    CommentableType,
    CommentId,
    ContentStatus,
    SortOrder,
    TargetId,
)
from alumni.persistence.mappers import comment_to_dict, row_to_comment
from alumni.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _active_on_target(
        self, commentable_type: CommentableType, commentable_id: TargetId
    ):
        return and_(
            comments_table.c.commentable_type == commentable_type.value,
            comments_table.c.commentable_id == commentable_id,
            comments_table.c.status == ContentStatus.ACTIVE.value,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of active comments on a target."""
        direction = desc if sort_order is SortOrder.DESC else asc
        stmt = (
            select(comments_table)
            .where(self._active_on_target(commentable_type, commentable_id))
            .order_by(
                direction(comments_table.c.created_at), direction(comments_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> int:
        """Count active comments on a target."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._active_on_target(commentable_type, commentable_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_active_ids_by_target(
        self,
        commentable_type: CommentableType,
        commentable_id: TargetId,
    ) -> List[CommentId]:
        """IDs of every active comment on a target."""
        stmt = select(comments_table.c.id).where(
            self._active_on_target(commentable_type, commentable_id)
        )
        result = await self.session.execute(stmt)
        return [CommentId(comment_id) for comment_id in result.scalars().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        if comment.id is None:
            stmt = insert(comments_table).values(**comment_dict)
        else:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        result = await self.session.execute(stmt.returning(comments_table))
        await self.session.flush()
        return row_to_comment(result.fetchone()._asdict())

    async def set_like_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized like count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=count)
        )
        await self.session.execute(stmt)

    async def set_reply_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized direct reply count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=count)
        )
        await self.session.execute(stmt)
