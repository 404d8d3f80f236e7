"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Reply
from alumni.domain.repository import ReplyRepository
from alumni.domain.value import CommentId, ContentStatus, ReplyId
from alumni.persistence.mappers import reply_to_dict, row_to_reply
from alumni.persistence.tables import replies_table

_ACTIVE = replies_table.c.status == ContentStatus.ACTIVE.value


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_active(self, *criteria) -> List[Reply]:
        stmt = (
            select(replies_table)
            .where(and_(_ACTIVE, *criteria))
            .order_by(replies_table.c.created_at.asc(), replies_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def _count_active(self, *criteria) -> int:
        stmt = (
            select(func.count())
            .select_from(replies_table)
            .where(and_(_ACTIVE, *criteria))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_direct_replies(self, comment_id: CommentId) -> List[Reply]:
        """Find active replies made directly to a comment."""
        return await self._find_active(
            replies_table.c.comment_id == comment_id,
            replies_table.c.parent_reply_id.is_(None),
        )

    async def find_children(self, parent_reply_id: ReplyId) -> List[Reply]:
        """Find active replies made directly to another reply."""
        return await self._find_active(
            replies_table.c.parent_reply_id == parent_reply_id
        )

    async def count_direct_replies(self, comment_id: CommentId) -> int:
        """Count active replies made directly to a comment."""
        return await self._count_active(
            replies_table.c.comment_id == comment_id,
            replies_table.c.parent_reply_id.is_(None),
        )

    async def count_children(self, parent_reply_id: ReplyId) -> int:
        """Count active replies made directly to a reply."""
        return await self._count_active(
            replies_table.c.parent_reply_id == parent_reply_id
        )

    async def count_active_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Count active replies at any depth under the given comments."""
        if not comment_ids:
            return 0
        return await self._count_active(replies_table.c.comment_id.in_(comment_ids))

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        reply_dict = reply_to_dict(reply)
        if reply.id is None:
            stmt = insert(replies_table).values(**reply_dict)
        else:
            stmt = (
                update(replies_table)
                .where(replies_table.c.id == reply.id)
                .values(**reply_dict)
            )
        result = await self.session.execute(stmt.returning(replies_table))
        await self.session.flush()
        return row_to_reply(result.fetchone()._asdict())

    async def set_like_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized like count."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(like_count=count)
        )
        await self.session.execute(stmt)

    async def set_reply_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized child reply count."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(reply_count=count)
        )
        await self.session.execute(stmt)
