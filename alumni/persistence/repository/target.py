"""PostgreSQL implementation of Target repository."""

from typing import Optional

from sqlalchemy import Table, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Target
from alumni.domain.repository import TargetRepository
from alumni.domain.value import TargetId, TargetType
from alumni.persistence.mappers import row_to_target
from alumni.persistence.tables import blogs_table, galleries_table, posts_table

# Adding a target kind means adding its table here
TARGET_TABLES: dict[TargetType, Table] = {
    TargetType.GALLERY: galleries_table,
    TargetType.BLOG: blogs_table,
    TargetType.POST: posts_table,
}


class PostgresTargetRepository(TargetRepository):
    """PostgreSQL implementation of TargetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, kind: TargetType, target_id: TargetId) -> bool:
        """Whether a target row exists."""
        table = TARGET_TABLES[kind]
        stmt = select(table.c.id).where(table.c.id == target_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find(self, kind: TargetType, target_id: TargetId) -> Optional[Target]:
        """Load a target's counters."""
        table = TARGET_TABLES[kind]
        stmt = select(table.c.id, table.c.like_count, table.c.comment_count).where(
            table.c.id == target_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_target(kind, row._asdict()) if row else None

    async def set_like_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's like count."""
        table = TARGET_TABLES[kind]
        stmt = update(table).where(table.c.id == target_id).values(like_count=count)
        await self.session.execute(stmt)

    async def set_comment_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's comment count."""
        table = TARGET_TABLES[kind]
        stmt = update(table).where(table.c.id == target_id).values(comment_count=count)
        await self.session.execute(stmt)
