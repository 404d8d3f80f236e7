"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Like
from alumni.domain.repository import LikeRepository
from alumni.domain.value import LikeableType, LikeId, TargetId, UserId
from alumni.persistence.mappers import like_to_dict, row_to_like
from alumni.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id == likeable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[TargetId],
    ) -> List[Like]:
        """Find a user's likes on multiple items (batch query)."""
        if not likeable_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id.in_(likeable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: Like) -> Like:
        """Save a new like.

        The insert runs in a savepoint so a unique violation leaves the
        request transaction usable.
        """
        stmt = insert(likes_table).values(**like_to_dict(like)).returning(likes_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_like(row._asdict())

    async def delete(self, like_id: LikeId) -> None:
        """Delete a like."""
        stmt = delete(likes_table).where(likes_table.c.id == like_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> int:
        """Count likes on a specific item."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                and_(
                    likes_table.c.likeable_type == likeable_type.value,
                    likes_table.c.likeable_id == likeable_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
