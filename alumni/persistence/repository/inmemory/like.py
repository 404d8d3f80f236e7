"""In-memory like repository for testing."""

from itertools import count
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from alumni.domain.model.like import Like
from alumni.domain.repository.like import LikeRepository
from alumni.domain.value import LikeableType, LikeId, TargetId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []
        self._ids = count(1)

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> Optional[Like]:
        """Find a like by user and likeable item."""
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.likeable_type == likeable_type
                and like.likeable_id == likeable_id
            ):
                return like
        return None

    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[TargetId],
    ) -> list[Like]:
        """Find a user's likes on multiple items (batch query)."""
        if not likeable_ids:
            return []

        wanted = set(likeable_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id
            and like.likeable_type == likeable_type
            and like.likeable_id in wanted
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this item
        """
        existing = await self.find_by_user_and_likeable(
            like.user_id, like.likeable_type, like.likeable_id
        )
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        saved = like.model_copy(update={"id": LikeId(next(self._ids))})
        self._likes.append(saved)
        return saved

    async def delete(self, like_id: LikeId) -> None:
        """Delete a like by ID."""
        self._likes = [like for like in self._likes if like.id != like_id]

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> int:
        """Count likes for a likeable item."""
        return sum(
            1
            for like in self._likes
            if like.likeable_type == likeable_type and like.likeable_id == likeable_id
        )
