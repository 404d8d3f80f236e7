"""Integration tests for PostgresLikeRepository.

These tests verify the ``uq_like`` constraint and that a rejected insert
leaves the request transaction usable.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Like
from alumni.domain.repository import LikeRepository, TargetRepository
from alumni.domain.service import CounterService, LikeService
from alumni.domain.value import LikeableType, LikeAction, TargetId, TargetType, UserId
from alumni.persistence.repository import PostgresLikeRepository
from alumni.persistence.tables import posts_table
from tests.harness import create_env_fixture
from tests.integration.conftest import insert_target

integration_env = create_env_fixture(unmock={"persistence"})


def make_like(post_id: TargetId, user_id: int = 7) -> Like:
    return Like(
        user_id=UserId(user_id),
        likeable_type=LikeableType.POST,
        likeable_id=post_id,
        created_at=datetime.now(),
    )


class BlindLikeRepository(PostgresLikeRepository):
    """Like store that never sees existing likes, as under a concurrent toggle."""

    async def find_by_user_and_likeable(self, user_id, likeable_type, likeable_id):
        return None


class TestLikeRepositoryIntegration:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_like_is_rejected(self, integration_env):
        """A second like by the same user violates uq_like."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        like_repo = await integration_env.get(LikeRepository)
        post_id = await insert_target(session, posts_table)
        first = await like_repo.save(make_like(post_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await like_repo.save(make_like(post_id))

        # The savepoint kept the transaction alive
        found = await like_repo.find_by_user_and_likeable(
            UserId(7), LikeableType.POST, post_id
        )
        assert found.id == first.id
        assert await like_repo.count_by_likeable(LikeableType.POST, post_id) == 1

    @pytest.mark.asyncio
    async def test_batch_lookup_and_delete(self, integration_env):
        """Batch lookup returns only the user's likes; delete removes the row."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        like_repo = await integration_env.get(LikeRepository)
        liked_post = await insert_target(session, posts_table)
        other_post = await insert_target(session, posts_table)
        mine = await like_repo.save(make_like(liked_post, user_id=7))
        await like_repo.save(make_like(other_post, user_id=8))

        # Act
        found = await like_repo.find_by_user_and_likeables(
            UserId(7), LikeableType.POST, [liked_post, other_post]
        )
        await like_repo.delete(mine.id)

        # Assert
        assert [like.likeable_id for like in found] == [liked_post]
        assert await like_repo.count_by_likeable(LikeableType.POST, liked_post) == 0

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_toggle_resolves_to_liked(self, integration_env):
        """Losing the insert race still reports liked and a correct count."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        target_repo = await integration_env.get(TargetRepository)
        post_id = await insert_target(session, posts_table)
        like_service = LikeService(
            like_repository=BlindLikeRepository(session),
            counter_service=await integration_env.get(CounterService),
        )
        await like_service.toggle_like(LikeableType.POST, post_id, UserId(7))

        # Act
        result = await like_service.toggle_like(LikeableType.POST, post_id, UserId(7))

        # Assert
        assert result.action is LikeAction.LIKED
        assert result.liked is True
        post = await target_repo.find(TargetType.POST, post_id)
        assert post.like_count == 1
