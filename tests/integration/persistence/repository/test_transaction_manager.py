"""Integration tests for PostgresTransactionManager.

A failing counter query must roll back only its own savepoint: the row
written before it stays in the request transaction and can be committed.
"""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Comment
from alumni.domain.repository import (
    CommentRepository,
    LikeRepository,
    TargetRepository,
)
from alumni.domain.service import CounterService
from alumni.domain.value import CommentableType, CommentId, UserId
from alumni.persistence.repository import (
    PostgresReplyRepository,
    PostgresTransactionManager,
)
from alumni.persistence.tables import galleries_table
from tests.harness import create_env_fixture
from tests.integration.conftest import insert_target

integration_env = create_env_fixture(unmock={"persistence"})


class FailingCountReplyRepository(PostgresReplyRepository):
    """Reply store whose cross-comment count fails inside PostgreSQL."""

    async def count_active_by_comments(self, comment_ids):
        await self.session.execute(text("SELECT 1 / 0"))
        return 0


class TestTransactionManagerIntegration:
    """Integration tests for counter recomputes under savepoints."""

    @pytest.mark.asyncio
    async def test_failed_recompute_keeps_request_transaction(self, integration_env):
        """The new comment survives a count query that errors in the database."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        comment_repo = await integration_env.get(CommentRepository)
        gallery_id = await insert_target(session, galleries_table)
        counter_service = CounterService(
            comment_repository=comment_repo,
            reply_repository=FailingCountReplyRepository(session),
            like_repository=await integration_env.get(LikeRepository),
            target_repository=await integration_env.get(TargetRepository),
            transaction_manager=PostgresTransactionManager(session),
        )
        comment = await comment_repo.save(
            Comment(
                author_id=UserId(3),
                commentable_type=CommentableType.GALLERY,
                commentable_id=gallery_id,
                content="See everyone at the reunion",
            )
        )

        # Act
        count = await counter_service.recompute_comment_count(
            CommentableType.GALLERY, gallery_id
        )

        # Assert
        assert count is None
        stored = await comment_repo.find_by_id(CommentId(comment.id))
        assert stored is not None
        await session.commit()

    @pytest.mark.asyncio
    async def test_savepoint_rolls_back_its_own_writes(self, integration_env):
        """Writes inside a failed savepoint are undone; earlier ones are kept."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        transactions = PostgresTransactionManager(session)
        gallery_id = await insert_target(session, galleries_table)

        # Act
        with pytest.raises(RuntimeError):
            async with transactions.savepoint():
                await session.execute(
                    galleries_table.update()
                    .where(galleries_table.c.id == gallery_id)
                    .values(comment_count=9)
                )
                raise RuntimeError("recompute failed")

        # Assert
        result = await session.execute(
            galleries_table.select().where(galleries_table.c.id == gallery_id)
        )
        row = result.fetchone()
        assert row is not None
        assert row.comment_count == 0
