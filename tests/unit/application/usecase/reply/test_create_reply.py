"""Unit tests for the reply use cases."""

import pytest

from alumni.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from alumni.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from alumni.domain.error import NotAuthorizedError, ValidationError
from alumni.domain.value import TargetType
from tests.conftest import identity, seed_target
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create_comment(env):
    await seed_target(env, TargetType.GALLERY, 5)
    use_case = await env.get(CreateCommentUseCase)
    return await use_case.execute(
        CreateCommentRequest(
            commentable_type="gallery",
            commentable_id=5,
            content="Root",
            author_id=1,
        )
    )


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_nested_reply_item(self, unit_env):
        """A reply to a reply reports the root comment and its parent."""
        # Arrange
        comment = await create_comment(unit_env)
        create_reply = await unit_env.get(CreateReplyUseCase)
        direct = await create_reply.execute(
            CreateReplyRequest(content="Direct", author_id=2, comment_id=str(comment.id))
        )

        # Act
        nested = await create_reply.execute(
            CreateReplyRequest(
                content="Nested", author_id=3, parent_reply_id=str(direct.id)
            )
        )

        # Assert
        assert direct.depth == 0
        assert nested.depth == 1
        assert nested.comment_id == comment.id
        assert nested.parent_reply_id == direct.id
        assert nested.user_id == 3
        assert nested.child_replies == []

    @pytest.mark.asyncio
    async def test_invalid_comment_id(self, unit_env):
        """Comment IDs must be positive numbers."""
        # Arrange
        create_reply = await unit_env.get(CreateReplyUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="valid positive number"):
            await create_reply.execute(
                CreateReplyRequest(content="Hi", author_id=2, comment_id="zero")
            )


class TestUpdateAndDeleteReplyUseCases:
    """Tests for UpdateReplyUseCase and DeleteReplyUseCase."""

    @pytest.mark.asyncio
    async def test_author_hides_own_reply(self, unit_env):
        """Authors may change the status of their own replies."""
        # Arrange
        comment = await create_comment(unit_env)
        create_reply = await unit_env.get(CreateReplyUseCase)
        update_reply = await unit_env.get(UpdateReplyUseCase)
        reply = await create_reply.execute(
            CreateReplyRequest(content="Oops", author_id=2, comment_id=comment.id)
        )

        # Act
        updated = await update_reply.execute(
            UpdateReplyRequest(reply_id=reply.id, identity=identity(2), status="hidden")
        )

        # Assert
        assert updated.status == "hidden"

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Users without a moderating role may not delete others' replies."""
        # Arrange
        comment = await create_comment(unit_env)
        create_reply = await unit_env.get(CreateReplyUseCase)
        delete_reply = await unit_env.get(DeleteReplyUseCase)
        reply = await create_reply.execute(
            CreateReplyRequest(content="Mine", author_id=2, comment_id=comment.id)
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete_reply.execute(
                DeleteReplyRequest(reply_id=reply.id, identity=identity(3))
            )
