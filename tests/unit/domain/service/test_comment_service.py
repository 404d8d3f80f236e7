"""Unit tests for CommentService."""

import pytest

from alumni.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from alumni.domain.service import CommentService
from alumni.domain.value import (
    CommentableType,
    CommentId,
    CommentQuery,
    ContentStatus,
    SortOrder,
    TargetId,
    TargetType,
    UserId,
)
from tests.conftest import identity, seed_target
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create(comment_service: CommentService, content: str = "Nice!", author: int = 1):
    return await comment_service.create_comment(
        CommentableType.GALLERY, TargetId(5), content, UserId(author)
    )


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_create_comment_trims_and_counts(self, unit_env):
        """A new comment is trimmed, active and counted on the target."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        targets = await seed_target(unit_env, TargetType.GALLERY, 5)

        # Act
        comment = await create(comment_service, "  Great photos!  ")

        # Assert
        assert comment.id is not None
        assert comment.content == "Great photos!"
        assert comment.status is ContentStatus.ACTIVE
        assert comment.like_count == 0
        assert comment.reply_count == 0
        target = await targets.find(TargetType.GALLERY, TargetId(5))
        assert target.comment_count == 1

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_target_raises(self, unit_env):
        """Commenting on a gallery that does not exist should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Gallery not found: 5"):
            await create(comment_service)

    @pytest.mark.asyncio
    async def test_create_comment_rejects_script(self, unit_env):
        """Script content should be rejected before touching storage."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)

        # Act & Assert
        with pytest.raises(ValidationError, match="invalid characters"):
            await create(comment_service, "<script>alert(1)</script>")


class TestListComments:
    """Tests for list_comments."""

    @pytest.mark.asyncio
    async def test_pagination_and_order(self, unit_env):
        """Pages should follow creation order and report the active total."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        created = [await create(comment_service, f"Comment {i}") for i in range(25)]

        # Act
        first_page, total = await comment_service.list_comments(
            CommentableType.GALLERY, TargetId(5), CommentQuery.from_raw(limit="20")
        )
        newest, _ = await comment_service.list_comments(
            CommentableType.GALLERY,
            TargetId(5),
            CommentQuery.from_raw(limit="5", sort_order="DESC"),
        )

        # Assert
        assert total == 25
        assert len(first_page) == 20
        assert [c.id for c in first_page] == [c.id for c in created[:20]]
        assert newest[0].id == created[-1].id

    @pytest.mark.asyncio
    async def test_hidden_comments_are_not_listed(self, unit_env):
        """Only active comments appear in listings."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        kept = await create(comment_service, "Kept")
        hidden = await create(comment_service, "Hidden")
        await comment_service.update_comment(
            CommentId(hidden.id), identity(1), status=ContentStatus.HIDDEN
        )

        # Act
        comments, total = await comment_service.list_comments(
            CommentableType.GALLERY, TargetId(5), CommentQuery()
        )

        # Assert
        assert [c.id for c in comments] == [kept.id]
        assert total == 1


class TestUpdateComment:
    """Tests for update_comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit_content(self, unit_env):
        """The author may change the text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service, "Frist")

        # Act
        updated = await comment_service.update_comment(
            CommentId(comment.id), identity(1), content=" First "
        )

        # Assert
        assert updated.content == "First"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_moderator_cannot_edit_content(self, unit_env):
        """Elevated roles moderate status but never rewrite text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                CommentId(comment.id), identity(9, "moderator"), content="Edited"
            )

    @pytest.mark.asyncio
    async def test_moderator_can_hide_and_count_drops(self, unit_env):
        """Hiding a comment removes it from the target's count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        targets = await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act
        updated = await comment_service.update_comment(
            CommentId(comment.id), identity(9, "admin"), status=ContentStatus.HIDDEN
        )

        # Assert
        assert updated.status is ContentStatus.HIDDEN
        target = await targets.find(TargetType.GALLERY, TargetId(5))
        assert target.comment_count == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_change_status(self, unit_env):
        """Plain users may not moderate other people's comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                CommentId(comment.id), identity(2), status=ContentStatus.HIDDEN
            )

    @pytest.mark.asyncio
    async def test_same_status_is_a_no_op(self, unit_env):
        """Re-applying the current status changes nothing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act
        updated = await comment_service.update_comment(
            CommentId(comment.id), identity(2), status=ContentStatus.ACTIVE
        )

        # Assert
        assert updated == comment

    @pytest.mark.asyncio
    async def test_plan_update_refuses_leaving_deleted(self, unit_env):
        """The status rules reject moves out of the terminal state."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)
        deleted = comment.model_copy(update={"status": ContentStatus.DELETED})

        # Act & Assert
        with pytest.raises(ValidationError, match="from deleted to active") as exc_info:
            comment_service.plan_update(
                deleted,
                comment.id,
                identity(1),
                content=None,
                status=ContentStatus.ACTIVE,
                max_length=1000,
            )

        assert exc_info.value.field == "status"


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_deleted_comment_is_gone(self, unit_env):
        """Deleted comments disappear from reads and counts."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        targets = await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act
        await comment_service.delete_comment(CommentId(comment.id), identity(1))

        # Assert
        stored = await comment_service.get_comment_by_id(CommentId(comment.id))
        assert stored.status is ContentStatus.DELETED
        target = await targets.find(TargetType.GALLERY, TargetId(5))
        assert target.comment_count == 0

        with pytest.raises(NotFoundError):
            await comment_service.update_comment(
                CommentId(comment.id), identity(1), content="Back"
            )
        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(comment.id), identity(1))

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Only the author or a moderator may delete."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await seed_target(unit_env, TargetType.GALLERY, 5)
        comment = await create(comment_service)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(CommentId(comment.id), identity(2))
