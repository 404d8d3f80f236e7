"""Unit tests for ThreadService."""

import pytest

from alumni.domain.service import (
    CommentService,
    LikeService,
    ReplyService,
    ThreadService,
)
from alumni.domain.value import (
    CommentableType,
    CommentId,
    ContentStatus,
    LikeableType,
    ReplyId,
    TargetId,
    TargetType,
    UserId,
)
from tests.conftest import identity, seed_target
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def build_chain(env, levels: int):
    """A comment with a single chain of replies ``levels`` deep."""
    await seed_target(env, TargetType.GALLERY, 5)
    comment_service = await env.get(CommentService)
    reply_service = await env.get(ReplyService)

    comment = await comment_service.create_comment(
        CommentableType.GALLERY, TargetId(5), "Root", UserId(1)
    )
    replies = [
        await reply_service.create_reply(
            "Level 0", UserId(2), comment_id=CommentId(comment.id)
        )
    ]
    for level in range(1, levels):
        replies.append(
            await reply_service.create_reply(
                f"Level {level}", UserId(2), parent_reply_id=ReplyId(replies[-1].id)
            )
        )
    return comment, replies


def tree_depth(nodes) -> int:
    if not nodes:
        return 0
    return 1 + max(tree_depth(node.children) for node in nodes)


class TestBuildThreads:
    """Tests for build_threads."""

    @pytest.mark.asyncio
    async def test_tree_is_cut_at_max_depth(self, unit_env):
        """Only ``max_depth`` levels of replies are assembled."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment, _ = await build_chain(unit_env, levels=5)

        # Act
        threads = await thread_service.build_threads(
            [comment], user_id=None, max_depth=3
        )

        # Assert
        assert len(threads) == 1
        assert tree_depth(threads[0].replies) == 3

    @pytest.mark.asyncio
    async def test_replies_can_be_left_out(self, unit_env):
        """include_replies=False yields bare comments."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment, _ = await build_chain(unit_env, levels=2)

        # Act
        threads = await thread_service.build_threads(
            [comment], user_id=None, include_replies=False
        )

        # Assert
        assert threads[0].replies == []

    @pytest.mark.asyncio
    async def test_like_annotations(self, unit_env):
        """Comments and replies are marked as liked for the requesting user."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        like_service = await unit_env.get(LikeService)
        comment, replies = await build_chain(unit_env, levels=2)
        await like_service.toggle_like(
            LikeableType.COMMENT, TargetId(comment.id), UserId(8)
        )
        await like_service.toggle_like(
            LikeableType.REPLY, TargetId(replies[1].id), UserId(8)
        )

        # Act
        mine = await thread_service.build_threads([comment], user_id=UserId(8))
        anonymous = await thread_service.build_threads([comment], user_id=None)

        # Assert
        thread = mine[0]
        assert thread.is_liked is True
        assert thread.replies[0].is_liked is False
        assert thread.replies[0].children[0].is_liked is True
        assert anonymous[0].is_liked is False
        assert anonymous[0].replies[0].children[0].is_liked is False


class TestReplyTrees:
    """Tests for get_direct_replies and get_nested_replies."""

    @pytest.mark.asyncio
    async def test_non_positive_depth_is_empty(self, unit_env):
        """max_depth <= 0 returns nothing."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment, replies = await build_chain(unit_env, levels=2)

        # Act & Assert
        assert await thread_service.get_direct_replies(CommentId(comment.id), 0) == []
        assert await thread_service.get_nested_replies(ReplyId(replies[0].id), -1) == []

    @pytest.mark.asyncio
    async def test_siblings_oldest_first(self, unit_env):
        """Sibling replies are ordered by creation."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        reply_service = await unit_env.get(ReplyService)
        comment, replies = await build_chain(unit_env, levels=1)
        second = await reply_service.create_reply(
            "Second", UserId(3), comment_id=CommentId(comment.id)
        )

        # Act
        nodes = await thread_service.get_direct_replies(CommentId(comment.id), 3)

        # Assert
        assert [node.reply.id for node in nodes] == [replies[0].id, second.id]

    @pytest.mark.asyncio
    async def test_hidden_reply_hides_its_subtree(self, unit_env):
        """Descendants of a hidden reply are not rendered."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        reply_service = await unit_env.get(ReplyService)
        comment, replies = await build_chain(unit_env, levels=3)
        await reply_service.update_reply(
            ReplyId(replies[1].id), identity(2), status=ContentStatus.HIDDEN
        )

        # Act
        nodes = await thread_service.get_direct_replies(CommentId(comment.id), 5)

        # Assert
        assert len(nodes) == 1
        assert nodes[0].children == []
