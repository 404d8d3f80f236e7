"""In-memory reply repository for testing."""

from itertools import count
from typing import Callable, Optional, Sequence

from alumni.domain.model.reply import Reply
from alumni.domain.repository.reply import ReplyRepository
from alumni.domain.value import CommentId, ReplyId


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[ReplyId, Reply] = {}
        self._ids = count(1)

    def _active(self, predicate: Callable[[Reply], bool]) -> list[Reply]:
        replies = [r for r in self._replies.values() if r.is_active and predicate(r)]
        replies.sort(key=lambda r: (r.created_at, r.id))
        return replies

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        return self._replies.get(reply_id)

    async def find_direct_replies(self, comment_id: CommentId) -> list[Reply]:
        """Find active replies made directly to a comment."""
        return self._active(
            lambda r: r.comment_id == comment_id and r.parent_reply_id is None
        )

    async def find_children(self, parent_reply_id: ReplyId) -> list[Reply]:
        """Find active replies made directly to another reply."""
        return self._active(lambda r: r.parent_reply_id == parent_reply_id)

    async def count_direct_replies(self, comment_id: CommentId) -> int:
        """Count active replies made directly to a comment."""
        return len(await self.find_direct_replies(comment_id))

    async def count_children(self, parent_reply_id: ReplyId) -> int:
        """Count active replies made directly to a reply."""
        return len(await self.find_children(parent_reply_id))

    async def count_active_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Count active replies at any depth under the given comments."""
        ids = set(comment_ids)
        return len(self._active(lambda r: r.comment_id in ids))

    async def save(self, reply: Reply) -> Reply:
        """Save a reply, assigning an ID on first save."""
        if reply.id is None:
            reply = reply.model_copy(update={"id": ReplyId(next(self._ids))})
        self._replies[reply.id] = reply
        return reply

    async def set_like_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized like count."""
        if reply_id in self._replies:
            self._replies[reply_id] = self._replies[reply_id].model_copy(
                update={"like_count": count}
            )

    async def set_reply_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized child reply count."""
        if reply_id in self._replies:
            self._replies[reply_id] = self._replies[reply_id].model_copy(
                update={"reply_count": count}
            )
