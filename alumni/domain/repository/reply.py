"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from alumni.domain.model.reply import Reply
from alumni.domain.value import CommentId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Listing methods return active replies only, oldest first with ties
    broken by ID.
    """

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID, whatever its status.

        Args:
            reply_id: The reply's unique identifier

        Returns:
            The reply if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_direct_replies(self, comment_id: CommentId) -> List[Reply]:
        """Find active replies made directly to a comment.

        Args:
            comment_id: The root comment ID

        Returns:
            Active replies without a parent reply, oldest first
        """
        pass

    @abstractmethod
    async def find_children(self, parent_reply_id: ReplyId) -> List[Reply]:
        """Find active replies made directly to another reply.

        Args:
            parent_reply_id: The parent reply ID

        Returns:
            Active child replies, oldest first
        """
        pass

    @abstractmethod
    async def count_direct_replies(self, comment_id: CommentId) -> int:
        """Count active replies made directly to a comment."""
        pass

    @abstractmethod
    async def count_children(self, parent_reply_id: ReplyId) -> int:
        """Count active replies made directly to a reply."""
        pass

    @abstractmethod
    async def count_active_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Count active replies at any depth under the given comments.

        Args:
            comment_ids: Root comment IDs

        Returns:
            Number of active replies whose root comment is in ``comment_ids``
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update).

        A reply without an ID is inserted and returned with the assigned ID.

        Args:
            reply: The reply to save

        Returns:
            The saved reply
        """
        pass

    @abstractmethod
    async def set_like_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized like count."""
        pass

    @abstractmethod
    async def set_reply_count(self, reply_id: ReplyId, count: int) -> None:
        """Overwrite the denormalized child reply count."""
        pass
