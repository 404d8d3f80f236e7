"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .reply import InMemoryReplyRepository
from .target import InMemoryTargetRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryTargetRepository",
    "InMemoryTransactionManager",
]
