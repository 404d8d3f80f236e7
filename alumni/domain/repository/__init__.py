"""Repository interfaces for the discussion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from alumni.domain.repository.comment import CommentRepository
from alumni.domain.repository.like import LikeRepository
from alumni.domain.repository.reply import ReplyRepository
from alumni.domain.repository.target import TargetRepository
from alumni.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentRepository",
    "ReplyRepository",
    "LikeRepository",
    "TargetRepository",
    "TransactionManager",
]
