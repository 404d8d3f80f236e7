"""PostgreSQL repository implementations."""

from alumni.persistence.repository.comment import PostgresCommentRepository
from alumni.persistence.repository.like import PostgresLikeRepository
from alumni.persistence.repository.reply import PostgresReplyRepository
from alumni.persistence.repository.target import PostgresTargetRepository
from alumni.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresCommentRepository",
    "PostgresReplyRepository",
    "PostgresLikeRepository",
    "PostgresTargetRepository",
    "PostgresTransactionManager",
]
