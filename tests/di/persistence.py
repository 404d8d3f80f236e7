"""Mock persistence providers for testing."""

from dishka import Scope, provide

from alumni.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    TargetRepository,
    TransactionManager,
)
from alumni.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryTargetRepository,
    InMemoryTransactionManager,
)
from alumni.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP scoped so data survives across HTTP requests made
    against one container. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_reply_repository(self) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository()

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository()

    @provide(scope=Scope.APP)
    def get_inmemory_target_repository(self) -> InMemoryTargetRepository:
        """Provide the in-memory target store, so tests can seed targets."""
        return InMemoryTargetRepository()

    @provide(scope=Scope.APP)
    def get_target_repository(
        self, targets: InMemoryTargetRepository
    ) -> TargetRepository:
        """Provide the seeded target store as the target repository."""
        return targets

    @provide(scope=Scope.APP)
    def get_inmemory_transaction_manager(self) -> InMemoryTransactionManager:
        """Provide the in-memory savepoint recorder, so tests can inspect it."""
        return InMemoryTransactionManager()

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self, transactions: InMemoryTransactionManager
    ) -> TransactionManager:
        """Provide the savepoint recorder as the transaction manager."""
        return transactions
