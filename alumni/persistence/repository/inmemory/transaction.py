"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from alumni.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Savepoints without rollback.

    In-memory stores have no aborted-transaction state to protect, so the
    block only records how often it was entered and how often it failed.
    """

    def __init__(self) -> None:
        self.entered = 0
        self.failed = 0

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        self.entered += 1
        try:
            yield
        except Exception:
            self.failed += 1
            raise
