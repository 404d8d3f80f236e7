"""PostgreSQL implementation of TransactionManager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Savepoints on the request session via ``SAVEPOINT``/``ROLLBACK TO``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
