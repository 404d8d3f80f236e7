"""Transaction control interface.

Counter recomputes must not affect the surrounding request transaction
when they fail. Each one runs inside a savepoint opened through this port.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Opens savepoints in the current unit of work."""

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Context in which a failing statement rolls back only itself.

        An exception raised inside the block rolls back to the savepoint and
        propagates. Work done before the block is kept.
        """
        pass
