"""Target repository interface.

Galleries, blogs and posts are owned by other parts of the application.
This port only checks their existence and writes their counters.
"""

from abc import ABC, abstractmethod
from typing import Optional

from alumni.domain.model.target import Target
from alumni.domain.value import TargetId, TargetType


class TargetRepository(ABC):
    """Repository for the counter view of content targets."""

    @abstractmethod
    async def exists(self, kind: TargetType, target_id: TargetId) -> bool:
        """Whether a target row exists."""
        pass

    @abstractmethod
    async def find(self, kind: TargetType, target_id: TargetId) -> Optional[Target]:
        """Load a target's counters.

        Args:
            kind: Table the ID refers to
            target_id: The target ID

        Returns:
            The target if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_like_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's like count."""
        pass

    @abstractmethod
    async def set_comment_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's comment count."""
        pass
