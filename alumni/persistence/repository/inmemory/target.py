"""In-memory target repository for testing."""

from typing import Optional

from alumni.domain.model.target import Target
from alumni.domain.repository.target import TargetRepository
from alumni.domain.value import TargetId, TargetType


class InMemoryTargetRepository(TargetRepository):
    """In-memory implementation of TargetRepository for testing.

    Targets are created by other parts of the application, so tests seed
    them with :meth:`add`.
    """

    def __init__(self) -> None:
        self._targets: dict[tuple[TargetType, TargetId], Target] = {}

    def add(self, kind: TargetType, target_id: int) -> Target:
        """Seed a target with zeroed counters."""
        target = Target(kind=kind, id=TargetId(target_id))
        self._targets[(kind, target.id)] = target
        return target

    async def exists(self, kind: TargetType, target_id: TargetId) -> bool:
        """Whether a target exists."""
        return (kind, target_id) in self._targets

    async def find(self, kind: TargetType, target_id: TargetId) -> Optional[Target]:
        """Load a target's counters."""
        return self._targets.get((kind, target_id))

    async def set_like_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's like count."""
        key = (kind, target_id)
        if key in self._targets:
            self._targets[key] = self._targets[key].model_copy(
                update={"like_count": count}
            )

    async def set_comment_count(
        self, kind: TargetType, target_id: TargetId, count: int
    ) -> None:
        """Overwrite the target's comment count."""
        key = (kind, target_id)
        if key in self._targets:
            self._targets[key] = self._targets[key].model_copy(
                update={"comment_count": count}
            )
