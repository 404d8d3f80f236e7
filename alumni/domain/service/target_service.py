"""Target domain service.

Resolves the polymorphic (type, id) pairs used by comments and likes
against the tables that own galleries, blogs and posts.
"""

import logfire

from alumni.domain.error import NotFoundError
from alumni.domain.repository import TargetRepository
from alumni.domain.value import TargetId, TargetType

from .base import Service


class TargetService(Service):
    """Domain service for content target lookups."""

    def __init__(self, target_repository: TargetRepository) -> None:
        """Initialize target service.

        Args:
            target_repository: Target repository
        """
        self.target_repository = target_repository

    async def validate_target_exists(self, kind: str, target_id: TargetId) -> bool:
        """Check whether a target exists.

        Kinds outside the known target set are reported as missing rather
        than raising.

        Args:
            kind: Target type name (gallery, blog or post)
            target_id: Target ID

        Returns:
            True if the target row exists
        """
        with logfire.span(
            "target_service.validate_target_exists", kind=str(kind), target_id=target_id
        ):
            try:
                target_type = TargetType(kind)
            except ValueError:
                logfire.warn("Unknown target kind", kind=str(kind))
                return False
            return await self.target_repository.exists(target_type, target_id)

    async def require_target(self, kind: TargetType, target_id: TargetId) -> None:
        """Ensure a target exists.

        Raises:
            NotFoundError: If the target does not exist
        """
        if not await self.validate_target_exists(kind, target_id):
            logfire.warn("Target not found", kind=kind.value, target_id=target_id)
            raise NotFoundError(kind.value.capitalize(), str(target_id))
