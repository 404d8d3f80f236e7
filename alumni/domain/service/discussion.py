"""Shared edit and moderation rules for comments and replies."""

from typing import Any, Optional, TypeVar

import logfire

from alumni.config import DiscussionSettings
from alumni.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from alumni.domain.model import Identity
from alumni.domain.model.common import DiscussionEntry
from alumni.domain.validation import validate_content
from alumni.domain.value import ContentStatus

from .base import Service

EntryT = TypeVar("EntryT", bound=DiscussionEntry)


class DiscussionService(Service):
    """Base for services managing authored, moderated entries.

    Content may only be edited by its author. Status may be changed by the
    author or by a user holding one of the elevated roles. Deleted entries
    behave as if they did not exist.
    """

    resource = "Entry"

    def __init__(self, settings: DiscussionSettings) -> None:
        self.settings = settings

    def ensure_visible(self, entry: Optional[EntryT], entry_id: int) -> EntryT:
        """Return ``entry`` unless it is missing or deleted.

        Raises:
            NotFoundError: If the entry is missing or deleted
        """
        if entry is None or entry.is_deleted:
            logfire.warn(f"{self.resource} not found", entry_id=entry_id)
            raise NotFoundError(self.resource, str(entry_id))
        return entry

    def can_moderate(self, entry: DiscussionEntry, identity: Identity) -> bool:
        return entry.is_authored_by(identity.user_id) or identity.has_any_role(
            self.settings.elevated_roles
        )

    def plan_update(
        self,
        entry: DiscussionEntry,
        entry_id: int,
        identity: Identity,
        content: Optional[str],
        status: Optional[ContentStatus],
        max_length: int,
    ) -> dict[str, Any]:
        """Check permissions for an update and compute the changed fields.

        Args:
            entry: The stored entry
            entry_id: ID used in error messages
            identity: The caller
            content: New content, if being changed
            status: New status, if being changed
            max_length: Content length limit for this kind of entry

        Returns:
            Field updates to apply (empty when nothing changes)

        Raises:
            NotAuthorizedError: If the caller may not make the change
            ValidationError: If the new content is invalid or the status
                change is not allowed
        """
        updates: dict[str, Any] = {}

        if content is not None:
            if not entry.is_authored_by(identity.user_id):
                raise NotAuthorizedError(
                    self.resource.lower(), str(entry_id), str(identity.user_id), "edit"
                )
            updates["content"] = validate_content(content, max_length)

        if status is not None and status is not entry.status:
            if not self.can_moderate(entry, identity):
                raise NotAuthorizedError(
                    self.resource.lower(),
                    str(entry_id),
                    str(identity.user_id),
                    "change the status of",
                )
            if not entry.status.can_transition_to(status):
                raise ValidationError(
                    f"Cannot change status from {entry.status.value} to {status.value}",
                    "status",
                )
            updates["status"] = status

        return updates

    def ensure_can_delete(
        self, entry: DiscussionEntry, entry_id: int, identity: Identity
    ) -> None:
        """Raises NotAuthorizedError unless the caller may delete ``entry``."""
        if not self.can_moderate(entry, identity):
            raise NotAuthorizedError(
                self.resource.lower(), str(entry_id), str(identity.user_id), "delete"
            )
