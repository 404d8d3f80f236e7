"""Authenticated caller."""

from collections.abc import Iterable

from alumni.domain.model.common import DomainModel
from alumni.domain.value import UserId


class Identity(DomainModel):
    """The user behind a request, as established by the auth layer."""

    user_id: UserId
    roles: tuple[str, ...] = ()

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(role in self.roles for role in roles)
