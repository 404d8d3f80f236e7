"""Caller identity from bearer tokens."""

from typing import Optional

import logfire

from alumni.config import AuthSettings
from alumni.domain.model import Identity
from alumni.domain.value import UserId
from alumni.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Turns bearer tokens into :class:`Identity` values."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: int, roles: Optional[list[str]] = None) -> str:
        """Sign a token for a user. Used by tooling and tests."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, roles or [], self.auth_settings)

    def verify_token(self, token: str) -> Identity:
        """Identity carried by ``token``.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            payload = verify_token(token, self.auth_settings)
            return Identity(user_id=UserId(payload.user_id), roles=tuple(payload.roles))

    def get_identity_from_token(self, token: Optional[str]) -> Optional[Identity]:
        """Identity carried by ``token``, or None when absent or unusable.

        Public endpoints treat a bad token the same as no token.
        """
        if not token:
            return None
        try:
            return self.verify_token(token)
        except JWTError as e:
            logfire.debug("Ignoring unusable token", reason=str(e))
            return None
