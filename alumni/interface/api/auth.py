"""Caller identity resolution for routes.

A token is read from the ``Authorization: Bearer`` header first and from
the auth cookie otherwise.
"""

from fastapi import HTTPException, status

from alumni.domain.model import Identity
from alumni.domain.service import JWTService

BEARER_PREFIX = "bearer "


def extract_token(authorization: str | None, cookie_token: str | None) -> str | None:
    """Pick the bearer token from the header, falling back to the cookie."""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return cookie_token or None


def optional_identity(
    jwt_service: JWTService,
    authorization: str | None,
    cookie_token: str | None,
) -> Identity | None:
    """Identity of the caller, or None for anonymous or invalid tokens."""
    return jwt_service.get_identity_from_token(
        extract_token(authorization, cookie_token)
    )


def require_identity(
    jwt_service: JWTService,
    authorization: str | None,
    cookie_token: str | None,
) -> Identity:
    """Identity of the caller.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    identity = optional_identity(jwt_service, authorization, cookie_token)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return identity
