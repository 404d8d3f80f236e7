"""Bearer token encoding and decoding.

Tokens carry the numeric user ID and the user's role names. They are issued
by the account service; this API only needs to read them, apart from
tooling and tests that mint their own.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from alumni.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims this API reads from a token."""

    user_id: int
    roles: list[str] = []
    exp: datetime


class JWTError(Exception):
    """Token could not be used: bad signature, expired or malformed claims."""


def create_token(user_id: int, roles: list[str], settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` holding ``roles``."""
    claims = {
        "user_id": user_id,
        "roles": list(roles),
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and parse its claims.

    Raises:
        JWTError: If the token is expired, forged or lacks a user ID
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired") from None
    except jwt.PyJWTError:
        raise JWTError("Invalid token") from None

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Token claims are malformed") from None
