"""Unit tests for caller identity resolution."""

import pytest
from fastapi import HTTPException

from alumni.domain.service import JWTService
from alumni.interface.api.auth import extract_token, optional_identity, require_identity


class TestExtractToken:
    """Tests for extract_token."""

    def test_header_wins_over_cookie(self):
        """A bearer header is preferred to the cookie."""
        assert extract_token("Bearer header-token", "cookie-token") == "header-token"

    def test_falls_back_to_cookie(self):
        """Non-bearer or missing headers fall back to the cookie."""
        assert extract_token(None, "cookie-token") == "cookie-token"
        assert extract_token("Basic abc", "cookie-token") == "cookie-token"

    def test_nothing_sent(self):
        """No header and no cookie means no token."""
        assert extract_token(None, None) is None


class TestIdentity:
    """Tests for optional_identity and require_identity."""

    def test_roles_travel_in_the_token(self, auth_settings):
        """The identity carries the token's user and roles."""
        # Arrange
        jwt_service = JWTService(auth_settings)
        token = jwt_service.create_token(12, ["moderator"])

        # Act
        identity = optional_identity(jwt_service, f"Bearer {token}", None)

        # Assert
        assert identity.user_id == 12
        assert identity.roles == ("moderator",)
        assert identity.has_any_role(["admin", "moderator"])

    def test_invalid_token_is_anonymous(self, auth_settings):
        """Garbage tokens resolve to no identity."""
        jwt_service = JWTService(auth_settings)

        assert optional_identity(jwt_service, "Bearer garbage", None) is None

    def test_required_identity_raises_401(self, auth_settings):
        """Protected routes reject anonymous callers."""
        jwt_service = JWTService(auth_settings)

        with pytest.raises(HTTPException) as exc_info:
            require_identity(jwt_service, None, None)

        assert exc_info.value.status_code == 401
