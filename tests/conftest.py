"""Test configuration and fixtures."""

import logfire
import pytest

from alumni.config import AuthSettings
from alumni.domain.model import Identity
from alumni.domain.value import TargetType, UserId
from alumni.persistence.repository.inmemory import InMemoryTargetRepository

# Keep spans local; app import instruments FastAPI against this config
logfire.configure(send_to_logfire=False, console=False)


async def seed_target(
    env, kind: TargetType = TargetType.GALLERY, target_id: int = 5
) -> InMemoryTargetRepository:
    """Register a gallery, blog or post in the container's target store.

    Args:
        env: Test container (request scoped or root)
        kind: Target kind
        target_id: Target ID

    Returns:
        The in-memory target repository, for reading counters back
    """
    targets = await env.get(InMemoryTargetRepository)
    targets.add(kind, target_id)
    return targets


def identity(user_id: int, *roles: str) -> Identity:
    """Caller identity for service and use case tests."""
    return Identity(user_id=UserId(user_id), roles=tuple(roles))


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(jwt_secret="test-secret")
