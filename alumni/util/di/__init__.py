"""Dependency injection wiring."""

from alumni.util.di.application import ProdApplicationProvider
from alumni.util.di.base import Component, ProviderBase
from alumni.util.di.core import ProdConfigProvider
from alumni.util.di.domain import ProdDomainProvider
from alumni.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Mockable components are listed by their abstract base
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Concrete provider class for an entry of :data:`PROVIDERS`."""
    return base.implementation(use_mock)


def mockable_components() -> set[str]:
    """Names of every component with a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
