"""Infrastructure providers.

Implementations are imported here so they register as subclasses of
their component base.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
