"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value.

    Listing parameters and page metadata derive from this so they can be
    passed between layers without defensive copies.
    """

    model_config = ConfigDict(frozen=True)
