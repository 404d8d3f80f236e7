"""JSON envelope shared by every response.

Success bodies look like ``{"success": true, "message": ..., "data": ...}``.
Failures look like ``{"success": false, "error": ..., "message": ...}``
with an optional ``field`` naming the offending input.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Successful response wrapper."""

    success: bool = True
    message: str
    data: Optional[DataT] = None


class ErrorEnvelope(BaseModel):
    """Failed response wrapper."""

    success: bool = False
    error: str
    message: Optional[str] = None
    field: Optional[str] = None
