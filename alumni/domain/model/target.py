"""Content targets owned outside the discussion subsystem.

Only the denormalized counters are read or written here.
"""

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import TargetId, TargetType


class Target(DomainModel):
    """Counter view of a gallery, blog or post."""

    kind: TargetType
    id: TargetId
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
