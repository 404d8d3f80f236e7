"""Like entity.

A like is a single user's endorsement of any likeable entity. At most one
exists per (user, type, id); unliking removes the row.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import LikeableType, LikeId, TargetId, UserId


class Like(DomainModel):
    """Like entity.

    Polymorphic reference to the liked entity (gallery, blog, post, comment
    or reply). Uniqueness is enforced by a database constraint.
    """

    id: Optional[LikeId] = None
    user_id: UserId
    likeable_type: LikeableType
    likeable_id: TargetId
    created_at: datetime = Field(default_factory=datetime.now)
