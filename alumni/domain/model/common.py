"""Base models for all domain entities."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from alumni.domain.value import ContentStatus, UserId


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class DiscussionEntry(DomainModel):
    """Fields shared by comments and replies.

    Both are authored text with their own like and reply counters and a
    moderation status. Neither is ever removed physically.
    """

    author_id: UserId
    content: str = Field(min_length=1)
    like_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    status: ContentStatus = ContentStatus.ACTIVE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        return self.status is ContentStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self.status is ContentStatus.DELETED

    def is_authored_by(self, user_id: Optional[UserId]) -> bool:
        return user_id is not None and self.author_id == user_id
