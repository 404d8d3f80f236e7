"""Toggle like use case."""

from typing import Any

from pydantic import BaseModel

from alumni.domain.error import ValidationError
from alumni.domain.service import LikeService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import LikeableType, TargetId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    likeable_type: Any = None
    likeable_id: Any = None
    user_id: int  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    action: str  # "liked" or "unliked"
    liked: bool


class ToggleLikeUseCase:
    """Use case for liking or unliking any likeable entity."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Likeable type and ID plus the acting user

        Returns:
            The action taken and the resulting like state

        Raises:
            ValidationError: If the type or ID is missing or invalid
        """
        if not request.likeable_type:
            raise ValidationError("likeable_type is required", "likeable_type")
        if not request.likeable_id:
            raise ValidationError("likeable_id is required", "likeable_id")

        kind = validate_kind(request.likeable_type, LikeableType, "likeable_type")
        likeable_id = TargetId(parse_id(request.likeable_id, "likeable_id"))

        result = await self.like_service.toggle_like(
            kind, likeable_id, UserId(request.user_id)
        )
        return ToggleLikeResponse(action=result.action.value, liked=result.liked)
