"""Get like status use case."""

from pydantic import BaseModel, Field

from alumni.domain.service import LikeService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import LikeableType, TargetId, UserId

from ..schema import ResponseModel


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    likeable_type: str
    likeable_id: str | int
    user_id: int | None = None  # None for anonymous callers


class GetLikeStatusResponse(ResponseModel):
    """Like status response."""

    liked: bool
    like_count: int = Field(alias="likeCount")


class GetLikeStatusUseCase:
    """Use case for reading an entity's like count and the caller's like."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        """Execute get like status flow.

        Raises:
            ValidationError: If the type or ID is invalid
        """
        kind = validate_kind(request.likeable_type, LikeableType, "likeable_type")
        likeable_id = TargetId(parse_id(request.likeable_id, "likeable_id"))

        status = await self.like_service.get_like_status(
            kind,
            likeable_id,
            UserId(request.user_id) if request.user_id else None,
        )
        return GetLikeStatusResponse(liked=status.liked, like_count=status.like_count)
