"""Like routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from alumni.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from alumni.domain.service import JWTService
from alumni.domain.validation import parse_id
from alumni.interface.api.auth import optional_identity, require_identity
from alumni.interface.api.envelope import Envelope

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


class ToggleLikeAPIRequest(BaseModel):
    """API request for toggling a like."""

    likeable_type: Any = None
    likeable_id: Any = None


@router.post("/like", response_model=Envelope[ToggleLikeResponse])
async def toggle_like(
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ToggleLikeResponse]:
    """Like an entity, or unlike it if already liked.

    Requires authentication.

    Returns:
        The action taken and the resulting like state
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(
            likeable_type=request.likeable_type,
            likeable_id=request.likeable_id,
            user_id=identity.user_id,
        )
    )
    return Envelope(message=f"Successfully {result.action}", data=result)


@router.get(
    "/like-status/{likeable_type}/{likeable_id}",
    response_model=Envelope[GetLikeStatusResponse],
)
async def get_like_status(
    likeable_type: str,
    likeable_id: str,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    user_id: str | None = Query(default=None, alias="userId"),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[GetLikeStatusResponse]:
    """Like count of an entity and whether the caller likes it.

    Public. Anonymous callers always get ``liked: false``.
    """
    identity = optional_identity(jwt_service, authorization, auth_token)
    requesting_user = identity.user_id if identity else None
    if requesting_user is None and user_id:
        requesting_user = parse_id(user_id, "userId")

    result = await get_like_status_use_case.execute(
        GetLikeStatusRequest(
            likeable_type=likeable_type,
            likeable_id=likeable_id,
            user_id=requesting_user,
        )
    )
    return Envelope(message="Like status retrieved successfully", data=result)
