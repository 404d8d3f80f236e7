"""Reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from alumni.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from alumni.application.usecase.schema import ReplyItem
from alumni.domain.service import JWTService
from alumni.interface.api.auth import require_identity
from alumni.interface.api.envelope import Envelope
from alumni.interface.api.routes.comments import ContentAPIRequest, UpdateEntryAPIRequest

router = APIRouter(tags=["replies"], route_class=DishkaRoute)


@router.post(
    "/comments/{comment_id}/replies",
    response_model=Envelope[ReplyItem],
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: str,
    request: ContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ReplyItem]:
    """Reply directly to a comment.

    Requires authentication.

    Args:
        comment_id: Comment ID
        request: Reply text

    Returns:
        The created reply (depth 0)
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    reply = await create_reply_use_case.execute(
        CreateReplyRequest(
            content=request.content or "",
            author_id=identity.user_id,
            comment_id=comment_id,
        )
    )
    return Envelope(message="Reply created successfully", data=reply)


@router.post(
    "/replies/{parent_reply_id}/replies",
    response_model=Envelope[ReplyItem],
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_reply(
    parent_reply_id: str,
    request: ContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ReplyItem]:
    """Reply to another reply.

    Requires authentication. The new reply belongs to the parent's root
    comment and sits one level deeper than the parent.
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    reply = await create_reply_use_case.execute(
        CreateReplyRequest(
            content=request.content or "",
            author_id=identity.user_id,
            parent_reply_id=parent_reply_id,
        )
    )
    return Envelope(message="Reply created successfully", data=reply)


@router.patch("/replies/{reply_id}", response_model=Envelope[ReplyItem])
async def update_reply(
    reply_id: str,
    request: UpdateEntryAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ReplyItem]:
    """Edit a reply (author only) or change its status (author or moderator)."""
    identity = require_identity(jwt_service, authorization, auth_token)

    reply = await update_reply_use_case.execute(
        UpdateReplyRequest(
            reply_id=reply_id,
            identity=identity,
            content=request.content,
            status=request.status,
        )
    )
    return Envelope(message="Reply updated successfully", data=reply)


@router.delete("/replies/{reply_id}", response_model=Envelope[None])
async def delete_reply(
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[None]:
    """Soft-delete a reply. Its descendants are left in place."""
    identity = require_identity(jwt_service, authorization, auth_token)

    await delete_reply_use_case.execute(
        DeleteReplyRequest(reply_id=reply_id, identity=identity)
    )
    return Envelope(message="Reply deleted successfully")
