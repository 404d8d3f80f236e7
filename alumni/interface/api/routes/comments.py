"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from alumni.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from alumni.application.usecase.schema import CommentItem
from alumni.domain.service import JWTService
from alumni.domain.validation import parse_id
from alumni.interface.api.auth import optional_identity, require_identity
from alumni.interface.api.envelope import Envelope

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request carrying comment or reply text."""

    content: str | None = None  # Checked by the domain validators


class UpdateEntryAPIRequest(BaseModel):
    """API request for editing or moderating a comment or reply."""

    content: str | None = None
    status: str | None = None


@router.get(
    "/{target_type}/{target_id}/comments",
    response_model=Envelope[GetCommentsResponse],
)
async def get_comments(
    target_type: str,
    target_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: str | None = None,
    limit: str | None = None,
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    include_replies: str | None = Query(default=None, alias="includeReplies"),
    max_depth: str | None = Query(default=None, alias="maxDepth"),
    user_id: str | None = Query(default=None, alias="userId"),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[GetCommentsResponse]:
    """List comment threads on a gallery or blog.

    Public. When the caller is authenticated, like annotations are for the
    caller; otherwise the ``userId`` query parameter is used if present.

    Args:
        target_type: Commentable type (gallery or blog)
        target_id: Target ID
        page: 1-based page number
        limit: Page size
        sort_order: ASC or DESC by creation time
        include_replies: "false" to omit reply trees
        max_depth: Number of reply levels to include
        user_id: User whose likes are annotated, for anonymous callers

    Returns:
        Comment threads and pagination metadata
    """
    identity = optional_identity(jwt_service, authorization, auth_token)
    requesting_user = identity.user_id if identity else None
    if requesting_user is None and user_id:
        requesting_user = parse_id(user_id, "userId")

    result = await get_comments_use_case.execute(
        GetCommentsRequest(
            commentable_type=target_type,
            commentable_id=target_id,
            page=page,
            limit=limit,
            sort_order=sort_order,
            include_replies=include_replies,
            max_depth=max_depth,
            user_id=requesting_user,
        )
    )
    return Envelope(message="Comments retrieved successfully", data=result)


@router.post(
    "/{target_type}/{target_id}/comments",
    response_model=Envelope[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    target_type: str,
    target_id: str,
    request: ContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CommentItem]:
    """Comment on a gallery or blog.

    Requires authentication.

    Args:
        target_type: Commentable type (gallery or blog)
        target_id: Target ID
        request: Comment text

    Returns:
        The created comment
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    comment = await create_comment_use_case.execute(
        CreateCommentRequest(
            commentable_type=target_type,
            commentable_id=target_id,
            content=request.content or "",
            author_id=identity.user_id,
        )
    )
    return Envelope(message="Comment created successfully", data=comment)


@router.patch("/comments/{comment_id}", response_model=Envelope[CommentItem])
async def update_comment(
    comment_id: str,
    request: UpdateEntryAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CommentItem]:
    """Edit a comment (author only) or change its status (author or moderator).

    Requires authentication.
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    comment = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            identity=identity,
            content=request.content,
            status=request.status,
        )
    )
    return Envelope(message="Comment updated successfully", data=comment)


@router.delete("/comments/{comment_id}", response_model=Envelope[None])
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> Envelope[None]:
    """Soft-delete a comment.

    Requires authentication as the author or a moderator.
    """
    identity = require_identity(jwt_service, authorization, auth_token)

    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, identity=identity)
    )
    return Envelope(message="Comment deleted successfully")
