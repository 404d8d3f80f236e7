"""Get comments use case."""

from typing import Any

from pydantic import BaseModel, Field

from alumni.config import DiscussionSettings
from alumni.domain.service import CommentService, ThreadService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import CommentableType, CommentQuery, PageInfo, TargetId, UserId

from ..schema import CommentItem, ResponseModel


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Listing parameters are passed through raw and normalised by
    :meth:`CommentQuery.from_raw`.
    """

    commentable_type: str
    commentable_id: str | int
    page: Any = None
    limit: Any = None
    sort_order: Any = None
    include_replies: Any = None
    max_depth: Any = None
    user_id: int | None = None  # Requesting user, for like annotations


class GetCommentsResponse(ResponseModel):
    """One page of comment threads plus pagination metadata."""

    comments: list[CommentItem]
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    items_per_page: int = Field(alias="itemsPerPage")
    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")


class GetCommentsUseCase:
    """Use case for listing the comment threads on a gallery or blog."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        settings: DiscussionSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            thread_service: Reply tree assembly
            settings: Page size and tree depth limits
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Target, listing parameters and optional requesting user

        Returns:
            Comments on the requested page with reply trees and like state

        Raises:
            ValidationError: If the target type or ID is invalid
        """
        kind = validate_kind(request.commentable_type, CommentableType, "commentable_type")
        target_id = TargetId(parse_id(request.commentable_id, "commentable_id"))
        query = CommentQuery.from_raw(
            page=request.page,
            limit=request.limit,
            sort_order=request.sort_order,
            include_replies=request.include_replies,
            max_depth=request.max_depth,
            default_page_size=self.settings.default_page_size,
            max_page_size=self.settings.max_page_size,
            default_max_depth=self.settings.default_tree_depth,
            max_depth_limit=self.settings.max_tree_depth,
        )

        comments, total = await self.comment_service.list_comments(
            kind, target_id, query
        )
        threads = await self.thread_service.build_threads(
            comments,
            user_id=UserId(request.user_id) if request.user_id else None,
            include_replies=query.include_replies,
            max_depth=query.max_depth,
        )

        page_info = PageInfo.build(query.page, query.page_size, total)
        return GetCommentsResponse(
            comments=[CommentItem.from_thread(thread) for thread in threads],
            **page_info.model_dump(),
        )
