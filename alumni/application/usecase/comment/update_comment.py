"""Update comment use case."""

from pydantic import BaseModel

from alumni.domain.model import Identity
from alumni.domain.service import CommentService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import CommentId, ContentStatus

from ..schema import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request.

    Either field may be omitted; omitted fields are left unchanged.
    """

    comment_id: str | int
    identity: Identity  # Current user
    content: str | None = None
    status: str | None = None


class UpdateCommentUseCase:
    """Use case for editing or moderating a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Comment ID, caller and the fields to change

        Returns:
            The comment after the update

        Raises:
            ValidationError: If the ID, status or content is invalid
            NotFoundError: If the comment is missing or deleted
            NotAuthorizedError: If the caller may not make the change
        """
        comment_id = CommentId(parse_id(request.comment_id, "commentId"))
        status = (
            validate_kind(request.status, ContentStatus, "status")
            if request.status is not None
            else None
        )

        comment = await self.comment_service.update_comment(
            comment_id,
            request.identity,
            content=request.content,
            status=status,
        )
        return CommentItem.from_comment(comment)
