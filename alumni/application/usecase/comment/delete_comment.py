"""Delete comment use case."""

from pydantic import BaseModel

from alumni.domain.model import Identity
from alumni.domain.service import CommentService
from alumni.domain.validation import parse_id
from alumni.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str | int
    identity: Identity


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            ValidationError: If the ID is invalid
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the caller is neither author nor moderator
        """
        comment_id = CommentId(parse_id(request.comment_id, "commentId"))
        await self.comment_service.delete_comment(comment_id, request.identity)
