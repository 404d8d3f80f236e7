"""Create comment use case."""

from pydantic import BaseModel

from alumni.domain.service import CommentService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import CommentableType, TargetId, UserId

from ..schema import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    commentable_type: str  # Raw path segment, validated here
    commentable_id: str | int
    content: str
    author_id: int  # User ID from authenticated user


class CreateCommentUseCase:
    """Use case for commenting on a gallery or blog."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Validate the target type and ID
        2. Create the comment (service checks content and target existence)

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the type, ID or content is invalid
            NotFoundError: If the target does not exist
        """
        kind = validate_kind(request.commentable_type, CommentableType, "commentable_type")
        target_id = TargetId(parse_id(request.commentable_id, "commentable_id"))

        comment = await self.comment_service.create_comment(
            kind=kind,
            target_id=target_id,
            content=request.content,
            author_id=UserId(request.author_id),
        )
        return CommentItem.from_comment(comment)
