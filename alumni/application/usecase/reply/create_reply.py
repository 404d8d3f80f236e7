"""Create reply use case."""

from pydantic import BaseModel

from alumni.domain.service import ReplyService
from alumni.domain.validation import parse_id
from alumni.domain.value import CommentId, ReplyId, UserId

from ..schema import ReplyItem


class CreateReplyRequest(BaseModel):
    """Create reply request.

    ``parent_reply_id`` makes the reply nested; otherwise ``comment_id``
    names the comment replied to.
    """

    content: str
    author_id: int  # User ID from authenticated user
    comment_id: str | int | None = None
    parent_reply_id: str | int | None = None


class CreateReplyUseCase:
    """Use case for replying to a comment or to another reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        """Initialize create reply use case.

        Args:
            reply_service: Reply domain service
        """
        self.reply_service = reply_service

    async def execute(self, request: CreateReplyRequest) -> ReplyItem:
        """Execute create reply flow.

        Args:
            request: Create reply request

        Returns:
            The created reply

        Raises:
            ValidationError: If an ID or the content is invalid, or no parent
                is given
            NotFoundError: If the comment or parent reply is not active
            DepthExceededError: If the reply would nest too deeply
        """
        parent_reply_id = (
            ReplyId(parse_id(request.parent_reply_id, "parentReplyId"))
            if request.parent_reply_id is not None
            else None
        )
        comment_id = (
            CommentId(parse_id(request.comment_id, "commentId"))
            if request.comment_id is not None
            else None
        )

        reply = await self.reply_service.create_reply(
            content=request.content,
            author_id=UserId(request.author_id),
            comment_id=comment_id,
            parent_reply_id=parent_reply_id,
        )
        return ReplyItem.from_reply(reply)
