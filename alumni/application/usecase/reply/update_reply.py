"""Update reply use case."""

from pydantic import BaseModel

from alumni.domain.model import Identity
from alumni.domain.service import ReplyService
from alumni.domain.validation import parse_id, validate_kind
from alumni.domain.value import ContentStatus, ReplyId

from ..schema import ReplyItem


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    reply_id: str | int
    identity: Identity
    content: str | None = None
    status: str | None = None


class UpdateReplyUseCase:
    """Use case for editing or moderating a reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: UpdateReplyRequest) -> ReplyItem:
        """Execute update reply flow.

        Raises:
            ValidationError: If the ID, status or content is invalid
            NotFoundError: If the reply is missing or deleted
            NotAuthorizedError: If the caller may not make the change
        """
        reply_id = ReplyId(parse_id(request.reply_id, "replyId"))
        status = (
            validate_kind(request.status, ContentStatus, "status")
            if request.status is not None
            else None
        )

        reply = await self.reply_service.update_reply(
            reply_id,
            request.identity,
            content=request.content,
            status=status,
        )
        return ReplyItem.from_reply(reply)
