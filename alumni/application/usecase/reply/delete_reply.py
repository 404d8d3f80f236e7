"""Delete reply use case."""

from pydantic import BaseModel

from alumni.domain.model import Identity
from alumni.domain.service import ReplyService
from alumni.domain.validation import parse_id
from alumni.domain.value import ReplyId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    reply_id: str | int
    identity: Identity


class DeleteReplyUseCase:
    """Use case for soft-deleting a reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: DeleteReplyRequest) -> None:
        reply_id = ReplyId(parse_id(request.reply_id, "replyId"))
        await self.reply_service.delete_reply(reply_id, request.identity)
