"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
