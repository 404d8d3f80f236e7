"""Domain value objects for the alumni discussion API."""

from alumni.domain.value.identifiers import (
    CommentId,
    LikeId,
    ReplyId,
    TargetId,
    UserId,
)
from alumni.domain.value.types import (
    CommentableType,
    CommentQuery,
    ContentStatus,
    LikeableType,
    LikeAction,
    PageInfo,
    SortOrder,
    TargetType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "ReplyId",
    "LikeId",
    "TargetId",
    # Types
    "CommentableType",
    "LikeableType",
    "TargetType",
    "ContentStatus",
    "SortOrder",
    "LikeAction",
    "CommentQuery",
    "PageInfo",
]
