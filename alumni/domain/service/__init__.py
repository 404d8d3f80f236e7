"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService
from .discussion import DiscussionService
from .jwt_service import JWTService
from .like_service import LikeService, LikeStatus, LikeToggle
from .reply_service import ReplyService
from .target_service import TargetService
from .thread_service import CommentThread, ReplyNode, ThreadService

__all__ = [
    "CommentService",
    "CommentThread",
    "CounterService",
    "DiscussionService",
    "JWTService",
    "LikeService",
    "LikeStatus",
    "LikeToggle",
    "ReplyNode",
    "ReplyService",
    "Service",
    "TargetService",
    "ThreadService",
]
