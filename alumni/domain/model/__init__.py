"""Domain model entities for the alumni discussion API."""

from alumni.domain.model.comment import Comment
from alumni.domain.model.identity import Identity
from alumni.domain.model.like import Like
from alumni.domain.model.reply import Reply
from alumni.domain.model.target import Target

__all__ = [
    "Comment",
    "Reply",
    "Like",
    "Target",
    "Identity",
]
