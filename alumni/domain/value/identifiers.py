"""Strongly typed identifiers for discussion entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. All identifiers are the integer
surrogate keys assigned by the database.
"""

from typing import NewType

UserId = NewType("UserId", int)
CommentId = NewType("CommentId", int)
ReplyId = NewType("ReplyId", int)
LikeId = NewType("LikeId", int)

# Opaque id into whichever table a polymorphic kind names
TargetId = NewType("TargetId", int)
