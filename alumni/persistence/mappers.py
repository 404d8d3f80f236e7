"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from alumni.domain.model import Comment, Like, Reply, Target
from alumni.domain.value import (
    CommentableType,
    CommentId,
    ContentStatus,
    LikeableType,
    LikeId,
    ReplyId,
    TargetId,
    TargetType,
    UserId,
)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        author_id=UserId(row["author_id"]),
        commentable_type=CommentableType(row["commentable_type"]),
        commentable_id=TargetId(row["commentable_id"]),
        content=row["content"],
        like_count=row["like_count"],
        reply_count=row["reply_count"],
        status=ContentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The ID is left out so inserts use the sequence.
    """
    data = comment.model_dump(exclude={"id"})
    data["commentable_type"] = comment.commentable_type.value
    data["status"] = comment.status.value
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        parent_reply_id=(
            ReplyId(row["parent_reply_id"]) if row.get("parent_reply_id") else None
        ),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        like_count=row["like_count"],
        reply_count=row["reply_count"],
        depth=row["depth"],
        status=ContentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict (without ID)."""
    data = reply.model_dump(exclude={"id"})
    data["status"] = reply.status.value
    return data


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        user_id=UserId(row["user_id"]),
        likeable_type=LikeableType(row["likeable_type"]),
        likeable_id=TargetId(row["likeable_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict (without ID)."""
    data = like.model_dump(exclude={"id"})
    data["likeable_type"] = like.likeable_type.value
    return data


def row_to_target(kind: TargetType, row: Dict[str, Any]) -> Target:
    """Convert a gallery, blog or post row to its counter view."""
    return Target(
        kind=kind,
        id=TargetId(row["id"]),
        like_count=row["like_count"],
        comment_count=row["comment_count"],
    )
