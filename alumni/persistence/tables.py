"""SQLAlchemy table definitions for the discussion subsystem.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (Polymorphic: commentable_type + commentable_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("author_id", Integer, nullable=False),
    Column("commentable_type", String(50), nullable=False),  # 'gallery', 'blog'
    Column("commentable_id", Integer, nullable=False),  # No FK, checked on write
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('active', 'hidden', 'deleted')", name="ck_comments_status"
    ),
    CheckConstraint("like_count >= 0", name="ck_comments_like_count"),
    CheckConstraint("reply_count >= 0", name="ck_comments_reply_count"),
)

Index(
    "idx_comments_target",
    comments_table.c.commentable_type,
    comments_table.c.commentable_id,
    comments_table.c.status,
    comments_table.c.created_at,
)

# ============================================================================
# REPLIES TABLE (Tree under a root comment)
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),  # Root comment, even for nested replies
    Column(
        "parent_reply_id",
        Integer,
        ForeignKey("replies.id", ondelete="CASCADE"),
        nullable=True,
    ),  # NULL for direct replies to the comment
    Column("author_id", Integer, nullable=False),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('active', 'hidden', 'deleted')", name="ck_replies_status"
    ),
    CheckConstraint("depth >= 0", name="ck_replies_depth"),
)

Index(
    "idx_replies_comment",
    replies_table.c.comment_id,
    replies_table.c.parent_reply_id,
    replies_table.c.status,
)
Index("idx_replies_parent", replies_table.c.parent_reply_id, replies_table.c.status)

# ============================================================================
# LIKES TABLE (Polymorphic: likeable_type + likeable_id)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("likeable_type", String(50), nullable=False),
    Column("likeable_id", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One like per user per item
    UniqueConstraint("user_id", "likeable_type", "likeable_id", name="uq_like"),
)

Index("idx_likes_likeable", likes_table.c.likeable_type, likes_table.c.likeable_id)

# ============================================================================
# TARGET TABLES (Owned elsewhere; only the counter columns are used here)
# ============================================================================
galleries_table = Table(
    "galleries",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
)

blogs_table = Table(
    "blogs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
)

posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
)
