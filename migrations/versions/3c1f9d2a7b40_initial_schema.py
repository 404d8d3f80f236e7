"""initial_schema

Create the discussion schema for the alumni network:
- Comments (polymorphic on galleries and blogs)
- Replies (threaded under a root comment, depth-bounded)
- Likes (polymorphic, one per user per item)
- Galleries, blogs and posts (counter columns only; owned elsewhere)

Revision ID: 3c1f9d2a7b40
Revises:
Create Date: 2026-10-19 10:12:44.318206

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9d2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TARGET tables (counter columns only)
    # ========================================================================
    for table in ("galleries", "blogs", "posts"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
            sa.Column(
                "comment_count", sa.Integer(), server_default="0", nullable=False
            ),
            sa.PrimaryKeyConstraint("id"),
        )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("commentable_type", sa.String(50), nullable=False),
        sa.Column("commentable_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(20), server_default="active", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'hidden', 'deleted')", name="ck_comments_status"
        ),
        sa.CheckConstraint("like_count >= 0", name="ck_comments_like_count"),
        sa.CheckConstraint("reply_count >= 0", name="ck_comments_reply_count"),
    )
    op.create_index(
        "idx_comments_target",
        "comments",
        ["commentable_type", "commentable_id", "status", "created_at"],
    )

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("parent_reply_id", sa.Integer(), nullable=True),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("depth", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(20), server_default="active", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_reply_id"], ["replies.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint(
            "status IN ('active', 'hidden', 'deleted')", name="ck_replies_status"
        ),
        sa.CheckConstraint("depth >= 0", name="ck_replies_depth"),
    )
    op.create_index(
        "idx_replies_comment", "replies", ["comment_id", "parent_reply_id", "status"]
    )
    op.create_index("idx_replies_parent", "replies", ["parent_reply_id", "status"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("likeable_type", sa.String(50), nullable=False),
        sa.Column("likeable_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "likeable_type", "likeable_id", name="uq_like"
        ),
    )
    op.create_index("idx_likes_likeable", "likes", ["likeable_type", "likeable_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_likes_likeable", table_name="likes")
    op.drop_table("likes")
    op.drop_index("idx_replies_parent", table_name="replies")
    op.drop_index("idx_replies_comment", table_name="replies")
    op.drop_table("replies")
    op.drop_index("idx_comments_target", table_name="comments")
    op.drop_table("comments")
    for table in ("posts", "blogs", "galleries"):
        op.drop_table(table)
