"""Response items shared by the comment, reply and like use cases.

Field aliases give the JSON names clients consume.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from alumni.domain.model import Comment, Reply
from alumni.domain.service import CommentThread, ReplyNode


class ResponseModel(BaseModel):
    """Response base accepting either field names or aliases."""

    model_config = ConfigDict(populate_by_name=True)


class ReplyItem(ResponseModel):
    """Reply in a response, with its visible children."""

    id: int
    comment_id: int = Field(alias="commentId")
    parent_reply_id: int | None = Field(alias="parentReplyId")
    user_id: int = Field(alias="userId")
    content: str
    like_count: int
    reply_count: int
    depth: int
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    is_liked_by_current_user: bool = Field(
        default=False, alias="isLikedByCurrentUser"
    )
    child_replies: list["ReplyItem"] = Field(default_factory=list, alias="childReplies")

    @classmethod
    def from_reply(
        cls,
        reply: Reply,
        is_liked: bool = False,
        children: list["ReplyItem"] | None = None,
    ) -> "ReplyItem":
        return cls(
            id=reply.id,
            comment_id=reply.comment_id,
            parent_reply_id=reply.parent_reply_id,
            user_id=reply.author_id,
            content=reply.content,
            like_count=reply.like_count,
            reply_count=reply.reply_count,
            depth=reply.depth,
            status=reply.status.value,
            created_at=reply.created_at,
            updated_at=reply.updated_at,
            is_liked_by_current_user=is_liked,
            child_replies=children or [],
        )

    @classmethod
    def from_node(cls, node: ReplyNode) -> "ReplyItem":
        return cls.from_reply(
            node.reply,
            is_liked=node.is_liked,
            children=[cls.from_node(child) for child in node.children],
        )


class CommentItem(ResponseModel):
    """Top-level comment in a response."""

    id: int
    user_id: int = Field(alias="userId")
    commentable_type: str
    commentable_id: int
    content: str
    like_count: int
    reply_count: int
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    is_liked_by_current_user: bool = Field(
        default=False, alias="isLikedByCurrentUser"
    )
    replies: list[ReplyItem] = Field(default_factory=list)

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        is_liked: bool = False,
        replies: list[ReplyItem] | None = None,
    ) -> "CommentItem":
        return cls(
            id=comment.id,
            user_id=comment.author_id,
            commentable_type=comment.commentable_type.value,
            commentable_id=comment.commentable_id,
            content=comment.content,
            like_count=comment.like_count,
            reply_count=comment.reply_count,
            status=comment.status.value,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_liked_by_current_user=is_liked,
            replies=replies or [],
        )

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "CommentItem":
        return cls.from_comment(
            thread.comment,
            is_liked=thread.is_liked,
            replies=[ReplyItem.from_node(node) for node in thread.replies],
        )
