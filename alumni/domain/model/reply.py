"""Reply entity.

Replies always belong to a root comment. Nested replies additionally point
at their parent reply and sit one level deeper than it.
"""

from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DiscussionEntry
from alumni.domain.value import CommentId, ReplyId


class Reply(DiscussionEntry):
    """Reply to a comment or to another reply.

    Threading is managed through:
    - comment_id: The root comment, inherited by every nested reply
    - parent_reply_id: Direct parent reply (None for direct replies)
    - depth: 0 for direct replies, parent depth + 1 for nested ones
    """

    id: Optional[ReplyId] = None  # Assigned by the repository on insert
    comment_id: CommentId
    parent_reply_id: Optional[ReplyId] = None
    depth: int = Field(default=0, ge=0)

    @property
    def is_nested(self) -> bool:
        return self.parent_reply_id is not None
