"""Comment entity.

Comments attach to a gallery or a blog through a (type, id) pair and root
a tree of replies.
"""

from typing import Optional

from alumni.domain.model.common import DiscussionEntry
from alumni.domain.value import CommentableType, CommentId, TargetId


class Comment(DiscussionEntry):
    """Top-level comment on a commentable target.

    ``reply_count`` tracks active direct replies only; nested replies are
    counted on their parent reply.
    """

    id: Optional[CommentId] = None  # Assigned by the repository on insert
    commentable_type: CommentableType
    commentable_id: TargetId
