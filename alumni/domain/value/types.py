"""Domain value objects for the discussion subsystem.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from enum import Enum
from typing import Any

from pydantic import Field

from alumni.domain.value.common import ValueObject


class CommentableType(str, Enum):
    """Type of entity that comments can attach to."""

    GALLERY = "gallery"
    BLOG = "blog"


class LikeableType(str, Enum):
    """Type of entity that can be liked."""

    GALLERY = "gallery"
    BLOG = "blog"
    POST = "post"
    COMMENT = "comment"
    REPLY = "reply"


class TargetType(str, Enum):
    """Content entity owned outside this subsystem that carries counters."""

    GALLERY = "gallery"
    BLOG = "blog"
    POST = "post"


class ContentStatus(str, Enum):
    """Moderation status of a comment or reply.

    ``deleted`` is terminal: nothing transitions out of it.
    """

    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"

    def can_transition_to(self, target: "ContentStatus") -> bool:
        """Whether a status update from this status to ``target`` is allowed.

        Re-setting the current status is not a transition.
        """
        return target in _STATUS_TRANSITIONS[self]


_STATUS_TRANSITIONS: dict[ContentStatus, frozenset[ContentStatus]] = {
    ContentStatus.ACTIVE: frozenset({ContentStatus.HIDDEN, ContentStatus.DELETED}),
    ContentStatus.HIDDEN: frozenset({ContentStatus.ACTIVE, ContentStatus.DELETED}),
    ContentStatus.DELETED: frozenset(),
}


class SortOrder(str, Enum):
    """Chronological ordering for top-level comments."""

    ASC = "ASC"
    DESC = "DESC"


class LikeAction(str, Enum):
    """Outcome of a like toggle."""

    LIKED = "liked"
    UNLIKED = "unliked"


def _lenient_int(value: Any) -> int | None:
    """Parse a loosely formatted integer, returning None when impossible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class CommentQuery(ValueObject):
    """Normalised listing parameters for comments on a target.

    Out-of-range values are clamped rather than rejected, so any query string
    produces a usable page request.
    """

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)
    sort_order: SortOrder = SortOrder.ASC
    include_replies: bool = True
    max_depth: int = Field(default=3, ge=1)

    @property
    def offset(self) -> int:
        """Number of rows to skip for this page."""
        return (self.page - 1) * self.page_size

    @classmethod
    def from_raw(
        cls,
        page: Any = None,
        limit: Any = None,
        sort_order: Any = None,
        include_replies: Any = None,
        max_depth: Any = None,
        *,
        default_page_size: int = 20,
        max_page_size: int = 100,
        default_max_depth: int = 3,
        max_depth_limit: int = 10,
    ) -> "CommentQuery":
        """Build a query from raw request values.

        Args:
            page: Requested page (1-based); missing or invalid becomes 1
            limit: Page size; zero or missing becomes the default, then
                clamped into ``1..max_page_size``
            sort_order: ``ASC`` or ``DESC`` in any case; anything else is ASC
            include_replies: Replies are included unless this is ``"false"``
                (or ``False``)
            max_depth: Reply tree depth; zero or missing becomes the default,
                then clamped into ``1..max_depth_limit``

        Returns:
            Normalised query
        """
        parsed_page = _lenient_int(page) or 1
        parsed_limit = _lenient_int(limit) or default_page_size
        parsed_depth = _lenient_int(max_depth) or default_max_depth

        order = SortOrder.ASC
        if isinstance(sort_order, str) and sort_order.upper() in SortOrder.__members__:
            order = SortOrder(sort_order.upper())

        if isinstance(include_replies, bool):
            with_replies = include_replies
        else:
            with_replies = include_replies != "false"

        return cls(
            page=max(1, parsed_page),
            page_size=min(max_page_size, max(1, parsed_limit)),
            sort_order=order,
            include_replies=with_replies,
            max_depth=min(max_depth_limit, max(1, parsed_depth)),
        )


class PageInfo(ValueObject):
    """Pagination metadata returned alongside a page of items."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, page_size: int, total_items: int) -> "PageInfo":
        """Compute metadata for ``page`` given the total number of items."""
        total_pages = math.ceil(total_items / page_size) if page_size else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            items_per_page=page_size,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )
