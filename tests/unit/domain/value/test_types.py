"""Unit tests for discussion value objects."""

import pytest

from alumni.domain.value import CommentQuery, ContentStatus, PageInfo, SortOrder


class TestCommentQuery:
    """Tests for CommentQuery.from_raw normalisation."""

    def test_defaults(self):
        """Missing parameters should take the defaults."""
        query = CommentQuery.from_raw()

        assert query.page == 1
        assert query.page_size == 20
        assert query.sort_order is SortOrder.ASC
        assert query.include_replies is True
        assert query.max_depth == 3
        assert query.offset == 0

    @pytest.mark.parametrize(
        ("page", "expected"), [("0", 1), ("-4", 1), ("abc", 1), ("3", 3)]
    )
    def test_page_is_at_least_one(self, page, expected):
        """Invalid pages should fall back to the first page."""
        assert CommentQuery.from_raw(page=page).page == expected

    @pytest.mark.parametrize(
        ("limit", "expected"), [("0", 20), ("500", 100), ("-2", 1), ("15", 15)]
    )
    def test_limit_is_clamped(self, limit, expected):
        """Page size should stay within 1..100."""
        assert CommentQuery.from_raw(limit=limit).page_size == expected

    @pytest.mark.parametrize(
        ("max_depth", "expected"), [("0", 3), ("50", 10), ("-1", 1), ("2", 2)]
    )
    def test_max_depth_is_clamped(self, max_depth, expected):
        """Tree depth should stay within 1..10."""
        assert CommentQuery.from_raw(max_depth=max_depth).max_depth == expected

    @pytest.mark.parametrize(
        ("sort_order", "expected"),
        [("desc", SortOrder.DESC), ("DESC", SortOrder.DESC), ("sideways", SortOrder.ASC)],
    )
    def test_sort_order_is_case_insensitive(self, sort_order, expected):
        """Sort order should accept any case and default to ASC."""
        assert CommentQuery.from_raw(sort_order=sort_order).sort_order is expected

    @pytest.mark.parametrize(
        ("include_replies", "expected"),
        [("false", False), (False, False), ("true", True), ("no", True), (None, True)],
    )
    def test_replies_included_unless_false(self, include_replies, expected):
        """Only the literal "false" should turn reply trees off."""
        query = CommentQuery.from_raw(include_replies=include_replies)

        assert query.include_replies is expected

    def test_offset(self):
        """Offset should skip the earlier pages."""
        assert CommentQuery.from_raw(page="3", limit="10").offset == 20


class TestPageInfo:
    """Tests for PageInfo.build."""

    def test_first_of_two_pages(self):
        """25 items at 20 per page should give two pages."""
        info = PageInfo.build(page=1, page_size=20, total_items=25)

        assert info.total_pages == 2
        assert info.has_next_page is True
        assert info.has_prev_page is False

    def test_last_page(self):
        """The last page has no next page."""
        info = PageInfo.build(page=2, page_size=20, total_items=25)

        assert info.has_next_page is False
        assert info.has_prev_page is True

    def test_empty(self):
        """No items means no pages."""
        info = PageInfo.build(page=1, page_size=20, total_items=0)

        assert info.total_pages == 0
        assert info.has_next_page is False


class TestContentStatus:
    """Tests for the status state machine."""

    def test_deleted_is_terminal(self):
        """Nothing leaves the deleted state."""
        assert not ContentStatus.DELETED.can_transition_to(ContentStatus.ACTIVE)
        assert not ContentStatus.DELETED.can_transition_to(ContentStatus.HIDDEN)

    def test_active_and_hidden_are_reversible(self):
        """Hidden content can be restored."""
        assert ContentStatus.ACTIVE.can_transition_to(ContentStatus.HIDDEN)
        assert ContentStatus.HIDDEN.can_transition_to(ContentStatus.ACTIVE)
        assert ContentStatus.HIDDEN.can_transition_to(ContentStatus.DELETED)

    def test_same_status_is_not_a_transition(self):
        """Re-setting the current status is handled as a no-op elsewhere."""
        for status in ContentStatus:
            assert not status.can_transition_to(status)
