"""Unit tests for input validators."""

import pytest

from alumni.domain.error import InvalidKindError, ValidationError
from alumni.domain.validation import parse_id, validate_content, validate_kind
from alumni.domain.value import CommentableType, LikeableType


class TestParseId:
    """Tests for parse_id."""

    @pytest.mark.parametrize("value", [1, "7", " 42 "])
    def test_accepts_positive_integers(self, value):
        """Positive integers and their string forms should parse."""
        assert parse_id(value) == int(str(value).strip())

    @pytest.mark.parametrize("value", [0, -3, "abc", "", None, "1.5", True])
    def test_rejects_non_positive_or_non_numeric(self, value):
        """Anything that is not a positive integer should be rejected."""
        with pytest.raises(ValidationError) as exc_info:
            parse_id(value, "commentId")

        assert exc_info.value.field == "commentId"
        assert exc_info.value.message == "commentId must be a valid positive number"


class TestValidateKind:
    """Tests for validate_kind."""

    def test_resolves_allowed_kind(self):
        """Allowed names should resolve to the enum member."""
        assert validate_kind("blog", CommentableType) is CommentableType.BLOG

    def test_post_is_likeable_but_not_commentable(self):
        """Posts can be liked but not commented on."""
        assert validate_kind("post", LikeableType) is LikeableType.POST

        with pytest.raises(InvalidKindError) as exc_info:
            validate_kind("post", CommentableType, "commentable_type")

        assert str(exc_info.value) == "commentable_type must be one of: gallery, blog"
        assert exc_info.value.field == "commentable_type"

    def test_matching_is_case_sensitive(self):
        """Kinds are lower-case on the wire."""
        with pytest.raises(InvalidKindError):
            validate_kind("Gallery", CommentableType)


class TestValidateContent:
    """Tests for validate_content."""

    def test_trims_content(self):
        """Surrounding whitespace should be removed."""
        assert validate_content("  Great photos!  ", 1000) == "Great photos!"

    @pytest.mark.parametrize("value", ["", "   \n\t ", None, 12])
    def test_rejects_missing_content(self, value):
        """Empty or non-text content should be rejected."""
        with pytest.raises(ValidationError, match="Content is required"):
            validate_content(value, 1000)

    def test_length_is_checked_after_trimming(self):
        """Whitespace padding should not count against the limit."""
        assert validate_content("  " + "a" * 500 + "  ", 500) == "a" * 500

        with pytest.raises(
            ValidationError, match="Content cannot exceed 500 characters"
        ):
            validate_content("a" * 501, 500)

    @pytest.mark.parametrize(
        "value",
        [
            "<script>alert(1)</script>",
            "<SCRIPT src=x>",
            "click javascript:void(0)",
            '<img onerror="x">',
            "<a onclick=steal()>",
            "bell\x07",
            "null\x00byte",
        ],
    )
    def test_rejects_unsafe_content(self, value):
        """Script injection patterns and control characters should be rejected."""
        with pytest.raises(
            ValidationError, match="Content contains invalid characters"
        ):
            validate_content(value, 1000)

    def test_allows_tabs_and_newlines(self):
        """Tab, newline and carriage return are ordinary whitespace."""
        text = "line one\r\nline\ttwo"

        assert validate_content(text, 1000) == text
