"""Input validators shared by services and the HTTP layer.

Each validator either returns the normalised value or raises a
:class:`~alumni.domain.error.ValidationError` naming the offending field.
"""

import re
from enum import Enum
from typing import Any, TypeVar

from alumni.domain.error import InvalidKindError, ValidationError

KindT = TypeVar("KindT", bound=Enum)

# Script tags, javascript: URLs and inline event handlers
_UNSAFE_CONTENT = re.compile(r"<script|javascript:|on\w+=", re.IGNORECASE)
# ASCII control characters other than tab, newline and carriage return
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def parse_id(value: Any, field: str = "id") -> int:
    """Parse a positive integer identifier.

    Raises:
        ValidationError: If the value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a valid positive number", field)
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except (TypeError, ValueError):
            raise ValidationError(
                f"{field} must be a valid positive number", field
            ) from None
    if parsed <= 0:
        raise ValidationError(f"{field} must be a valid positive number", field)
    return parsed


def validate_kind(value: Any, allowed: type[KindT], field: str = "type") -> KindT:
    """Resolve a polymorphic type name against an enum of allowed kinds.

    Matching is exact: kinds are lower-case on the wire.

    Raises:
        InvalidKindError: If the value does not name an allowed kind
    """
    if isinstance(value, allowed):
        return value
    try:
        return allowed(value)
    except ValueError:
        raise InvalidKindError(field, [member.value for member in allowed]) from None


def validate_content(value: Any, max_length: int, field: str = "content") -> str:
    """Trim and check user supplied text.

    Raises:
        ValidationError: If the text is missing, too long or unsafe
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Content is required", field)

    content = value.strip()
    if len(content) > max_length:
        raise ValidationError(
            f"Content cannot exceed {max_length} characters", field
        )
    if _UNSAFE_CONTENT.search(content) or _CONTROL_CHARS.search(content):
        raise ValidationError("Content contains invalid characters", field)
    return content
