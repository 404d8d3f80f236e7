"""Domain layer errors."""

from typing import Optional


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    ``field`` names the offending input when there is one.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidKindError(ValidationError):
    """Raised when a polymorphic type is outside the allowed set."""

    def __init__(self, field: str, allowed: list[str]):
        self.allowed = allowed
        super().__init__(f"{field} must be one of: {', '.join(allowed)}", field)


class DepthExceededError(DomainError):
    """Raised when a nested reply would exceed the maximum depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum reply depth exceeded ({max_depth})")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they may not change."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
