"""User domain exceptions."""

from typing import Any
from uuid import UUID

from thoughtline.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message="An account with this email already exists",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str | UUID | None = None) -> None:
        self.user_id = user_id
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id) if user_id else None},
        )


class InvalidProfileError(ValidationError):
    """Raised when a profile field violates its length bound."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_PROFILE,
            details=details,
        )
