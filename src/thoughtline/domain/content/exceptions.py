"""Content domain exceptions."""

from uuid import UUID

from thoughtline.domain.shared.exceptions import (
    ErrorCode,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


class InvalidContentError(ValidationError):
    """Raised when thought or comment text is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code=ErrorCode.INVALID_CONTENT)


class ThoughtNotFoundError(NotFoundError):
    """Raised when a thought cannot be found."""

    def __init__(self, thought_id: str | UUID | None = None) -> None:
        self.thought_id = thought_id
        super().__init__(
            message="Thought not found",
            code=ErrorCode.THOUGHT_NOT_FOUND,
            details={"thought_id": str(thought_id) if thought_id else None},
        )


class NotThoughtOwnerError(PermissionDeniedError):
    """Raised when someone other than the author edits or deletes a thought."""

    def __init__(self, thought_id: UUID, user_id: UUID) -> None:
        super().__init__(
            message="You can only modify your own thoughts",
            details={"thought_id": str(thought_id), "user_id": str(user_id)},
        )
