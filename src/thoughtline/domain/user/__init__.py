"""User domain: profile aggregate, repository interface and exceptions."""

from thoughtline.domain.user.aggregates import User
from thoughtline.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidProfileError,
    UserNotFoundError,
)
from thoughtline.domain.user.repositories import UserRepository

__all__ = [
    "User",
    "UserRepository",
    "EmailAlreadyExistsError",
    "InvalidProfileError",
    "UserNotFoundError",
]
