"""Shared domain components.

This module exports exceptions and time helpers used across domain
boundaries.
"""

from thoughtline.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainException,
    ErrorCode,
    InternalError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from thoughtline.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
