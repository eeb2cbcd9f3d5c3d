"""ThoughtLine Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the feed domain. It handles:
- Password hashing (bcrypt)
- Session token creation and verification (JWT)
- User credential storage (with pluggable persistence)

Architecture:
    thoughtline_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from thoughtline_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from thoughtline_auth.repositories import UserCredentialData, UserCredentialRepository
from thoughtline_auth.schemas import TokenPayload
from thoughtline_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
