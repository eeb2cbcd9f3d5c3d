"""Abstract repository interfaces for authentication."""

from thoughtline_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = [
    "UserCredentialData",
    "UserCredentialRepository",
]
