"""SQLAlchemy repository implementations for authentication."""

from thoughtline_auth.persistence.sqlalchemy.repositories.user_credential_repository import (  # NOQA: E501
    UserCredentialRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy"]
