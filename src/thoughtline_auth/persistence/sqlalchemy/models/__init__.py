"""SQLAlchemy models for authentication credentials."""

from thoughtline_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["UserCredentialModel"]
