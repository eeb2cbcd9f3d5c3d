"""SQLAlchemy implementation for thoughtline_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation
"""

from thoughtline_auth.persistence.sqlalchemy.base import AuthBase
from thoughtline_auth.persistence.sqlalchemy.models import UserCredentialModel
from thoughtline_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
