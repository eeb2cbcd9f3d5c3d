"""SQLAlchemy models for persistence layer."""

from thoughtline.infrastructure.persistence.sqlalchemy.models.base import Base
from thoughtline.infrastructure.persistence.sqlalchemy.models.content import (
    CommentModel,
    LikeModel,
    ThoughtModel,
)
from thoughtline.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "CommentModel",
    "LikeModel",
    "ThoughtModel",
    "UserModel",
]
