"""SQLAlchemy repository implementations."""

from thoughtline.infrastructure.persistence.sqlalchemy.repositories.content import (
    CommentRepositorySQLAlchemy,
    LikeRepositorySQLAlchemy,
    ThoughtRepositorySQLAlchemy,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CommentRepositorySQLAlchemy",
    "LikeRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "ThoughtRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
