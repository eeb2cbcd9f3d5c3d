from thoughtline.infrastructure.persistence.sqlalchemy.repositories.content.comment_repository import (  # NOQA: E501
    CommentRepositorySQLAlchemy,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.content.like_repository import (  # NOQA: E501
    LikeRepositorySQLAlchemy,
)
from thoughtline.infrastructure.persistence.sqlalchemy.repositories.content.thought_repository import (  # NOQA: E501
    ThoughtRepositorySQLAlchemy,
)

__all__ = [
    "CommentRepositorySQLAlchemy",
    "LikeRepositorySQLAlchemy",
    "ThoughtRepositorySQLAlchemy",
]
