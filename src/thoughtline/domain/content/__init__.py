"""Content domain: thoughts, comments and likes."""

from thoughtline.domain.content.aggregates import Thought
from thoughtline.domain.content.content_rules import (
    MAX_CONTENT_LENGTH,
    validate_content,
)
from thoughtline.domain.content.entities import Comment
from thoughtline.domain.content.exceptions import (
    InvalidContentError,
    NotThoughtOwnerError,
    ThoughtNotFoundError,
)
from thoughtline.domain.content.repositories import (
    CommentRepository,
    LikeRepository,
    ThoughtRepository,
)

__all__ = [
    "MAX_CONTENT_LENGTH",
    "Comment",
    "CommentRepository",
    "InvalidContentError",
    "LikeRepository",
    "NotThoughtOwnerError",
    "Thought",
    "ThoughtNotFoundError",
    "ThoughtRepository",
    "validate_content",
]
