from thoughtline.domain.content.repositories.comment_repository import (
    CommentRepository,
)
from thoughtline.domain.content.repositories.like_repository import LikeRepository
from thoughtline.domain.content.repositories.thought_repository import (
    ThoughtRepository,
)

__all__ = ["CommentRepository", "LikeRepository", "ThoughtRepository"]
