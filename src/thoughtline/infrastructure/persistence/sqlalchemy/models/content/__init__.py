from thoughtline.infrastructure.persistence.sqlalchemy.models.content.comment_model import (  # NOQA: E501
    CommentModel,
)
from thoughtline.infrastructure.persistence.sqlalchemy.models.content.like_model import (  # NOQA: E501
    LikeModel,
)
from thoughtline.infrastructure.persistence.sqlalchemy.models.content.thought_model import (  # NOQA: E501
    ThoughtModel,
)

__all__ = ["CommentModel", "LikeModel", "ThoughtModel"]
