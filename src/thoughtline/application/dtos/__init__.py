from thoughtline.application.dtos.feed import (
    AuthorDTO,
    CommentDTO,
    ThoughtFeedItemDTO,
)

__all__ = ["AuthorDTO", "CommentDTO", "ThoughtFeedItemDTO"]
