"""Feed DTOs - read models for thoughts and comments."""

from thoughtline.application.dtos.feed.feed_dto import (
    AuthorDTO,
    CommentDTO,
    ThoughtFeedItemDTO,
)

__all__ = ["AuthorDTO", "CommentDTO", "ThoughtFeedItemDTO"]
