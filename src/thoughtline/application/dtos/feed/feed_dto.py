"""Feed DTOs: read models for thoughts and comments.

Thoughts and comments are always returned together with a small author
summary and, for thoughts, live like/comment counts.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AuthorDTO:
    """Public summary of the user who wrote a thought or comment."""

    id: UUID
    email: str
    display_name: str | None


@dataclass(frozen=True)
class ThoughtFeedItemDTO:
    """A thought as shown in the feed."""

    id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime
    author: AuthorDTO
    like_count: int
    comment_count: int
    is_liked: bool


@dataclass(frozen=True)
class CommentDTO:
    """A comment with its author."""

    id: UUID
    thought_id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    author: AuthorDTO
