"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from thoughtline.application.ports.feed import FeedReadPort
from thoughtline.domain.content.repositories import (
    CommentRepository,
    LikeRepository,
    ThoughtRepository,
)
from thoughtline.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def thought_repository(self) -> ThoughtRepository:
        """Get thought repository."""
        ...

    def comment_repository(self) -> CommentRepository:
        """Get comment repository."""
        ...

    def like_repository(self) -> LikeRepository:
        """Get like repository."""
        ...

    def feed_read_port(self) -> FeedReadPort:
        """Get feed read port."""
        ...
