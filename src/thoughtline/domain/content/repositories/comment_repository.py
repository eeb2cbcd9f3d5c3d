"""Comment repository interface."""

from abc import ABC, abstractmethod

from thoughtline.domain.content.entities import Comment


class CommentRepository(ABC):
    """Write-side repository for comments.

    Listing is served by the feed read port, which joins author data.
    """

    @abstractmethod
    async def save(self, comment: Comment) -> None:
        """Persist a new comment."""
