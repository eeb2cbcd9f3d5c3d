"""Feed read port.

Read-side contract for everything the feed screens display. Each method
returns DTOs with author data and aggregated counts already attached.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from thoughtline.application.dtos.feed import CommentDTO, ThoughtFeedItemDTO


class FeedReadPort(Protocol):
    """Feed read interface."""

    async def list_thoughts(
        self,
        *,
        viewer_id: UUID | None = None,
        author_id: UUID | None = None,
    ) -> list[ThoughtFeedItemDTO]:
        """All thoughts, newest first, optionally limited to one author.

        ``is_liked`` reflects ``viewer_id`` and is False without a viewer.
        """
        ...

    async def get_thought(
        self,
        thought_id: UUID,
        *,
        viewer_id: UUID | None = None,
    ) -> ThoughtFeedItemDTO | None:
        """A single thought in feed form, or None if it does not exist."""
        ...

    async def list_comments(self, thought_id: UUID) -> list[CommentDTO]:
        """Comments of a thought, oldest first."""
        ...

    async def get_comment(self, comment_id: UUID) -> CommentDTO | None:
        """A single comment with its author, or None."""
        ...
