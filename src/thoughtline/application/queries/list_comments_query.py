"""List the comments of a thought."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.application.dtos.feed import CommentDTO
from thoughtline.application.ports.feed import FeedReadPort

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class ListCommentsQuery:
    """Comments oldest first. An unknown thought simply has no comments."""

    def __init__(self, feed_read_port: FeedReadPort):
        self._feed = feed_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCommentsQuery:
        return cls(feed_read_port=factory.feed_read_port())

    async def execute(self, thought_id: UUID) -> list[CommentDTO]:
        return await self._feed.list_comments(thought_id)
