"""List the thought feed."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.application.dtos.feed import ThoughtFeedItemDTO
from thoughtline.application.ports.feed import FeedReadPort

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class ListThoughtsQuery:
    """All thoughts newest first, or only those of one author."""

    def __init__(self, feed_read_port: FeedReadPort):
        self._feed = feed_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListThoughtsQuery:
        return cls(feed_read_port=factory.feed_read_port())

    async def execute(
        self,
        viewer_id: UUID | None = None,
        author_id: UUID | None = None,
    ) -> list[ThoughtFeedItemDTO]:
        return await self._feed.list_thoughts(
            viewer_id=viewer_id,
            author_id=author_id,
        )
