"""Load a single thought in feed form."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.application.dtos.feed import ThoughtFeedItemDTO
from thoughtline.application.ports.feed import FeedReadPort
from thoughtline.domain.content import ThoughtNotFoundError

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class GetThoughtQuery:
    """Fetch one thought with author, counts and the viewer's like state."""

    def __init__(self, feed_read_port: FeedReadPort):
        self._feed = feed_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetThoughtQuery:
        return cls(feed_read_port=factory.feed_read_port())

    async def execute(
        self,
        thought_id: UUID,
        viewer_id: UUID | None = None,
    ) -> ThoughtFeedItemDTO:
        item = await self._feed.get_thought(thought_id, viewer_id=viewer_id)
        if item is None:
            raise ThoughtNotFoundError(thought_id)
        return item
