"""Load a single comment with its author."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.application.dtos.feed import CommentDTO
from thoughtline.application.ports.feed import FeedReadPort
from thoughtline.domain.shared.exceptions import NotFoundError

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class GetCommentQuery:
    def __init__(self, feed_read_port: FeedReadPort):
        self._feed = feed_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCommentQuery:
        return cls(feed_read_port=factory.feed_read_port())

    async def execute(self, comment_id: UUID) -> CommentDTO:
        comment = await self._feed.get_comment(comment_id)
        if comment is None:
            msg = "Comment not found"
            raise NotFoundError(msg, details={"comment_id": str(comment_id)})
        return comment
