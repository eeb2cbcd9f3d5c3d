"""Unit tests for the feed queries."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from thoughtline.application.dtos.feed import AuthorDTO, CommentDTO, ThoughtFeedItemDTO
from thoughtline.application.queries import (
    GetCommentQuery,
    GetThoughtQuery,
    ListCommentsQuery,
    ListThoughtsQuery,
)
from thoughtline.domain.content import ThoughtNotFoundError
from thoughtline.domain.shared.exceptions import NotFoundError

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _author():
    return AuthorDTO(id=uuid4(), email="a@x.com", display_name="Ann")


def _thought_item(author):
    return ThoughtFeedItemDTO(
        id=uuid4(),
        user_id=author.id,
        content="hi",
        created_at=NOW,
        updated_at=NOW,
        author=author,
        like_count=2,
        comment_count=1,
        is_liked=False,
    )


class TestListThoughtsQuery:
    def setup_method(self):
        self.feed = AsyncMock()
        self.query = ListThoughtsQuery(feed_read_port=self.feed)

    async def test_passes_filters_to_port(self):
        viewer_id = uuid4()
        author_id = uuid4()
        item = _thought_item(_author())
        self.feed.list_thoughts.return_value = [item]

        result = await self.query.execute(viewer_id=viewer_id, author_id=author_id)

        assert result == [item]
        self.feed.list_thoughts.assert_awaited_once_with(
            viewer_id=viewer_id,
            author_id=author_id,
        )

    async def test_defaults_to_anonymous_global_feed(self):
        self.feed.list_thoughts.return_value = []

        assert await self.query.execute() == []
        self.feed.list_thoughts.assert_awaited_once_with(
            viewer_id=None,
            author_id=None,
        )


class TestGetThoughtQuery:
    def setup_method(self):
        self.feed = AsyncMock()
        self.query = GetThoughtQuery(feed_read_port=self.feed)

    async def test_returns_item(self):
        item = _thought_item(_author())
        self.feed.get_thought.return_value = item

        assert await self.query.execute(item.id) is item

    async def test_missing_thought(self):
        self.feed.get_thought.return_value = None

        with pytest.raises(ThoughtNotFoundError):
            await self.query.execute(uuid4())


class TestCommentQueries:
    def setup_method(self):
        self.feed = AsyncMock()
        author = _author()
        self.comment = CommentDTO(
            id=uuid4(),
            thought_id=uuid4(),
            user_id=author.id,
            content="nice",
            created_at=NOW,
            author=author,
        )

    async def test_list_comments(self):
        self.feed.list_comments.return_value = [self.comment]

        result = await ListCommentsQuery(self.feed).execute(self.comment.thought_id)

        assert result == [self.comment]

    async def test_get_comment(self):
        self.feed.get_comment.return_value = self.comment

        result = await GetCommentQuery(self.feed).execute(self.comment.id)

        assert result is self.comment

    async def test_get_missing_comment(self):
        self.feed.get_comment.return_value = None

        with pytest.raises(NotFoundError, match="Comment not found"):
            await GetCommentQuery(self.feed).execute(uuid4())
