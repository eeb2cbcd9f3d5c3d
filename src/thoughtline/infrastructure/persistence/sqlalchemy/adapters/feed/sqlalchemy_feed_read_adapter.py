"""SQLAlchemy implementation of FeedReadPort.

Like and comment counts are correlated scalar subqueries evaluated at read
time, so they always equal the number of rows that actually exist. No
counter columns are stored.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.application.dtos.feed import (
    AuthorDTO,
    CommentDTO,
    ThoughtFeedItemDTO,
)
from thoughtline.application.ports.feed import FeedReadPort
from thoughtline.domain.shared.time import ensure_tz_aware
from thoughtline.infrastructure.persistence.sqlalchemy.models import (
    CommentModel,
    LikeModel,
    ThoughtModel,
    UserModel,
)


class SqlAlchemyFeedReadAdapter(FeedReadPort):
    """SQLAlchemy feed read adapter."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_thoughts(
        self,
        *,
        viewer_id: UUID | None = None,
        author_id: UUID | None = None,
    ) -> list[ThoughtFeedItemDTO]:
        stmt = self._thought_select(viewer_id).order_by(
            ThoughtModel.created_at.desc(),
            ThoughtModel.id.desc(),
        )
        if author_id is not None:
            stmt = stmt.where(ThoughtModel.user_id == author_id)

        result = await self._session.execute(stmt)
        return [self._to_thought_dto(row) for row in result.all()]

    async def get_thought(
        self,
        thought_id: UUID,
        *,
        viewer_id: UUID | None = None,
    ) -> ThoughtFeedItemDTO | None:
        stmt = self._thought_select(viewer_id).where(ThoughtModel.id == thought_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_thought_dto(row) if row is not None else None

    async def list_comments(self, thought_id: UUID) -> list[CommentDTO]:
        stmt = (
            self._comment_select()
            .where(CommentModel.thought_id == thought_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_comment_dto(row) for row in result.all()]

    async def get_comment(self, comment_id: UUID) -> CommentDTO | None:
        stmt = self._comment_select().where(CommentModel.id == comment_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_comment_dto(row) if row is not None else None

    # -------------------------------------------------------------------------
    # Query building
    # -------------------------------------------------------------------------

    def _thought_select(self, viewer_id: UUID | None) -> Select[Any]:
        like_count = (
            select(func.count())
            .select_from(LikeModel)
            .where(LikeModel.thought_id == ThoughtModel.id)
            .correlate(ThoughtModel)
            .scalar_subquery()
            .label("like_count")
        )
        comment_count = (
            select(func.count())
            .select_from(CommentModel)
            .where(CommentModel.thought_id == ThoughtModel.id)
            .correlate(ThoughtModel)
            .scalar_subquery()
            .label("comment_count")
        )
        columns: list[Any] = [
            ThoughtModel.id,
            ThoughtModel.user_id,
            ThoughtModel.content,
            ThoughtModel.created_at,
            ThoughtModel.updated_at,
            UserModel.email,
            UserModel.display_name,
            like_count,
            comment_count,
        ]
        if viewer_id is not None:
            is_liked = (
                exists()
                .where(
                    LikeModel.thought_id == ThoughtModel.id,
                    LikeModel.user_id == viewer_id,
                )
                .correlate(ThoughtModel)
                .label("is_liked")
            )
            columns.append(is_liked)

        return select(*columns).join(UserModel, UserModel.id == ThoughtModel.user_id)

    def _comment_select(self) -> Select[Any]:
        return select(
            CommentModel.id,
            CommentModel.thought_id,
            CommentModel.user_id,
            CommentModel.content,
            CommentModel.created_at,
            UserModel.email,
            UserModel.display_name,
        ).join(UserModel, UserModel.id == CommentModel.user_id)

    # -------------------------------------------------------------------------
    # Row mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_thought_dto(row: Any) -> ThoughtFeedItemDTO:
        mapping = row._mapping
        return ThoughtFeedItemDTO(
            id=mapping["id"],
            user_id=mapping["user_id"],
            content=mapping["content"],
            created_at=ensure_tz_aware(mapping["created_at"]),
            updated_at=ensure_tz_aware(mapping["updated_at"]),
            author=AuthorDTO(
                id=mapping["user_id"],
                email=mapping["email"],
                display_name=mapping["display_name"],
            ),
            like_count=int(mapping["like_count"] or 0),
            comment_count=int(mapping["comment_count"] or 0),
            # SQLite returns the EXISTS column as 0/1
            is_liked=bool(mapping.get("is_liked", False)),
        )

    @staticmethod
    def _to_comment_dto(row: Any) -> CommentDTO:
        mapping = row._mapping
        return CommentDTO(
            id=mapping["id"],
            thought_id=mapping["thought_id"],
            user_id=mapping["user_id"],
            content=mapping["content"],
            created_at=ensure_tz_aware(mapping["created_at"]),
            author=AuthorDTO(
                id=mapping["user_id"],
                email=mapping["email"],
                display_name=mapping["display_name"],
            ),
        )
