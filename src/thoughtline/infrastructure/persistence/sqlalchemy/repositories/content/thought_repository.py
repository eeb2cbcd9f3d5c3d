"""SQLAlchemy implementation of ThoughtRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.domain.content import Thought, ThoughtRepository
from thoughtline.domain.shared.time import ensure_tz_aware
from thoughtline.infrastructure.persistence.sqlalchemy.models import (
    CommentModel,
    LikeModel,
    ThoughtModel,
)

logger = logging.getLogger(__name__)


class ThoughtRepositorySQLAlchemy(ThoughtRepository):
    """SQLAlchemy implementation of the ThoughtRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, thought_id: UUID) -> Thought | None:
        model = await self._find_model_by_id(thought_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def save(self, thought: Thought) -> None:
        existing = await self._find_model_by_id(thought.id)

        if existing:
            existing.content = thought.content
            existing.updated_at = thought.updated_at
            logger.debug("Updated thought: %s", thought.id)
        else:
            self._session.add(self._map_to_model(thought))
            logger.info("Created thought: %s (user: %s)", thought.id, thought.user_id)

        await self._session.flush()

    async def delete(self, thought_id: UUID) -> bool:
        model = await self._find_model_by_id(thought_id)
        if model is None:
            return False

        # Children first; the FK cascade covers rows added concurrently
        await self._session.execute(
            delete(LikeModel).where(LikeModel.thought_id == thought_id),
        )
        await self._session.execute(
            delete(CommentModel).where(CommentModel.thought_id == thought_id),
        )
        await self._session.delete(model)
        await self._session.flush()

        logger.info("Deleted thought: %s", thought_id)
        return True

    async def _find_model_by_id(self, thought_id: UUID) -> ThoughtModel | None:
        stmt = select(ThoughtModel).where(ThoughtModel.id == thought_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ThoughtModel) -> Thought:
        return Thought.reconstitute(
            id=model.id,
            user_id=model.user_id,
            content=model.content,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, thought: Thought) -> ThoughtModel:
        return ThoughtModel(
            id=thought.id,
            user_id=thought.user_id,
            content=thought.content,
            created_at=thought.created_at,
            updated_at=thought.updated_at,
        )
