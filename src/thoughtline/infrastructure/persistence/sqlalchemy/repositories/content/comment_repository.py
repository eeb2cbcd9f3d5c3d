"""SQLAlchemy implementation of CommentRepository."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.domain.content import Comment, CommentRepository
from thoughtline.infrastructure.persistence.sqlalchemy.models import CommentModel

logger = logging.getLogger(__name__)


class CommentRepositorySQLAlchemy(CommentRepository):
    """SQLAlchemy implementation of the CommentRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, comment: Comment) -> None:
        self._session.add(self._map_to_model(comment))
        await self._session.flush()
        logger.info(
            "Created comment: %s (thought: %s, user: %s)",
            comment.id,
            comment.thought_id,
            comment.user_id,
        )

    def _map_to_model(self, comment: Comment) -> CommentModel:
        return CommentModel(
            id=comment.id,
            thought_id=comment.thought_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
        )
