"""SQLAlchemy implementation of LikeRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.domain.content import LikeRepository
from thoughtline.infrastructure.persistence.sqlalchemy.models import LikeModel
from thoughtline.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class LikeRepositorySQLAlchemy(LikeRepository):
    """SQLAlchemy implementation of the LikeRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def toggle(self, user_id: UUID, thought_id: UUID) -> bool:
        """
        Flip the like state with a delete-first strategy.

        A delete that removes a row means the thought was liked, so the
        result is "unliked". Otherwise a row is inserted inside a SAVEPOINT;
        if a concurrent request inserted the same pair first, the composite
        primary key rejects ours and the end state is still "liked".
        """
        result = await self._session.execute(
            delete(LikeModel).where(
                LikeModel.user_id == user_id,
                LikeModel.thought_id == thought_id,
            ),
        )
        if result.rowcount:
            logger.debug("User %s unliked thought %s", user_id, thought_id)
            return False

        try:
            async with self._session.begin_nested():
                self._session.add(LikeModel(user_id=user_id, thought_id=thought_id))
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            logger.debug(
                "Concurrent like for user %s on thought %s already stored",
                user_id,
                thought_id,
            )
            return True

        logger.debug("User %s liked thought %s", user_id, thought_id)
        return True
