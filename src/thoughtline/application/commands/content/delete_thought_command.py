"""Delete a thought together with its likes and comments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.domain.content import (
    NotThoughtOwnerError,
    ThoughtNotFoundError,
    ThoughtRepository,
)

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteThoughtCommand:
    """Delete a thought after validating that it exists and, if asked, its owner."""

    def __init__(self, thought_repository: ThoughtRepository):
        self._thought_repo = thought_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteThoughtCommand:
        return cls(thought_repository=factory.thought_repository())

    async def execute(
        self,
        thought_id: UUID,
        acting_user_id: UUID | None = None,
    ) -> None:
        thought = await self._thought_repo.find_by_id(thought_id)
        if thought is None:
            raise ThoughtNotFoundError(thought_id)

        if acting_user_id is not None and not thought.is_owned_by(acting_user_id):
            logger.warning(
                "User %s tried to delete thought %s owned by %s",
                acting_user_id,
                thought_id,
                thought.user_id,
            )
            raise NotThoughtOwnerError(thought_id, acting_user_id)

        await self._thought_repo.delete(thought_id)
