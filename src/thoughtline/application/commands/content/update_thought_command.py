"""Edit the text of an existing thought."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.domain.content import (
    NotThoughtOwnerError,
    Thought,
    ThoughtNotFoundError,
    ThoughtRepository,
)
from thoughtline.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateThoughtCommand:
    """Replace a thought's content, optionally checking the acting user owns it."""

    def __init__(self, thought_repository: ThoughtRepository):
        self._thought_repo = thought_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateThoughtCommand:
        return cls(thought_repository=factory.thought_repository())

    async def execute(
        self,
        thought_id: UUID,
        content: str | None,
        acting_user_id: UUID | None = None,
    ) -> Thought:
        if not content:
            msg = "Content is required"
            raise ValidationError(msg)

        thought = await self._thought_repo.find_by_id(thought_id)
        if thought is None:
            raise ThoughtNotFoundError(thought_id)

        if acting_user_id is not None and not thought.is_owned_by(acting_user_id):
            logger.warning(
                "User %s tried to edit thought %s owned by %s",
                acting_user_id,
                thought_id,
                thought.user_id,
            )
            raise NotThoughtOwnerError(thought_id, acting_user_id)

        thought.edit(content)
        await self._thought_repo.save(thought)
        return thought
