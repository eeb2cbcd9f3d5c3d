"""Publish a new thought."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.domain.content import Thought, ThoughtRepository
from thoughtline.domain.shared.exceptions import ValidationError
from thoughtline.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class CreateThoughtCommand:
    """Create a thought on behalf of an existing user."""

    def __init__(
        self,
        thought_repository: ThoughtRepository,
        user_repository: UserRepository,
    ):
        self._thought_repo = thought_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateThoughtCommand:
        return cls(
            thought_repository=factory.thought_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(self, user_id: UUID | None, content: str | None) -> Thought:
        if not content or user_id is None:
            msg = "Content and userId are required"
            raise ValidationError(msg)

        # Validates the content before touching the store
        thought = Thought.create(user_id=user_id, content=content)

        if await self._user_repo.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        await self._thought_repo.save(thought)
        return thought
