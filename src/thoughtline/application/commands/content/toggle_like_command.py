"""Like or unlike a thought."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from thoughtline.domain.content import (
    LikeRepository,
    ThoughtNotFoundError,
    ThoughtRepository,
)
from thoughtline.domain.shared.exceptions import ValidationError
from thoughtline.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory


class ToggleLikeCommand:
    """Flip whether a user likes a thought and report the new state."""

    def __init__(
        self,
        like_repository: LikeRepository,
        thought_repository: ThoughtRepository,
        user_repository: UserRepository,
    ):
        self._like_repo = like_repository
        self._thought_repo = thought_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ToggleLikeCommand:
        return cls(
            like_repository=factory.like_repository(),
            thought_repository=factory.thought_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(self, thought_id: UUID, user_id: UUID | None) -> bool:
        """
        Toggle the like.

        Returns
        -------
        True if the thought is now liked by the user, False if unliked
        """
        if user_id is None:
            msg = "UserId is required"
            raise ValidationError(msg)

        if await self._thought_repo.find_by_id(thought_id) is None:
            raise ThoughtNotFoundError(thought_id)
        if await self._user_repo.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        return await self._like_repo.toggle(user_id=user_id, thought_id=thought_id)
