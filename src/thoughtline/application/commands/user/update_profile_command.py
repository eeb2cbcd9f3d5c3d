"""Partially update a user's public profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from thoughtline.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from thoughtline.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"display_name", "bio"})


class UpdateProfileCommand:
    """
    Apply a partial profile update.

    ``changes`` holds only the fields the client sent. A key that is absent
    leaves the field untouched, a key mapped to None clears it. Unknown
    keys are ignored.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: UUID, changes: dict[str, Any]) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        updates = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        if user.update_profile(**updates):
            await self._user_repo.save(user)
            logger.info(
                "Updated profile for user %s (fields: %s)",
                user_id,
                ", ".join(sorted(updates)),
            )

        return user
