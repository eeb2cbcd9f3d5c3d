"""Like repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID


class LikeRepository(ABC):
    """Repository for (user, thought) like pairs."""

    @abstractmethod
    async def toggle(self, user_id: UUID, thought_id: UUID) -> bool:
        """
        Flip the like state for a user and thought.

        Returns
        -------
        True if the thought is liked afterwards, False if it was unliked
        """
