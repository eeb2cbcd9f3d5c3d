"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from thoughtline.domain.user.aggregates import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address (exact match)."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already holds the email
        """
