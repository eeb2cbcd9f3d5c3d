"""Thought repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from thoughtline.domain.content.aggregates import Thought


class ThoughtRepository(ABC):
    """Repository interface for Thought aggregates."""

    @abstractmethod
    async def find_by_id(self, thought_id: UUID) -> Optional[Thought]:
        """Find a thought by its ID."""

    @abstractmethod
    async def save(self, thought: Thought) -> None:
        """Insert a new thought or persist an edit."""

    @abstractmethod
    async def delete(self, thought_id: UUID) -> bool:
        """
        Delete a thought together with its likes and comments.

        Returns
        -------
        True if the thought existed
        """
