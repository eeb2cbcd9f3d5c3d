"""Helpers for persisting users and thoughts in integration tests."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from thoughtline.domain.content import Thought
from thoughtline.domain.user import User
from thoughtline.infrastructure.persistence.sqlalchemy.repositories import (
    ThoughtRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


class TestUserFactory:
    """Create and persist users with sensible defaults."""

    __test__ = False  # not a test class

    @staticmethod
    async def create(
        session: AsyncSession,
        email: str = "test@example.com",
        display_name: str | None = None,
        user_id: UUID | None = None,
    ) -> User:
        user = User(email=email, display_name=display_name, id=user_id)
        await UserRepositorySQLAlchemy(session).save(user)
        return user


async def create_thought(
    session: AsyncSession,
    user: User,
    content: str = "A passing thought",
) -> Thought:
    thought = Thought.create(user_id=user.id, content=content)
    await ThoughtRepositorySQLAlchemy(session).save(thought)
    return thought
