"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    session_maker,
)
from tests.shared.fixtures.factories import TestUserFactory, create_thought

__all__ = [
    "async_engine",
    "database_url",
    "db_session",
    "session_maker",
    "TestUserFactory",
    "create_thought",
]
