"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    │   ├── thoughtline_auth/
    │   ├── config/
    │   ├── domain/
    │   ├── application/
    │   └── presentation/
    ├── integration/       # Tests against a throwaway SQLite database
    │   ├── persistence/
    │   └── api/
    └── shared/            # Shared fixtures and utilities
"""

import pytest

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    database_url,
    db_session,
    session_maker,
)
from thoughtline_config import clear_settings_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Ensure no test sees settings cached by another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
