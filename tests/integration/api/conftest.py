"""Fixtures for API integration tests.

Each test gets an app configured for its own SQLite file. The client runs
the application lifespan, which opens that database and creates the
schema.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from tests.shared.fixtures.api import TEST_JWT_SECRET
from thoughtline.presentation.api.app import create_app
from thoughtline_config import Settings


@pytest.fixture
def api_settings(database_url) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database_url=database_url,
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        password_bcrypt_rounds=4,
    )


@pytest.fixture
def app(api_settings):
    return create_app(api_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
