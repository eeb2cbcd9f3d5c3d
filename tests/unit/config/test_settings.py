"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr, ValidationError

from thoughtline_config import Settings, get_settings
from thoughtline_config.settings import DEFAULT_JWT_SECRET_KEY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ENVIRONMENT",
        "JWT_SECRET_KEY",
        "JWT_TOKEN_EXPIRE_DAYS",
        "PASSWORD_BCRYPT_ROUNDS",
        "API_CORS_ORIGINS",
        "DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.jwt_token_expire_days == 7
        assert settings.password_bcrypt_rounds == 12
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.uses_default_jwt_secret

    def test_default_secret_value(self):
        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == DEFAULT_JWT_SECRET_KEY


class TestEnvironmentOverrides:
    def test_reads_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("JWT_TOKEN_EXPIRE_DAYS", "3")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == "from-env"
        assert settings.jwt_token_expire_days == 3
        assert not settings.uses_default_jwt_secret

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestValidation:
    def test_production_rejects_default_secret(self):
        with pytest.raises(ValidationError, match="JWT_SECRET_KEY"):
            Settings(_env_file=None, environment="production")

    def test_production_accepts_custom_secret(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            jwt_secret_key=SecretStr("a-real-secret"),
        )

        assert settings.environment == "production"

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, password_bcrypt_rounds=rounds)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="staging")


class TestCorsOrigins:
    def test_empty_by_default(self):
        assert Settings(_env_file=None).cors_origins == []

    def test_comma_separated(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins="http://a.test, http://b.test,",
        )

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_list_is_joined(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins=["http://a.test", "http://b.test"],
        )

        assert settings.api_cors_origins == "http://a.test,http://b.test"
