"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. THOUGHTLINE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Development-only signing secret. Production refuses to start with it.
DEFAULT_JWT_SECRET_KEY = "thoughtline-dev-secret-change-me"  # NOQA: S105


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. THOUGHTLINE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("THOUGHTLINE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "ThoughtLine"
    environment: Literal["development", "test", "production"] = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/thoughtline.db"

    # Security
    jwt_secret_key: SecretStr = SecretStr(DEFAULT_JWT_SECRET_KEY)
    jwt_token_expire_days: int = 7
    password_bcrypt_rounds: int = 12

    # API (API_ prefix)
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed

    # Logging
    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("password_bcrypt_rounds")
    @classmethod
    def _validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:  # NOQA: PLR2004
            msg = "password_bcrypt_rounds must be between 4 and 31"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def _reject_default_secret_in_production(self) -> Settings:
        if self.environment == "production" and self.uses_default_jwt_secret:
            msg = (
                "JWT_SECRET_KEY must be set in production. "
                "Generate one with `thoughtline secrets generate`."
            )
            raise ValueError(msg)
        return self

    @property
    def uses_default_jwt_secret(self) -> bool:
        """Whether the development signing secret is in effect."""
        return self.jwt_secret_key.get_secret_value() == DEFAULT_JWT_SECRET_KEY

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
