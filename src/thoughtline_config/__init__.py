"""Shared application configuration package."""

from .settings import (
    DEFAULT_JWT_SECRET_KEY,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
)

__all__ = [
    "DEFAULT_JWT_SECRET_KEY",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
]
