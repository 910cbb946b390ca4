"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    CtxlogSettings,
    LevelName,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CtxlogSettings",
    "LevelName",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
