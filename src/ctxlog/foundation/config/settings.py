"""Environment-based configuration using pydantic-settings.

Example:
    >>> from ctxlog.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'DEBUG'

    # Or with environment variables:
    # CTXLOG_LOG_LEVEL=INFO
    # CTXLOG_LOG_FORMAT=console
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARN", "ERROR", "FATAL", "PANIC"]


class LoggingSettings(BaseSettings):
    """Writer configuration: threshold, output format and caller reporting."""

    model_config = SettingsConfigDict(
        env_prefix="CTXLOG_LOG_",
        extra="ignore",
    )

    level: LevelName = "DEBUG"
    format: Literal["json", "console", "none"] = "json"
    colors: bool | None = Field(default=None, description="Force ANSI colors (None = auto-detect)")
    report_caller: bool = Field(default=True, description="Attach file:line function of the call site")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept any casing and the 'warning' spelling."""
        if not isinstance(v, str):
            return v
        v = v.strip().upper()
        return "WARN" if v == "WARNING" else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class CtxlogSettings(BaseSettings):
    """Root settings for ctxlog.

    Loads configuration from environment variables with CTXLOG_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        CTXLOG_LOG_LEVEL=INFO
        CTXLOG_LOG_FORMAT=json
        CTXLOG_LOG_REPORT_CALLER=false
    """

    model_config = SettingsConfigDict(
        env_prefix="CTXLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> CtxlogSettings:
    """Get the global settings instance (cached)."""
    return CtxlogSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
