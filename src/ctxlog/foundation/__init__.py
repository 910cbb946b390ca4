"""Foundation - building blocks shared by the runtime layer.

Contains: error types, field type aliases, config.
"""

from __future__ import annotations

from .config import CtxlogSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import Fields, LoggedError, PanicError

__all__ = [
    # Errors
    "LoggedError", "PanicError",
    "Fields",
    # Config
    "CtxlogSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
]
