"""Structured logging module: context-aware logging with trace correlation."""

from .caller import UNKNOWN_CALLER, resolve_caller
from .fields import INVALID_KEY_PREFIX, MISSING_VALUE, merge_fields
from .logger import (
    CALLER_KEY,
    ERROR_KEY,
    ContextLogger,
    Logger,
    NoOpLogger,
    configure_logging,
    get_logger,
    get_writer,
    reset_logging,
)
from .writer import (
    ConsoleRenderer,
    JsonRenderer,
    Level,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    Writer,
    create_renderer,
)

__all__ = [
    # Logger
    "Logger",
    "ContextLogger",
    "NoOpLogger",
    "configure_logging",
    "get_logger",
    "get_writer",
    "reset_logging",
    "CALLER_KEY",
    "ERROR_KEY",
    # Writer
    "Writer",
    "Level",
    "LogEntry",
    "LogRenderer",
    "JsonRenderer",
    "ConsoleRenderer",
    "NoOpRenderer",
    "create_renderer",
    # Fields & caller
    "merge_fields",
    "MISSING_VALUE",
    "INVALID_KEY_PREFIX",
    "resolve_caller",
    "UNKNOWN_CALLER",
]
