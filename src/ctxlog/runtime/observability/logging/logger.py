"""Context-aware structured logging with trace correlation and error reporting.

Every record is enriched with:
- The call site (``caller``: ``file.py:42 function``)
- Trace ids of the active span in the ambient context (``traceID``, ``spanID``)
- Fields accumulated with ``with_values``/``with_error``

Error-level records (error, fatal, panic) are also forwarded to an error
reporter reachable from the ambient context.

Quick Start:
    >>> from ctxlog import configure_logging, get_logger
    >>>
    >>> # Configure (once at startup)
    >>> configure_logging(format="console", level="info")  # or "json" for production
    >>>
    >>> log = get_logger(ctx).with_values("request_id", "abc123")
    >>> log.info("processing request", "user_id", 123)
    >>> log.with_error(exc).error("request failed")  # also reported to the hub in ctx
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, NoReturn, Protocol, TextIO, runtime_checkable

from ctxlog.foundation.config import CtxlogSettings, get_settings
from ctxlog.foundation.errors import Fields, PanicError

from ..reporting import report_errors
from ..tracing import trace_fields
from .caller import resolve_caller
from .fields import merge_fields
from .writer import Level, LogEntry, Writer, create_renderer

if TYPE_CHECKING:
    from ..context import ContextLike

ERROR_KEY = "error"
CALLER_KEY = "caller"

# Frames between _log and the application call site: the level method and the call site itself
_CALLER_SKIP = 2

_EMPTY_FIELDS: Mapping[str, object] = MappingProxyType({})


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger Protocol & Implementation
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class Logger(Protocol):
    """Protocol for context loggers. Chaining methods return new loggers."""

    def set_level(self, level: Level | str | int) -> Logger: ...
    def debug(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def info(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def warn(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def warning(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def error(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def fatal(self, msg: str, *keys_and_values: object, **fields: object) -> None: ...
    def panic(self, msg: str, *keys_and_values: object, **fields: object) -> NoReturn: ...
    def with_values(self, *keys_and_values: object, **fields: object) -> Logger: ...
    def with_error(self, err: BaseException | None) -> Logger: ...


@dataclass(frozen=True, slots=True)
class ContextLogger:
    """Logger bound to an ambient context and a shared writer. Immutable.

    ``with_values``/``with_error`` return a new logger whose fields are the
    union of this one's and the new ones (new keys win). ``set_level`` is
    the exception: it changes the shared writer's threshold for everyone.

    Example:
        >>> base = get_logger(ctx).with_values("service", "billing")
        >>> base.with_values("attempt", 2).warn("retrying", "delay_ms", 250)
        # => {"level": "warning", "message": "retrying", "caller": "billing.py:31 charge",
        #     "service": "billing", "attempt": 2, "delay_ms": 250, ...}
    """

    writer: Writer
    context: ContextLike = None
    _fields: Mapping[str, object] = field(default_factory=lambda: _EMPTY_FIELDS, repr=False)

    @property
    def fields(self) -> Mapping[str, object]:
        """Read-only view of the accumulated fields."""
        return self._fields

    def set_level(self, level: Level | str | int) -> ContextLogger:
        """Set the shared writer's threshold; affects every logger using it."""
        self.writer.set_level(level)
        return self

    def with_values(self, *keys_and_values: object, **fields: object) -> ContextLogger:
        """Create new logger with additional fields."""
        extra = {**merge_fields(keys_and_values), **fields}
        return ContextLogger(self.writer, self.context, MappingProxyType({**self._fields, **extra}))

    def with_error(self, err: BaseException | None) -> ContextLogger:
        """Create new logger carrying ``err`` itself under the ``error`` key."""
        return self.with_values(ERROR_KEY, err)

    def debug(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        self._log(Level.DEBUG, msg, keys_and_values, fields)

    def info(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        self._log(Level.INFO, msg, keys_and_values, fields)

    def warn(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        self._log(Level.WARN, msg, keys_and_values, fields)

    def warning(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        self._log(Level.WARN, msg, keys_and_values, fields)

    def error(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        """Log at error level and report the message and error fields."""
        self._log(Level.ERROR, msg, keys_and_values, fields)

    def fatal(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        """Log at fatal level, flush, then exit with status 1.

        Exits even when the fatal level is filtered out. With the default
        exit function (``sys.exit``) this never returns.
        """
        self._log(Level.FATAL, msg, keys_and_values, fields)
        self.writer.flush()
        self.writer.exit(1)

    def panic(self, msg: str, *keys_and_values: object, **fields: object) -> NoReturn:
        """Log at panic level, then raise PanicError carrying the entry."""
        entry = self._log(Level.PANIC, msg, keys_and_values, fields)
        raise PanicError(msg, entry)

    def _log(self, level: Level, msg: str, pairs: Sequence[object], kw: Fields) -> LogEntry | None:
        # Below ERROR nothing happens for filtered records; error levels still report
        if level < Level.ERROR and not self.writer.enabled(level):
            return None
        merged = {**self._fields, **merge_fields(pairs), **kw}
        if level >= Level.ERROR:
            report_errors(self.context, msg, merged)
        enriched: Fields = {CALLER_KEY: resolve_caller(_CALLER_SKIP)} if self.writer.report_caller else {}
        enriched.update(trace_fields(self.context))
        enriched.update((k, v) for k, v in merged.items() if k not in enriched)
        entry = self.writer.entry(level, msg, enriched)
        self.writer.write(entry)
        return entry


@dataclass(frozen=True, slots=True)
class NoOpLogger:
    """Logger that discards every record.

    Control flow is kept: ``fatal`` raises SystemExit(1), ``panic`` raises
    PanicError, so code relying on them not returning behaves the same.
    """

    def set_level(self, level: Level | str | int) -> NoOpLogger:
        return self

    def with_values(self, *keys_and_values: object, **fields: object) -> NoOpLogger:
        return self

    def with_error(self, err: BaseException | None) -> NoOpLogger:
        return self

    def debug(self, msg: str, *keys_and_values: object, **fields: object) -> None: pass
    def info(self, msg: str, *keys_and_values: object, **fields: object) -> None: pass
    def warn(self, msg: str, *keys_and_values: object, **fields: object) -> None: pass
    def warning(self, msg: str, *keys_and_values: object, **fields: object) -> None: pass
    def error(self, msg: str, *keys_and_values: object, **fields: object) -> None: pass

    def fatal(self, msg: str, *keys_and_values: object, **fields: object) -> None:
        raise SystemExit(1)

    def panic(self, msg: str, *keys_and_values: object, **fields: object) -> NoReturn:
        raise PanicError(msg)


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


# Process-wide default writer; module state so every thread sees the same threshold
_writer: Writer | None = None
_writer_lock = threading.Lock()


def configure_logging(
    settings: CtxlogSettings | None = None,
    *,
    format: str | None = None,  # noqa: A002 - shadows builtin but matches settings
    level: Level | str | int | None = None,
    output: TextIO | None = None,
    colors: bool | None = None,
    report_caller: bool | None = None,
) -> Writer:
    """Configure the default writer from settings, with keyword overrides.

    Loggers obtained earlier keep the writer they were created with.
    """
    global _writer
    cfg = (settings or get_settings()).logging
    writer = Writer(
        renderer=create_renderer(format or cfg.format, output=output,
                                 colors=cfg.colors if colors is None else colors),
        level=Level.parse(cfg.level if level is None else level),
        report_caller=cfg.report_caller if report_caller is None else report_caller,
    )
    with _writer_lock:
        _writer = writer
    return writer


def get_writer() -> Writer:
    """Get the default writer, configuring it from settings on first use."""
    global _writer
    if (writer := _writer) is not None:
        return writer
    with _writer_lock:
        if _writer is None:
            cfg = get_settings().logging
            _writer = Writer(renderer=create_renderer(cfg.format, colors=cfg.colors),
                             level=Level.parse(cfg.level), report_caller=cfg.report_caller)
        return _writer


def reset_logging() -> None:
    """Drop the default writer; the next get_writer() rebuilds it (useful for testing)."""
    global _writer
    with _writer_lock:
        _writer = None


def get_logger(ctx: ContextLike = None, *, writer: Writer | None = None) -> ContextLogger:
    """Get a logger for an ambient context.

    Args:
        ctx: Context carrying an optional span and error reporter (may be None)
        writer: Explicit writer; defaults to the process-wide one

    Example:
        >>> get_logger(ctx).info("user signed in", "user_id", 42)
    """
    return ContextLogger(writer if writer is not None else get_writer(), ctx)
