"""Structured writer: levels, entries, renderers and the shared threshold.

The writer is the collaborator behind every logger handle. It builds
entries, filters them against a threshold, renders them and, for fatal
records, ends the process. One writer is normally shared by all handles, so
``set_level`` on any handle is observed by every other one.
"""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import IntEnum
from typing import Callable, Protocol, TextIO, runtime_checkable

import orjson

from ctxlog.foundation.errors import Fields

RESERVED_KEYS = frozenset({"timestamp", "level", "message"})
CLASH_PREFIX = "fields."


# ─────────────────────────────────────────────────────────────────────────────
# Levels & Entries
# ─────────────────────────────────────────────────────────────────────────────


class Level(IntEnum):
    """Severity, ordered DEBUG < INFO < WARN < ERROR < FATAL < PANIC."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    @property
    def label(self) -> str:
        """Lowercase name used in rendered records."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Level | str | int) -> Level:
        """Parse a level name ("warn", "WARNING", ...), member, or int value."""
        match value:
            case Level():
                return value
            case bool():
                pass
            case int():
                try:
                    return cls(value)
                except ValueError:
                    pass
            case str():
                name = value.strip().upper()
                if (level := cls.__members__.get("WARN" if name == "WARNING" else name)) is not None:
                    return level
        raise ValueError(f"Unknown log level: {value!r}. Use debug, info, warn, error, fatal or panic")


_LABELS = {Level.DEBUG: "debug", Level.INFO: "info", Level.WARN: "warning",
           Level.ERROR: "error", Level.FATAL: "fatal", Level.PANIC: "panic"}


@dataclass(slots=True)
class LogEntry:
    """A record ready for rendering. ``timestamp`` is nanoseconds since the epoch."""

    timestamp: int
    level: Level
    message: str
    fields: Fields

    @property
    def ts_iso(self) -> str:
        """RFC 3339 UTC timestamp with nanosecond precision."""
        secs, nanos = divmod(self.timestamp, 1_000_000_000)
        return f"{datetime.fromtimestamp(secs, tz=UTC):%Y-%m-%dT%H:%M:%S}.{nanos:09d}Z"

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        secs, nanos = divmod(self.timestamp, 1_000_000_000)
        return f"{datetime.fromtimestamp(secs, tz=UTC):%H:%M:%S}.{nanos // 1_000_000:03d}"

    def record(self) -> Fields:
        """Flat record: timestamp, level and message first, then fields.

        Fields named like the record's own keys are prefixed with ``fields.``.
        """
        out: Fields = {"timestamp": self.ts_iso, "level": self.level.label, "message": self.message}
        for k, v in self.fields.items():
            out[f"{CLASH_PREFIX}{k}" if k in RESERVED_KEYS else k] = v
        return out


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...
    def flush(self) -> None: ...


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation (Elasticsearch, Loki, Datadog, etc.)."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = entry.record()
        try:
            line = orjson.dumps(record, default=_json_default, option=orjson.OPT_NON_STR_KEYS)
        except orjson.JSONEncodeError:
            # Out-of-range ints, lone surrogates or deep nesting: degrade the values, never the call
            line = orjson.dumps(_json_safe(record), default=_json_default_safe,
                                option=orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATACLASS)
        self.output.write(line.decode() + "\n")

    def flush(self) -> None:
        self.output.flush()


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable colored console output. Format: timestamp [level] message key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        paint = _painter(bool(self.colors))
        parts = [paint("dim", entry.ts_human)] if self.show_timestamp else []
        parts += [paint(_LEVEL_STYLES[entry.level], f"[{entry.level.label}]"),
                  paint("bold", _escape(str(entry.message)))]
        parts += [f"{paint('cyan', _escape(str(k)))}={paint(*_console_value(v))}" for k, v in entry.fields.items()]
        self.output.write(" ".join(parts) + "\n")

    def flush(self) -> None:
        self.output.flush()


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass

    def flush(self) -> None:
        pass


def create_renderer(format: str = "json", *, output: TextIO | None = None,  # noqa: A002
                    colors: bool | None = None) -> LogRenderer:
    """Build a renderer by name: "json" (machine), "console" (human), "none"."""
    match format:
        case "json": return JsonRenderer(output=output or sys.stdout)
        case "console": return ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "none": return NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'json', 'console', or 'none'")


# ─────────────────────────────────────────────────────────────────────────────
# Writer
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Writer:
    """Shared structured writer holding the severity threshold.

    Rendering is serialized by a lock; the threshold is a plain attribute
    (single writer, many readers).

    Args:
        renderer: Where and how entries are written
        level: Minimum severity that gets rendered
        report_caller: Whether handles attach the ``caller`` field
        exit_func: Called with the exit status after a fatal record
        clock: Nanosecond clock used for timestamps
    """

    renderer: LogRenderer = field(default_factory=JsonRenderer)
    level: Level = Level.DEBUG
    report_caller: bool = True
    exit_func: Callable[[int], object] = sys.exit
    clock: Callable[[], int] = time.time_ns
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self.level = Level.parse(self.level)

    def set_level(self, level: Level | str | int) -> None:
        self.level = Level.parse(level)

    def get_level(self) -> Level:
        return self.level

    def enabled(self, level: Level) -> bool:
        return level >= self.level

    def entry(self, level: Level, message: str, fields: Fields) -> LogEntry:
        return LogEntry(self.clock(), level, message, fields)

    def write(self, entry: LogEntry) -> bool:
        """Render entry if its level passes the threshold. Returns whether it was rendered."""
        if not self.enabled(entry.level):
            return False
        with self._lock:
            self.renderer.render(entry)
        return True

    def flush(self) -> None:
        with self._lock:
            self.renderer.flush()

    def exit(self, code: int) -> None:
        self.exit_func(code)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


_STYLES = {"bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m", "green": "\033[32m", "yellow": "\033[33m",
           "blue": "\033[34m", "magenta": "\033[35m", "cyan": "\033[36m", "white": "\033[37m"}
_RESET = "\033[0m"
_LEVEL_STYLES = {Level.DEBUG: "dim", Level.INFO: "green", Level.WARN: "yellow",
                 Level.ERROR: "red", Level.FATAL: "magenta", Level.PANIC: "magenta"}

# orjson encodes ints in the signed/unsigned 64-bit range and refuses deeper nesting than 254
_INT_MIN, _INT_MAX = -(2**63), 2**64 - 1
_MAX_DEPTH = 200


def _painter(colors: bool) -> Callable[[str, str], str]:
    """Return a ``(style, text) -> str`` function, a passthrough when colors are off."""
    if not colors:
        return lambda style, text: text
    return lambda style, text: f"{_STYLES[style]}{text}{_RESET}"


def _escape(text: str) -> str:
    """Replace lone surrogates (e.g. from surrogateescape-decoded paths) with backslash escapes."""
    return text.encode("utf-8", "backslashreplace").decode()


def _int_text(v: int) -> str:
    try:
        return str(v)
    except ValueError:  # more digits than sys.get_int_max_str_digits() allows
        return hex(v)


def _json_default(obj: object) -> str:
    """Fallback for values orjson cannot encode (exceptions, arbitrary objects)."""
    return str(obj)


def _json_default_safe(obj: object) -> str:
    return _escape(str(obj))


def _json_safe(obj: object, depth: int = 0) -> object:
    """Copy of obj with every value orjson rejects turned into text."""
    if depth > _MAX_DEPTH:
        return _escape(repr(obj))
    match obj:
        case bool() | float() | None:
            return obj
        case int():
            return obj if _INT_MIN <= obj <= _INT_MAX else _int_text(obj)
        case str():
            return _escape(obj)
        case dict():
            return {(_json_safe(k) if isinstance(k, str | int) else k): _json_safe(v, depth + 1)
                    for k, v in obj.items()}
        case list() | tuple():
            return [_json_safe(v, depth + 1) for v in obj]
        case _:
            return obj


def _console_value(v: object) -> tuple[str, str]:
    """Style and text of a field value for console output."""
    match v:
        case str(): return "yellow", f'"{_escape(v)}"'
        case bool(): return "blue", str(v).lower()
        case int(): return "blue", _int_text(v)
        case float(): return "blue", str(v)
        case BaseException(): return "red", f'"{_escape(str(v))}"'
        case dict(): return "dim", f"{{{len(v)} items}}"
        case list() | tuple(): return "dim", f"[{len(v)} items]"
        case _: return "white", repr(v)
