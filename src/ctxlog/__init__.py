"""ctxlog - Context-aware structured logging with trace correlation and error reporting.

A thin logging facade: key/value fields, the caller's file:line, and the
trace ids of the active span are folded into each record; error-level records
are also forwarded to an error-reporting client found in the ambient context.

Quick Start:
    >>> from ctxlog import Context, SpanContext, configure_logging, get_logger
    >>>
    >>> configure_logging(format="json", level="info")
    >>>
    >>> ctx = Context().with_span(SpanContext.new())
    >>> log = get_logger(ctx).with_values("request_id", "abc123")
    >>> log.info("user signed in", "user_id", 42)
    {"timestamp":"2024-01-03T10:30:45.123456789Z","level":"info","message":"user signed in",
     "caller":"views.py:18 login","traceID":"4bf9...","spanID":"00f0...","request_id":"abc123","user_id":42}

Error Reporting:
    >>> import sentry_sdk
    >>> ctx = Context().with_hub(sentry_sdk.get_current_scope())  # anything with capture_exception()
    >>> get_logger(ctx).with_error(exc).error("charge failed")    # two events: message + exc

OpenTelemetry:
    >>> from opentelemetry import context as otel_context
    >>> get_logger(otel_context.get_current()).info("traced")     # ids of the current OTel span
"""

from __future__ import annotations

__version__ = "0.1.0"

# Config
from .foundation.config import CtxlogSettings, LoggingSettings, clear_settings_cache, get_settings

# Errors
from .foundation.errors import LoggedError, PanicError

# Observability
from .runtime.observability import (
    HUB_KEY,
    SPAN_KEY,
    ConsoleRenderer,
    Context,
    ContextLogger,
    ErrorReporter,
    JsonRenderer,
    Level,
    LogEntry,
    Logger,
    LogRenderer,
    NoOpLogger,
    NoOpRenderer,
    SpanContext,
    Writer,
    configure_logging,
    extract_trace,
    get_logger,
    get_writer,
    merge_fields,
    report_errors,
    reset_logging,
    resolve_caller,
)

__all__ = [
    "__version__",
    # Logging
    "Logger", "ContextLogger", "NoOpLogger", "get_logger", "configure_logging", "get_writer", "reset_logging",
    "Writer", "Level", "LogEntry", "LogRenderer", "JsonRenderer", "ConsoleRenderer", "NoOpRenderer",
    # Context & enrichment
    "Context", "SPAN_KEY", "HUB_KEY", "SpanContext", "extract_trace", "merge_fields", "resolve_caller",
    # Reporting
    "ErrorReporter", "report_errors",
    # Errors
    "LoggedError", "PanicError",
    # Config
    "CtxlogSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
]
