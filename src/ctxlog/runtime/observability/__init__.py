"""Observability for application code: context loggers, trace correlation, error reporting.

Quick Start:
    >>> from ctxlog.runtime.observability import Context, SpanContext, get_logger
    >>>
    >>> ctx = Context().with_span(SpanContext.new()).with_hub(sentry_hub)
    >>> log = get_logger(ctx)
    >>> log.info("order placed", "order_id", 42)     # includes traceID/spanID
    >>> log.with_error(exc).error("charge failed")   # also captured by the hub
"""

from .context import HUB_KEY, SPAN_KEY, Context, ContextLike, lookup
from .logging import (
    CALLER_KEY,
    ERROR_KEY,
    ConsoleRenderer,
    ContextLogger,
    JsonRenderer,
    Level,
    LogEntry,
    Logger,
    LogRenderer,
    NoOpLogger,
    NoOpRenderer,
    Writer,
    configure_logging,
    create_renderer,
    get_logger,
    get_writer,
    merge_fields,
    reset_logging,
    resolve_caller,
)
from .reporting import ErrorReporter, find_reporter, report_errors
from .tracing import SPAN_ID_KEY, TRACE_ID_KEY, SpanContext, extract_trace, is_null_id

__all__ = [
    # Context
    "Context",
    "ContextLike",
    "SPAN_KEY",
    "HUB_KEY",
    "lookup",
    # Logging
    "Logger",
    "ContextLogger",
    "NoOpLogger",
    "get_logger",
    "configure_logging",
    "get_writer",
    "reset_logging",
    "Writer",
    "Level",
    "LogEntry",
    "LogRenderer",
    "JsonRenderer",
    "ConsoleRenderer",
    "NoOpRenderer",
    "create_renderer",
    "merge_fields",
    "resolve_caller",
    "CALLER_KEY",
    "ERROR_KEY",
    # Tracing
    "SpanContext",
    "extract_trace",
    "is_null_id",
    "TRACE_ID_KEY",
    "SPAN_ID_KEY",
    # Reporting
    "ErrorReporter",
    "find_reporter",
    "report_errors",
]
