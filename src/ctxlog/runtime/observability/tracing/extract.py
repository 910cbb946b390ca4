"""Trace id extraction for log correlation.

Resolves the active span reachable from an ambient context and returns its
(trace_id, span_id) pair. A missing span, a missing context or the all-zero
sentinel all mean "no active trace" and yield None.
"""

from __future__ import annotations

from opentelemetry import context as otel_context
from opentelemetry import trace as otel_trace

from ..context import HUB_KEY, SPAN_KEY, is_context, lookup

TRACE_ID_KEY = "traceID"
SPAN_ID_KEY = "spanID"


def is_null_id(value: str) -> bool:
    """Check if a trace or span id is effectively null (empty or all zeros)."""
    return not value or value.strip("0") == ""


def extract_trace(ctx: object) -> tuple[str, str] | None:
    """Return (trace_id, span_id) of the span reachable from ctx, or None.

    A hub stored under HUB_KEY that is itself a context is searched instead of
    ctx, so a tracing hub's context wins over the outer one.
    """
    if ctx is None:
        return None
    if is_context(hub := lookup(ctx, HUB_KEY)):
        ctx = hub
    if (ids := span_ids(_find_span(ctx))) is None:
        return None
    trace_id, span_id = ids
    if is_null_id(trace_id) or is_null_id(span_id):
        return None
    return trace_id, span_id


def trace_fields(ctx: object) -> dict[str, str]:
    """Trace ids as log fields; empty when there is no active trace."""
    if (ids := extract_trace(ctx)) is None:
        return {}
    return {TRACE_ID_KEY: ids[0], SPAN_ID_KEY: ids[1]}


def span_ids(span: object) -> tuple[str, str] | None:
    """Read hex ids off a supported span handle."""
    match span:
        case None:
            return None
        case otel_trace.Span():
            sc = span.get_span_context()
            return otel_trace.format_trace_id(sc.trace_id), otel_trace.format_span_id(sc.span_id)
        case otel_trace.SpanContext():
            return otel_trace.format_trace_id(span.trace_id), otel_trace.format_span_id(span.span_id)
    # SpanContext-like handles, directly or behind a ``context`` attribute
    holder = getattr(span, "context", span)
    trace_id, span_id = getattr(holder, "trace_id", None), getattr(holder, "span_id", None)
    if isinstance(trace_id, str) and isinstance(span_id, str):
        return trace_id, span_id
    return None


def _find_span(ctx: object) -> object | None:
    if (span := lookup(ctx, SPAN_KEY)) is not None:
        return span
    if isinstance(ctx, otel_context.Context):
        return otel_trace.get_current_span(ctx)
    return None
