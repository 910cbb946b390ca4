"""Tracing module: span ids and their extraction from an ambient context."""

from .context import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanContext
from .extract import SPAN_ID_KEY, TRACE_ID_KEY, extract_trace, is_null_id, span_ids, trace_fields

__all__ = [
    # Context
    "SpanContext",
    "INVALID_TRACE_ID",
    "INVALID_SPAN_ID",
    # Extraction
    "extract_trace",
    "trace_fields",
    "span_ids",
    "is_null_id",
    "TRACE_ID_KEY",
    "SPAN_ID_KEY",
]
