"""Tests for trace id extraction from ambient contexts."""

import pytest
from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, set_span_in_context
from opentelemetry.trace import SpanContext as OtelSpanContext

from ctxlog import HUB_KEY, SPAN_KEY, Context, SpanContext, extract_trace
from ctxlog.runtime.observability.tracing import is_null_id, span_ids, trace_fields

TRACE_ID = "4bf92f3577b34da6a3ce929d0e0e4736"
SPAN_ID = "00f067aa0ba902b7"


def _otel_span(trace_id: int, span_id: int) -> NonRecordingSpan:
    return NonRecordingSpan(OtelSpanContext(trace_id=trace_id, span_id=span_id, is_remote=False))


@pytest.mark.parametrize("value", ["", "0", "0000000000000000", "0" * 32])
def test_null_ids(value: str) -> None:
    assert is_null_id(value)


@pytest.mark.parametrize("value", [TRACE_ID, SPAN_ID, "1", "00000001"])
def test_real_ids(value: str) -> None:
    assert not is_null_id(value)


def test_no_context() -> None:
    assert extract_trace(None) is None
    assert trace_fields(None) == {}


def test_context_without_span() -> None:
    assert extract_trace(Context()) is None
    assert extract_trace({}) is None


def test_span_context_in_context() -> None:
    ctx = Context().with_span(SpanContext(trace_id=TRACE_ID, span_id=SPAN_ID))

    assert extract_trace(ctx) == (TRACE_ID, SPAN_ID)
    assert trace_fields(ctx) == {"traceID": TRACE_ID, "spanID": SPAN_ID}


def test_all_zero_ids_are_absent() -> None:
    assert extract_trace(Context().with_span(SpanContext.invalid())) is None


def test_one_zero_id_is_absent() -> None:
    ctx = Context().with_span(SpanContext(trace_id=TRACE_ID, span_id="0" * 16))
    assert extract_trace(ctx) is None


def test_plain_dict_context() -> None:
    assert extract_trace({SPAN_KEY: SpanContext(TRACE_ID, SPAN_ID)}) == (TRACE_ID, SPAN_ID)


def test_nested_hub_context_is_unwrapped() -> None:
    """A context stored under the hub key is searched instead of the outer one."""
    inner = Context().with_span(SpanContext(TRACE_ID, SPAN_ID))
    outer = Context().with_span(SpanContext.new()).with_hub(inner)

    assert extract_trace(outer) == (TRACE_ID, SPAN_ID)


def test_non_context_hub_is_ignored_for_tracing() -> None:
    ctx = {SPAN_KEY: SpanContext(TRACE_ID, SPAN_ID), HUB_KEY: object()}
    assert extract_trace(ctx) == (TRACE_ID, SPAN_ID)


def test_span_with_context_attribute() -> None:
    class Span:
        def __init__(self, context: SpanContext) -> None:
            self.context = context

    assert span_ids(Span(SpanContext(TRACE_ID, SPAN_ID))) == (TRACE_ID, SPAN_ID)


def test_unsupported_span_handle() -> None:
    assert span_ids(object()) is None
    assert extract_trace(Context().with_span("not a span")) is None


def test_opentelemetry_span_stored_explicitly() -> None:
    span = _otel_span(int(TRACE_ID, 16), int(SPAN_ID, 16))
    assert extract_trace(Context().with_span(span)) == (TRACE_ID, SPAN_ID)


def test_opentelemetry_context_current_span() -> None:
    otel_ctx = set_span_in_context(_otel_span(int(TRACE_ID, 16), int(SPAN_ID, 16)))
    assert extract_trace(otel_ctx) == (TRACE_ID, SPAN_ID)


def test_opentelemetry_context_without_span() -> None:
    """An empty OTel context resolves to the invalid span, which is absent."""
    otel_ctx = trace.set_span_in_context(trace.INVALID_SPAN)
    assert extract_trace(otel_ctx) is None


def test_span_context_new_and_child() -> None:
    root = SpanContext.new()
    child = root.child()

    assert len(root.trace_id) == 32 and len(root.span_id) == 16
    assert child.trace_id == root.trace_id
    assert child.parent_id == root.span_id
    assert child.span_id != root.span_id
