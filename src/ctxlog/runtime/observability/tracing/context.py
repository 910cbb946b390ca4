"""Span identifiers carried in an ambient context.

``SpanContext`` is the lightweight span handle ctxlog understands natively.
OpenTelemetry spans are accepted as well (see ``extract``).
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

INVALID_TRACE_ID = "0" * 32
INVALID_SPAN_ID = "0" * 16


@dataclass(frozen=True, slots=True)
class SpanContext:
    """Trace/span id pair as lower-case hex strings (32 and 16 chars).

    Example:
        >>> root = SpanContext.new()
        >>> child = root.child()
        >>> child.trace_id == root.trace_id, child.parent_id == root.span_id
        (True, True)
    """

    trace_id: str
    span_id: str
    parent_id: str | None = None

    @classmethod
    def new(cls) -> SpanContext:
        """Start a new trace with a root span."""
        return cls(trace_id=secrets.token_hex(16), span_id=secrets.token_hex(8))

    @classmethod
    def invalid(cls) -> SpanContext:
        """The all-zero sentinel meaning 'no active trace'."""
        return cls(trace_id=INVALID_TRACE_ID, span_id=INVALID_SPAN_ID)

    def child(self) -> SpanContext:
        """Create a child span in the same trace."""
        return SpanContext(trace_id=self.trace_id, span_id=secrets.token_hex(8), parent_id=self.span_id)
