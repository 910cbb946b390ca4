"""Ambient call context: an immutable carrier of call-scoped services.

A context optionally holds a span handle (under ``SPAN_KEY``) and a hub
(under ``HUB_KEY``). The hub is either an error reporter or a nested tracing
context that must be unwrapped before looking for a span.

Any ``Mapping`` works as a context too, which covers plain dicts and
OpenTelemetry's ``Context``:

    >>> ctx = Context().with_span(SpanContext.new()).with_hub(reporter)
    >>> get_logger(ctx).error("payment failed", "order", 42)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

SPAN_KEY = "ctxlog.span"
HUB_KEY = "ctxlog.hub"

ContextLike = Union["Context", Mapping[str, object], None]


@dataclass(frozen=True, slots=True)
class Context:
    """Immutable key/value context. ``with_*`` methods return a new context."""

    values: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def value(self, key: str) -> object | None:
        return self.values.get(key)

    def with_value(self, key: str, value: object) -> Context:
        return Context(MappingProxyType({**self.values, key: value}))

    def with_span(self, span: object) -> Context:
        """Attach a span handle (OpenTelemetry span, SpanContext, ...)."""
        return self.with_value(SPAN_KEY, span)

    def with_hub(self, hub: object) -> Context:
        """Attach an error reporter or a nested tracing context."""
        return self.with_value(HUB_KEY, hub)

    def __contains__(self, key: object) -> bool:
        return key in self.values


def is_context(obj: object) -> bool:
    """Whether obj can be searched by key (Context or any Mapping)."""
    return isinstance(obj, (Context, Mapping))


def lookup(ctx: object, key: str) -> object | None:
    """Type-checked key lookup on a context. Returns None instead of raising."""
    if ctx is None:
        return None
    if isinstance(ctx, Context):
        return ctx.value(key)
    if isinstance(ctx, Mapping):
        return ctx.get(key)
    return None
