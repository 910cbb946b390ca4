"""Bridge from error-level log calls to an error-reporting backend.

The backend client is looked up in the ambient context under ``HUB_KEY``.
Any object with a ``capture_exception(error)`` method qualifies, so a
``sentry_sdk`` hub or scope can be stored there as-is.

Delivery (network, batching, retries) belongs to the client; this module only
decides what to forward.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from ctxlog.foundation.errors import LoggedError

from .context import HUB_KEY, lookup


@runtime_checkable
class ErrorReporter(Protocol):
    """Protocol for error-reporting clients."""

    def capture_exception(self, error: BaseException) -> object: ...


def find_reporter(ctx: object) -> ErrorReporter | None:
    """Return the reporter reachable from ctx, if any."""
    hub = lookup(ctx, HUB_KEY)
    return hub if isinstance(hub, ErrorReporter) else None


def report_errors(ctx: object, message: str, fields: Mapping[str, object]) -> None:
    """Forward the message and every exception-valued field to the reporter.

    No-op when ctx carries no reporter. The message and each error field are
    reported as separate events; no de-duplication is applied.
    """
    if (reporter := find_reporter(ctx)) is None:
        return
    if message:
        reporter.capture_exception(LoggedError(message))
    for value in fields.values():
        if isinstance(value, BaseException):
            reporter.capture_exception(value)
