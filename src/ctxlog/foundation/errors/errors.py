"""Exceptions raised or reported by the logging facade.

Logging input never raises: malformed fields degrade into synthetic keys.
The classes here are the deliberate exits (``panic``) and the synthetic
error events handed to error reporters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ctxlog.runtime.observability.logging.writer import LogEntry


class LoggedError(Exception):
    """Synthetic error carrying a logged message.

    Reported to the error backend when ``error``/``fatal``/``panic`` is
    called with a non-empty message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PanicError(RuntimeError):
    """Raised by ``Logger.panic`` after the record is written.

    Not meant to be handled locally; a top-level supervisor may catch it.

    Attributes:
        message: The logged message
        entry: The log entry that was built for the panic
    """

    def __init__(self, message: str, entry: LogEntry | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.entry = entry

    def __repr__(self) -> str:
        return f"PanicError({self.message!r})"
