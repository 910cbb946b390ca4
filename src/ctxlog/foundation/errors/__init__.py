"""Error types and shared aliases for ctxlog.

- LoggedError: synthetic error reported for a logged message
- PanicError: raised by Logger.panic after logging
- Fields: type alias for record fields
"""

from .errors import LoggedError, PanicError
from .types import Fields

__all__ = [
    # Exceptions
    "LoggedError", "PanicError",
    # Aliases
    "Fields",
]
