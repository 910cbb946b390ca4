"""Type aliases shared across ctxlog."""

from __future__ import annotations

# Fields attached to a log record: any value is allowed, not only JSON
Fields = dict[str, object]
