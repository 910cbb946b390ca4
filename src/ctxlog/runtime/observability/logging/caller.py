"""Call-site resolution for log records."""

from __future__ import annotations

import os
import sys

UNKNOWN_CALLER = "unknown:? unknown"


def resolve_caller(skip: int = 0) -> str:
    """Describe a calling frame as ``"<file>:<line> <function>"``.

    ``skip`` counts frames above the direct caller of this function, so
    ``resolve_caller(0)`` describes whoever called ``resolve_caller``.
    Falls back to ``UNKNOWN_CALLER`` when the stack cannot be inspected.
    """
    getframe = getattr(sys, "_getframe", None)
    if getframe is None:
        return UNKNOWN_CALLER
    try:
        frame = getframe(skip + 1)
    except ValueError:  # stack shallower than requested
        return UNKNOWN_CALLER
    code = frame.f_code
    func = getattr(code, "co_qualname", code.co_name)
    return f"{os.path.basename(code.co_filename)}:{frame.f_lineno} {func}"
