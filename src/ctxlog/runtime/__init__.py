"""Runtime - what application code calls at log time.

Contains: context loggers, the shared writer, trace extraction and the error-reporter bridge.
"""

from .observability import Context, ContextLogger, Logger, configure_logging, get_logger

__all__ = ["Context", "ContextLogger", "Logger", "configure_logging", "get_logger"]
