"""Structured logging context for timesheet processing."""

import logging
import threading
from typing import Any, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """Get a copy of the fields currently attached to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are attached to every record emitted inside the block by handlers
    that carry a ContextFilter (configure_logging installs one).

    Example:
        with LogContext(source="august.txt"):
            logger.info("Parsing timesheet")
            # Record includes source="august.txt"
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        self.previous_context = get_log_context()
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that copies context fields onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in getattr(_thread_local, "context", {}).items():
            setattr(record, key, value)
        return True
