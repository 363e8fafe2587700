"""Public logging API for the outcomes lookup tool.

This package wraps Python's ``logging`` module with stderr defaults and
contextvars-based propagation of lookup identifiers.
"""

from .config import configure_logging, get_logger
from .context import bind_context, get_context, log_context

__all__ = [
    "bind_context",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
]
