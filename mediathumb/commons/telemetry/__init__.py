"""Telemetry module - logging and timing."""

from mediathumb.commons.telemetry.decorators import LogContext, timed
from mediathumb.commons.telemetry.logger import (
    JsonFormatter,
    TextFormatter,
    clear_log_context,
    configure_logging,
    get_log_context,
    get_logger,
    set_log_context,
)

__all__ = [
    # Decorators
    "timed",
    "LogContext",
    # Logger
    "get_logger",
    "configure_logging",
    "JsonFormatter",
    "TextFormatter",
    # Log Context
    "get_log_context",
    "set_log_context",
    "clear_log_context",
]
