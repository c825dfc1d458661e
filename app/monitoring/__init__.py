"""
Logging setup for the blog API.

Usage
-----
>>> from app.monitoring import configure_logging
>>> configure_logging()

Or import individual helpers:
>>> from app.monitoring.logging import get_logger, bind_request_id
"""

from app.monitoring.logging import (
    RequestIdFilter,
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "RequestIdFilter",
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
