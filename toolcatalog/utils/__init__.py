"""Utility modules for the tool catalog."""

from .logging import (
    DevelopmentFormatter,
    JSONFormatter,
    RequestContextFilter,
    SensitiveDataFilter,
    Timer,
    clear_request_context,
    get_correlation_id,
    get_request_id,
    redact_sensitive_data,
    set_request_context,
    setup_logging,
    timed,
)

__all__ = [
    "setup_logging",
    "set_request_context",
    "clear_request_context",
    "get_request_id",
    "get_correlation_id",
    "Timer",
    "timed",
    "JSONFormatter",
    "DevelopmentFormatter",
    "RequestContextFilter",
    "SensitiveDataFilter",
    "redact_sensitive_data",
]
