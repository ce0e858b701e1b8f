"""
Structured logging for the tool catalog service.

Provides:
- JSON structured logging for production environments
- Human-readable colored logging for development
- Request context (request_id, correlation_id) propagation
- Redaction of credentials that end up in log messages
- Timing utilities for the expensive steps (catalog load, rasterization)
"""

import json
import logging
import os
import re
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Dict, Optional

# Context variables for request tracking
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

SENSITIVE_PATTERNS: list[re.Pattern] = [
    re.compile(r'https://[0-9a-f]+@[\w.-]+/\d+', re.IGNORECASE),  # Sentry DSNs
    re.compile(r'secret["\']?\s*[:=]\s*["\']?[\w-]+', re.IGNORECASE),
    re.compile(r'token["\']?\s*[:=]\s*["\']?[\w.-]+', re.IGNORECASE),
    re.compile(r'bearer\s+[\w.-]+', re.IGNORECASE),
]

REDACTED = "[REDACTED]"

# Fields to exclude from extra data in JSON logs
EXCLUDED_RECORD_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "request_id", "correlation_id", "message", "taskName",
})

DEFAULT_SERVICE_NAME = "toolcatalog-api"


def redact_sensitive_data(message: str) -> str:
    """
    Redact credentials from log messages.

    Args:
        message: The log message to sanitize

    Returns:
        Message with sensitive data replaced with [REDACTED]
    """
    if not message:
        return message

    result = message
    for pattern in SENSITIVE_PATTERNS:
        result = pattern.sub(REDACTED, result)
    return result


class RequestContextFilter(logging.Filter):
    """Add request context to all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        record.correlation_id = correlation_id_var.get() or "-"
        return True


class SensitiveDataFilter(logging.Filter):
    """Filter sensitive data from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.msg:
            record.msg = redact_sensitive_data(str(record.msg))
        if record.args:
            record.args = tuple(
                redact_sensitive_data(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging in production.

    Outputs logs as single-line JSON objects:
    {
        "timestamp": "2024-01-15T10:30:00.123456+00:00",
        "level": "INFO",
        "logger": "toolcatalog.previews.generator",
        "message": "Rendered preview",
        "service": "toolcatalog-api",
        "request_id": "abc-123",
        "correlation_id": "corr-789",
        "extra": {...}
    }
    """

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "request_id": getattr(record, "request_id", "-"),
            "correlation_id": getattr(record, "correlation_id", "-"),
        }

        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            k: v for k, v in record.__dict__.items()
            if k not in EXCLUDED_RECORD_ATTRS and not k.startswith("_")
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str, ensure_ascii=False)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable formatter with colors for development.

    Format: [timestamp] LEVEL    [req_id] logger - message
    """

    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""

        request_id = getattr(record, "request_id", "-")
        req_display = request_id[:8] if request_id != "-" else "-"

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        formatted = (
            f"{self.DIM}[{timestamp}]{self.RESET} "
            f"{color}{self.BOLD}{record.levelname:8}{reset} "
            f"{self.DIM}[{req_display:>8}]{self.RESET} "
            f"{record.name} - {record.getMessage()}"
        )

        extra_fields = {
            k: v for k, v in record.__dict__.items()
            if k not in EXCLUDED_RECORD_ATTRS and not k.startswith("_")
        }
        if extra_fields:
            formatted += f" {self.DIM}{extra_fields}{self.RESET}"

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def get_log_level() -> int:
    """
    Get log level from the LOG_LEVEL environment variable.

    Returns:
        Logging level integer, INFO when unset or invalid
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def should_use_json_format() -> bool:
    """JSON logs when LOG_FORMAT_JSON is truthy or ENVIRONMENT is production."""
    force_json = os.environ.get("LOG_FORMAT_JSON", "").lower() in ("true", "1", "yes")
    if force_json:
        return True
    return os.environ.get("ENVIRONMENT", "development").lower() in ("production", "prod")


def setup_logging(
    service_name: str = DEFAULT_SERVICE_NAME,
    log_level: Optional[int] = None,
    force_json: bool = False,
) -> logging.Logger:
    """
    Configure structured logging for the application.

    This should be called once at application startup, before other modules
    that use logging are imported.

    Args:
        service_name: Name of the service for log identification
        log_level: Override log level (defaults to LOG_LEVEL env var)
        force_json: Force JSON output even in development

    Returns:
        Configured root logger
    """
    level = log_level if log_level is not None else get_log_level()
    use_json = force_json or should_use_json_format()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())
    handler.addFilter(SensitiveDataFilter())

    if use_json:
        handler.setFormatter(JSONFormatter(service_name))
    else:
        handler.setFormatter(DevelopmentFormatter())

    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    root_logger.info(
        "Logging configured",
        extra={
            "log_level": logging.getLevelName(level),
            "format": "json" if use_json else "development",
            "service": service_name,
        },
    )

    return root_logger


def set_request_context(
    request_id: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """
    Set request context for the current async context.

    Args:
        request_id: Unique identifier for the request
        correlation_id: Correlation ID for distributed tracing
    """
    if request_id is not None:
        request_id_var.set(request_id)
    if correlation_id is not None:
        correlation_id_var.set(correlation_id)


def clear_request_context() -> None:
    """Clear request context after request completion."""
    request_id_var.set(None)
    correlation_id_var.set(None)


def get_request_id() -> Optional[str]:
    """Get current request ID from context."""
    return request_id_var.get()


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return correlation_id_var.get()


class Timer:
    """
    Context manager for timing operations.

    Usage:
        with Timer("rasterize", logger) as timer:
            png = rasterizer.render(template)
        print(f"Render took {timer.elapsed_ms}ms")
    """

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        log_level: int = logging.DEBUG,
    ):
        self.name = name
        self.logger = logger
        self.log_level = log_level
        self.start_time: Optional[float] = None
        self.elapsed_ms: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is not None:
            self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000

        if self.logger:
            self.logger.log(
                self.log_level,
                f"{self.name} completed in {self.elapsed_ms:.2f}ms",
                extra={
                    "operation": self.name,
                    "duration_ms": round(self.elapsed_ms, 2),
                    "success": exc_type is None,
                },
            )


def timed(
    name: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    log_level: int = logging.DEBUG,
) -> Callable:
    """
    Decorator for timing synchronous function execution.

    Usage:
        @timed("catalog_load")
        def load_catalog(path):
            ...

    Args:
        name: Operation name (defaults to function name)
        logger: Logger to use (defaults to function's module logger)
        log_level: Level to log at

    Returns:
        Decorated function
    """
    def decorator(func: Callable) -> Callable:
        operation_name = name or func.__name__
        func_logger = logger or logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            with Timer(operation_name, func_logger, log_level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
