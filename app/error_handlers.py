"""
FastAPI exception handlers for the tool catalog API.

All error responses follow the format:
{
    "success": false,
    "error": "Human-readable message",
    "error_code": "MACHINE_READABLE_CODE",
    "details": {}  # Optional additional context
}
"""

import logging
import re
import uuid
from typing import Any, Dict, List, Optional

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from toolcatalog.config import get_settings
from toolcatalog.seo import InvalidPathError

from .exceptions import ErrorCode, ToolCatalogException

logger = logging.getLogger(__name__)

# Filesystem paths (font files, catalog file) never leave the server.
PATH_PATTERN = re.compile(r"[/\\][\w./\\-]+\.\w+")

MAX_MESSAGE_LENGTH = 500

SAFE_DETAIL_KEYS = frozenset({
    "resource_type",
    "resource_id",
    "kind",
    "slug",
    "path",
    "errors",
    "error_reference",
    "sentry_event_id",
})

STATUS_CODE_MAPPING = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    422: ErrorCode.VALIDATION_ERROR,
    500: ErrorCode.INTERNAL_ERROR,
}


def sanitize_error_message(message: str) -> str:
    """
    Strip file paths from an error message and cap its length.

    Args:
        message: The error message to sanitize.

    Returns:
        Message safe to return to clients.
    """
    if not message:
        return message

    message = PATH_PATTERN.sub("[path]", message)
    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[:MAX_MESSAGE_LENGTH] + "..."
    return message


def sanitize_details(details: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only whitelisted detail keys."""
    return {key: value for key, value in details.items() if key in SAFE_DETAIL_KEYS}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten FastAPI validation errors into ``{field, message}`` pairs.

    Args:
        errors: Error dictionaries from ``RequestValidationError.errors()``.

    Returns:
        At most ten formatted errors.
    """
    formatted = []
    for error in errors:
        field_parts = [str(part) for part in error.get("loc", []) if part != "body"]
        field = ".".join(field_parts) if field_parts else "request"

        if error.get("type") == "missing":
            message = f"Field '{field}' is required"
        elif "enum" in error.get("type", ""):
            message = f"Field '{field}' has an invalid value"
        else:
            message = sanitize_error_message(error.get("msg", "Invalid value"))

        formatted.append({"field": field, "message": message})

    return formatted[:10]


def create_error_response(
    status_code: int,
    error: str,
    error_code: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code.
        error: Human-readable error message.
        error_code: Machine-readable error code.
        details: Optional additional details.
    """
    content: Dict[str, Any] = {
        "success": False,
        "error": sanitize_error_message(error),
        "error_code": error_code,
    }

    if details:
        sanitized_details = sanitize_details(details)
        if sanitized_details:
            content["details"] = sanitized_details

    return JSONResponse(status_code=status_code, content=content)


def report_to_sentry(
    exc: Exception,
    request: Optional[Request] = None,
    extra_context: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Report an exception to Sentry with request context.

    Args:
        exc: The exception to report.
        request: Optional request for context.
        extra_context: Optional additional context.

    Returns:
        Sentry event ID if reported, None when Sentry is not initialized.
    """
    try:
        if not sentry_sdk.get_client().is_active():
            return None

        with sentry_sdk.new_scope() as scope:
            if request:
                scope.set_context("request", {
                    "method": request.method,
                    "url": str(request.url),
                    "path": request.url.path,
                })
                request_id = getattr(request.state, "request_id", None)
                if request_id:
                    scope.set_tag("request_id", request_id)

            if extra_context:
                scope.set_context("extra", extra_context)

            return sentry_sdk.capture_exception(exc)

    except Exception as e:
        logger.warning(f"Failed to report exception to Sentry: {e}")
        return None


# =============================================================================
# Exception Handlers
# =============================================================================

async def tool_catalog_exception_handler(
    request: Request,
    exc: ToolCatalogException,
) -> JSONResponse:
    """Handle ToolCatalogException and its subclasses."""
    log_message = f"{exc.__class__.__name__}: {exc.message}"
    if exc.internal_message:
        log_message += f" | Internal: {exc.internal_message}"

    if exc.status_code >= 500:
        logger.error(log_message, exc_info=exc)
        report_to_sentry(exc, request)
    else:
        logger.warning(log_message)

    return create_error_response(
        status_code=exc.status_code,
        error=exc.message,
        error_code=exc.error_code.value,
        details=exc.details,
    )


async def invalid_path_handler(request: Request, exc: InvalidPathError) -> JSONResponse:
    """Handle a non root-relative path reaching the metadata generator."""
    logger.warning(f"Invalid metadata path on {request.url.path}: {exc.path!r}")
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        error=str(exc),
        error_code=ErrorCode.INVALID_PATH.value,
        details={"path": exc.path},
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle request validation errors (bad path or query parameters)."""
    errors = format_validation_errors(exc.errors())

    logger.warning(
        f"Validation error on {request.method} {request.url.path}: "
        f"{len(errors)} error(s)"
    )

    if len(errors) == 1:
        error_message = errors[0]["message"]
    else:
        error_message = f"Validation failed with {len(errors)} error(s)"

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        error=error_message,
        error_code=ErrorCode.VALIDATION_ERROR.value,
        details={"errors": errors},
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Convert HTTPException (including router 404/405) to the standard format."""
    error_code = STATUS_CODE_MAPPING.get(exc.status_code, ErrorCode.UNKNOWN_ERROR)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code}: {detail}")
    elif exc.status_code >= 400:
        logger.warning(f"HTTP {exc.status_code}: {detail}")

    return create_error_response(
        status_code=exc.status_code,
        error=detail,
        error_code=error_code.value,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Catch-all for unexpected errors.

    Logs the traceback, reports to Sentry and returns a generic message with a
    short reference id for support.
    """
    error_reference = str(uuid.uuid4())[:8]

    logger.error(
        f"Unhandled exception [ref:{error_reference}] on "
        f"{request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )

    event_id = report_to_sentry(
        exc,
        request,
        extra_context={"error_reference": error_reference},
    )

    details: Dict[str, Any] = {"error_reference": error_reference}
    if get_settings().is_production:
        message = "An unexpected error occurred. Please try again later."
    else:
        message = f"Internal server error: {type(exc).__name__}"
        if event_id:
            details["sentry_event_id"] = event_id

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error=message,
        error_code=ErrorCode.INTERNAL_ERROR.value,
        details=details,
    )


# =============================================================================
# Handler Registration
# =============================================================================

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ToolCatalogException, tool_catalog_exception_handler)
    app.add_exception_handler(InvalidPathError, invalid_path_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Exception handlers registered")
