"""
HTTP-facing exceptions for the tool catalog API.

Every exception maps to an HTTP status code and a machine-readable error
code. Handlers in ``app.error_handlers`` turn them into the standard error
body.

Exception Hierarchy:
    ToolCatalogException (base, 500)
    ├── ResourceNotFoundError (404)
    ├── InvalidRequestError (400)
    └── PreviewRenderError (500)
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error identifiers returned in ``error_code``."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # 400 / 422
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PATH = "INVALID_PATH"

    # 404
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"

    # 405
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # 500
    RENDER_FAILED = "RENDER_FAILED"
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"


class ToolCatalogException(Exception):
    """
    Base class for all API errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code.
        status_code: HTTP status code to return.
        details: Additional context about the error.
        internal_message: Detailed message for logging, never sent to clients.
    """

    status_code: int = 500
    default_error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.internal_message = internal_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error body for the API response."""
        response = {
            "success": False,
            "error": self.message,
            "error_code": self.error_code.value,
        }
        if self.details:
            response["details"] = self.details
        return response

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code.value!r}, "
            f"status_code={self.status_code})"
        )


class ResourceNotFoundError(ToolCatalogException):
    """Raised when a requested tool, category or page does not exist."""

    status_code = 404
    default_error_code = ErrorCode.RESOURCE_NOT_FOUND
    default_message = "Resource not found"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
    ):
        details = details or {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id[:100]

        super().__init__(
            message=message,
            error_code=error_code or self.default_error_code,
            details=details,
            internal_message=internal_message,
        )


class InvalidRequestError(ToolCatalogException):
    """Raised when request input is well-formed but unusable."""

    status_code = 400
    default_error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid request"


class PreviewRenderError(ToolCatalogException):
    """
    Raised when a preview image cannot be rasterized.

    Wraps ``toolcatalog.previews.RenderError``; the underlying cause is kept
    in ``internal_message`` for logs and Sentry.
    """

    status_code = 500
    default_error_code = ErrorCode.RENDER_FAILED
    default_message = "Failed to render preview image"

    def __init__(
        self,
        message: Optional[str] = None,
        kind: Optional[str] = None,
        slug: Optional[str] = None,
        internal_message: Optional[str] = None,
    ):
        details: Dict[str, Any] = {}
        if kind:
            details["kind"] = kind
        if slug:
            details["slug"] = slug

        super().__init__(
            message=message,
            details=details,
            internal_message=internal_message,
        )


def tool_not_found(slug: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        message=f"Tool not found: {slug}",
        resource_type="tool",
        resource_id=slug,
        error_code=ErrorCode.TOOL_NOT_FOUND,
    )


def category_not_found(slug: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        message=f"Category not found: {slug}",
        resource_type="category",
        resource_id=slug,
        error_code=ErrorCode.CATEGORY_NOT_FOUND,
    )
