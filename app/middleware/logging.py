"""
Request logging middleware.

Provides:
- Request ID generation and propagation into log records
- Response time tracking
- X-Request-ID / X-Response-Time response headers
- Quiet logging for health checks and docs
"""

import logging
import time
import uuid
from typing import Callable, Optional, Set

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from toolcatalog.utils.logging import clear_request_context, set_request_context

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Structured request logging.

    Every response carries ``X-Request-ID`` (reused from the incoming header
    when present) and ``X-Response-Time``. Log level follows the status code.
    """

    DEFAULT_EXCLUDE_PATHS: Set[str] = frozenset({
        "/docs",
        "/openapi.json",
        "/redoc",
        "/favicon.ico",
    })

    # Logged only when they fail
    ERROR_ONLY_PATHS: Set[str] = frozenset({
        "/health",
    })

    def __init__(
        self,
        app,
        exclude_paths: Optional[Set[str]] = None,
        error_only_paths: Optional[Set[str]] = None,
    ):
        super().__init__(app)
        self.exclude_paths = exclude_paths or self.DEFAULT_EXCLUDE_PATHS
        self.error_only_paths = error_only_paths or self.ERROR_ONLY_PATHS

    def _get_request_id(self, request: Request) -> str:
        return request.headers.get("X-Request-ID") or str(uuid.uuid4())

    def _get_correlation_id(self, request: Request) -> Optional[str]:
        return request.headers.get("X-Correlation-ID")

    def _should_log(self, path: str, status_code: int) -> bool:
        if path in self.exclude_paths:
            return False
        if path in self.error_only_paths:
            return status_code >= 400
        return True

    @staticmethod
    def _get_log_level(status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        elif status_code >= 400:
            return logging.WARNING
        return logging.INFO

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self._get_request_id(request)
        correlation_id = self._get_correlation_id(request)

        set_request_context(request_id=request_id, correlation_id=correlation_id)
        request.state.request_id = request_id

        method = request.method
        path = request.url.path
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
            if correlation_id:
                response.headers["X-Correlation-ID"] = correlation_id

            if self._should_log(path, response.status_code):
                logger.log(
                    self._get_log_level(response.status_code),
                    f"{method} {path} {response.status_code} ({duration_ms:.2f}ms)",
                    extra={
                        "event": "http_request",
                        "http_method": method,
                        "http_path": path,
                        "http_status": response.status_code,
                        "duration_ms": round(duration_ms, 2),
                        "user_agent": request.headers.get("User-Agent", "-"),
                    },
                )

            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{method} {path} FAILED ({duration_ms:.2f}ms): {type(exc).__name__}",
                extra={
                    "event": "http_request_error",
                    "http_method": method,
                    "http_path": path,
                    "duration_ms": round(duration_ms, 2),
                    "error_type": type(exc).__name__,
                },
                exc_info=True,
            )
            raise

        finally:
            clear_request_context()
