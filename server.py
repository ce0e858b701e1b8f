"""
HTTP server for the tool catalog.

Serves catalog browsing, page metadata, the sitemap and social preview
images. This is the entry point that assembles the components of the
``app`` package.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager

import sentry_sdk
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

# Configure structured logging FIRST, before other imports that use logging
from toolcatalog.utils.logging import setup_logging

logger = setup_logging(service_name="toolcatalog-api")

from pydantic import ValidationError

from toolcatalog import __version__
from toolcatalog.catalog import DataIntegrityError
from toolcatalog.config import Settings, get_settings

try:
    settings: Settings = get_settings()
except ValidationError as e:
    logger.critical(f"Configuration validation failed: {e}")
    sys.exit(1)

from app.dependencies import get_default_catalog
from app.error_handlers import register_exception_handlers
from app.middleware import RequestLoggingMiddleware
from app.routes import (
    catalog_router,
    health_router,
    pages_router,
    previews_router,
    sitemap_router,
)

# =============================================================================
# Sentry Error Tracking
# =============================================================================

if settings.is_sentry_configured:
    sentry_settings = settings.sentry
    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.sentry_environment,
        traces_sample_rate=sentry_settings.sentry_traces_sample_rate,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
        attach_stacktrace=True,
        release=sentry_settings.sentry_release,
    )
    logger.info(f"Sentry initialized for environment: {sentry_settings.sentry_environment}")
else:
    logger.info("Sentry DSN not configured, error tracking disabled")


# =============================================================================
# Application
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog before serving; a broken catalog stops the process."""
    try:
        get_default_catalog()
    except DataIntegrityError as e:
        logger.critical(f"Catalog failed validation, refusing to start: {e}")
        sys.exit(1)
    yield


def create_app(load_catalog_on_startup: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        load_catalog_on_startup: Validate the catalog during startup. Tests
            that override the catalog dependency turn this off.
    """
    application = FastAPI(
        title="Tool Catalog API",
        description=(
            "Catalog of free browser-based tools, with page metadata, "
            "sitemap and social preview images derived from it."
        ),
        version=__version__,
        lifespan=lifespan if load_catalog_on_startup else None,
        openapi_tags=[
            {"name": "health", "description": "Health checks"},
            {"name": "catalog", "description": "Categories and tools"},
            {"name": "metadata", "description": "SEO metadata per page"},
            {"name": "sitemap", "description": "XML sitemap"},
            {"name": "previews", "description": "Social preview images"},
        ],
    )

    register_exception_handlers(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    if settings.logging.request_logging_enabled:
        application.add_middleware(RequestLoggingMiddleware)

    application.include_router(health_router)
    application.include_router(catalog_router)
    application.include_router(pages_router)
    application.include_router(sitemap_router)
    application.include_router(previews_router)

    return application


app = create_app()


if __name__ == "__main__":
    reload_enabled = os.environ.get("UVICORN_RELOAD", "false").lower() == "true"
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run("server:app", host="0.0.0.0", port=port, reload=reload_enabled)
