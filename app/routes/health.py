"""
Health check endpoint.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import sentry_sdk
from fastapi import APIRouter, Depends

from toolcatalog import __version__
from toolcatalog.catalog import CatalogLookup
from toolcatalog.config import get_settings

from ..dependencies import get_lookup

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Service health check",
    responses={
        200: {
            "description": "Health status retrieved",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "timestamp": "2024-01-24T12:00:00+00:00",
                        "version": "1.0.0",
                        "environment": "production",
                        "catalog": {"categories": 13, "tools": 89},
                        "services": {"sentry": {"status": "up"}},
                    }
                }
            },
        }
    },
)
async def health_check(lookup: CatalogLookup = Depends(get_lookup)) -> Dict[str, Any]:
    """Report catalog size and whether error tracking is active."""
    sentry_active = sentry_sdk.get_client().is_active()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "environment": get_settings().environment,
        "catalog": {
            "categories": len(lookup.list_categories()),
            "tools": len(lookup.list_tools()),
        },
        "services": {
            "sentry": {"status": "up" if sentry_active else "not_configured"},
        },
    }
