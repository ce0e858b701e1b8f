"""
Type definitions for sitemap generation.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChangeFrequency(str, Enum):
    """How often a URL is expected to change."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class SitemapEntry(BaseModel):
    """One crawlable URL."""

    url: str = Field(..., description="Absolute URL")
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)
