"""
Type definitions for page metadata and structured data.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class OpenGraphImage(BaseModel):
    """An image descriptor attached to Open Graph metadata."""

    url: str
    width: int = 1200
    height: int = 630
    alt: str = ""

    model_config = ConfigDict(frozen=True)


class OpenGraph(BaseModel):
    """Open Graph payload for social sharing."""

    title: str
    description: str
    url: str
    site_name: str
    type: str = "website"
    images: Tuple[OpenGraphImage, ...] = ()

    model_config = ConfigDict(frozen=True)


class TwitterCard(BaseModel):
    """Twitter card payload."""

    card: str = "summary_large_image"
    site: Optional[str] = None
    title: str = ""
    description: str = ""
    images: Tuple[str, ...] = ()
    creator: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Alternates(BaseModel):
    """Alternate URLs for a page."""

    canonical: str

    model_config = ConfigDict(frozen=True)


class PageMetadata(BaseModel):
    """
    SEO metadata for a single page.

    Every field is optional so that an empty instance can stand in for a page
    whose tool or category does not exist.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    alternates: Optional[Alternates] = None
    open_graph: Optional[OpenGraph] = None
    twitter: Optional[TwitterCard] = None
    metadata_base: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "PageMetadata":
        """Metadata for a page that resolved to nothing."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.alternates is None

    @property
    def canonical_url(self) -> Optional[str]:
        return self.alternates.canonical if self.alternates else None


class StructuredData(BaseModel):
    """A JSON-LD document for rich results."""

    type: str
    data: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
