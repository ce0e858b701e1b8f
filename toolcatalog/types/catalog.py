"""
Type definitions for the tool catalog.

This module defines the entities held by the catalog store: categories,
tools, and the editorial side tables (category SEO copy, subcategories)
that category pages are built from.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ToolSEO(BaseModel):
    """SEO copy for a single tool page."""

    title: str = Field(..., description="Page title (without site suffix)")
    description: str = Field(..., description="Meta description")
    keywords: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Ordered keywords, most important first"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class FAQ(BaseModel):
    """A question/answer pair shown on a tool page."""

    question: str
    answer: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class Category(BaseModel):
    """A group of tools, addressed by slug."""

    slug: str = Field(..., description="Unique, URL-safe identifier")
    name: str = Field(..., description="Display name, conventionally '<glyph> <label>'")
    icon: str = Field(..., description="Short glyph used by cards")
    description: str = Field(..., description="One-sentence summary")

    model_config = ConfigDict(frozen=True, extra="forbid")


class Tool(BaseModel):
    """A single browser-based utility listed in the catalog."""

    id: str = Field(..., description="Stable identifier (not necessarily the slug)")
    slug: str = Field(..., description="Unique routing key")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Slug of the owning category")
    description: str = Field(..., description="Long description")
    short_description: str = Field(..., description="Card and preview summary")
    icon: str = Field(..., description="Glyph shown in cards and previews")
    seo: ToolSEO
    featured: bool = Field(default=False, description="Shown on the home page")
    related_tools: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Slugs of related tools"
    )
    faq: Tuple[FAQ, ...] = Field(default_factory=tuple)
    disclaimer: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class CategorySEO(BaseModel):
    """Editorial SEO copy for a category page."""

    title: str
    description: str
    keywords: Tuple[str, ...] = Field(default_factory=tuple)
    intro: str = ""
    seo_content: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Subcategory(BaseModel):
    """A named grouping of tools inside a category page."""

    name: str
    icon: str
    tool_slugs: Tuple[str, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, extra="forbid")
