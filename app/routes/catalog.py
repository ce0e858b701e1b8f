"""
Catalog browsing endpoints.

Read-only JSON views over categories and tools. Unknown slugs return a 404
error body.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from toolcatalog.catalog import CatalogLookup, FEATURED_TOOLS_LIMIT
from toolcatalog.types import Category, CategorySEO, Subcategory, Tool

from ..dependencies import get_lookup
from ..exceptions import category_not_found, tool_not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


class CategoryDetail(BaseModel):
    """A category with its SEO copy, popular tools and neighbors."""

    category: Category
    seo: Optional[CategorySEO] = None
    popular_tools: List[Tool] = []
    related_categories: List[Category] = []
    subcategories: List[Subcategory] = []


@router.get("/categories", response_model=List[Category])
async def list_categories(lookup: CatalogLookup = Depends(get_lookup)):
    """All categories in catalog order."""
    return list(lookup.list_categories())


@router.get("/categories/{slug}", response_model=CategoryDetail)
async def get_category(slug: str, lookup: CatalogLookup = Depends(get_lookup)):
    category = lookup.get_category_by_slug(slug)
    if category is None:
        raise category_not_found(slug)

    return CategoryDetail(
        category=category,
        seo=lookup.get_category_seo(slug),
        popular_tools=list(lookup.get_popular_tools_for_category(slug)),
        related_categories=list(lookup.get_related_categories(slug)),
        subcategories=list(lookup.get_subcategories_for_category(slug)),
    )


@router.get("/categories/{slug}/tools", response_model=List[Tool])
async def list_category_tools(slug: str, lookup: CatalogLookup = Depends(get_lookup)):
    """Tools in a category, in catalog order."""
    if lookup.get_category_by_slug(slug) is None:
        raise category_not_found(slug)
    return list(lookup.get_tools_by_category(slug))


@router.get("/tools", response_model=List[Tool])
async def list_tools(lookup: CatalogLookup = Depends(get_lookup)):
    return list(lookup.list_tools())


@router.get("/tools/featured", response_model=List[Tool])
async def list_featured_tools(
    limit: int = Query(FEATURED_TOOLS_LIMIT, ge=1, le=50),
    lookup: CatalogLookup = Depends(get_lookup),
):
    """Featured tools, at most ``limit`` of them."""
    return list(lookup.get_featured_tools(limit))


@router.get("/tools/{slug}", response_model=Tool)
async def get_tool(slug: str, lookup: CatalogLookup = Depends(get_lookup)):
    tool = lookup.get_tool_by_slug(slug)
    if tool is None:
        raise tool_not_found(slug)
    return tool


@router.get("/tools/{slug}/related", response_model=List[Tool])
async def list_related_tools(slug: str, lookup: CatalogLookup = Depends(get_lookup)):
    """Related tools that exist in the catalog, in authored order."""
    if lookup.get_tool_by_slug(slug) is None:
        raise tool_not_found(slug)
    return list(lookup.get_related_tools(slug))
