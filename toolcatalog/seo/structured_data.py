"""
JSON-LD structured data for rich results.

Each builder returns a ``StructuredData`` whose ``data`` can be dropped into a
``<script type="application/ld+json">`` tag as-is.
"""
from typing import Iterable, Optional

from ..catalog.presentation import category_label
from ..types.catalog import Category, Tool
from ..types.seo import StructuredData
from ..types.site import SiteConfig

SCHEMA_CONTEXT = "https://schema.org"


def website_schema(site: SiteConfig) -> StructuredData:
    """
    WebSite schema with a site search action.

    Args:
        site: The site configuration.

    Returns:
        The structured data.
    """
    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.brand,
        "alternateName": site.name,
        "url": site.url,
        "description": site.description,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": site.absolute("/search?q={search_term_string}"),
            },
            "query-input": "required name=search_term_string",
        },
    }
    return StructuredData(type="WebSite", data=data)


def organization_schema(site: SiteConfig) -> StructuredData:
    """Organization schema for the publisher of the site."""
    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": site.brand,
        "url": site.url,
        "logo": site.logo,
        "description": site.description,
        "sameAs": [],
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": "customer service",
            "url": site.absolute("/about"),
        },
    }
    return StructuredData(type="Organization", data=data)


def collection_page_schema(
    site: SiteConfig,
    categories: Iterable[Category],
) -> StructuredData:
    """
    CollectionPage schema listing every category, in catalog order.

    Args:
        site: The site configuration.
        categories: Categories to list.

    Returns:
        The structured data.
    """
    items = [
        {
            "@type": "ListItem",
            "position": position,
            "name": category_label(category),
            "url": site.absolute(f"/category/{category.slug}"),
        }
        for position, category in enumerate(categories, start=1)
    ]
    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": site.tagline,
        "description": site.description,
        "url": site.url,
        "mainEntity": {
            "@type": "ItemList",
            "numberOfItems": len(items),
            "itemListElement": items,
        },
    }
    return StructuredData(type="CollectionPage", data=data)


def breadcrumb_schema(
    site: SiteConfig,
    category: Category,
    tool: Optional[Tool] = None,
) -> StructuredData:
    """
    BreadcrumbList schema: Home > Category (> Tool).

    Args:
        site: The site configuration.
        category: The category crumb.
        tool: Optional tool crumb; the trail ends at the category without it.

    Returns:
        The structured data.
    """
    crumbs = [
        ("Home", site.url),
        (category_label(category), site.absolute(f"/category/{category.slug}")),
    ]
    if tool is not None:
        crumbs.append((tool.name, site.absolute(f"/tools/{tool.slug}")))

    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": name,
                "item": url,
            }
            for position, (name, url) in enumerate(crumbs, start=1)
        ],
    }
    return StructuredData(type="BreadcrumbList", data=data)


def faq_schema(tool: Tool) -> Optional[StructuredData]:
    """
    FAQPage schema from a tool's FAQ entries.

    Returns:
        The structured data, or None when the tool has no FAQ.
    """
    if not tool.faq:
        return None

    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": entry.question,
                "acceptedAnswer": {
                    "@type": "Answer",
                    "text": entry.answer,
                },
            }
            for entry in tool.faq
        ],
    }
    return StructuredData(type="FAQPage", data=data)
