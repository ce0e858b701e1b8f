"""
In-memory catalog store.

The store owns every category and tool for the lifetime of the process. It is
built once, validated in its constructor, and never mutated afterwards;
queries go through ``CatalogLookup``.
"""

import json
import logging
import re
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from ..types.catalog import Category, CategorySEO, Subcategory, Tool
from ..utils.logging import timed
from .errors import DataIntegrityError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _freeze(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


def _duplicates(values: Iterable[str]) -> List[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


class CatalogStore:
    """
    Immutable registry of categories and tools.

    Usage:
        store = load_catalog()
        for tool in store.tools:
            ...

    Raises:
        DataIntegrityError: From the constructor, if any invariant is broken.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        tools: Iterable[Tool],
        category_seo: Optional[Mapping[str, CategorySEO]] = None,
        popular_tools: Optional[Mapping[str, Sequence[str]]] = None,
        related_categories: Optional[Mapping[str, Sequence[str]]] = None,
        subcategories: Optional[Mapping[str, Sequence[Subcategory]]] = None,
    ):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._tools: Tuple[Tool, ...] = tuple(tools)
        self._category_seo = _freeze(category_seo)
        self._popular_tools = _freeze(
            {k: tuple(v) for k, v in (popular_tools or {}).items()}
        )
        self._related_categories = _freeze(
            {k: tuple(v) for k, v in (related_categories or {}).items()}
        )
        self._subcategories = _freeze(
            {k: tuple(v) for k, v in (subcategories or {}).items()}
        )

        self._validate()

        logger.info(
            f"Catalog loaded: {len(self._categories)} categories, "
            f"{len(self._tools)} tools"
        )

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def tools(self) -> Tuple[Tool, ...]:
        return self._tools

    @property
    def category_seo(self) -> Mapping[str, CategorySEO]:
        return self._category_seo

    @property
    def popular_tools(self) -> Mapping[str, Tuple[str, ...]]:
        return self._popular_tools

    @property
    def related_categories(self) -> Mapping[str, Tuple[str, ...]]:
        return self._related_categories

    @property
    def subcategories(self) -> Mapping[str, Tuple[Subcategory, ...]]:
        return self._subcategories

    def __len__(self) -> int:
        return len(self._tools)

    def _validate(self) -> None:
        """Check every invariant and raise once with all problems found."""
        problems: List[str] = []

        category_slugs = [c.slug for c in self._categories]
        tool_slugs = [t.slug for t in self._tools]

        for slug in _duplicates(category_slugs):
            problems.append(f"duplicate category slug '{slug}'")
        for slug in _duplicates(tool_slugs):
            problems.append(f"duplicate tool slug '{slug}'")
        for tool_id in _duplicates(t.id for t in self._tools):
            problems.append(f"duplicate tool id '{tool_id}'")

        for slug in category_slugs:
            if not SLUG_PATTERN.match(slug):
                problems.append(f"malformed category slug '{slug}'")
        for slug in tool_slugs:
            if not SLUG_PATTERN.match(slug):
                problems.append(f"malformed tool slug '{slug}'")

        known_categories = set(category_slugs)
        for tool in self._tools:
            if tool.category not in known_categories:
                problems.append(
                    f"tool '{tool.slug}' references unknown category '{tool.category}'"
                )

        side_tables = {
            "category_seo": self._category_seo,
            "popular_tools": self._popular_tools,
            "related_categories": self._related_categories,
            "subcategories": self._subcategories,
        }
        for table_name, table in side_tables.items():
            for key in table:
                if key not in known_categories:
                    problems.append(f"{table_name} entry for unknown category '{key}'")

        for key, related in self._related_categories.items():
            for slug in related:
                if slug not in known_categories:
                    problems.append(
                        f"related_categories of '{key}' references unknown category '{slug}'"
                    )

        if problems:
            raise DataIntegrityError("Catalog failed validation", problems)

        self._warn_unresolved_tool_references(set(tool_slugs))

    def _warn_unresolved_tool_references(self, known_tools: set) -> None:
        # Lookups drop these silently; surface them once at load time.
        for tool in self._tools:
            for slug in tool.related_tools:
                if slug not in known_tools:
                    logger.warning(f"Tool '{tool.slug}' lists unknown related tool '{slug}'")
        for category, slugs in self._popular_tools.items():
            for slug in slugs:
                if slug not in known_tools:
                    logger.warning(f"Popular tools of '{category}' list unknown tool '{slug}'")
        for category, groups in self._subcategories.items():
            for group in groups:
                for slug in group.tool_slugs:
                    if slug not in known_tools:
                        logger.warning(
                            f"Subcategory '{group.name}' of '{category}' lists unknown tool '{slug}'"
                        )


def catalog_from_dict(raw: Dict) -> CatalogStore:
    """
    Build a store from the JSON artifact structure.

    Args:
        raw: Parsed catalog document.

    Returns:
        A validated CatalogStore.

    Raises:
        DataIntegrityError: If the document does not match the schema or
            breaks a catalog invariant.
    """
    try:
        categories = [Category.model_validate(c) for c in raw.get("categories", [])]
        tools = [Tool.model_validate(t) for t in raw.get("tools", [])]
        category_seo = {
            slug: CategorySEO.model_validate(seo)
            for slug, seo in raw.get("category_seo", {}).items()
        }
        subcategories = {
            slug: [Subcategory.model_validate(s) for s in groups]
            for slug, groups in raw.get("subcategories", {}).items()
        }
    except ValidationError as e:
        raise DataIntegrityError("Catalog does not match the expected schema", [str(e)]) from e

    return CatalogStore(
        categories=categories,
        tools=tools,
        category_seo=category_seo,
        popular_tools=raw.get("popular_tools", {}),
        related_categories=raw.get("related_categories", {}),
        subcategories=subcategories,
    )


@timed("catalog_load")
def load_catalog(path: Optional[Union[str, Path]] = None) -> CatalogStore:
    """
    Load the catalog artifact from disk.

    Args:
        path: JSON file to read. Defaults to the packaged catalog.

    Returns:
        A validated CatalogStore.

    Raises:
        DataIntegrityError: If the file is unreadable or invalid.
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        with catalog_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataIntegrityError(f"Could not read catalog from {catalog_path}", [str(e)]) from e

    if not isinstance(raw, dict):
        raise DataIntegrityError(f"Catalog root in {catalog_path} must be an object")

    logger.debug(f"Loading catalog from {catalog_path}")
    return catalog_from_dict(raw)

