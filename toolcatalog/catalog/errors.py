"""
Exceptions raised by the catalog store.
"""

from typing import List, Optional


class CatalogError(Exception):
    """Base exception for catalog problems."""

    pass


class DataIntegrityError(CatalogError):
    """
    Raised when catalog source data violates an invariant.

    Duplicate slugs, malformed slugs and dangling category references are
    authoring defects: the catalog refuses to load rather than serve
    inconsistent data.
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.message = message
        self.problems = list(problems or [])
        detail = message
        if self.problems:
            detail = f"{message}: " + "; ".join(self.problems)
        super().__init__(detail)
