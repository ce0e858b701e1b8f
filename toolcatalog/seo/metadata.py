"""
Page metadata generation.

Builds the title, description, canonical URL, Open Graph and Twitter card
payloads for one page. The generator is a pure function of its inputs and the
site configuration; serializing the result to markup is left to the page
rendering layer.
"""
from typing import Iterable, List

from ..types.seo import Alternates, OpenGraph, OpenGraphImage, PageMetadata, TwitterCard
from ..types.site import SiteConfig

SITE_KEYWORDS = ("free tools", "no signup", "online tools")

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


class InvalidPathError(ValueError):
    """Raised when a page path is not root-relative."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Page path must be root-relative (start with a single '/'): {path!r}")


def merge_keywords(keywords: Iterable[str]) -> List[str]:
    """
    Combine page keywords with the site-wide keywords.

    Caller keywords come first, in their original order; site-wide keywords
    follow. Repeats are dropped, keeping the first occurrence.

    Args:
        keywords: Page-specific keywords.

    Returns:
        The merged keyword list.
    """
    merged: List[str] = []
    seen = set()
    for keyword in [*keywords, *SITE_KEYWORDS]:
        if keyword not in seen:
            seen.add(keyword)
            merged.append(keyword)
    return merged


class MetadataGenerator:
    """
    Builds PageMetadata for a site.

    Usage:
        generator = MetadataGenerator(SiteConfig())
        metadata = generator.generate(
            "EMI Calculator - Calculate Monthly Loan Payments",
            "Free EMI calculator...",
            ["EMI calculator", "loan calculator"],
            "/tools/emi-calculator",
        )
    """

    def __init__(self, site: SiteConfig):
        self.site = site

    def resolve_url(self, path: str) -> str:
        """
        Resolve a root-relative path against the site's base URL.

        Raises:
            InvalidPathError: If ``path`` does not start with exactly one '/'.
        """
        if not path.startswith("/") or path.startswith("//"):
            raise InvalidPathError(path)
        return self.site.absolute(path)

    def generate(
        self,
        title: str,
        description: str,
        keywords: Iterable[str] = (),
        path: str = "/",
    ) -> PageMetadata:
        """
        Generate metadata for one page.

        Args:
            title: Page title without the site suffix.
            description: Meta description.
            keywords: Page-specific keywords, most important first.
            path: Root-relative page path.

        Returns:
            Fully populated PageMetadata.

        Raises:
            InvalidPathError: If ``path`` is not root-relative.
        """
        full_title = f"{title} | {self.site.name}"
        url = self.resolve_url(path)

        image = OpenGraphImage(
            url=self.site.og_image,
            width=OG_IMAGE_WIDTH,
            height=OG_IMAGE_HEIGHT,
            alt=title,
        )

        return PageMetadata(
            title=full_title,
            description=description,
            keywords=tuple(merge_keywords(keywords)),
            alternates=Alternates(canonical=url),
            open_graph=OpenGraph(
                title=full_title,
                description=description,
                url=url,
                site_name=self.site.brand,
                type="website",
                images=(image,),
            ),
            twitter=TwitterCard(
                card="summary_large_image",
                site=self.site.twitter,
                title=full_title,
                description=description,
                images=(self.site.og_image,),
                creator=self.site.twitter,
            ),
            metadata_base=self.site.url,
        )
