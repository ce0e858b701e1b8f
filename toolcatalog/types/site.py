"""
Site-wide constants consumed by the generators.

A ``SiteConfig`` is built once (normally from ``SiteSettings``) and handed to
every generator, so nothing in the core reads the environment directly.
"""

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SiteConfig(BaseModel):
    """Immutable description of the public site."""

    name: str = Field(default="gofreetool.com", description="Title suffix")
    brand: str = Field(default="GoFreeTool", description="Open Graph site name")
    url: str = Field(default="https://gofreetool.com", description="Base URL, no trailing slash")
    description: str = Field(default="Free Daily-Use Tools — No Signup Required")
    tagline: str = Field(default="Free Daily-Use Tools & Calculators")
    og_image: str = Field(default="https://gofreetool.com/og-image.png")
    twitter: str = Field(default="@gofreetool", description="Twitter site/creator handle")
    logo: str = Field(default="https://gofreetool.com/icons/icon-512.png")

    model_config = ConfigDict(frozen=True)

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"Site URL must be an absolute http(s) URL: {v!r}")
        return v.rstrip("/")

    @property
    def domain(self) -> str:
        """Bare domain shown in preview footers."""
        return urlsplit(self.url).netloc

    def absolute(self, path: str) -> str:
        """Join a root-relative path onto the base URL."""
        return f"{self.url}{path}"
