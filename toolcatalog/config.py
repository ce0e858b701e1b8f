"""
Centralized configuration management for the tool catalog service.

This module provides a Pydantic Settings-based configuration system that:
- Validates environment variables at startup
- Groups related settings for better organization
- Supports .env file loading

The catalog core never reads these settings itself: the application builds a
``SiteConfig`` and the other values from them and injects those into the
store, generators and rasterizer.

Usage:
    from toolcatalog.config import get_settings

    settings = get_settings()
    site = settings.site.to_site_config()
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types.site import SiteConfig


# =============================================================================
# Site Settings
# =============================================================================


class SiteSettings(BaseSettings):
    """Public identity of the site, used in metadata, sitemap and previews."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    site_name: str = Field(
        default="gofreetool.com",
        description="Suffix appended to every page title",
    )
    site_brand: str = Field(
        default="GoFreeTool",
        description="Brand name used as Open Graph site name and on previews",
    )
    site_url: str = Field(
        default="https://gofreetool.com",
        description="Absolute base URL",
    )
    site_description: str = Field(
        default="Free Daily-Use Tools — No Signup Required",
    )
    site_tagline: str = Field(
        default="Free Daily-Use Tools & Calculators",
    )
    site_og_image: str = Field(
        default="https://gofreetool.com/og-image.png",
        description="Default Open Graph image URL",
    )
    site_twitter: str = Field(
        default="@gofreetool",
        description="Twitter handle for cards",
    )
    site_logo: str = Field(
        default="https://gofreetool.com/icons/icon-512.png",
    )

    def to_site_config(self) -> SiteConfig:
        """Build the immutable SiteConfig handed to the generators."""
        return SiteConfig(
            name=self.site_name,
            brand=self.site_brand,
            url=self.site_url,
            description=self.site_description,
            tagline=self.site_tagline,
            og_image=self.site_og_image,
            twitter=self.site_twitter,
            logo=self.site_logo,
        )


# =============================================================================
# Catalog Settings
# =============================================================================


class CatalogSettings(BaseSettings):
    """Where the catalog artifact is loaded from."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    catalog_data_path: Optional[str] = Field(
        default=None,
        description="Path to the catalog JSON; defaults to the packaged file",
    )


# =============================================================================
# Preview Image Settings
# =============================================================================


class PreviewSettings(BaseSettings):
    """Font resources for preview rasterization."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    preview_font_path: Optional[str] = Field(
        default=None,
        description="TrueType font for regular text (Pillow default font if unset)",
    )
    preview_bold_font_path: Optional[str] = Field(
        default=None,
        description="TrueType font for bold titles (regular font if unset)",
    )
    preview_emoji_font_path: Optional[str] = Field(
        default=None,
        description="Color emoji font for icon glyphs (regular font if unset)",
    )
    preview_cache_seconds: int = Field(
        default=86400,
        ge=0,
        description="Cache-Control max-age for preview responses",
    )


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingSettings(BaseSettings):
    """Configuration for logging."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format_json: bool = Field(
        default=False,
        description="Force JSON log format in development",
    )
    request_logging_enabled: bool = Field(
        default=True,
        description="Enable request logging middleware",
    )


# =============================================================================
# Monitoring Settings (Sentry)
# =============================================================================


class SentrySettings(BaseSettings):
    """Configuration for Sentry error tracking."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )
    sentry_environment: str = Field(
        default="development",
        description="Sentry environment name",
    )
    sentry_traces_sample_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Sentry transaction sample rate (0.0 to 1.0)",
    )
    sentry_release: Optional[str] = Field(
        default="toolcatalog@1.0.0",
        description="Sentry release version",
    )

    @property
    def is_configured(self) -> bool:
        """Check if Sentry is configured."""
        return bool(self.sentry_dsn)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration groups.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )

    site: SiteSettings = Field(default_factory=SiteSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    previews: PreviewSettings = Field(default_factory=PreviewSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    sentry: SentrySettings = Field(default_factory=SentrySettings)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_sentry_configured(self) -> bool:
        """Check if Sentry error tracking is available."""
        return self.sentry.is_configured


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Validated Settings instance

    Raises:
        ValidationError: If configuration is invalid
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings from environment.

    This clears the cache and returns fresh settings.
    Useful for testing or after environment changes.
    """
    get_settings.cache_clear()
    return get_settings()
