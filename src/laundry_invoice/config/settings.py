"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parents[1]


class PdfSettings(BaseSettings):
    """PDF canvas and serialization configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    page_format: str = "A4"
    page_margin: float = 30.0
    currency_prefix: str = "Rs."
    compress: bool = True

    # Stream draining
    stream_chunk_size: int = 16 * 1024  # bytes per data event
    stream_queue_size: int = 8

    @field_validator("stream_chunk_size", "stream_queue_size")
    @classmethod
    def ensure_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v


class BrandingSettings(BaseSettings):
    """Brand and contact text painted on every invoice."""

    model_config = SettingsConfigDict(env_prefix="BRAND_")

    default_business_name: str = "Elite Laundry"
    tagline: str = "Elite Care for Every Wear"

    # Brand mark (right side of the header)
    asset_path: Path = PACKAGE_DIR / "assets" / "logo.svg"
    wordmark: tuple[str, str] = ("Elite", "Laundry")
    mark_tagline: str = "Elite Care for Everyday Wear"
    fallback_label: str = "Elite Laundry"

    # Contact details
    contact_phone: str = "+91 91758 31200"
    contact_email: str = "info@elitelaundry.org"
    contact_address: str = "Shop No. 9, Sai Park Town Kiwale, Pune, 412101, MH, IN"

    # Payment terms next to the total box
    payment_terms: str = "Payment Terms: Cash on Delivery"
    thank_you_note: str = "Thank you for choosing our services!"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Laundry Invoice Engine"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    branding: BrandingSettings = Field(default_factory=BrandingSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
