"""Configuration module."""

from laundry_invoice.config.logging import configure_logging, get_logger
from laundry_invoice.config.settings import (
    BrandingSettings,
    PdfSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "PdfSettings",
    "BrandingSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
