"""Tests for settings and service factories."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from laundry_invoice.application.services import (
    build_invoice_composer,
    get_invoice_pdf_service,
    reset_services,
)
from laundry_invoice.config import (
    PdfSettings,
    configure_logging,
    get_logger,
    get_settings,
    reset_settings,
)
from laundry_invoice.config.logging import add_app_context
from laundry_invoice.config.settings import PACKAGE_DIR


class TestSettings:
    def test_defaults(self):
        settings = get_settings()

        assert settings.pdf.page_format == "A4"
        assert settings.pdf.page_margin == 30.0
        assert settings.pdf.currency_prefix == "Rs."
        assert settings.branding.default_business_name == "Elite Laundry"
        assert settings.branding.asset_path == PACKAGE_DIR / "assets" / "logo.svg"

    def test_bundled_asset_exists(self):
        assert get_settings().branding.asset_path.is_file()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PDF_PAGE_MARGIN", "40")
        monkeypatch.setenv("BRAND_CONTACT_PHONE", "+91 00000 00000")
        reset_settings()

        settings = get_settings()

        assert settings.pdf.page_margin == 40.0
        assert settings.branding.contact_phone == "+91 00000 00000"

    def test_settings_singleton(self):
        assert get_settings() is get_settings()

    def test_rejects_non_positive_queue(self):
        with pytest.raises(ValidationError):
            PdfSettings(stream_queue_size=0)


class TestServiceFactories:
    def test_pdf_service_singleton(self):
        first = get_invoice_pdf_service()
        assert get_invoice_pdf_service() is first

        reset_services()
        assert get_invoice_pdf_service() is not first

    def test_composer_uses_configured_margin(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PDF_PAGE_MARGIN", "36")
        reset_settings()

        composer = build_invoice_composer()

        assert composer.theme.page_margin == 36.0


class TestLogging:
    """Tests for structlog configuration."""

    @pytest.fixture(autouse=True)
    def _restore_structlog(self):
        yield
        structlog.reset_defaults()

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_configure_logging(self, monkeypatch: pytest.MonkeyPatch, environment: str):
        monkeypatch.setenv("ENVIRONMENT", environment)
        reset_settings()

        configure_logging()
        get_logger("laundry_invoice.tests").info("logging_configured", environment=environment)

        assert logging.getLogger("fpdf").level == logging.WARNING

    def test_add_app_context(self):
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "Laundry Invoice Engine"
        assert event["environment"] == "development"
