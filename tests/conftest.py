"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from fakes import FIXED_NOW, FakeRasterizer, RecordingCanvas
from laundry_invoice.application.services import reset_services
from laundry_invoice.config import BrandingSettings, reset_settings
from laundry_invoice.core.entities import (
    BusinessSettings,
    DocumentMetadata,
    InvoiceTheme,
    OrderData,
    ServiceLine,
)
from laundry_invoice.core.exceptions import AssetUnavailableError
from laundry_invoice.core.services import BrandMarkRenderer, InvoiceComposer


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate settings and service singletons between tests."""
    for name in ("ENVIRONMENT", "LOG_LEVEL", "PDF_PAGE_MARGIN", "PDF_CURRENCY_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def theme() -> InvoiceTheme:
    return InvoiceTheme()


@pytest.fixture
def branding() -> BrandingSettings:
    return BrandingSettings()


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same aware timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_order() -> OrderData:
    """Paid order with two service lines (subtotal 250, total 350)."""
    return OrderData(
        id=123,
        customer_name="Asha Kulkarni",
        customer_phone="+91 98220 11111",
        customer_address=None,
        status="Delivered",
        payment_status="Paid",
        total_amount=Decimal("350"),
        created_at=datetime(2026, 3, 5, 10, 30),
        services=[
            ServiceLine(service_type="Washing", cloth_type="Shirt", quantity=5, rate=Decimal("30")),
            ServiceLine(service_type="Dry Clean", cloth_type="Saree", quantity=2, rate=Decimal("50")),
        ],
    )


@pytest.fixture
def empty_order() -> OrderData:
    """Order with no service lines and zero total."""
    return OrderData(
        id=7,
        customer_name="Walk-in",
        status="Pending",
        payment_status="Pending",
        total_amount=0,
        created_at=datetime(2026, 1, 2, 9, 0),
        services=[],
    )


@pytest.fixture
def business() -> BusinessSettings:
    return BusinessSettings(business_name="Sparkle Cleaners")


@pytest.fixture
def recording_canvases() -> list[RecordingCanvas]:
    """Every canvas created by the recording factory, in creation order."""
    return []


@pytest.fixture
def recording_factory(recording_canvases: list[RecordingCanvas]):
    """Canvas factory that hands out RecordingCanvas instances."""

    def factory(metadata: DocumentMetadata, margin: float) -> RecordingCanvas:
        canvas = RecordingCanvas(metadata=metadata, margin=margin)
        recording_canvases.append(canvas)
        return canvas

    return factory


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def brand_mark(theme: InvoiceTheme, fake_rasterizer: FakeRasterizer, tmp_path: Path) -> BrandMarkRenderer:
    """Brand mark renderer whose vector asset exists and rasterizes."""
    asset = tmp_path / "logo.svg"
    asset.write_text("<svg xmlns='http://www.w3.org/2000/svg'/>")
    return BrandMarkRenderer(theme=theme, asset_path=asset, rasterizer=fake_rasterizer)


@pytest.fixture
def composer(
    recording_factory, brand_mark: BrandMarkRenderer, theme: InvoiceTheme, fixed_clock
) -> InvoiceComposer:
    """Composer painting onto recording canvases with a fixed clock."""
    return InvoiceComposer(
        canvas_factory=recording_factory,
        brand_mark=brand_mark,
        theme=theme,
        clock=fixed_clock,
    )


@pytest.fixture
def failing_rasterizer() -> FakeRasterizer:
    return FakeRasterizer(error=AssetUnavailableError("logo.svg", "libcairo missing"))
