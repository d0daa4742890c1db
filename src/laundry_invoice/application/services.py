"""
Service factory functions for dependency injection.

This module wires the fpdf2 canvas and the cairosvg rasterizer to the core
composer. Use cases should import from here.
"""

from functools import partial

from laundry_invoice.config import Settings, get_settings
from laundry_invoice.core.entities.theme import InvoiceTheme
from laundry_invoice.core.interfaces import IAssetRasterizer
from laundry_invoice.core.services import BrandMarkRenderer, InvoiceComposer, InvoicePdfService

# Singleton service instance
_invoice_pdf_service: InvoicePdfService | None = None


def build_invoice_composer(
    settings: Settings | None = None,
    rasterizer: IAssetRasterizer | None = None,
    clock=None,
) -> InvoiceComposer:
    """
    Build an InvoiceComposer from settings.

    Args:
        settings: Optional settings override
        rasterizer: Optional rasterizer override for the brand asset
        clock: Optional callable returning the generation timestamp

    Returns:
        Configured InvoiceComposer
    """
    settings = settings or get_settings()

    # Lazy import infrastructure to keep the core importable without fpdf2
    from laundry_invoice.infrastructure.pdf import CairoSvgRasterizer, Fpdf2Canvas

    theme = InvoiceTheme(page_margin=settings.pdf.page_margin)
    branding = settings.branding

    brand_mark = BrandMarkRenderer(
        theme=theme,
        asset_path=branding.asset_path,
        rasterizer=rasterizer or CairoSvgRasterizer(),
        wordmark=branding.wordmark,
        tagline=branding.mark_tagline,
        fallback_label=branding.fallback_label,
    )
    canvas_factory = partial(
        Fpdf2Canvas,
        page_format=settings.pdf.page_format,
        compress=settings.pdf.compress,
        chunk_size=settings.pdf.stream_chunk_size,
    )

    options = {}
    if clock is not None:
        options["clock"] = clock

    return InvoiceComposer(
        canvas_factory=canvas_factory,
        brand_mark=brand_mark,
        theme=theme,
        branding=branding,
        currency=settings.pdf.currency_prefix,
        **options,
    )


def get_invoice_pdf_service(
    composer: InvoiceComposer | None = None,
) -> InvoicePdfService:
    """
    Get or create InvoicePdfService instance.

    Uses singleton pattern for efficiency; an explicit composer bypasses
    the cache.

    Args:
        composer: Optional composer override

    Returns:
        Configured InvoicePdfService
    """
    global _invoice_pdf_service

    if _invoice_pdf_service is not None and composer is None:
        return _invoice_pdf_service

    settings = get_settings()
    service = InvoicePdfService(
        composer=composer or build_invoice_composer(settings),
        queue_size=settings.pdf.stream_queue_size,
    )

    if composer is None:
        _invoice_pdf_service = service

    return service


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _invoice_pdf_service
    _invoice_pdf_service = None
