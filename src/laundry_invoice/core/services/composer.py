"""
Invoice composer.

Opens a canvas, moves it through created -> composing -> finalized and runs
the six sections in a fixed order, threading the vertical cursor between
them. Every order gets every section, even when one paints little.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from laundry_invoice.config import BrandingSettings, get_logger
from laundry_invoice.core.entities.document import DocumentMetadata
from laundry_invoice.core.entities.order import BusinessSettings, OrderData
from laundry_invoice.core.entities.theme import InvoiceTheme
from laundry_invoice.core.exceptions import LayoutError
from laundry_invoice.core.interfaces.canvas import ICanvas
from laundry_invoice.core.services.brand_mark import BrandMarkRenderer
from laundry_invoice.core.services.sections import (
    SectionContext,
    render_business_header,
    render_customer_block,
    render_footer,
    render_invoice_header,
    render_total_box,
)
from laundry_invoice.core.services.services_table import render_services_table

logger = get_logger(__name__)

Section = Callable[[ICanvas, SectionContext, float], float]
CanvasFactory = Callable[[DocumentMetadata, float], ICanvas]

SECTION_SEQUENCE: tuple[tuple[str, Section], ...] = (
    ("business_header", render_business_header),
    ("invoice_header", render_invoice_header),
    ("customer_block", render_customer_block),
    ("services_table", render_services_table),
    ("total_box", render_total_box),
    ("footer", render_footer),
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class ComposedInvoice:
    """A finalized canvas plus the cursor after each section."""

    canvas: ICanvas
    cursor_trace: list[tuple[str, float]]


class InvoiceComposer:
    """
    Lays out one invoice per call.

    Holds only immutable collaborators, so a single composer can serve
    concurrent calls; each call gets its own canvas and cursor.
    """

    def __init__(
        self,
        canvas_factory: CanvasFactory,
        brand_mark: BrandMarkRenderer,
        theme: InvoiceTheme | None = None,
        branding: BrandingSettings | None = None,
        currency: str = "Rs.",
        clock: Callable[[], datetime] = _local_now,
    ):
        self._canvas_factory = canvas_factory
        self._brand_mark = brand_mark
        self._theme = theme or InvoiceTheme()
        self._branding = branding or BrandingSettings()
        self._currency = currency
        self._clock = clock

    @property
    def theme(self) -> InvoiceTheme:
        return self._theme

    def build_metadata(
        self, order: OrderData, business: BusinessSettings, generated_at: datetime
    ) -> DocumentMetadata:
        """PDF info dictionary for an order."""
        return DocumentMetadata(
            title=f"Bill - Order #{order.id}",
            author=business.display_name(self._branding.default_business_name),
            subject="Service Bill",
            keywords="laundry, bill, invoice",
            creation_date=generated_at,
        )

    def compose(
        self, order: OrderData, business: BusinessSettings | None = None
    ) -> ComposedInvoice:
        """
        Paint every section of the invoice and finalize the canvas.

        Args:
            order: Order to bill.
            business: Optional branding; defaults apply when omitted.

        Returns:
            ComposedInvoice whose canvas is finalized and ready to stream.

        Raises:
            LayoutError: If a section moves the cursor backwards.
        """
        business = business or BusinessSettings()
        generated_at = self._clock()

        canvas = self._canvas_factory(
            self.build_metadata(order, business, generated_at),
            self._theme.page_margin,
        )
        context = SectionContext(
            order=order,
            business=business,
            theme=self._theme,
            branding=self._branding,
            brand_mark=self._brand_mark,
            generated_at=generated_at,
            currency=self._currency,
        )

        canvas.begin()
        cursor = self._theme.page_margin
        trace: list[tuple[str, float]] = []

        for name, section in SECTION_SEQUENCE:
            next_cursor = section(canvas, context, cursor)
            if next_cursor < cursor:
                raise LayoutError(name, cursor, next_cursor)
            cursor = next_cursor
            trace.append((name, cursor))

        canvas.finalize()

        logger.debug(
            "invoice_composed",
            order_id=order.id,
            service_lines=len(order.services),
            final_cursor=cursor,
        )
        return ComposedInvoice(canvas=canvas, cursor_trace=trace)
