"""
Invoice PDF generation service.

Composes the invoice through the injected composer and drains the finished
document into bytes.
"""

from dataclasses import dataclass

from laundry_invoice.config import get_logger
from laundry_invoice.core.entities.order import BusinessSettings, OrderData
from laundry_invoice.core.services.composer import InvoiceComposer
from laundry_invoice.core.services.serializer import DEFAULT_QUEUE_SIZE, serialize

logger = get_logger(__name__)


@dataclass
class InvoicePdfResult:
    """Result of invoice PDF generation."""

    pdf_bytes: bytes
    order_id: int
    file_name: str
    file_size: int


class InvoicePdfService:
    """Service for generating invoice PDFs from order data."""

    def __init__(self, composer: InvoiceComposer, queue_size: int = DEFAULT_QUEUE_SIZE):
        self._composer = composer
        self._queue_size = queue_size

    async def generate_invoice(
        self, order: OrderData, business: BusinessSettings | None = None
    ) -> bytes:
        """
        Generate the invoice PDF for an order.

        Args:
            order: Order to bill.
            business: Optional business branding.

        Returns:
            Complete PDF bytes.

        Raises:
            DocumentStreamError: If the document stream fails while draining.
        """
        logger.info(
            "generating_invoice_pdf",
            order_id=order.id,
            service_lines=len(order.services),
        )
        composed = self._composer.compose(order, business)
        pdf_bytes = await serialize(composed.canvas, queue_size=self._queue_size)

        logger.info(
            "invoice_pdf_generated",
            order_id=order.id,
            size_bytes=len(pdf_bytes),
        )
        return pdf_bytes

    async def generate_invoice_result(
        self, order: OrderData, business: BusinessSettings | None = None
    ) -> InvoicePdfResult:
        """Generate the invoice and wrap it with download metadata."""
        pdf_bytes = await self.generate_invoice(order, business)
        return InvoicePdfResult(
            pdf_bytes=pdf_bytes,
            order_id=order.id,
            file_name=f"bill-order-{order.id}.pdf",
            file_size=len(pdf_bytes),
        )
