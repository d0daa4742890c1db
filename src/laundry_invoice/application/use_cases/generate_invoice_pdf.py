"""
Generate Invoice PDF Use Case.

Generates the invoice PDF for one laundry order.
"""

from collections.abc import Mapping
from typing import Any

from laundry_invoice.application.dto.responses import InvoicePdfResponse
from laundry_invoice.config import get_logger
from laundry_invoice.core.entities.order import BusinessSettings, OrderData
from laundry_invoice.core.services.invoice_pdf_service import InvoicePdfResult, InvoicePdfService

logger = get_logger(__name__)


class GenerateInvoicePdfUseCase:
    """
    Use case for generating invoice PDFs.

    Flow:
    1. Normalize the order (entity or persisted record)
    2. Render PDF via InvoicePdfService
    3. Return PDF bytes and metadata
    """

    def __init__(
        self,
        pdf_service: InvoicePdfService | None = None,
    ):
        self._pdf_service = pdf_service

    def _get_pdf_service(self) -> InvoicePdfService:
        if self._pdf_service is None:
            from laundry_invoice.application.services import get_invoice_pdf_service

            self._pdf_service = get_invoice_pdf_service()
        return self._pdf_service

    async def execute(
        self,
        order: OrderData | Mapping[str, Any],
        business: BusinessSettings | Mapping[str, Any] | None = None,
    ) -> InvoicePdfResult:
        """
        Generate the invoice PDF for the given order.

        Args:
            order: Order entity, or a persisted order row with its services.
            business: Optional business branding, as entity or mapping.

        Returns:
            InvoicePdfResult with PDF bytes and metadata.
        """
        if not isinstance(order, OrderData):
            order = OrderData.from_record(order)
        if business is not None and not isinstance(business, BusinessSettings):
            business = BusinessSettings.model_validate(dict(business))

        logger.info("generate_invoice_pdf_started", order_id=order.id)
        service = self._get_pdf_service()
        result = await service.generate_invoice_result(order, business)
        logger.info(
            "generate_invoice_pdf_complete",
            order_id=order.id,
            file_size=result.file_size,
        )
        return result

    @staticmethod
    def to_response(result: InvoicePdfResult) -> InvoicePdfResponse:
        """Convert result to a download response."""
        return InvoicePdfResponse(
            order_id=str(result.order_id),
            file_name=result.file_name,
            file_size=result.file_size,
            pdf_bytes=result.pdf_bytes,
        )
