"""Core domain services."""

from laundry_invoice.core.services.brand_mark import BrandMarkRenderer
from laundry_invoice.core.services.composer import ComposedInvoice, InvoiceComposer
from laundry_invoice.core.services.invoice_pdf_service import InvoicePdfResult, InvoicePdfService
from laundry_invoice.core.services.serializer import serialize

__all__ = [
    "BrandMarkRenderer",
    "ComposedInvoice",
    "InvoiceComposer",
    "InvoicePdfResult",
    "InvoicePdfService",
    "serialize",
]
