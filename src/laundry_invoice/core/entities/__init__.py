"""Domain entities."""

from laundry_invoice.core.entities.document import DocumentMetadata, DocumentState, PaintStyle
from laundry_invoice.core.entities.order import (
    NOT_AVAILABLE,
    PAID_STATUS,
    BusinessSettings,
    OrderData,
    ServiceLine,
)
from laundry_invoice.core.entities.theme import InvoiceTheme

__all__ = [
    "BusinessSettings",
    "DocumentMetadata",
    "DocumentState",
    "InvoiceTheme",
    "NOT_AVAILABLE",
    "OrderData",
    "PAID_STATUS",
    "PaintStyle",
    "ServiceLine",
]
