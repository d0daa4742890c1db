"""
Laundry invoice engine.

Turns one laundry order into a single-page PDF invoice.
"""

from laundry_invoice.core.entities.order import BusinessSettings, OrderData, ServiceLine

__version__ = "1.0.0"


async def generate_invoice(
    order: OrderData, business: BusinessSettings | None = None
) -> bytes:
    """
    Generate the invoice PDF for an order using the configured service.

    Args:
        order: Order to bill.
        business: Optional business name and logo path.

    Returns:
        Complete PDF bytes.
    """
    from laundry_invoice.application.services import get_invoice_pdf_service

    return await get_invoice_pdf_service().generate_invoice(order, business)


__all__ = [
    "BusinessSettings",
    "OrderData",
    "ServiceLine",
    "generate_invoice",
]
