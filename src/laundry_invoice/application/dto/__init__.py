"""Data Transfer Objects returned by the use cases."""

from laundry_invoice.application.dto.responses import InvoicePdfResponse

__all__ = ["InvoicePdfResponse"]
