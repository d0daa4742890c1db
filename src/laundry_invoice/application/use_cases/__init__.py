"""Application use cases."""

from laundry_invoice.application.use_cases.generate_invoice_pdf import GenerateInvoicePdfUseCase

__all__ = ["GenerateInvoicePdfUseCase"]
