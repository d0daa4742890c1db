"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates the invoice engine by:
1. Defining response DTOs for callers
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection
"""

from laundry_invoice.application.dto.responses import InvoicePdfResponse
from laundry_invoice.application.services import (
    build_invoice_composer,
    get_invoice_pdf_service,
    reset_services,
)
from laundry_invoice.application.use_cases import GenerateInvoicePdfUseCase

__all__ = [
    # Response DTOs
    "InvoicePdfResponse",
    # Use Cases
    "GenerateInvoicePdfUseCase",
    # Service factories
    "build_invoice_composer",
    "get_invoice_pdf_service",
    "reset_services",
]
