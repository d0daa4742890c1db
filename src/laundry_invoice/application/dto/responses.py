"""Response DTOs.

Pydantic v2 models handed back to callers of the use cases.
"""

from pydantic import BaseModel, Field


class InvoicePdfResponse(BaseModel):
    """Response for invoice PDF generation."""

    order_id: str
    file_name: str = Field(..., description="Suggested download file name")
    content_type: str = "application/pdf"
    file_size: int
    pdf_bytes: bytes = Field(..., repr=False)
