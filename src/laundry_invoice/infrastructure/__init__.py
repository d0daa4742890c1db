"""Infrastructure layer implementations."""

from laundry_invoice.infrastructure import pdf

__all__ = ["pdf"]
