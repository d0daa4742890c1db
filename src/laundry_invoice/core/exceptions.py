"""
Domain exceptions for the invoice engine.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InvoiceEngineError(Exception):
    """Base exception for all invoice engine errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(InvoiceEngineError):
    """Invalid configuration."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            f"Invalid configuration for {setting}: {reason}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting, "reason": reason},
        )


# Asset Exceptions
class AssetError(InvoiceEngineError):
    """Base exception for brand and logo assets."""

    pass


class AssetUnavailableError(AssetError):
    """Asset file is missing or cannot be converted."""

    def __init__(self, asset: str, reason: str | None = None):
        super().__init__(
            f"Asset unavailable: {asset}" + (f" - {reason}" if reason else ""),
            code="ASSET_UNAVAILABLE",
            details={"asset": asset, "reason": reason},
        )


# Rendering Exceptions
class RenderingError(InvoiceEngineError):
    """Base exception for document composition."""

    pass


class DocumentStateError(RenderingError):
    """Document used outside the lifecycle state an operation requires."""

    def __init__(self, operation: str, expected: str, actual: str):
        super().__init__(
            f"Cannot {operation} a document in state '{actual}' (expected '{expected}')",
            code="DOCUMENT_STATE_ERROR",
            details={"operation": operation, "expected": expected, "actual": actual},
        )


class LayoutError(RenderingError):
    """A section moved the layout cursor backwards."""

    def __init__(self, section: str, previous: float, current: float):
        super().__init__(
            f"Section '{section}' moved the cursor from {previous:.2f} back to {current:.2f}",
            code="LAYOUT_ERROR",
            details={"section": section, "previous": previous, "current": current},
        )


# Serialization Exceptions
class DocumentStreamError(InvoiceEngineError, OSError):
    """Document byte stream failed while being drained."""

    def __init__(self, reason: str):
        super().__init__(
            f"Document stream failed: {reason}",
            code="DOCUMENT_STREAM_ERROR",
            details={"reason": reason},
        )
