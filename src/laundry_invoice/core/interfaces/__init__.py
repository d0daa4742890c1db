"""Core interfaces (ports) for dependency injection."""

from laundry_invoice.core.interfaces.canvas import IAssetRasterizer, ICanvas, ImageSource

__all__ = [
    "IAssetRasterizer",
    "ICanvas",
    "ImageSource",
]
