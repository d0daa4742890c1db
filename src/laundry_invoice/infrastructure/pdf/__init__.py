"""PDF generation infrastructure."""

from laundry_invoice.infrastructure.pdf.fpdf2_canvas import Fpdf2Canvas
from laundry_invoice.infrastructure.pdf.rasterizer import CairoSvgRasterizer

__all__ = [
    "CairoSvgRasterizer",
    "Fpdf2Canvas",
]
