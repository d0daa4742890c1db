"""
Abstract interfaces for the drawing and raster capabilities.

The engine composes invoices against these contracts only; fpdf2 and
cairosvg sit behind them in the infrastructure layer, and tests substitute
a recording canvas.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager
from io import BytesIO
from pathlib import Path

from laundry_invoice.core.entities.document import DocumentState, PaintStyle

ImageSource = str | Path | bytes | BytesIO


class ICanvas(ABC):
    """
    Single-page drawing surface with a created/composing/finalized lifecycle.

    Coordinates are points with the origin at the top-left corner. Fill color
    also applies to text, as in most PDF toolkits.
    """

    # ------------------------------------------------------------------
    # Geometry and lifecycle
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def page_width(self) -> float:
        pass

    @property
    @abstractmethod
    def page_height(self) -> float:
        pass

    @property
    @abstractmethod
    def state(self) -> DocumentState:
        """Current lifecycle state."""
        pass

    @abstractmethod
    def begin(self) -> None:
        """Move from created to composing."""
        pass

    @abstractmethod
    def finalize(self) -> None:
        """Move from composing to finalized; no more painting afterwards."""
        pass

    @abstractmethod
    def open_stream(self) -> Iterator[bytes]:
        """Yield the finished document as ordered byte chunks."""
        pass

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------

    @abstractmethod
    def set_fill_color(self, color: str) -> None:
        """Set fill and text color from a ``#rrggbb`` string."""
        pass

    @abstractmethod
    def set_stroke_color(self, color: str) -> None:
        pass

    @abstractmethod
    def set_line_width(self, width: float) -> None:
        pass

    @abstractmethod
    def set_font(self, size: float, style: str = "") -> None:
        """Select the body font; style is "" or "B"."""
        pass

    @abstractmethod
    def graphics_state(self, round_strokes: bool = False) -> AbstractContextManager[None]:
        """Save graphics state on enter and restore it on exit."""
        pass

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def rectangle(
        self, x: float, y: float, width: float, height: float, style: PaintStyle
    ) -> None:
        pass

    @abstractmethod
    def rounded_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        style: PaintStyle,
    ) -> None:
        pass

    @abstractmethod
    def circle(self, cx: float, cy: float, radius: float, style: PaintStyle) -> None:
        pass

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pass

    @abstractmethod
    def text(
        self,
        value: str,
        x: float,
        y: float,
        width: float | None = None,
        align: str = "L",
    ) -> None:
        """Paint text with its top at ``y``, wrapped to ``width`` when given."""
        pass

    @abstractmethod
    def image(
        self, source: ImageSource, x: float, y: float, width: float, height: float
    ) -> None:
        """Paint a raster image; raises when the source cannot be decoded."""
        pass


class IAssetRasterizer(ABC):
    """Converts a vector asset into PNG bytes of a given pixel size."""

    @abstractmethod
    def rasterize(self, path: Path, width_px: int, height_px: int) -> bytes:
        pass
