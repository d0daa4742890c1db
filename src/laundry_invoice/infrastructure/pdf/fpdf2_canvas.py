"""
Fpdf2 implementation of the drawing canvas.

Wraps a single-page ``FPDF`` document measured in points, guards the
created -> composing -> finalized lifecycle, and exposes the finished
document as a chunked byte stream.
"""

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from io import BytesIO

from fpdf import FPDF
from fpdf.enums import StrokeCapStyle, StrokeJoinStyle, XPos, YPos

from laundry_invoice.core.entities.document import DocumentMetadata, DocumentState, PaintStyle
from laundry_invoice.core.exceptions import DocumentStateError
from laundry_invoice.core.interfaces.canvas import ICanvas, ImageSource

FONT_FAMILY = "Helvetica"
LINE_HEIGHT_FACTOR = 1.15
DEFAULT_CHUNK_SIZE = 16384


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (or ``#rgb``) into an RGB triple."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _safe_text(text: str) -> str:
    """Replace characters the core fonts cannot encode."""
    return text.encode("latin-1", "replace").decode("latin-1")


class Fpdf2Canvas(ICanvas):
    """Single-page fpdf2 document behind the ICanvas contract."""

    def __init__(
        self,
        metadata: DocumentMetadata,
        margin: float,
        page_format: str = "A4",
        compress: bool = True,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        pdf = FPDF(orientation="portrait", unit="pt", format=page_format)
        pdf.set_compression(compress)
        pdf.set_auto_page_break(False)
        pdf.set_margins(margin, margin, margin)
        # Text is placed at exact layout coordinates, without cell padding
        pdf.c_margin = 0

        pdf.set_title(metadata.title)
        pdf.set_author(metadata.author)
        pdf.set_subject(metadata.subject)
        pdf.set_keywords(metadata.keywords)
        pdf.set_creator(metadata.author)
        pdf.creation_date = metadata.creation_date

        pdf.add_page()
        pdf.set_font(FONT_FAMILY, "", 10)

        self._pdf = pdf
        self._chunk_size = chunk_size
        self._font_size = 10.0
        self._state = DocumentState.CREATED

    # ------------------------------------------------------------------
    # Geometry and lifecycle
    # ------------------------------------------------------------------

    @property
    def page_width(self) -> float:
        return float(self._pdf.w)

    @property
    def page_height(self) -> float:
        return float(self._pdf.h)

    @property
    def state(self) -> DocumentState:
        return self._state

    def _require(self, operation: str, expected: DocumentState) -> None:
        if self._state is not expected:
            raise DocumentStateError(operation, expected.value, self._state.value)

    def begin(self) -> None:
        self._require("begin", DocumentState.CREATED)
        self._state = DocumentState.COMPOSING

    def finalize(self) -> None:
        self._require("finalize", DocumentState.COMPOSING)
        self._state = DocumentState.FINALIZED

    def open_stream(self) -> Iterator[bytes]:
        self._require("stream", DocumentState.FINALIZED)
        return self._chunks()

    def _chunks(self) -> Iterator[bytes]:
        # Output is produced on first iteration so failures surface as stream errors.
        data = bytes(self._pdf.output())
        for start in range(0, len(data), self._chunk_size):
            yield data[start : start + self._chunk_size]

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------

    def set_fill_color(self, color: str) -> None:
        self._require("paint", DocumentState.COMPOSING)
        rgb = _hex_to_rgb(color)
        self._pdf.set_fill_color(*rgb)
        self._pdf.set_text_color(*rgb)

    def set_stroke_color(self, color: str) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.set_draw_color(*_hex_to_rgb(color))

    def set_line_width(self, width: float) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.set_line_width(width)

    def set_font(self, size: float, style: str = "") -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.set_font(FONT_FAMILY, style, size)
        self._font_size = size

    def graphics_state(self, round_strokes: bool = False) -> AbstractContextManager[None]:
        self._require("paint", DocumentState.COMPOSING)
        return self._local_context(round_strokes)

    @contextmanager
    def _local_context(self, round_strokes: bool) -> Iterator[None]:
        options = {}
        if round_strokes:
            options = {
                "stroke_cap_style": StrokeCapStyle.ROUND,
                "stroke_join_style": StrokeJoinStyle.ROUND,
            }
        font_size = self._font_size
        with self._pdf.local_context(**options):
            yield
        self._font_size = font_size

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def rectangle(
        self, x: float, y: float, width: float, height: float, style: PaintStyle
    ) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.rect(x, y, width, height, style=style.value)

    def rounded_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        style: PaintStyle,
    ) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.rect(
            x,
            y,
            width,
            height,
            style=style.value,
            round_corners=True,
            corner_radius=radius,
        )

    def circle(self, cx: float, cy: float, radius: float, style: PaintStyle) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.ellipse(cx - radius, cy - radius, 2 * radius, 2 * radius, style=style.value)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.line(x1, y1, x2, y2)

    def text(
        self,
        value: str,
        x: float,
        y: float,
        width: float | None = None,
        align: str = "L",
    ) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self._pdf.set_xy(x, y)
        self._pdf.multi_cell(
            width or 0,
            self._font_size * LINE_HEIGHT_FACTOR,
            _safe_text(value),
            align=align,
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )

    def image(
        self, source: ImageSource, x: float, y: float, width: float, height: float
    ) -> None:
        self._require("paint", DocumentState.COMPOSING)
        if isinstance(source, bytes):
            source = BytesIO(source)
        self._pdf.image(source, x=x, y=y, w=width, h=height)
