"""Test doubles and PDF helpers shared across the suite."""

import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from io import BytesIO
from pathlib import Path
from typing import Any

from laundry_invoice.core.entities import DocumentMetadata, DocumentState, PaintStyle
from laundry_invoice.core.exceptions import DocumentStateError
from laundry_invoice.core.interfaces import IAssetRasterizer, ICanvas, ImageSource

A4_WIDTH = 595.28
A4_HEIGHT = 841.89

IST = timezone(timedelta(hours=5, minutes=30))
FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5, tzinfo=IST)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams in *pdf_bytes* and return all text.

    fpdf2 compresses page content with zlib (FlateDecode). We find each
    ``stream ... endstream`` block, attempt to decompress it, and
    concatenate the decoded text alongside the raw document.
    """
    texts = [pdf_bytes.decode("latin-1")]

    start_marker = b"stream\n"
    end_marker = b"\nendstream"
    idx = 0
    while True:
        s = pdf_bytes.find(start_marker, idx)
        if s == -1:
            break
        s += len(start_marker)
        e = pdf_bytes.find(end_marker, s)
        if e == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[s:e]).decode("latin-1", errors="replace"))
        except zlib.error:
            pass
        idx = e + len(end_marker)

    return "\n".join(texts)


@dataclass
class Op:
    """One recorded canvas call."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)


class RecordingCanvas(ICanvas):
    """In-memory canvas that records every call in order."""

    def __init__(
        self,
        metadata: DocumentMetadata | None = None,
        margin: float = 30.0,
        payload: bytes = b"%PDF-1.3 recorded",
        fail_images: bool = False,
        stream_error: Exception | None = None,
    ):
        self.metadata = metadata
        self.margin = margin
        self.payload = payload
        self.fail_images = fail_images
        self.stream_error = stream_error
        self.ops: list[Op] = []
        self.fill_color: str | None = None
        self.font: tuple[float, str] = (10, "")
        self._state = DocumentState.CREATED

    # Lifecycle -----------------------------------------------------------

    @property
    def page_width(self) -> float:
        return A4_WIDTH

    @property
    def page_height(self) -> float:
        return A4_HEIGHT

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
        for start in range(0, len(self.payload), 4):
            yield self.payload[start : start + 4]
        if self.stream_error is not None:
            raise self.stream_error

    # Recording -----------------------------------------------------------

    def _record(self, name: str, **args: Any) -> None:
        self._require("paint", DocumentState.COMPOSING)
        self.ops.append(Op(name, args))

    def calls(self, name: str) -> list[Op]:
        return [op for op in self.ops if op.name == name]

    def texts(self) -> list[str]:
        return [op.args["value"] for op in self.calls("text")]

    def text_op(self, value: str) -> Op:
        for op in self.calls("text"):
            if op.args["value"] == value:
                return op
        raise AssertionError(f"text {value!r} was not painted")

    # Graphics state ------------------------------------------------------

    def set_fill_color(self, color: str) -> None:
        self._record("fill_color", color=color)
        self.fill_color = color

    def set_stroke_color(self, color: str) -> None:
        self._record("stroke_color", color=color)

    def set_line_width(self, width: float) -> None:
        self._record("line_width", width=width)

    def set_font(self, size: float, style: str = "") -> None:
        self._record("font", size=size, style=style)
        self.font = (size, style)

    @contextmanager
    def graphics_state(self, round_strokes: bool = False) -> Iterator[None]:
        self._record("save", round_strokes=round_strokes)
        saved = (self.fill_color, self.font)
        yield
        self.fill_color, self.font = saved
        self._record("restore")

    # Primitives ----------------------------------------------------------

    def rectangle(
        self, x: float, y: float, width: float, height: float, style: PaintStyle
    ) -> None:
        self._record(
            "rectangle", x=x, y=y, width=width, height=height, style=style, fill=self.fill_color
        )

    def rounded_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        style: PaintStyle,
    ) -> None:
        self._record(
            "rounded_rectangle", x=x, y=y, width=width, height=height, radius=radius, style=style
        )

    def circle(self, cx: float, cy: float, radius: float, style: PaintStyle) -> None:
        self._record("circle", cx=cx, cy=cy, radius=radius, style=style)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2)

    def text(
        self,
        value: str,
        x: float,
        y: float,
        width: float | None = None,
        align: str = "L",
    ) -> None:
        self._record(
            "text",
            value=value,
            x=x,
            y=y,
            width=width,
            align=align,
            color=self.fill_color,
            size=self.font[0],
            style=self.font[1],
        )

    def image(
        self, source: ImageSource, x: float, y: float, width: float, height: float
    ) -> None:
        if self.fail_images:
            raise ValueError("cannot decode image")
        if isinstance(source, BytesIO):
            source = source.getvalue()
        self._record("image", source=source, x=x, y=y, width=width, height=height)


class FakeRasterizer(IAssetRasterizer):
    """Rasterizer that returns fixed bytes or raises on demand."""

    def __init__(self, png: bytes = b"\x89PNG fake", error: Exception | None = None):
        self.png = png
        self.error = error
        self.calls: list[tuple[Path, int, int]] = []

    def rasterize(self, path: Path, width_px: int, height_px: int) -> bytes:
        self.calls.append((path, width_px, height_px))
        if self.error is not None:
            raise self.error
        return self.png
