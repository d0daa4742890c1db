"""
Brand mark rendering with a three-tier fallback chain.

1. vector_asset: rasterize the bundled SVG logo and paint it as an image.
2. procedural:   draw badge, circle, hanger glyph and wordmark with primitives.
3. text_only:    paint a bold label.

Each tier is an attempt returning True on success. Exceptions are logged and
the next tier runs; when every tier fails the header simply has no mark.
"""

from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from laundry_invoice.config import get_logger
from laundry_invoice.core.entities.document import PaintStyle
from laundry_invoice.core.entities.theme import InvoiceTheme
from laundry_invoice.core.interfaces.canvas import IAssetRasterizer, ICanvas

logger = get_logger(__name__)

MIN_MARK_WIDTH = 60.0
MARK_ASPECT_RATIO = 0.25  # logo.svg is 400x100
TAGLINE_MIN_WIDTH = 100.0


@dataclass(frozen=True)
class MarkBox:
    """Bounding box of the brand mark."""

    x: float
    y: float
    width: float

    @property
    def height(self) -> float:
        return self.width * MARK_ASPECT_RATIO


MarkAttempt = Callable[[ICanvas, MarkBox], bool]


class BrandMarkRenderer:
    """Paints the brand mark (icon + wordmark) into a fixed 4:1 box."""

    def __init__(
        self,
        theme: InvoiceTheme,
        asset_path: Path | None = None,
        rasterizer: IAssetRasterizer | None = None,
        wordmark: tuple[str, str] = ("Elite", "Laundry"),
        tagline: str = "Elite Care for Everyday Wear",
        fallback_label: str = "Elite Laundry",
    ):
        self._theme = theme
        self._asset_path = asset_path
        self._rasterizer = rasterizer
        self._wordmark = wordmark
        self._tagline = tagline
        self._fallback_label = fallback_label

    @property
    def tiers(self) -> list[tuple[str, MarkAttempt]]:
        """Ordered fallback tiers."""
        return [
            ("vector_asset", self._draw_vector_asset),
            ("procedural", self._draw_procedural),
            ("text_only", self._draw_text_only),
        ]

    @staticmethod
    def mark_height(width: float) -> float:
        return max(width, MIN_MARK_WIDTH) * MARK_ASPECT_RATIO

    def render(self, canvas: ICanvas, x: float, y: float, width: float) -> str | None:
        """
        Paint the mark at (x, y) and return the name of the tier used.

        Never raises. Returns None when every tier failed.
        """
        box = MarkBox(x=x, y=y, width=max(width, MIN_MARK_WIDTH))

        for name, attempt in self.tiers:
            try:
                if attempt(canvas, box):
                    return name
            except Exception as e:
                logger.warning("brand_mark_tier_failed", tier=name, error=str(e))

        logger.warning("brand_mark_exhausted", x=x, y=y, width=box.width)
        return None

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    def _draw_vector_asset(self, canvas: ICanvas, box: MarkBox) -> bool:
        if self._rasterizer is None or self._asset_path is None:
            return False
        if not self._asset_path.is_file():
            logger.debug("brand_asset_missing", path=str(self._asset_path))
            return False

        png = self._rasterizer.rasterize(
            self._asset_path, round(box.width), round(box.height)
        )
        canvas.image(BytesIO(png), box.x, box.y, box.width, box.height)
        return True

    def _draw_procedural(self, canvas: ICanvas, box: MarkBox) -> bool:
        theme = self._theme
        height = box.height
        icon_size = height
        cx = box.x + icon_size / 2
        cy = box.y + icon_size / 2

        with canvas.graphics_state(round_strokes=True):
            # Badge
            canvas.set_fill_color(theme.mark_badge)
            canvas.rounded_rectangle(
                box.x,
                box.y,
                icon_size,
                icon_size,
                max(2, icon_size * 0.2),
                PaintStyle.FILL,
            )
            canvas.set_fill_color(theme.mark_circle)
            canvas.circle(cx, cy, max(5, icon_size * 0.38), PaintStyle.FILL)

            # Hanger
            s = max(0.5, icon_size * 0.08)
            canvas.set_stroke_color(theme.mark_badge)
            canvas.set_line_width(max(1, icon_size * 0.05))
            canvas.line(cx - 8 * s, cy + 4 * s, cx, cy - 6 * s)
            canvas.line(cx, cy - 6 * s, cx + 8 * s, cy + 4 * s)
            canvas.line(cx - 8 * s, cy + 4 * s, cx + 8 * s, cy + 4 * s)
            canvas.line(cx - 2 * s, cy - 6 * s, cx + 2 * s, cy - 6 * s)

            # Wordmark
            text_x = box.x + icon_size + 8
            text_width = max(50, box.width - icon_size - 8)
            first, second = self._wordmark

            canvas.set_font(max(8, min(14, box.width * 0.15)), "B")
            canvas.set_fill_color(theme.mark_title)
            canvas.text(first, text_x, box.y + height * 0.1, width=text_width)
            canvas.text(second, text_x, box.y + height * 0.45, width=text_width)

            if box.width > TAGLINE_MIN_WIDTH:
                canvas.set_font(max(6, min(8, box.width * 0.06)))
                canvas.set_fill_color(theme.mark_tagline)
                canvas.text(self._tagline, text_x, box.y + height * 0.8, width=text_width)

        return True

    def _draw_text_only(self, canvas: ICanvas, box: MarkBox) -> bool:
        canvas.set_font(10, "B")
        canvas.set_fill_color(self._theme.primary)
        canvas.text(self._fallback_label, box.x, box.y)
        return True
