"""
SVG rasterizer backed by cairosvg.

Converts the bundled vector brand asset into PNG bytes the canvas can
embed. cairosvg is imported on first use because it loads libcairo at
import time.
"""

from pathlib import Path

from laundry_invoice.config import get_logger
from laundry_invoice.core.exceptions import AssetUnavailableError
from laundry_invoice.core.interfaces.canvas import IAssetRasterizer

logger = get_logger(__name__)

# Pixels per point; keeps the embedded mark crisp when printed.
RASTER_SCALE = 4


class CairoSvgRasterizer(IAssetRasterizer):
    """Rasterize SVG files with cairosvg."""

    def __init__(self, scale: int = RASTER_SCALE):
        self._scale = scale

    def rasterize(self, path: Path, width_px: int, height_px: int) -> bytes:
        if not path.is_file():
            raise AssetUnavailableError(str(path), "file not found")

        import cairosvg

        png = cairosvg.svg2png(
            url=str(path),
            output_width=width_px * self._scale,
            output_height=height_px * self._scale,
        )
        if not png:
            raise AssetUnavailableError(str(path), "rasterizer returned no data")

        logger.debug(
            "brand_asset_rasterized",
            path=str(path),
            width_px=width_px * self._scale,
            height_px=height_px * self._scale,
        )
        return png
