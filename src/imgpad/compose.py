"""
Canvas compositing.

The canvas is filled first, then the source is drawn over it. Padding
therefore shows the pure fill color and the source region shows the fill
blended under any source transparency.
"""

from __future__ import annotations

import logging

from PIL import Image

from .colors import Color
from .errors import InvalidCanvasError
from .padding import Padding

logger = logging.getLogger(__name__)


def canvas_size(source_size: tuple[int, int], padding: Padding) -> tuple[int, int]:
    """Size of the padded canvas for a source of the given size."""
    width, height = source_size
    return (width + padding.horizontal, height + padding.vertical)


def _visible_source_box(
    source_size: tuple[int, int],
    size: tuple[int, int],
    offset: tuple[int, int],
) -> tuple[int, int, int, int] | None:
    """Part of the source that lands on the canvas, in source coordinates."""
    src_w, src_h = source_size
    dst_w, dst_h = size
    x, y = offset

    left = max(0, -x)
    top = max(0, -y)
    right = min(src_w, dst_w - x)
    bottom = min(src_h, dst_h - y)

    if right <= left or bottom <= top:
        return None
    return (left, top, right, bottom)


def _to_rgba(source: Image.Image) -> Image.Image:
    if source.mode == "RGBA":
        return source
    if source.mode == "I" or source.mode.startswith("I;16"):
        # 16-bit grayscale; Pillow clips to 255 on convert, so scale down first.
        eight_bit = source.convert("I").point(lambda v: v / 256).convert("L")
        return eight_bit.convert("RGBA")
    return source.convert("RGBA")


def composite(source: Image.Image, fill: Color, padding: Padding) -> Image.Image:
    """
    Return a new RGBA canvas with source drawn over a fill at the padding offset.

    Sources without alpha are treated as opaque. Raises InvalidCanvasError
    when the padding makes a dimension negative.
    """
    size = canvas_size(source.size, padding)
    if size[0] < 0 or size[1] < 0:
        raise InvalidCanvasError(size)
    if size[0] == 0 or size[1] == 0:
        logger.warning("Padding %s produces an empty %dx%d canvas", padding, *size)

    canvas = Image.new("RGBA", size, fill.as_tuple())

    box = _visible_source_box(source.size, size, padding.offset)
    if box is None:
        logger.debug("Source %dx%d falls outside the canvas", *source.size)
        return canvas

    overlay = _to_rgba(source)
    if box != (0, 0) + overlay.size:
        overlay = overlay.crop(box)

    dest = (max(0, padding.left), max(0, padding.top))
    canvas.alpha_composite(overlay, dest=dest)

    logger.debug(
        "Composited %dx%d %s source onto %dx%d canvas at %s",
        source.width, source.height, source.mode, size[0], size[1], dest,
    )
    return canvas
