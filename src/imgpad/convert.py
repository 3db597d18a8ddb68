"""
Image conversion orchestration.

A conversion is one pass of:
1. Look up the route for (input format, output format)
2. Decode the input
3. Composite it onto a padded canvas filled per the route's policy
4. Encode to the output path, refusing to overwrite
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from PIL import Image

from .colors import TRANSPARENT, Color
from .compose import composite
from .config import ConversionConfig
from .errors import DecodeError, EncodeError, UnsupportedConversionError
from .formats import PIL_FORMATS, ImageFormat, detect_format

logger = logging.getLogger(__name__)

JPEG_QUALITY = 50


class FillPolicy(enum.Enum):
    """How the canvas behind the source is filled."""

    BACKGROUND = "background"
    TRANSPARENT = "transparent"

    def resolve(self, config: ConversionConfig) -> Color:
        if self is FillPolicy.BACKGROUND:
            return config.background
        return TRANSPARENT


@dataclass(frozen=True)
class Route:
    """A supported (source, target) pair and how to produce the target."""
    source: ImageFormat
    target: ImageFormat
    fill: FillPolicy
    save_options: dict[str, Any] = field(default_factory=dict)

    @property
    def output_mode(self) -> str:
        # JPEG has no alpha channel.
        return "RGB" if self.target == "jpeg" else "RGBA"


# The user's background only applies when the target can't hold alpha.
# PNG output always gets a transparent border.
ROUTES: dict[tuple[ImageFormat, ImageFormat], Route] = {
    ("png", "jpeg"): Route(
        source="png",
        target="jpeg",
        fill=FillPolicy.BACKGROUND,
        save_options={"quality": JPEG_QUALITY},
    ),
    ("jpeg", "png"): Route(
        source="jpeg",
        target="png",
        fill=FillPolicy.TRANSPARENT,
    ),
}


@dataclass
class ConversionResult:
    """Result of a conversion."""
    input_path: Path
    output_path: Path
    route: Route
    source_size: tuple[int, int]
    output_size: tuple[int, int]


def find_route(source: ImageFormat, target: ImageFormat) -> Route:
    """Raises UnsupportedConversionError if the pair has no route."""
    route = ROUTES.get((source, target))
    if route is None:
        raise UnsupportedConversionError(source, target)
    return route


def decode_image(path: Path, image_format: ImageFormat) -> Image.Image:
    """
    Read and fully decode an image of the given format.

    Raises:
        OSError: If the file can't be opened
        DecodeError: If the content isn't a valid image of that format, or is
            over Pillow's MAX_IMAGE_PIXELS limit
    """
    with open(path, "rb") as f:
        try:
            img = Image.open(f, formats=[PIL_FORMATS[image_format]])
            img.load()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(path, image_format, str(e) or type(e).__name__) from e

    logger.debug("Decoded %s: %dx%d %s", path.name, img.width, img.height, img.mode)
    return img


def encode_image(image: Image.Image, path: Path, route: Route) -> None:
    """
    Encode image to a new file at path.

    Raises:
        FileExistsError: If path already exists
        EncodeError: If the encoder rejects the image
    """
    if image.mode != route.output_mode:
        image = image.convert(route.output_mode)

    with open(path, "xb") as out:
        try:
            image.save(out, format=PIL_FORMATS[route.target], **route.save_options)
        except (OSError, ValueError, SystemError) as e:
            raise EncodeError(path, route.target, str(e) or type(e).__name__) from e

    logger.debug("Encoded %s as %s", path.name, route.target)


def convert_image(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    config: ConversionConfig,
) -> ConversionResult:
    """
    Convert input_path to output_path, padding the content per config.

    Only png -> jpeg and jpeg -> png are supported. The output file must
    not exist yet.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    route = find_route(detect_format(input_path), detect_format(output_path))
    logger.info(
        "Converting %s (%s) -> %s (%s)",
        input_path, route.source, output_path, route.target,
    )

    source = decode_image(input_path, route.source)
    fill = route.fill.resolve(config)
    canvas = composite(source, fill, config.padding)
    encode_image(canvas, output_path, route)

    result = ConversionResult(
        input_path=input_path,
        output_path=output_path,
        route=route,
        source_size=source.size,
        output_size=canvas.size,
    )
    logger.info(
        "Conversion complete: %dx%d -> %dx%d",
        *result.source_size, *result.output_size,
    )
    return result
