"""
imgpad - pad and convert images between PNG and JPEG.

png -> jpeg fills the padding with the requested background color.
jpeg -> png always leaves the padding transparent.

Deployment:
    pip install imgpad
    imgpad --bg red --padding 10 in.png out.jpg
"""

from .colors import Color, iter_hex_tokens, parse_color, parse_hex_color
from .compose import canvas_size, composite
from .config import ConversionConfig
from .convert import (
    JPEG_QUALITY,
    ROUTES,
    ConversionResult,
    FillPolicy,
    Route,
    convert_image,
    find_route,
)
from .errors import (
    CompositeError,
    DecodeError,
    EncodeError,
    ImgpadError,
    InvalidCanvasError,
    InvalidColorError,
    InvalidPaddingError,
    UnsupportedConversionError,
)
from .formats import ImageFormat, detect_format
from .padding import Padding, parse_padding

__all__ = [
    # Parsing
    "Color",
    "parse_color",
    "parse_hex_color",
    "iter_hex_tokens",
    "Padding",
    "parse_padding",
    "ImageFormat",
    "detect_format",
    # Pipeline
    "ConversionConfig",
    "canvas_size",
    "composite",
    "JPEG_QUALITY",
    "ROUTES",
    "FillPolicy",
    "Route",
    "ConversionResult",
    "find_route",
    "convert_image",
    # Errors
    "ImgpadError",
    "InvalidColorError",
    "InvalidPaddingError",
    "UnsupportedConversionError",
    "CompositeError",
    "InvalidCanvasError",
    "DecodeError",
    "EncodeError",
]
