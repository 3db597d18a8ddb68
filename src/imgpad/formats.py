"""File format detection from path extensions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

ImageFormat = Literal["png", "jpeg", "unknown"]

EXTENSION_FORMATS: dict[str, ImageFormat] = {
    ".png": "png",
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
}

# Pillow's names for the formats we read and write.
PIL_FORMATS: dict[str, str] = {
    "png": "PNG",
    "jpeg": "JPEG",
}


def _extension(path: str | os.PathLike[str]) -> str:
    # Unlike Path.suffix, a dotfile like ".png" counts as an extension.
    _, dot, ext = Path(path).name.rpartition(".")
    return f".{ext}".lower() if dot else ""


def detect_format(path: str | os.PathLike[str]) -> ImageFormat:
    """Classify a path by its extension. Unknown is a result, not an error."""
    return EXTENSION_FORMATS.get(_extension(path), "unknown")
