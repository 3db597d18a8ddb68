"""
Exceptions raised by the imgpad conversion pipeline.

Every failure is terminal for a conversion. Plain I/O failures (missing
input, existing output) are not wrapped and surface as the usual OSError
subclasses.
"""

from __future__ import annotations

from pathlib import Path


class ImgpadError(Exception):
    """Base exception for imgpad."""
    pass


class InvalidColorError(ImgpadError, ValueError):
    """Raised when a background color spec can't be parsed."""

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"invalid color {spec!r}: {reason}")


class InvalidPaddingError(ImgpadError, ValueError):
    """Raised when a padding spec can't be parsed."""

    def __init__(self, spec: str, reason: str, edge: str | None = None):
        self.spec = spec
        self.edge = edge
        self.reason = reason
        if edge is None:
            message = f"invalid padding {spec!r}: {reason}"
        else:
            message = f"parse {edge} padding: {reason}"
        super().__init__(message)


class UnsupportedConversionError(ImgpadError):
    """Raised when no route exists between the detected formats."""

    def __init__(self, source_format: str, target_format: str):
        self.source_format = source_format
        self.target_format = target_format
        super().__init__(
            f"unsupported conversion: {source_format} to {target_format}"
        )


class CompositeError(ImgpadError):
    """Raised when the output canvas can't be built."""
    pass


class InvalidCanvasError(CompositeError, ValueError):
    """Raised when padding produces a canvas with a negative dimension."""

    def __init__(self, size: tuple[int, int]):
        self.size = size
        super().__init__(f"canvas size {size[0]}x{size[1]} is negative")


class DecodeError(ImgpadError):
    """Raised when the input file can't be decoded as its expected format."""

    def __init__(self, path: Path, image_format: str, reason: str):
        self.path = path
        self.image_format = image_format
        super().__init__(f"decode {image_format} {path}: {reason}")


class EncodeError(ImgpadError):
    """Raised when the output image can't be encoded."""

    def __init__(self, path: Path, image_format: str, reason: str):
        self.path = path
        self.image_format = image_format
        super().__init__(f"encode {image_format} {path}: {reason}")
