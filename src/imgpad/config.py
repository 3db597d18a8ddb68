"""Configuration for a single conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import WHITE, Color, parse_color
from .padding import Padding, parse_padding

DEFAULT_BACKGROUND = "white"
DEFAULT_PADDING = ""


@dataclass(frozen=True)
class ConversionConfig:
    """Background and padding, parsed once and read-only afterwards."""

    background: Color = WHITE
    padding: Padding = field(default_factory=Padding)

    @classmethod
    def from_options(
        cls,
        bg: str = DEFAULT_BACKGROUND,
        padding: str = DEFAULT_PADDING,
    ) -> ConversionConfig:
        """
        Build from raw option strings.

        Raises InvalidColorError or InvalidPaddingError.
        """
        return cls(
            background=parse_color(bg),
            padding=parse_padding(padding),
        )
