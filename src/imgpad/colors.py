"""
Background color parsing.

Accepts a handful of named colors or a hex string. The hex scan is
deliberately loose: it picks the first three two-character word tokens
out of the string, so "#ff8800", "ff8800" and "ff-88-00" all parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterator

from .errors import InvalidColorError

logger = logging.getLogger(__name__)

# ASCII word characters only, two at a time, non-overlapping.
_HEX_TOKEN = re.compile(r"[0-9A-Za-z_]{2}")
_CHANNELS = ("red", "green", "blue")


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color. Alpha defaults to opaque."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def is_opaque(self) -> bool:
        return self.a == 255


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": Color(r=255),
    "green": Color(g=255),
    "blue": Color(b=255),
}


def iter_hex_tokens(text: str) -> Iterator[str]:
    """Yield the two-character word tokens of text, left to right."""
    for match in _HEX_TOKEN.finditer(text):
        yield match.group(0)


def parse_hex_color(spec: str) -> Color:
    """
    Parse an RRGGBB hex color, with or without a leading '#'.

    Raises InvalidColorError: fewer than three tokens, or a token that
    isn't hexadecimal.
    """
    tokens = list(islice(iter_hex_tokens(spec.removeprefix("#")), 3))
    if len(tokens) < 3:
        raise InvalidColorError(
            spec, f"expected 3 hex pairs, found {len(tokens)}"
        )

    values: list[int] = []
    for channel, token in zip(_CHANNELS, tokens):
        try:
            values.append(int(token, 16))
        except ValueError as e:
            raise InvalidColorError(
                spec, f"{channel} channel {token!r} is not hexadecimal"
            ) from e

    return Color(*values)


def parse_color(spec: str) -> Color:
    """Parse a named color (case-insensitive) or fall back to hex."""
    named = NAMED_COLORS.get(spec.lower())
    if named is not None:
        logger.debug("Color %r -> named %s", spec, named)
        return named

    color = parse_hex_color(spec)
    logger.debug("Color %r -> hex %s", spec, color)
    return color
