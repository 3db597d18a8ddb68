"""Padding spec parsing, CSS shorthand style."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import InvalidPaddingError

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Padding:
    """
    Border widths in pixels, in CSS order.

    Values are not range checked. Negative padding shrinks the canvas
    and crops the source.
    """
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    @property
    def offset(self) -> tuple[int, int]:
        """Where the source's top-left corner lands on the canvas."""
        return (self.left, self.top)


def _parse_edge(spec: str, token: str, edge: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise InvalidPaddingError(
            spec, f"{token!r} is not an integer", edge=edge
        )
    return int(token)


def parse_padding(spec: str) -> Padding:
    """
    Expand a padding spec into four edges.

    "" -> 0 everywhere, "v" -> all edges, "y,x" -> vertical/horizontal,
    "t,r,b,l" -> each edge. Any other token count is rejected.
    """
    if spec == "":
        return Padding()

    tokens = spec.split(",")

    if len(tokens) == 1:
        v = _parse_edge(spec, tokens[0], "uniform")
        padding = Padding(v, v, v, v)
    elif len(tokens) == 2:
        y = _parse_edge(spec, tokens[0], "vertical")
        x = _parse_edge(spec, tokens[1], "horizontal")
        padding = Padding(top=y, right=x, bottom=y, left=x)
    elif len(tokens) == 4:
        padding = Padding(
            top=_parse_edge(spec, tokens[0], "top"),
            right=_parse_edge(spec, tokens[1], "right"),
            bottom=_parse_edge(spec, tokens[2], "bottom"),
            left=_parse_edge(spec, tokens[3], "left"),
        )
    else:
        raise InvalidPaddingError(
            spec, f"expected 0, 1, 2 or 4 values, got {len(tokens)}"
        )

    logger.debug("Padding %r -> %s", spec, padding)
    return padding
