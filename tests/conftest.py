from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a solid-color image under tmp_path and return its path."""

    def _make(
        name: str,
        size: tuple[int, int] = (40, 30),
        color: tuple[int, ...] = (30, 120, 200),
        mode: str = "RGB",
    ) -> Path:
        path = tmp_path / name
        img = Image.new(mode, size, color)
        if path.suffix.lower() in (".jpg", ".jpeg"):
            img.save(path, format="JPEG", quality=95)
        else:
            img.save(path, format="PNG")
        return path

    return _make
