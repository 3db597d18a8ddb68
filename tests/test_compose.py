import numpy as np
import pytest
from PIL import Image

from imgpad.colors import TRANSPARENT, Color
from imgpad.compose import canvas_size, composite
from imgpad.errors import CompositeError, InvalidCanvasError
from imgpad.padding import Padding

RED = Color(255, 0, 0)


def _gradient(width: int = 10, height: int = 8) -> Image.Image:
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[..., 0] = np.arange(width, dtype=np.uint8)[None, :] * 20
    arr[..., 1] = np.arange(height, dtype=np.uint8)[:, None] * 30
    arr[..., 2] = 77
    return Image.fromarray(arr)


def test_canvas_size():
    assert canvas_size((10, 8), Padding(1, 2, 3, 4)) == (16, 12)


def test_zero_padding_reproduces_opaque_source():
    src = _gradient()
    out = composite(src, RED, Padding())

    assert out.size == src.size
    assert out.mode == "RGBA"
    assert np.array_equal(np.asarray(out.convert("RGB")), np.asarray(src))
    assert (np.asarray(out)[..., 3] == 255).all()


def test_padding_regions_hold_fill():
    src = _gradient()
    out = np.asarray(composite(src, RED, Padding(top=1, right=2, bottom=3, left=4)))

    assert out.shape == (8 + 4, 10 + 6, 4)
    red = np.array([255, 0, 0, 255], dtype=np.uint8)
    assert (out[:1] == red).all()
    assert (out[-3:] == red).all()
    assert (out[:, :4] == red).all()
    assert (out[:, -2:] == red).all()
    assert np.array_equal(out[1:9, 4:14, :3], np.asarray(src))


def test_transparent_fill():
    src = _gradient()
    out = np.asarray(composite(src, TRANSPARENT, Padding(2, 2, 2, 2)))

    assert (out[:2, :, 3] == 0).all()
    assert (out[2:10, 2:12, 3] == 255).all()


def test_source_alpha_blends_over_fill():
    src = Image.new("RGBA", (4, 4), (0, 0, 255, 128))
    out = composite(src, RED, Padding(1, 1, 1, 1))

    r, g, b, a = out.getpixel((2, 2))
    assert a == 255
    assert g == 0
    assert abs(r - 127) <= 1
    assert abs(b - 128) <= 1
    assert out.getpixel((0, 0)) == (255, 0, 0, 255)


def test_fully_transparent_source_shows_fill():
    src = Image.new("RGBA", (4, 4), (9, 9, 9, 0))
    out = composite(src, RED, Padding())
    assert set(out.getdata()) == {(255, 0, 0, 255)}


def test_source_alpha_kept_over_transparent_fill():
    src = Image.new("RGBA", (3, 3), (0, 0, 255, 128))
    out = composite(src, TRANSPARENT, Padding())
    r, g, b, a = out.getpixel((1, 1))
    assert a == 128
    assert abs(b - 255) <= 1


def test_palette_source_is_converted():
    src = Image.new("P", (3, 3), 0)
    src.putpalette([10, 20, 30] + [0, 0, 0] * 255)
    out = composite(src, RED, Padding(1, 1, 1, 1))
    assert out.getpixel((1, 1)) == (10, 20, 30, 255)


def test_negative_padding_crops_source():
    src = _gradient()
    out = composite(src, RED, Padding(-2, -2, -2, -2))

    assert out.size == (6, 4)
    assert np.array_equal(np.asarray(out)[..., :3], np.asarray(src)[2:6, 2:8])


def test_negative_left_shifts_source():
    src = _gradient()
    out = np.asarray(composite(src, RED, Padding(0, 5, 0, -5)))

    assert out.shape[:2] == (8, 10)
    assert np.array_equal(out[:, :5, :3], np.asarray(src)[:, 5:])
    assert (out[:, 5:] == np.array([255, 0, 0, 255], dtype=np.uint8)).all()


def test_source_outside_canvas_leaves_fill():
    src = _gradient()
    out = composite(src, RED, Padding(0, 20, 0, -15))
    assert out.size == (15, 8)
    assert set(out.getdata()) == {(255, 0, 0, 255)}


def test_empty_canvas_is_allowed():
    out = composite(_gradient(), RED, Padding(0, -5, 0, -5))
    assert out.size == (0, 8)


def test_negative_canvas_raises():
    with pytest.raises(InvalidCanvasError) as exc_info:
        composite(_gradient(), RED, Padding(-10, -10, -10, -10))
    assert exc_info.value.size == (-10, -12)
    assert isinstance(exc_info.value, CompositeError)


def test_source_is_not_modified():
    src = Image.new("RGBA", (3, 3), (0, 0, 255, 128))
    before = list(src.getdata())
    composite(src, RED, Padding(1, 1, 1, 1))
    assert list(src.getdata()) == before


@pytest.mark.parametrize("mode", ["I;16", "I"])
def test_sixteen_bit_gray_is_scaled_to_eight_bits(mode):
    src = Image.new(mode, (4, 4), 0x8080)
    out = composite(src, RED, Padding())

    r, g, b, a = out.getpixel((0, 0))
    assert a == 255
    assert r == g == b
    assert abs(r - 128) <= 1


def test_sixteen_bit_extremes():
    src = Image.new("I;16", (2, 1))
    src.putpixel((0, 0), 0)
    src.putpixel((1, 0), 0xFFFF)
    out = composite(src, RED, Padding())

    assert out.getpixel((0, 0)) == (0, 0, 0, 255)
    assert out.getpixel((1, 0))[0] >= 254
