import struct
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from traa.geometry import DesktopSize
from traa.pixels import (
    PIXEL_RGB_WHITE,
    PIXEL_RGBA_BLACK,
    PIXEL_RGBA_TRANSPARENT,
    PIXEL_RGBA_WHITE,
    add_cursor_outline,
    alpha_mul,
    combine_mask,
    dump_bmp,
    encode_bmp,
    has_alpha_channel,
    rgba,
)
from traa.types import Size


def bgra(b, g, r, a):
    return int.from_bytes(bytes([b, g, r, a]), sys.byteorder)


def channels(pixel):
    return tuple(pixel.to_bytes(4, sys.byteorder))


byte = st.integers(min_value=0, max_value=255)


@given(byte, byte, byte, byte)
def test_rgba_memory_layout(r, g, b, a):
    assert tuple(rgba(r, g, b, a).to_bytes(4, sys.byteorder)) == (r, g, b, a)


def test_named_colours():
    assert rgba(0, 0, 0, 0) == PIXEL_RGBA_TRANSPARENT == 0
    assert rgba(0, 0, 0, 255) == PIXEL_RGBA_BLACK
    assert rgba(255, 255, 255, 255) == PIXEL_RGBA_WHITE
    assert channels(PIXEL_RGBA_BLACK) == (0, 0, 0, 255)
    assert channels(PIXEL_RGBA_WHITE) == (255, 255, 255, 255)


def test_outline_surrounds_black_pixel():
    t, k = PIXEL_RGBA_TRANSPARENT, PIXEL_RGBA_BLACK
    pixels = [t, t, t, t, k, t, t, t, t]
    add_cursor_outline(3, 3, pixels)
    w = PIXEL_RGBA_WHITE
    assert pixels == [t, w, t, w, k, w, t, w, t]


def test_outline_leaves_image_without_black_alone():
    pixels = [PIXEL_RGBA_TRANSPARENT] * 4
    add_cursor_outline(2, 2, pixels)
    assert pixels == [PIXEL_RGBA_TRANSPARENT] * 4


def test_outline_rejects_short_buffer():
    with pytest.raises(ValueError):
        add_cursor_outline(3, 3, [0] * 4)


@given(byte, byte, byte)
def test_alpha_mul_opaque_unchanged(b, g, r):
    pixels = [bgra(b, g, r, 255)]
    alpha_mul(pixels, 1, 1)
    assert channels(pixels[0]) == (b, g, r, 255)


@given(byte, byte, byte)
def test_alpha_mul_transparent_clears_colour(b, g, r):
    pixels = [bgra(b, g, r, 0)]
    alpha_mul(pixels, 1, 1)
    assert pixels == [0]


@given(byte, byte, byte, byte)
def test_alpha_mul_never_brightens(b, g, r, a):
    pixels = [bgra(b, g, r, a)]
    alpha_mul(pixels, 1, 1)
    nb, ng, nr, na = channels(pixels[0])
    assert na == a
    assert nb <= b and ng <= g and nr <= r


def test_has_alpha_channel_found():
    pixels = [bgra(1, 2, 3, 0), bgra(0, 0, 0, 7)]
    assert has_alpha_channel(pixels, 2, 2, 1) is True


def test_has_alpha_channel_ignores_stride_padding():
    pixels = [bgra(9, 9, 9, 0), bgra(0, 0, 0, 255), bgra(5, 5, 5, 0), bgra(0, 0, 0, 255)]
    assert has_alpha_channel(pixels, 2, 1, 2) is False
    assert has_alpha_channel(pixels, 2, 2, 2) is True


def test_has_alpha_channel_rejects_small_stride():
    with pytest.raises(ValueError):
        has_alpha_channel([0, 0], 1, 2, 1)


def test_combine_mask_cases():
    color = [0, PIXEL_RGB_WHITE, 0]
    mask = [0, 0, PIXEL_RGB_WHITE]
    assert combine_mask(color, mask, 3, 1) is False
    assert color == [PIXEL_RGBA_BLACK, PIXEL_RGBA_BLACK ^ PIXEL_RGB_WHITE, PIXEL_RGBA_TRANSPARENT]


def test_combine_mask_inverting_pixel_gets_outline():
    color = [0, 0, bgra(1, 2, 3, 0)]
    mask = [0, PIXEL_RGB_WHITE, PIXEL_RGB_WHITE]
    assert combine_mask(color, mask, 3, 1) is True
    assert color == [PIXEL_RGBA_BLACK, PIXEL_RGBA_WHITE, PIXEL_RGBA_BLACK]


def test_combine_mask_rejects_short_mask():
    with pytest.raises(ValueError):
        combine_mask([0, 0], [0], 2, 1)


def test_encode_bmp_headers():
    data = bytes(range(2 * 3 * 4))
    encoded = encode_bmp(data, Size(2, 3))
    assert encoded[:2] == b"BM"
    file_size, _, _, offset = struct.unpack_from("<IHHI", encoded, 2)
    assert offset == 54
    assert file_size == len(encoded) == 54 + len(data)
    header_size, width, height, planes, bits, compression, image_size = struct.unpack_from(
        "<IiiHHII", encoded, 14
    )
    assert (header_size, width, height, planes, bits, compression) == (40, 2, -3, 1, 32, 0)
    assert image_size == len(data)
    assert encoded[54:] == data


def test_encode_bmp_truncates_extra_data():
    data = bytes(20)
    encoded = encode_bmp(data, DesktopSize(2, 2))
    assert len(encoded) == 54 + 16


@pytest.mark.parametrize("size", [Size(0, 2), Size(2, 0), Size(-1, 2)])
def test_encode_bmp_rejects_empty_size(size):
    with pytest.raises(ValueError):
        encode_bmp(bytes(64), size)


def test_encode_bmp_rejects_short_data():
    with pytest.raises(ValueError):
        encode_bmp(bytes(15), Size(2, 2))


def test_dump_bmp_writes_encoding(tmp_path):
    data = bytearray(range(16))
    target = tmp_path / "image.bmp"
    dump_bmp(data, Size(2, 2), str(target))
    assert target.read_bytes() == encode_bmp(data, Size(2, 2))


def test_dump_bmp_invalid_size_writes_nothing(tmp_path):
    target = tmp_path / "image.bmp"
    with pytest.raises(ValueError):
        dump_bmp(bytes(16), Size(0, 0), str(target))
    assert not target.exists()