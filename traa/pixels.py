"""Pixel helpers for 32-bit cursor and window images, and BMP output.

Pixels are 32-bit integers whose bytes, in native order, hold blue, green,
red and alpha, the layout of a BGRA frame buffer.
"""

from __future__ import annotations

import struct
import sys
from typing import MutableSequence, Protocol, Sequence, Union

BYTES_PER_PIXEL = 4

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_BI_RGB = 0

BmpData = Union[bytes, bytearray, memoryview]


class _HasSize(Protocol):
    width: int
    height: int


def rgba(r: int, g: int, b: int, a: int) -> int:
    """A 32-bit pixel whose bytes in memory are ``r, g, b, a``."""
    if sys.byteorder == "little":
        return ((a << 24) & 0xFF000000) | ((b << 16) & 0xFF0000) | ((g << 8) & 0xFF00) | (r & 0xFF)
    return ((r << 24) & 0xFF000000) | ((g << 16) & 0xFF0000) | ((b << 8) & 0xFF00) | (a & 0xFF)


PIXEL_RGBA_BLACK = rgba(0, 0, 0, 0xFF)
PIXEL_RGBA_WHITE = rgba(0xFF, 0xFF, 0xFF, 0xFF)
PIXEL_RGBA_TRANSPARENT = rgba(0, 0, 0, 0)
# A white mask pixel as the system reports it: red, green and blue set, alpha clear.
PIXEL_RGB_WHITE = 0x00FFFFFF


def _channels(pixel: int) -> bytes:
    return (pixel & 0xFFFFFFFF).to_bytes(4, sys.byteorder)


def _pixel(channels: Sequence[int]) -> int:
    return int.from_bytes(bytes(channels), sys.byteorder)


def _check_area(pixels: Sequence[int], width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    if len(pixels) < width * height:
        raise ValueError("pixel buffer is smaller than width * height")


def add_cursor_outline(width: int, height: int, pixels: MutableSequence[int]) -> None:
    """Turn transparent pixels next to black ones white, in place.

    This outlines a cursor so it stays visible on dark backgrounds.
    """
    _check_area(pixels, width, height)
    for y in range(height):
        for x in range(width):
            index = y * width + x
            if pixels[index] != PIXEL_RGBA_TRANSPARENT:
                continue
            if (
                (y > 0 and pixels[index - width] == PIXEL_RGBA_BLACK)
                or (y < height - 1 and pixels[index + width] == PIXEL_RGBA_BLACK)
                or (x > 0 and pixels[index - 1] == PIXEL_RGBA_BLACK)
                or (x < width - 1 and pixels[index + 1] == PIXEL_RGBA_BLACK)
            ):
                pixels[index] = PIXEL_RGBA_WHITE


def alpha_mul(pixels: MutableSequence[int], width: int, height: int) -> None:
    """Premultiply blue, green and red of each pixel by its alpha, in place."""
    _check_area(pixels, width, height)
    for index in range(width * height):
        blue, green, red, alpha = _channels(pixels[index])
        pixels[index] = _pixel(
            (blue * alpha // 0xFF, green * alpha // 0xFF, red * alpha // 0xFF, alpha)
        )


def has_alpha_channel(pixels: Sequence[int], stride: int, width: int, height: int) -> bool:
    """Whether any pixel in the ``width`` x ``height`` area has a non-zero alpha.

    ``stride`` is the distance between rows, counted in pixels.
    """
    if stride < width:
        raise ValueError("stride must not be smaller than width")
    for y in range(height):
        row = y * stride
        if any(_channels(pixel)[3] for pixel in pixels[row : row + width]):
            return True
    return False


def combine_mask(
    color: MutableSequence[int], mask: Sequence[int], width: int, height: int
) -> bool:
    """Rebuild transparency of ``color`` from a monochrome ``mask``, in place.

    Where the mask is white the pixel becomes transparent if it was black, and
    black otherwise (a screen-inverting pixel, which gets an outline). Where the
    mask is black the pixel is made opaque. Returns whether an outline was added.
    """
    _check_area(color, width, height)
    _check_area(mask, width, height)
    add_outline = False
    for index in range(width * height):
        if mask[index] == PIXEL_RGB_WHITE:
            if color[index] != 0:
                add_outline = True
                color[index] = PIXEL_RGBA_BLACK
            else:
                color[index] = PIXEL_RGBA_TRANSPARENT
        else:
            color[index] = PIXEL_RGBA_BLACK ^ color[index]
    if add_outline:
        add_cursor_outline(width, height, color)
    return add_outline


def encode_bmp(data: BmpData, size: _HasSize) -> bytes:
    """Encode tightly packed 32-bit BGRA rows as a top-down BMP file."""
    width, height = size.width, size.height
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    pixel_bytes = width * height * BYTES_PER_PIXEL
    payload = memoryview(data).cast("B")
    if len(payload) < pixel_bytes:
        raise ValueError("image data is smaller than width * height * 4")

    offset = _FILE_HEADER.size + _INFO_HEADER.size
    file_header = _FILE_HEADER.pack(b"BM", offset + pixel_bytes, 0, 0, offset)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size, width, -height, 1, 32, _BI_RGB, pixel_bytes, 0, 0, 0, 0
    )
    return file_header + info_header + bytes(payload[:pixel_bytes])


def dump_bmp(data: BmpData, size: _HasSize, file_name: str) -> None:
    """Write the image as a BMP file at ``file_name``."""
    encoded = encode_bmp(data, size)
    with open(file_name, "wb") as stream:
        stream.write(encoded)