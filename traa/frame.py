"""Captured desktop frames holding BGRA pixel data."""

from __future__ import annotations

import math
import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

from traa.geometry import DesktopRect, DesktopSize, DesktopVector
from traa.region import DesktopRegion
from traa.types import ScreenCapturerId

PixelBuffer = Union[bytearray, memoryview]

# Platform handle value meaning "no handle".
INVALID_HANDLE: Any = None if os.name == "nt" else -1

_STANDARD_DPI = 96.0
# Only these platforms report a DPI that maps logical to physical pixels.
_SCALES_BY_DPI = sys.platform in ("win32", "darwin")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class SharedMemory:
    """A buffer shared with other processes, with its platform handle and an id."""

    data: PixelBuffer
    size: int
    handle: Any = INVALID_HANDLE
    id: int = 0


class SharedMemoryFactory(ABC):
    """Creates :class:`SharedMemory` buffers for frames."""

    @abstractmethod
    def create_shared_memory(self, size: int) -> Optional[SharedMemory]:
        """Return a buffer of ``size`` bytes, or ``None`` when none can be made."""


class DesktopFrame:
    """A video frame captured from the screen; pixels are always 4-byte BGRA."""

    BYTES_PER_PIXEL = 4

    def __init__(
        self,
        size: DesktopSize,
        stride: int,
        data: PixelBuffer,
        shared_memory: Optional[SharedMemory] = None,
    ) -> None:
        view = memoryview(data)
        if view.readonly:
            raise TypeError("frame data must be a writable buffer")
        if not size.is_empty() and view.nbytes < stride * size.height:
            raise ValueError("frame data is smaller than stride * height")
        self._size = size
        self._stride = stride
        self._data = data
        self._shared_memory = shared_memory

        self.updated_region = DesktopRegion()
        self.top_left = DesktopVector()
        self.dpi = DesktopVector()
        self.may_contain_cursor = False
        self.capture_time_ms = 0
        self.capturer_id = ScreenCapturerId.UNKNOWN
        self.icc_profile = b""

    @property
    def size(self) -> DesktopSize:
        """Size in physical pixels, as laid out in the buffer."""
        return self._size

    @property
    def stride(self) -> int:
        """Distance in bytes between two neighbouring rows."""
        return self._stride

    @property
    def data(self) -> PixelBuffer:
        return self._data

    @property
    def shared_memory(self) -> Optional[SharedMemory]:
        return self._shared_memory

    def _bytes(self) -> memoryview:
        return memoryview(self._data).cast("B")

    def rect(self) -> DesktopRect:
        """The frame's area in desktop coordinates; only the size is scaled."""
        scale = self.scale_factor()
        return DesktopRect.make_xywh(
            self.top_left.x,
            self.top_left.y,
            int(self._size.width / scale),
            int(self._size.height / scale),
        )

    def scale_factor(self) -> float:
        """Ratio of physical pixels to logical pixels, taken from the DPI."""
        scale = 1.0
        if _SCALES_BY_DPI and not self.dpi.is_zero() and self.dpi.x == self.dpi.y:
            scale = self.dpi.x / _STANDARD_DPI
        return scale

    def offset_at(self, pos: DesktopVector) -> int:
        """Byte offset of the pixel at ``pos`` in the data buffer."""
        return self._stride * pos.y + self.BYTES_PER_PIXEL * pos.x

    def copy_pixels_from(
        self, src_buffer: PixelBuffer, src_stride: int, dest_rect: DesktopRect
    ) -> None:
        """Copy rows from ``src_buffer`` into ``dest_rect``, which must lie within the frame."""
        if not DesktopRect.make_size(self._size).contains(dest_rect):
            raise ValueError("destination rectangle lies outside the frame")
        if dest_rect.is_empty():
            return
        row_bytes = self.BYTES_PER_PIXEL * dest_rect.width
        src = memoryview(src_buffer).cast("B")
        if len(src) < src_stride * (dest_rect.height - 1) + row_bytes:
            raise ValueError("source buffer is too small for the destination rectangle")
        dst = self._bytes()
        dst_offset = self.offset_at(dest_rect.top_left)
        src_offset = 0
        for _ in range(dest_rect.height):
            dst[dst_offset : dst_offset + row_bytes] = src[src_offset : src_offset + row_bytes]
            dst_offset += self._stride
            src_offset += src_stride

    def copy_pixels_from_frame(
        self, src_frame: DesktopFrame, src_pos: DesktopVector, dest_rect: DesktopRect
    ) -> None:
        """Copy pixels starting at ``src_pos`` of ``src_frame`` into ``dest_rect``."""
        source = src_frame._bytes()[src_frame.offset_at(src_pos) :]
        self.copy_pixels_from(source, src_frame.stride, dest_rect)

    def copy_intersecting_pixels_from(
        self, src_frame: DesktopFrame, horizontal_scale: float, vertical_scale: float
    ) -> bool:
        """Copy the part of ``src_frame`` that overlaps this frame; false if none does.

        The scales relate pixel space to offset space: an offset between the
        two origins is multiplied by them before the overlap is found.
        """
        origin = self.top_left
        src_offset = src_frame.top_left.subtract(origin)

        intersection = src_frame.rect()
        if horizontal_scale != 1.0 or vertical_scale != 1.0:
            adjustment = DesktopVector(
                _round_half_away((horizontal_scale - 1.0) * src_offset.x),
                _round_half_away((vertical_scale - 1.0) * src_offset.y),
            )
            intersection.translate(adjustment)
            src_offset = src_offset.add(adjustment)

        intersection.intersect_with(self.rect())
        if intersection.is_empty():
            return False

        intersection.translate(-origin.x, -origin.y)
        src_pos = DesktopVector(max(0, -src_offset.x), max(0, -src_offset.y))
        self.copy_pixels_from_frame(src_frame, src_pos, intersection)
        return True

    def copy_frame_info_from(self, other: DesktopFrame) -> None:
        """Copy everything but the size, stride and pixel data from ``other``."""
        self.dpi = other.dpi
        self.capture_time_ms = other.capture_time_ms
        self.capturer_id = other.capturer_id
        self.updated_region = other.updated_region.copy()
        self.top_left = other.top_left
        self.icc_profile = bytes(other.icc_profile)
        self.may_contain_cursor = other.may_contain_cursor

    def move_frame_info_from(self, other: DesktopFrame) -> None:
        """Like :meth:`copy_frame_info_from`, but takes ``other``'s updated region by swapping."""
        self.dpi = other.dpi
        self.capture_time_ms = other.capture_time_ms
        self.capturer_id = other.capturer_id
        self.updated_region.swap(other.updated_region)
        self.top_left = other.top_left
        self.icc_profile = bytes(other.icc_profile)
        self.may_contain_cursor = other.may_contain_cursor

    def frame_data_is_black(self) -> bool:
        """Whether the first width * height pixels are all zero; false for an empty frame."""
        if self._size.is_empty():
            return False
        count = self._size.width * self._size.height * self.BYTES_PER_PIXEL
        return not any(self._bytes()[:count])

    def set_frame_data_to_black(self) -> None:
        """Set every byte of the frame's rows to zero."""
        count = self._stride * self._size.height
        if count > 0:
            self._bytes()[:count] = bytes(count)


class BasicDesktopFrame(DesktopFrame):
    """A frame owning a zero-filled, tightly packed buffer."""

    def __init__(self, size: DesktopSize) -> None:
        if size.width < 0 or size.height < 0:
            raise ValueError("frame size must not be negative")
        stride = self.BYTES_PER_PIXEL * size.width
        super().__init__(size, stride, bytearray(stride * size.height), None)

    @classmethod
    def copy_of(cls, frame: DesktopFrame) -> BasicDesktopFrame:
        """A new frame holding a copy of ``frame``'s pixels and information."""
        result = cls(frame.size)
        if frame.size.width and frame.size.height:
            result.copy_pixels_from(
                frame.data, frame.stride, DesktopRect.make_size(frame.size)
            )
        result.copy_frame_info_from(frame)
        return result