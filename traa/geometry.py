"""Integer geometry used for screens, windows and frames."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

from traa.types import Point, Rect, Size


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class DesktopVector:
    """A 2D offset or position."""

    x: int = 0
    y: int = 0

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def add(self, other: DesktopVector) -> DesktopVector:
        return DesktopVector(self.x + other.x, self.y + other.y)

    def subtract(self, other: DesktopVector) -> DesktopVector:
        return DesktopVector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> DesktopVector:
        return DesktopVector(-self.x, -self.y)

    def to_point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class DesktopSize:
    """Size of a screen, window or frame."""

    width: int = 0
    height: int = 0

    @classmethod
    def from_size(cls, size: Size) -> DesktopSize:
        return cls(size.width, size.height)

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def to_size(self) -> Size:
        return Size(self.width, self.height)


@dataclass
class DesktopRect:
    """A rectangle on the screen, given by its edges; right and bottom are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def make_size(cls, size: DesktopSize) -> DesktopRect:
        return cls(0, 0, size.width, size.height)

    @classmethod
    def make_wh(cls, width: int, height: int) -> DesktopRect:
        return cls(0, 0, width, height)

    @classmethod
    def make_xywh(cls, x: int, y: int, width: int, height: int) -> DesktopRect:
        return cls(x, y, x + width, y + height)

    @classmethod
    def make_ltrb(cls, left: int, top: int, right: int, bottom: int) -> DesktopRect:
        return cls(left, top, right, bottom)

    @classmethod
    def make_origin_size(cls, origin: DesktopVector, size: DesktopSize) -> DesktopRect:
        return cls.make_xywh(origin.x, origin.y, size.width, size.height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def set_width(self, width: int) -> None:
        self.right = self.left + width

    def set_height(self, height: int) -> None:
        self.bottom = self.top + height

    @property
    def top_left(self) -> DesktopVector:
        return DesktopVector(self.left, self.top)

    @property
    def size(self) -> DesktopSize:
        return DesktopSize(self.width, self.height)

    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def contains(self, other: Union[DesktopVector, DesktopRect]) -> bool:
        """Whether a point lies inside, or a rectangle lies wholly inside, this rectangle."""
        if isinstance(other, DesktopVector):
            return self.left <= other.x < self.right and self.top <= other.y < self.bottom
        if isinstance(other, DesktopRect):
            return (
                other.left >= self.left
                and other.right <= self.right
                and other.top >= self.top
                and other.bottom <= self.bottom
            )
        raise TypeError(f"cannot test containment of {type(other).__name__}")

    def intersect_with(self, other: DesktopRect) -> None:
        """Shrink to the intersection with ``other``; an empty result becomes all zeros."""
        self.left = max(self.left, other.left)
        self.top = max(self.top, other.top)
        self.right = min(self.right, other.right)
        self.bottom = min(self.bottom, other.bottom)
        if self.is_empty():
            self.left = self.top = self.right = self.bottom = 0

    def union_with(self, other: DesktopRect) -> None:
        """Grow to cover ``other``; an empty rectangle is replaced, an empty ``other`` ignored."""
        if self.is_empty():
            self.left, self.top, self.right, self.bottom = (
                other.left,
                other.top,
                other.right,
                other.bottom,
            )
            return
        if other.is_empty():
            return
        self.left = min(self.left, other.left)
        self.top = min(self.top, other.top)
        self.right = max(self.right, other.right)
        self.bottom = max(self.bottom, other.bottom)

    def translate(self, dx: Union[int, DesktopVector], dy: Optional[int] = None) -> None:
        """Move by ``(dx, dy)``, or by a vector passed as ``dx`` alone."""
        if isinstance(dx, DesktopVector):
            if dy is not None:
                raise TypeError("dy must be omitted when a vector is given")
            dx, dy = dx.x, dx.y
        elif dy is None:
            raise TypeError("dy is required when dx is an integer")
        self.left += dx
        self.top += dy
        self.right += dx
        self.bottom += dy

    def extend(
        self, left_offset: int, top_offset: int, right_offset: int, bottom_offset: int
    ) -> None:
        """Push each edge outwards by its offset, without normalising the result."""
        self.left -= left_offset
        self.top -= top_offset
        self.right += right_offset
        self.bottom += bottom_offset

    def scale(self, horizontal: float, vertical: float) -> None:
        """Scale the size, keeping the top-left corner in place."""
        self.right += _round_half_away(self.width * (horizontal - 1))
        self.bottom += _round_half_away(self.height * (vertical - 1))

    def copy(self) -> DesktopRect:
        return replace(self)

    def to_rect(self) -> Rect:
        return Rect(self.left, self.top, self.right, self.bottom)