"""Mouse cursor image with its hotspot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from traa.frame import BasicDesktopFrame, DesktopFrame
from traa.geometry import DesktopVector


@dataclass
class MouseCursor:
    """A cursor image and the hotspot within it."""

    image: Optional[DesktopFrame] = None
    hotspot: DesktopVector = field(default_factory=DesktopVector)

    @classmethod
    def copy_of(cls, cursor: MouseCursor) -> MouseCursor:
        """A deep copy of ``cursor``; a cursor without an image copies to an empty one."""
        if cursor.image is None:
            return cls()
        return cls(BasicDesktopFrame.copy_of(cursor.image), cursor.hotspot)