"""Fitting an image size into a pixel budget."""

from __future__ import annotations

import math

from traa.geometry import DesktopSize


def calc_scaled_size(source: DesktopSize, dest: DesktopSize) -> DesktopSize:
    """Scale ``source`` down, keeping its aspect, so its area fits the area of ``dest``.

    The result has even dimensions; a source that already fits is returned unchanged,
    and a zero dimension anywhere yields a zero size.
    """
    if source.width == 0 or source.height == 0 or dest.width == 0 or dest.height == 0:
        return DesktopSize(0, 0)

    src_area = source.width * source.height
    dst_area = dest.width * dest.height
    if src_area <= dst_area:
        return source

    factor = math.sqrt(dst_area / src_area)
    # Encoders need both dimensions to be multiples of two.
    width = int(source.width * factor) & ~1
    height = int(source.height * factor) & ~1
    return DesktopSize(width, height)