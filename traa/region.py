"""Regions of the screen made of rectangles, stored as rows of horizontal spans."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from traa.geometry import DesktopRect

_Span = Tuple[int, int]


def _span_left(span: _Span) -> int:
    return span[0]


def _span_right(span: _Span) -> int:
    return span[1]


def _row_bottom(row: "_Row") -> int:
    return row.bottom


@dataclass
class _Row:
    """A horizontal band of the region; every span covers the band's full height."""

    top: int
    bottom: int
    spans: List[_Span] = field(default_factory=list)

    def copy(self) -> "_Row":
        return _Row(self.top, self.bottom, list(self.spans))


def _add_span_to_row(row: _Row, left: int, right: int) -> None:
    """Add ``[left, right)`` to the row, coalescing spans that overlap or touch it."""
    spans = row.spans
    # Spans often arrive left to right, so appending is checked first.
    if not spans or left > spans[-1][1]:
        spans.append((left, right))
        return

    # First span that ends at or after ``left``.
    start = bisect_left(spans, left, key=_span_right)
    # First span that starts after ``right``.
    end = bisect_left(spans, right + 1, lo=start, key=_span_left)
    if end == 0:
        spans.insert(0, (left, right))
        return

    end -= 1
    if end < start:
        spans.insert(start, (left, right))
        return

    left = min(left, spans[start][0])
    right = max(right, spans[end][1])
    spans[start : end + 1] = [(left, right)]


def _is_span_in_row(row: _Row, span: _Span) -> bool:
    index = bisect_left(row.spans, span[0], key=_span_left)
    return index < len(row.spans) and row.spans[index] == span


def _intersect_spans(set1: List[_Span], set2: List[_Span]) -> List[_Span]:
    output: List[_Span] = []
    a, b = set1, set2
    ia = ib = 0
    while ia < len(a) and ib < len(b):
        # Keep ``a`` as the sequence whose current span starts leftmost.
        if b[ib][0] < a[ia][0]:
            a, b = b, a
            ia, ib = ib, ia

        if a[ia][1] <= b[ib][0]:
            ia += 1
            continue

        left = b[ib][0]
        right = min(a[ia][1], b[ib][1])
        output.append((left, right))

        if a[ia][1] == right:
            ia += 1
        if b[ib][1] == right:
            ib += 1
    return output


def _subtract_spans(set_a: List[_Span], set_b: List[_Span]) -> List[_Span]:
    output: List[_Span] = []
    ib = 0
    for a_left, a_right in set_a:
        if ib == len(set_b) or a_right < set_b[ib][0]:
            output.append((a_left, a_right))
            continue

        pos = a_left
        while ib < len(set_b) and set_b[ib][0] < a_right:
            b_left, b_right = set_b[ib]
            if b_left > pos:
                output.append((pos, b_left))
            if b_right > pos:
                pos = b_right
                if pos >= a_right:
                    break
            ib += 1
        if pos < a_right:
            output.append((pos, a_right))
    return output


class DesktopRegion:
    """A set of screen pixels, kept as non-overlapping rows ordered top to bottom.

    Iterating yields non-overlapping rectangles covering the region, each span
    merged with identical spans on the rows directly below it.
    """

    def __init__(
        self, rects: Optional[Union[DesktopRect, Iterable[DesktopRect]]] = None
    ) -> None:
        self._rows: List[_Row] = []
        if rects is None:
            return
        if isinstance(rects, DesktopRect):
            self.add_rect(rects)
        else:
            self.add_rects(rects)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DesktopRegion):
            return NotImplemented
        return self._rows == other._rows

    def __iter__(self) -> Iterator[DesktopRect]:
        rows = self._rows
        for index, row in enumerate(rows):
            previous = rows[index - 1] if index > 0 else None
            for span in row.spans:
                # Already reported as part of a rectangle starting higher up.
                if (
                    previous is not None
                    and previous.bottom == row.top
                    and _is_span_in_row(previous, span)
                ):
                    continue
                last = index
                while (
                    last + 1 < len(rows)
                    and rows[last].bottom == rows[last + 1].top
                    and _is_span_in_row(rows[last + 1], span)
                ):
                    last += 1
                yield DesktopRect.make_ltrb(span[0], row.top, span[1], rows[last].bottom)

    def __repr__(self) -> str:
        return f"DesktopRegion({list(self)!r})"

    def is_empty(self) -> bool:
        return not self._rows

    def copy(self) -> DesktopRegion:
        result = DesktopRegion()
        result._rows = [row.copy() for row in self._rows]
        return result

    def clear(self) -> None:
        self._rows = []

    def set_rect(self, rect: DesktopRect) -> None:
        """Make the region hold exactly ``rect``."""
        self.clear()
        self.add_rect(rect)

    def _merge_with_preceding_row(self, index: int) -> int:
        """Merge row ``index`` into the row above when they join; return its new index."""
        if index > 0:
            previous = self._rows[index - 1]
            current = self._rows[index]
            if previous.bottom == current.top and previous.spans == current.spans:
                current.top = previous.top
                del self._rows[index - 1]
                return index - 1
        return index

    def add_rect(self, rect: DesktopRect) -> None:
        """Add the pixels of ``rect``; an empty rectangle changes nothing."""
        if rect.is_empty():
            return

        rows = self._rows
        top = rect.top
        i = bisect_right(rows, top, key=_row_bottom)
        while top < rect.bottom:
            if i == len(rows) or top < rows[i].top:
                # Open a new row above the current one.
                bottom = rect.bottom
                if i < len(rows) and rows[i].top < bottom:
                    bottom = rows[i].top
                rows.insert(i, _Row(top, bottom))
            elif top > rows[i].top:
                # Split the row at ``top`` and continue in its lower part.
                upper = _Row(rows[i].top, top, list(rows[i].spans))
                rows.insert(i, upper)
                i += 1
                rows[i].top = top

            if rect.bottom < rows[i].bottom:
                # Split the row at the rectangle's bottom and continue in its upper part.
                upper = _Row(top, rect.bottom, list(rows[i].spans))
                rows.insert(i, upper)
                rows[i + 1].top = rect.bottom

            _add_span_to_row(rows[i], rect.left, rect.right)
            top = rows[i].bottom
            i = self._merge_with_preceding_row(i)
            i += 1

        if i < len(rows):
            self._merge_with_preceding_row(i)

    def add_rects(self, rects: Iterable[DesktopRect]) -> None:
        for rect in rects:
            self.add_rect(rect)

    def add_region(self, region: DesktopRegion) -> None:
        for rect in list(region):
            self.add_rect(rect)

    def intersect(self, region1: DesktopRegion, region2: DesktopRegion) -> None:
        """Replace the content with the intersection of two regions."""
        a = list(region1._rows)
        b = list(region2._rows)
        self.clear()
        ia = ib = 0
        while ia < len(a) and ib < len(b):
            # Keep ``a`` as the sequence whose current row starts highest.
            if b[ib].top < a[ia].top:
                a, b = b, a
                ia, ib = ib, ia

            if a[ia].bottom <= b[ib].top:
                ia += 1
                continue

            top = b[ib].top
            bottom = min(a[ia].bottom, b[ib].bottom)
            spans = _intersect_spans(a[ia].spans, b[ib].spans)
            if spans:
                self._rows.append(_Row(top, bottom, spans))
                self._merge_with_preceding_row(len(self._rows) - 1)

            if a[ia].bottom == bottom:
                ia += 1
            if b[ib].bottom == bottom:
                ib += 1

    def intersect_with(self, other: Union[DesktopRegion, DesktopRect]) -> None:
        """Clip the region to another region or to a rectangle."""
        if isinstance(other, DesktopRect):
            other = DesktopRegion(other)
        elif not isinstance(other, DesktopRegion):
            raise TypeError(f"cannot intersect with {type(other).__name__}")
        self.intersect(self.copy(), other)

    def subtract(self, other: Union[DesktopRegion, DesktopRect]) -> None:
        """Remove the pixels of another region or of a rectangle."""
        if isinstance(other, DesktopRect):
            other = DesktopRegion(other)
        elif not isinstance(other, DesktopRegion):
            raise TypeError(f"cannot subtract {type(other).__name__}")
        if other.is_empty():
            return

        b = [row.copy() for row in other._rows]
        rows = self._rows
        ib = 0
        top = b[0].top
        ia = bisect_right(rows, top, key=_row_bottom)

        while ia < len(rows) and ib < len(b):
            row_a = rows[ia]
            if row_a.bottom <= top:
                ia = self._merge_with_preceding_row(ia)
                ia += 1
                continue

            if top > row_a.top:
                # Split at ``top`` and continue in the lower part.
                rows.insert(ia, _Row(row_a.top, top, list(row_a.spans)))
                ia += 1
                row_a.top = top
            elif top < row_a.top:
                # Nothing to subtract between ``top`` and the row's top.
                top = row_a.top
                if top >= b[ib].bottom:
                    ib += 1
                    if ib < len(b):
                        top = b[ib].top
                    continue

            if b[ib].bottom < row_a.bottom:
                # Split at the bottom of ``b``'s row and continue in the upper part.
                bottom = b[ib].bottom
                upper = _Row(top, bottom, list(row_a.spans))
                rows.insert(ia, upper)
                row_a.top = bottom
                row_a = upper

            row_a.spans = _subtract_spans(row_a.spans, b[ib].spans)
            top = row_a.bottom

            if top >= b[ib].bottom:
                ib += 1
                if ib < len(b):
                    top = b[ib].top

            if not row_a.spans:
                del rows[ia]
            else:
                ia = self._merge_with_preceding_row(ia)
                ia += 1

        if ia < len(rows):
            self._merge_with_preceding_row(ia)

    def translate(self, dx: int, dy: int) -> None:
        """Move the region by ``(dx, dy)``."""
        for row in self._rows:
            row.top += dy
            row.bottom += dy
            if dx:
                row.spans = [(left + dx, right + dx) for left, right in row.spans]

    def swap(self, other: DesktopRegion) -> None:
        """Exchange contents with ``other``."""
        self._rows, other._rows = other._rows, self._rows