"""Searching a bitmap for occurrences of a smaller bitmap."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from pixelseek.bitmap import Bitmap
from pixelseek.geometry import Point, Rect
from pixelseek.rgb import hex_similar_to_color


def _needle_at_offset(
    needle: Bitmap, haystack: Bitmap, offset_x: int, offset_y: int, tolerance: float
) -> bool:
    """Return whether ``needle`` matches ``haystack`` with its origin at the offset.

    The needle is compared from its last pixel backwards.
    """
    return all(
        hex_similar_to_color(
            needle.hex_at(x, y),
            haystack.hex_at(offset_x + x, offset_y + y),
            tolerance,
        )
        for y in reversed(range(needle.height))
        for x in reversed(range(needle.width))
    )


def _search(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float, start: Point
) -> Optional[Point]:
    """Return the first match at or after ``start``, reported one past its origin.

    The first row is scanned from ``start.x``; later rows restart at
    ``rect.origin.x``. Rows and columns end where the needle would leave the
    extent given by ``rect.size``.
    """
    if needle.width == 0 or needle.height == 0:
        raise ValueError("needle bitmap must not be empty")
    if (
        needle.height > haystack.height
        or needle.width > haystack.width
        or not haystack.rect_in_bounds(rect)
    ):
        return None
    if needle.width > rect.size.width or needle.height > rect.size.height:
        return None

    scan_height = rect.size.height - needle.height
    scan_width = rect.size.width - needle.width
    x = start.x
    for y in range(start.y, scan_height + 1):
        for x in range(x, scan_width + 1):
            if _needle_at_offset(needle, haystack, x, y, tolerance):
                return Point(x + 1, y + 1)
        x = rect.origin.x
    return None


def _iter_matches(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float
) -> Iterator[Point]:
    """Yield successive matches, resuming each search just after the last one."""
    step_width = haystack.width - needle.width + 1
    point = Point(0, 0)
    while True:
        found = _search(needle, haystack, rect, tolerance, point)
        if found is None:
            return
        yield found
        next_x, next_y = found.x + 1, found.y
        if next_x >= step_width:
            next_x, next_y = 0, next_y + 1
        point = Point(next_x, next_y)


def find_bitmap(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Optional[Rect] = None,
    tolerance: float = 0.0,
) -> Optional[Point]:
    """Look for ``needle`` inside ``rect`` of ``haystack``.

    Returns the point one past the needle's top-left corner in each
    coordinate, or None if it is not found. ``rect`` defaults to the whole
    haystack; ``tolerance`` runs from 0 (exact) to 1 (any colour). Raises
    ValueError for an empty needle.
    """
    if rect is None:
        rect = haystack.bounds()
    return _search(needle, haystack, rect, tolerance, Point(0, 0))


def find_all_bitmap(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Optional[Rect] = None,
    tolerance: float = 0.0,
) -> list[Point]:
    """Return every occurrence of ``needle``, reported as by find_bitmap."""
    if rect is None:
        rect = haystack.bounds()
    return list(_iter_matches(needle, haystack, rect, tolerance))


def count_bitmap(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Optional[Rect] = None,
    tolerance: float = 0.0,
) -> int:
    """Return how many occurrences of ``needle`` find_all_bitmap reports."""
    if rect is None:
        rect = haystack.bounds()
    return sum(1 for _ in _iter_matches(needle, haystack, rect, tolerance))