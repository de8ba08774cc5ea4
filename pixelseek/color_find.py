"""Searching a bitmap for pixels of a given colour."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from pixelseek.bitmap import Bitmap
from pixelseek.geometry import Point, Rect
from pixelseek.rgb import hex_similar_to_color


def _scan(
    image: Bitmap, color: int, rect: Rect, tolerance: float, start: Point
) -> Iterator[Point]:
    """Yield matching pixels row by row, beginning at ``start``.

    Rows end at ``rect.size.width`` and later rows restart at ``rect.origin.x``.
    """
    if not image.rect_in_bounds(rect):
        return
    x = start.x
    for y in range(start.y, rect.size.height):
        for x in range(x, rect.size.width):
            if hex_similar_to_color(color, image.hex_at(x, y), tolerance):
                yield Point(x, y)
        x = rect.origin.x


def find_color(
    image: Bitmap, color: int, rect: Optional[Rect] = None, tolerance: float = 0.0
) -> Optional[Point]:
    """Return the first pixel of ``color`` within ``rect``, or None.

    ``rect`` defaults to the whole image; ``tolerance`` runs from 0 (exact)
    to 1 (any colour).
    """
    if rect is None:
        rect = image.bounds()
    return next(_scan(image, color, rect, tolerance, rect.origin), None)


def find_all_color(
    image: Bitmap, color: int, rect: Optional[Rect] = None, tolerance: float = 0.0
) -> list[Point]:
    """Return every pixel of ``color`` within ``rect`` in row-major order."""
    if rect is None:
        rect = image.bounds()
    return list(_scan(image, color, rect, tolerance, Point(0, 0)))


def count_color(
    image: Bitmap, color: int, rect: Optional[Rect] = None, tolerance: float = 0.0
) -> int:
    """Return how many pixels of ``color`` lie within ``rect``."""
    if rect is None:
        rect = image.bounds()
    return sum(1 for _ in _scan(image, color, rect, tolerance, Point(0, 0)))