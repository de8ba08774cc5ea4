"""Points, sizes and rectangles used throughout pixelseek."""

from __future__ import annotations

from dataclasses import dataclass, field

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _require_unsigned(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Point:
    """A point with non-negative integer coordinates."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _require_unsigned("x", self.x)
        _require_unsigned("y", self.y)


@dataclass(frozen=True)
class SignedPoint:
    """A point whose coordinates are signed 32-bit integers."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        for name, value in (("x", self.x), ("y", self.y)):
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError(f"{name} out of 32-bit signed range: {value}")


@dataclass(frozen=True)
class Size:
    """A width and height, both non-negative."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _require_unsigned("width", self.width)
        _require_unsigned("height", self.height)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left origin and its size."""

    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def make(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rectangle from its origin coordinates and dimensions."""
        return cls(Point(x, y), Size(width, height))

    def contains_rect(self, other: Rect) -> bool:
        """Return True if ``other`` lies entirely within this rectangle."""
        return (
            other.origin.x >= self.origin.x
            and other.origin.y >= self.origin.y
            and other.origin.x + other.size.width <= self.origin.x + self.size.width
            and other.origin.y + other.size.height <= self.origin.y + self.size.height
        )