"""RGB colours and their packed 0xRRGGBB hex form."""

from __future__ import annotations

import math
from dataclasses import dataclass

HEX_MIN = 0x000000
HEX_MAX = 0xFFFFFF

# Largest Euclidean distance between two colours, rounded up.
_MAX_DISTANCE = 442.0


def rgb_to_hex(red: int, green: int, blue: int) -> int:
    """Pack three channel values into a 0xRRGGBB integer."""
    return (red << 16) | (green << 8) | blue


def _channels(hex_color: int) -> tuple[int, int, int]:
    return (hex_color >> 16) & 0xFF, (hex_color >> 8) & 0xFF, hex_color & 0xFF


def _within_tolerance(c1: tuple[int, int, int], c2: tuple[int, int, int], tolerance: float) -> bool:
    # Channel differences are taken modulo 256, as the matching has always done.
    squares = sum(((a - b) & 0xFF) ** 2 for a, b in zip(c1, c2))
    return math.sqrt(squares) <= tolerance * _MAX_DISTANCE


def hex_similar_to_color(h1: int, h2: int, tolerance: float) -> bool:
    """Return whether two hex colours match within ``tolerance`` (0 exact, 1 any)."""
    if tolerance <= 0.0:
        return h1 == h2
    return _within_tolerance(_channels(h1), _channels(h2), tolerance)


@dataclass(frozen=True)
class RGBColor:
    """A colour with 8-bit red, green and blue channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be in 0..255, got {value}")

    def to_hex(self) -> int:
        """Return the colour as a 0xRRGGBB integer."""
        return rgb_to_hex(self.red, self.green, self.blue)

    @classmethod
    def from_hex(cls, hex_color: int) -> RGBColor:
        """Build a colour from a 0xRRGGBB integer."""
        return cls(*_channels(hex_color))

    def similar_to(self, other: RGBColor, tolerance: float) -> bool:
        """Return whether ``other`` matches this colour within ``tolerance``."""
        if tolerance <= 0.0:
            return self == other
        return _within_tolerance(
            (self.red, self.green, self.blue),
            (other.red, other.green, other.blue),
            tolerance,
        )