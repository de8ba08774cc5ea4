"""In-memory bitmaps with pixels stored in blue, green, red byte order."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from pixelseek.geometry import Point, Rect
from pixelseek.rgb import RGBColor, rgb_to_hex

# Interval that pixel rows are aligned to; must be a power of two.
BYTE_ALIGN = 4


def add_padding(width: int) -> int:
    """Round a row width in bytes up to the next multiple of BYTE_ALIGN."""
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if BYTE_ALIGN == 0:
        return width
    return BYTE_ALIGN + ((width - 1) & ~(BYTE_ALIGN - 1))


@dataclass(frozen=True)
class Bitmap:
    """A raster image whose origin is the top-left corner.

    Each row occupies ``bytewidth`` bytes of ``buffer``; each pixel occupies
    ``bytes_per_pixel`` bytes, the first three being blue, green and red.
    """

    buffer: bytes
    width: int
    height: int
    bytewidth: int
    bits_per_pixel: int = 24
    bytes_per_pixel: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "buffer", bytes(self.buffer))
        if self.bytes_per_pixel is None:
            object.__setattr__(self, "bytes_per_pixel", self.bits_per_pixel // 8)
        for name in ("width", "height", "bytewidth"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        needed = self.height * self.bytewidth
        if len(self.buffer) < needed:
            raise ValueError(
                f"buffer holds {len(self.buffer)} bytes, {needed} are needed"
            )

    def copy(self) -> Bitmap:
        """Return an independent copy of this bitmap."""
        return replace(self)

    def copy_portion(self, rect: Rect) -> Bitmap:
        """Return the part of this bitmap inside ``rect``.

        The copy keeps this bitmap's row width. Raises ValueError if ``rect``
        does not fit inside the bitmap.
        """
        if not self.rect_in_bounds(rect):
            raise ValueError(f"{rect} is outside the bitmap bounds")
        bufsize = rect.size.height * self.bytewidth
        offset = self.bytewidth * rect.origin.y + rect.origin.x * self.bytes_per_pixel
        chunk = self.buffer[offset:offset + bufsize]
        # Rows past the last one of the source are never read as pixels.
        chunk += bytes(bufsize - len(chunk))
        return Bitmap(
            chunk,
            rect.size.width,
            rect.size.height,
            self.bytewidth,
            self.bits_per_pixel,
            self.bytes_per_pixel,
        )

    def to_rgb(self) -> Bitmap:
        """Return a copy with the first and third byte of every pixel swapped.

        Pixels are addressed as tightly packed rows of ``width`` pixels.
        """
        src = self.buffer
        buf = bytearray(src)
        step = self.bytes_per_pixel
        total = self.height * self.width * step
        if total:
            buf[0:total:step] = src[2:total + 2:step]
            buf[2:total + 2:step] = src[0:total:step]
        return replace(self, buffer=bytes(buf))

    def bounds(self) -> Rect:
        """Return the rectangle covering the whole bitmap."""
        return Rect.make(0, 0, self.width, self.height)

    def point_in_bounds(self, point: Point) -> bool:
        """Return whether ``point`` is a pixel of this bitmap."""
        return point.x < self.width and point.y < self.height

    def rect_in_bounds(self, rect: Rect) -> bool:
        """Return whether ``rect`` lies within this bitmap."""
        return (
            rect.origin.x + rect.size.width <= self.width
            and rect.origin.y + rect.size.height <= self.height
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the bitmap")
        return self.bytewidth * y + x * self.bytes_per_pixel

    def color_at(self, x: int, y: int) -> RGBColor:
        """Return the colour of the pixel at (x, y)."""
        offset = self._offset(x, y)
        blue, green, red = self.buffer[offset:offset + 3]
        return RGBColor(red, green, blue)

    def hex_at(self, x: int, y: int) -> int:
        """Return the colour of the pixel at (x, y) as 0xRRGGBB."""
        offset = self._offset(x, y)
        blue, green, red = self.buffer[offset:offset + 3]
        return rgb_to_hex(red, green, blue)