"""Reading and writing uncompressed 24- and 32-bit BMP files."""

from __future__ import annotations

import os
import struct
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

from pixelseek.bitmap import Bitmap, add_padding

BMP_MAGIC = 0x4D42  # "BM" read as a little-endian 16-bit value
_COMPRESSION_RGB = 0

_FILE_HEADER = struct.Struct("<HIII")  # magic, file size, reserved, image offset
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")  # Windows v3 header
_CORE_HEADER = struct.Struct("<IHHHH")  # OS/2 v1 header
_HEADER_SIZE = struct.Struct("<I")

_CORE_HEADER_SIZE = 12
_INFO_HEADER_SIZES = (40, 108, 124)


class BMPErrorCode(IntEnum):
    """Reasons a BMP file could not be read."""

    GENERIC = 0
    ACCESS = 1
    INVALID_KEY = 2
    UNSUPPORTED_HEADER = 3
    INVALID_COLOR_PANES = 4
    UNSUPPORTED_COLOR_DEPTH = 5
    UNSUPPORTED_COMPRESSION = 6
    INVALID_PIXEL_DATA = 7


_ERROR_STRINGS = {
    BMPErrorCode.ACCESS: "Could not open file",
    BMPErrorCode.INVALID_KEY: "Not a BMP file",
    BMPErrorCode.UNSUPPORTED_HEADER: "Unsupported BMP header",
    BMPErrorCode.INVALID_COLOR_PANES: "Invalid number of color panes in BMP file",
    BMPErrorCode.UNSUPPORTED_COLOR_DEPTH: "Unsupported color depth in BMP file",
    BMPErrorCode.UNSUPPORTED_COMPRESSION: "Unsupported file compression in BMP file",
    BMPErrorCode.INVALID_PIXEL_DATA: "Could not read BMP pixel data",
}


def bmp_error_string(code: int) -> Optional[str]:
    """Return the description of a BMP error code, or None if it has none."""
    try:
        return _ERROR_STRINGS.get(BMPErrorCode(code))
    except ValueError:
        return None


class BMPReadError(Exception):
    """Raised when BMP data cannot be turned into a bitmap."""

    def __init__(self, code: BMPErrorCode) -> None:
        self.code = BMPErrorCode(code)
        super().__init__(bmp_error_string(self.code) or "Could not read BMP data")


def flip_bitmap_data(data: bytes, height: int, bytewidth: int) -> bytes:
    """Return ``data`` with its first ``height`` rows in reverse order."""
    data = bytes(data)
    if height <= 1:
        return data
    end = height * bytewidth
    rows = [data[start:start + bytewidth] for start in range(0, end, bytewidth)]
    return b"".join(reversed(rows)) + data[end:]


def bitmap_from_bmp_bytes(data: bytes) -> Bitmap:
    """Parse the contents of a BMP file into a top-down bitmap.

    Supports uncompressed 24- and 32-bit images with a Windows v3/v4/v5 or an
    OS/2 v1 header. Raises BMPReadError otherwise.
    """
    data = bytes(data)
    if len(data) < _FILE_HEADER.size:
        raise BMPReadError(BMPErrorCode.GENERIC)
    magic, _file_size, _reserved, image_offset = _FILE_HEADER.unpack_from(data)
    if magic != BMP_MAGIC:
        raise BMPReadError(BMPErrorCode.INVALID_KEY)

    pos = _FILE_HEADER.size
    if len(data) < pos + _HEADER_SIZE.size:
        raise BMPReadError(BMPErrorCode.GENERIC)
    (header_size,) = _HEADER_SIZE.unpack_from(data, pos)

    if header_size == _CORE_HEADER_SIZE:
        if len(data) < pos + _CORE_HEADER.size:
            raise BMPReadError(BMPErrorCode.GENERIC)
        _, width, height, planes, bits = _CORE_HEADER.unpack_from(data, pos)
        compression = _COMPRESSION_RGB
    elif header_size in _INFO_HEADER_SIZES:
        # Only the v3 part is used; the pixel offset skips the rest.
        if len(data) < pos + _INFO_HEADER.size:
            raise BMPReadError(BMPErrorCode.GENERIC)
        _, width, height, planes, bits, compression, *_ = _INFO_HEADER.unpack_from(
            data, pos
        )
    else:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_HEADER)

    if planes != 1:
        raise BMPReadError(BMPErrorCode.INVALID_COLOR_PANES)
    if bits not in (24, 32):
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COLOR_DEPTH)
    if compression != _COMPRESSION_RGB:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COMPRESSION)
    if width < 0:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)

    bytes_per_pixel = bits // 8
    bytewidth = add_padding(width * bytes_per_pixel)
    rows = abs(height)
    image_size = bytewidth * rows
    pixels = data[image_offset:image_offset + image_size]
    if image_size == 0 or len(pixels) < image_size:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)

    # A positive height means the rows are stored bottom-up.
    if height >= 0:
        pixels = flip_bitmap_data(pixels, rows, bytewidth)

    return Bitmap(pixels, width, rows, bytewidth, bits, bytes_per_pixel)


def read_bmp(path: Union[str, os.PathLike]) -> Bitmap:
    """Read the BMP file at ``path``; raises BMPReadError on failure."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise BMPReadError(BMPErrorCode.ACCESS) from exc
    return bitmap_from_bmp_bytes(data)


def _bgr_pixel_data(bitmap: Bitmap, bytewidth: int) -> bytes:
    image_size = bytewidth * bitmap.height
    if bitmap.bytewidth == bytewidth:
        return bitmap.buffer[:image_size]
    step = bitmap.bytes_per_pixel
    out = bytearray(image_size)
    for y in range(bitmap.height):
        src_row = y * bitmap.bytewidth
        dst_row = y * bytewidth
        for x in range(bitmap.width):
            src = src_row + x * step
            dst = dst_row + x * step
            out[dst:dst + 3] = bitmap.buffer[src:src + 3]
    return bytes(out)


def create_bitmap_data(bitmap: Bitmap) -> bytes:
    """Return the contents of a Windows v3 BMP file holding ``bitmap``.

    Rows are written top-down (negative height) and padded to 4 bytes.
    """
    bytewidth = (bitmap.width * bitmap.bytes_per_pixel + 3) & ~3
    image_size = bytewidth * bitmap.height
    image_offset = _FILE_HEADER.size + _INFO_HEADER.size
    file_header = _FILE_HEADER.pack(
        BMP_MAGIC, _INFO_HEADER.size + image_size, 0, image_offset
    )
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        bitmap.width,
        -bitmap.height,
        1,
        bitmap.bits_per_pixel,
        _COMPRESSION_RGB,
        image_size,
        0,
        0,
        0,
        0,
    )
    return file_header + info_header + _bgr_pixel_data(bitmap, bytewidth)


def save_bmp(bitmap: Bitmap, path: Union[str, os.PathLike]) -> None:
    """Write ``bitmap`` to ``path`` as a Windows v3 BMP file."""
    Path(path).write_bytes(create_bitmap_data(bitmap))