"""Loading and saving bitmaps by image type."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Optional, Union

from pixelseek.bitmap import Bitmap
from pixelseek.bmp import bmp_error_string, read_bmp, save_bmp

PathLike = Union[str, os.PathLike]


class ImageType(IntEnum):
    """Image file formats known by name."""

    INVALID = 0
    PNG = 1
    BMP = 2


class UnsupportedImageTypeError(Exception):
    """Raised when an image type cannot be read or written."""


_EXTENSIONS = {"png": ImageType.PNG, "bmp": ImageType.BMP}


def get_extension(fname: str) -> Optional[str]:
    """Return the text after the last dot of ``fname``.

    A dot in the first position is not looked at; with no later dot, all but
    the first character is returned. Returns None for an empty name.
    """
    if not fname:
        return None
    dot = fname.rfind(".", 1)
    return fname[max(dot, 0) + 1:]


def image_type_from_extension(extension: str) -> ImageType:
    """Guess the image type from a file extension, case-insensitively."""
    return _EXTENSIONS.get(extension.lower(), ImageType.INVALID)


def _resolve_type(path: PathLike, image_type: Optional[ImageType]) -> ImageType:
    if image_type is not None:
        return ImageType(image_type)
    extension = get_extension(os.fspath(path))
    if extension is None:
        return ImageType.INVALID
    return image_type_from_extension(extension)


def load_bitmap(path: PathLike, image_type: Optional[ImageType] = None) -> Bitmap:
    """Read the image at ``path``; the type defaults to one from the extension."""
    resolved = _resolve_type(path, image_type)
    if resolved is ImageType.BMP:
        return read_bmp(path)
    raise UnsupportedImageTypeError(f"cannot read images of type {resolved.name}")


def save_bitmap(
    bitmap: Bitmap, path: PathLike, image_type: Optional[ImageType] = None
) -> None:
    """Write ``bitmap`` to ``path``; the type defaults to one from the extension."""
    resolved = _resolve_type(path, image_type)
    if resolved is ImageType.BMP:
        save_bmp(bitmap, path)
        return
    raise UnsupportedImageTypeError(f"cannot write images of type {resolved.name}")


def io_error_string(image_type: ImageType, error: int) -> Optional[str]:
    """Return the description of an error code for the given image type."""
    if image_type == ImageType.BMP:
        return bmp_error_string(error)
    return "Unsupported image type"