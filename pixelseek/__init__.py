"""Bitmaps, BMP file I/O, colour and sub-image search, and small helpers."""

__version__ = "0.1.0"