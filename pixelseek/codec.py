"""Base64 encoding and lenient decoding."""

from __future__ import annotations

import base64

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE_TABLE = {byte: index for index, byte in enumerate(_ALPHABET)}


def base64_decode(data: bytes | bytearray | memoryview | str) -> bytes:
    """Decode base64, skipping bytes outside the alphabet (including padding).

    Each accepted digit is placed by its position in the input, so noise that
    shifts the alignment of later digits changes the result.
    """
    if isinstance(data, str):
        data = data.encode("ascii")
    decoded = bytearray()
    last = 0
    for position, byte in enumerate(bytes(data)):
        digit = _DECODE_TABLE.get(byte)
        if digit is None:
            continue
        phase = position % 4
        if phase == 1:
            decoded.append(((last << 2) | ((digit & 0x30) >> 4)) & 0xFF)
        elif phase == 2:
            decoded.append((((last & 0x0F) << 4) | ((digit & 0x3C) >> 2)) & 0xFF)
        elif phase == 3:
            decoded.append((((last & 0x03) << 6) | digit) & 0xFF)
        last = digit
    return bytes(decoded)


def base64_encode(data: bytes | bytearray | memoryview) -> bytes:
    """Encode ``data`` as padded base64 with no line breaks.

    Raises ValueError for empty input.
    """
    raw = bytes(data)
    if not raw:
        raise ValueError("cannot encode empty data")
    return base64.b64encode(raw)