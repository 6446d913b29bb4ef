"""Writing 8-bit grayscale PNG images."""

from __future__ import annotations

import os
import struct
import zlib
from collections.abc import Iterable
from pathlib import Path

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def write_grayscale_png(
    path: str | os.PathLike[str], pixels: Iterable[int], width: int, height: int
) -> Path:
    """Write row-major 8-bit gray pixels to a PNG file and return its path."""
    data = bytes(pixels)
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if len(data) != width * height:
        raise ValueError(
            f"Expected {width * height} pixels for a {width}x{height} image, got {len(data)}"
        )

    rows = b"".join(
        b"\x00" + data[start : start + width] for start in range(0, len(data), width)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    target = Path(path)
    target.write_bytes(
        PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(rows))
        + _chunk(b"IEND", b"")
    )
    return target