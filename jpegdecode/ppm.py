"""Writing decoded images as binary PPM (P6) and PGM (P5) files."""

from __future__ import annotations

import os
from typing import Any, Sequence

MAX_VALUE = 255


def _check_rows(image: Sequence[Sequence[Any]] | None, height: int) -> None:
    if image is None:
        raise ValueError("image is missing")
    for y in range(height):
        if image[y] is None:
            raise ValueError(f"row {y} is missing")


def _write(path: str | os.PathLike, magic: str, width: int, height: int, body: bytes) -> None:
    header = f"{magic}\n{width} {height}\n{MAX_VALUE}\n".encode("ascii")
    with open(path, "wb") as f:
        f.write(header)
        f.write(body)


def write_ppm(
    path: str | os.PathLike,
    image: Sequence[Sequence[Any]],
    width: int,
    height: int,
) -> None:
    """Write ``image`` (rows of pixels with ``r``, ``g``, ``b``) as a P6 file."""
    _check_rows(image, height)
    body = bytearray()
    for row in image[:height]:
        for pixel in row[:width]:
            body += bytes((pixel.r & 0xFF, pixel.g & 0xFF, pixel.b & 0xFF))
    _write(path, "P6", width, height, bytes(body))


def write_pgm(
    path: str | os.PathLike,
    image: Sequence[Sequence[Any]],
    width: int,
    height: int,
) -> None:
    """Write the red channel of ``image`` as a P5 greyscale file."""
    _check_rows(image, height)
    body = bytes(pixel.r & 0xFF for row in image[:height] for pixel in row[:width])
    _write(path, "P5", width, height, body)