"""Colour-space conversion of decoded planes into RGB pixels."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Sequence


@dataclass
class Pixel:
    """An RGB pixel with components in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0


def _saturate(value: int) -> int:
    return min(max(value, 0), 255)


def _convert(y: float, cb: float, cr: float) -> Pixel:
    r = int(y + 1.402 * (cr - 128))
    g = int(y - 0.34414 * (cb - 128) - 0.71414 * (cr - 128))
    b = int(y + 1.772 * (cb - 128))
    return Pixel(_saturate(r), _saturate(g), _saturate(b))


def ycbcr_to_rgb(
    y: Sequence[Sequence[float] | None],
    cb: Sequence[Sequence[float] | None],
    cr: Sequence[Sequence[float] | None],
    height: int,
    width: int,
) -> list[list[Pixel]]:
    """Convert full-resolution Y, Cb and Cr planes to a ``height`` x ``width`` image.

    A missing row in any plane leaves the matching output row black.
    """
    planes = {"Y": y, "Cb": cb, "Cr": cr}
    for name, plane in planes.items():
        if plane is None:
            raise ValueError(f"{name} block is missing")
        if len(plane) < height:
            raise ValueError(f"{name} block has {len(plane)} rows, expected {height}")

    image: list[list[Pixel]] = []
    for index, (row_y, row_cb, row_cr) in enumerate(zip(y[:height], cb[:height], cr[:height])):
        missing = [name for name, row in zip(planes, (row_y, row_cb, row_cr)) if row is None]
        if missing:
            warnings.warn(f"{missing[0]} block row {index} is missing", stacklevel=2)
            image.append([Pixel() for _ in range(width)])
            continue
        image.append(
            [_convert(vy, vcb, vcr) for vy, vcb, vcr in zip(row_y[:width], row_cb[:width], row_cr[:width])]
        )
    return image


def grayscale_to_rgb(y: Sequence[Sequence[float]] | None, size: int) -> list[list[Pixel]]:
    """Turn a square ``size`` x ``size`` luminance plane into grey pixels."""
    if y is None:
        raise ValueError("Y block is missing")
    image: list[list[Pixel]] = []
    for row in y[:size]:
        grey_row = []
        for value in row[:size]:
            level = int(value) & 0xFF
            grey_row.append(Pixel(level, level, level))
        image.append(grey_row)
    return image