"""Loeffler-style fast 8x8 inverse DCT."""

from __future__ import annotations

import math
from typing import Sequence

_SQRT2 = 1.4142135623730951
_SQRT8 = 2.8284271247461903


def _butterfly(o0: float, o1: float) -> tuple[float, float]:
    return (o1 + o0) / 2, (o0 - o1) / 2


def _rotate(o0: float, o1: float, k: float, n: int) -> tuple[float, float]:
    angle = n * math.pi / 16
    c, s = math.cos(angle), math.sin(angle)
    return (o0 * c - o1 * s) / k, (o1 * c + o0 * s) / k


def loeffler_idct_1d(vector: Sequence[float]) -> list[float]:
    """Return the 1-D inverse DCT of eight coefficients."""
    v = [x * _SQRT8 for x in vector]

    s4 = [0.0] * 8
    s4[7], s4[4] = _butterfly(v[1], v[7])
    s4[5] = v[3] / _SQRT2
    s4[6] = v[5] / _SQRT2
    s4[0], s4[1], s4[2], s4[3] = v[0], v[4], v[2], v[6]

    s3 = [0.0] * 8
    s3[0], s3[1] = _butterfly(s4[0], s4[1])
    s3[4], s3[6] = _butterfly(s4[4], s4[6])
    s3[7], s3[5] = _butterfly(s4[7], s4[5])
    s3[2], s3[3] = _rotate(s4[2], s4[3], math.sqrt(2), 6)

    s2 = [0.0] * 8
    s2[0], s2[3] = _butterfly(s3[0], s3[3])
    s2[1], s2[2] = _butterfly(s3[1], s3[2])
    s2[4], s2[7] = _rotate(s3[4], s3[7], 1, 3)
    s2[5], s2[6] = _rotate(s3[5], s3[6], 1, 1)

    out = [0.0] * 8
    out[0], out[7] = _butterfly(s2[0], s2[7])
    out[1], out[6] = _butterfly(s2[1], s2[6])
    out[2], out[5] = _butterfly(s2[2], s2[5])
    out[3], out[4] = _butterfly(s2[3], s2[4])
    return out


def _transpose(matrix: list[list[float]]) -> list[list[float]]:
    return [list(column) for column in zip(*matrix)]


def idct_loeffler_2d(block: Sequence[Sequence[float]]) -> list[list[int]]:
    """Return the level-shifted, clamped and rounded 2-D IDCT of an 8x8 block."""
    rows = [loeffler_idct_1d([float(v) for v in row]) for row in block]
    columns = [loeffler_idct_1d(col) for col in _transpose(rows)]
    result = _transpose(columns)
    return [
        [int(math.floor(min(max(v + 128, 0.0), 255.0) + 0.5)) for v in row]
        for row in result
    ]