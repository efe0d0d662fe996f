"""Direct (textbook) 8x8 inverse DCT."""

from __future__ import annotations

import math
from typing import Sequence

_COS = [[math.cos((2 * x + 1) * i * math.pi / 16.0) for i in range(8)] for x in range(8)]
_C = [1.0 / math.sqrt(2.0)] + [1.0] * 7


def _clamp_round(value: float) -> int:
    return int(math.floor(min(max(value, 0.0), 255.0) + 0.5))


def idct_8x8(block: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the level-shifted, clamped and rounded IDCT of an 8x8 block."""
    output = [[0.0] * 8 for _ in range(8)]
    for x in range(8):
        for y in range(8):
            total = 0.0
            for i in range(8):
                for j in range(8):
                    total += _C[i] * _C[j] * block[i][j] * _COS[x][i] * _COS[y][j]
            output[x][y] = float(_clamp_round(total / 4.0 + 128.0))
    return output