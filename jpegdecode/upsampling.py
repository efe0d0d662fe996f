"""Chroma upsampling by pixel replication."""

from __future__ import annotations

import warnings
from typing import Sequence

BLOCK_SIZE = 8


def upsample_chroma(
    block: Sequence[Sequence[float] | None] | None,
    h_y: int,
    v_y: int,
    h_c: int,
    v_c: int,
) -> list[list[float]]:
    """Stretch a chroma plane of (v_c*8) x (h_c*8) to the luma size (v_y*8) x (h_y*8).

    Each chroma sample is repeated ``h_y // h_c`` times across and
    ``v_y // v_c`` times down. A missing plane gives an all-zero result.
    """
    width_y, height_y = h_y * BLOCK_SIZE, v_y * BLOCK_SIZE
    width_c, height_c = h_c * BLOCK_SIZE, v_c * BLOCK_SIZE
    result = [[0.0] * width_y for _ in range(height_y)]

    factor_h = h_y // h_c
    factor_v = v_y // v_c

    if block is None:
        warnings.warn("chroma block is missing", stacklevel=2)
        return result

    for i, row in enumerate(block[:height_c]):
        if row is None:
            warnings.warn(f"chroma row {i} is missing", stacklevel=2)
            continue
        for j, value in enumerate(row[:width_c]):
            for dv in range(factor_v):
                for dh in range(factor_h):
                    new_i = i * factor_v + dv
                    new_j = j * factor_h + dh
                    if new_i < height_y and new_j < width_y:
                        result[new_i][new_j] = value
                    else:
                        warnings.warn(
                            f"sample ({new_i}, {new_j}) outside "
                            f"({height_y - 1}, {width_y - 1})",
                            stacklevel=2,
                        )
    return result