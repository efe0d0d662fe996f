"""Inverse zigzag reordering of 64 coefficients into an 8x8 block."""

from __future__ import annotations

from typing import Sequence

_ZIGZAG = (
    (0, 0), (0, 1), (1, 0), (2, 0), (1, 1), (0, 2), (0, 3), (1, 2),
    (2, 1), (3, 0), (4, 0), (3, 1), (2, 2), (1, 3), (0, 4), (0, 5),
    (1, 4), (2, 3), (3, 2), (4, 1), (5, 0), (6, 0), (5, 1), (4, 2),
    (3, 3), (2, 4), (1, 5), (0, 6), (0, 7), (1, 6), (2, 5), (3, 4),
    (4, 3), (5, 2), (6, 1), (7, 0), (7, 1), (6, 2), (5, 3), (4, 4),
    (3, 5), (2, 6), (1, 7), (2, 7), (3, 6), (4, 5), (5, 4), (6, 3),
    (7, 2), (7, 3), (6, 4), (5, 5), (4, 6), (3, 7), (4, 7), (5, 6),
    (6, 5), (7, 4), (7, 5), (6, 6), (5, 7), (6, 7), (7, 6), (7, 7),
)


def inverse_zigzag(vector: Sequence[float]) -> list[list[float]]:
    """Place 64 zigzag-ordered values into an 8x8 block (rows of columns)."""
    if len(vector) != 64:
        raise ValueError(f"expected 64 coefficients, got {len(vector)}")
    block = [[0.0] * 8 for _ in range(8)]
    for (row, col), value in zip(_ZIGZAG, vector):
        block[row][col] = value
    return block