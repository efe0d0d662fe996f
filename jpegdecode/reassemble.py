"""Assembling the 8x8 blocks of one MCU component into a single array."""

from __future__ import annotations

from typing import Sequence

BLOCK_SIZE = 8


def assemble_blocks(blocks: Sequence[Sequence[float]], h: int, v: int) -> list[list[float]]:
    """Lay out ``h * v`` row-major 64-value blocks into a (v*8) x (h*8) array.

    Blocks are taken left to right, then top to bottom.
    """
    if len(blocks) < h * v:
        raise ValueError(f"expected {h * v} blocks, got {len(blocks)}")
    result = [[0.0] * (h * BLOCK_SIZE) for _ in range(v * BLOCK_SIZE)]
    for by in range(v):
        for bx in range(h):
            block = blocks[bx + by * h]
            for y in range(BLOCK_SIZE):
                row = block[y * BLOCK_SIZE:(y + 1) * BLOCK_SIZE]
                result[by * BLOCK_SIZE + y][bx * BLOCK_SIZE:(bx + 1) * BLOCK_SIZE] = row
    return result