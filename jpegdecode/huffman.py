"""Huffman decoding trees and entropy decoding of 8x8 blocks."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Sequence

from .bitstream import BitStream

END_OF_BLOCK = 0x00
ZERO_RUN_LENGTH = 0xF0
BLOCK_SIZE = 64


def _to_int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass
class HuffmanNode:
    """A node of a Huffman decoding tree; leaves carry a symbol."""

    left: HuffmanNode | None = None
    right: HuffmanNode | None = None
    symbol: int | None = None

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None


@dataclass
class DcPredictor:
    """Previous DC value of a component, updated as blocks are decoded."""

    value: int = 0


def _insert(root: HuffmanNode, code: int, length: int, symbol: int) -> None:
    node = root
    for shift in range(length - 1, -1, -1):
        if (code >> shift) & 1:
            if node.right is None:
                node.right = HuffmanNode()
            node = node.right
        else:
            if node.left is None:
                node.left = HuffmanNode()
            node = node.left
    if length <= 16 and code == (1 << length) - 1:
        warnings.warn(f"Huffman code made only of ones ({length} bits)", stacklevel=3)
    node.symbol = symbol


def build_huffman_tree(lengths: Sequence[int], symbols: Sequence[int]) -> HuffmanNode:
    """Build the canonical tree from the 16 code counts and the symbol list."""
    root = HuffmanNode()
    symbol_iter = iter(symbols)
    code = 0
    for length, count in enumerate(lengths[:16], start=1):
        for _ in range(count):
            try:
                symbol = next(symbol_iter)
            except StopIteration:
                raise ValueError("fewer symbols than code lengths announce") from None
            _insert(root, code, length, symbol)
            code += 1
        code <<= 1
    return root


def decode_symbol(tree: HuffmanNode, stream: BitStream) -> int:
    """Follow the bits of ``stream`` down ``tree`` and return the symbol."""
    node: HuffmanNode | None = tree
    while node is not None and not node.is_leaf:
        node = node.right if stream.read(1) else node.left
    if node is None:
        raise ValueError("bit sequence matches no Huffman code")
    return node.symbol  # type: ignore[return-value]


def read_magnitude(size: int, stream: BitStream) -> int:
    """Read a ``size``-bit magnitude and return its signed value."""
    if size == 0:
        return 0
    bits = stream.read(size)
    if bits & (1 << (size - 1)):
        return _to_int16(bits)
    return _to_int16(bits - (1 << size) + 1)


def decode_block(
    dc_tree: HuffmanNode,
    ac_tree: HuffmanNode,
    stream: BitStream,
    predictor: DcPredictor,
) -> list[float]:
    """Decode one block (DC then AC) into a 64-entry zigzag-ordered list."""
    vector = [0.0] * BLOCK_SIZE

    category = decode_symbol(dc_tree, stream)
    predictor.value = _to_int16(predictor.value + read_magnitude(category, stream))
    vector[0] = float(predictor.value)

    index = 1
    while index < BLOCK_SIZE:
        symbol = decode_symbol(ac_tree, stream)
        if symbol == END_OF_BLOCK:
            break
        if symbol == ZERO_RUN_LENGTH:
            index = min(index + 16, BLOCK_SIZE)
            continue
        run, magnitude = (symbol >> 4) & 0x0F, symbol & 0x0F
        index = min(index + run, BLOCK_SIZE)
        if magnitude > 0 and index < BLOCK_SIZE:
            vector[index] = float(read_magnitude(magnitude, stream))
            index += 1
    return vector