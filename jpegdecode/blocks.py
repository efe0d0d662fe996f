"""Reading the entropy-coded scan and decoding it into blocks and MCUs."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import BinaryIO, Sequence

from .bitstream import BitStream
from .huffman import DcPredictor, HuffmanNode, build_huffman_tree, decode_block
from .metadata import HuffmanTable, JpegFormatError, JpegMetadata

MARKER_PREFIX = 0xFF
STUFFED_ZERO = 0x00
RESTART_FIRST = 0xD0
RESTART_LAST = 0xD7
END_OF_IMAGE = 0xD9
MAX_BLOCKS_PER_COMPONENT = 4

TreePair = tuple[HuffmanNode, HuffmanNode]


@dataclass
class MCU:
    """The decoded zigzag-ordered blocks of one minimum coded unit."""

    y_blocks: list[list[float]] = field(default_factory=list)
    cb_blocks: list[list[float]] = field(default_factory=list)
    cr_blocks: list[list[float]] = field(default_factory=list)


def read_scan_data(file: BinaryIO, position: int) -> bytes:
    """Read the scan data from ``position`` up to EOI.

    Stuffed ``FF 00`` pairs keep only ``FF``; the byte after ``FF`` in a
    restart marker is dropped; reading stops at ``FF D9``.
    """
    file.seek(position)
    raw = file.read()
    out = bytearray()
    prev = 0
    for cur in raw:
        if prev == MARKER_PREFIX:
            if cur == STUFFED_ZERO or RESTART_FIRST <= cur <= RESTART_LAST:
                prev = 0
                continue
            if cur == END_OF_IMAGE:
                break
        out.append(cur)
        prev = cur
    return bytes(out)


def _tree(tables: Sequence[HuffmanTable | None], index: int, kind: str) -> HuffmanNode:
    table = tables[index] if 0 <= index < len(tables) else None
    if table is None:
        raise JpegFormatError(f"missing {kind} Huffman table {index}")
    return build_huffman_tree(table.lengths, table.symbols)


def _component_trees(meta: JpegMetadata) -> list[TreePair]:
    return [
        (_tree(meta.dc_tables, dc, "DC"), _tree(meta.ac_tables, ac, "AC"))
        for dc, ac in (
            (meta.dc_index_y, meta.ac_index_y),
            (meta.dc_index_cb, meta.ac_index_cb),
            (meta.dc_index_cr, meta.ac_index_cr),
        )
    ]


def extract_grayscale_blocks(stream: BitStream, meta: JpegMetadata) -> list[list[float]]:
    """Decode every luminance block of a single-component image, in scan order."""
    count = ((meta.width + 7) // 8) * ((meta.height + 7) // 8)
    dc_tree = _tree(meta.dc_tables, meta.dc_index_y, "DC")
    ac_tree = _tree(meta.ac_tables, meta.ac_index_y, "AC")
    predictor = DcPredictor()
    return [decode_block(dc_tree, ac_tree, stream, predictor) for _ in range(count)]


def mcu_count(width: int, height: int, h_max: int, v_max: int) -> int:
    """Number of MCUs covering a ``width`` x ``height`` image."""
    across = (width + h_max * 8 - 1) // (h_max * 8)
    down = (height + v_max * 8 - 1) // (v_max * 8)
    return across * down


def decode_component_blocks(
    stream: BitStream,
    dc_tree: HuffmanNode,
    ac_tree: HuffmanNode,
    h: int,
    v: int,
    predictor: DcPredictor,
) -> list[list[float]]:
    """Decode the ``h * v`` blocks one component contributes to an MCU."""
    count = h * v
    if count > MAX_BLOCKS_PER_COMPONENT:
        warnings.warn(f"unexpected number of blocks per component: {count}", stacklevel=2)
    return [decode_block(dc_tree, ac_tree, stream, predictor) for _ in range(count)]


def decode_mcu(
    stream: BitStream,
    meta: JpegMetadata,
    predictors: Sequence[DcPredictor],
    trees: Sequence[TreePair],
) -> MCU:
    """Decode one MCU; ``predictors`` and ``trees`` are in Y, Cb, Cr order."""
    sampling = ((meta.h_y, meta.v_y), (meta.h_cb, meta.v_cb), (meta.h_cr, meta.v_cr))
    y, cb, cr = (
        decode_component_blocks(stream, dc, ac, h, v, predictor)
        for (h, v), predictor, (dc, ac) in zip(sampling, predictors, trees)
    )
    return MCU(y_blocks=y, cb_blocks=cb, cr_blocks=cr)


def decode_mcus(count: int, stream: BitStream, meta: JpegMetadata) -> list[MCU]:
    """Decode ``count`` consecutive MCUs of a three-component scan."""
    trees = _component_trees(meta)
    predictors = [DcPredictor(), DcPredictor(), DcPredictor()]
    return [decode_mcu(stream, meta, predictors, trees) for _ in range(count)]