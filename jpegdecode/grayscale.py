"""Decoding of single-component (greyscale) images into PGM files."""

from __future__ import annotations

import os
from typing import Sequence

from .blocks import extract_grayscale_blocks
from .color import Pixel, grayscale_to_rgb
from .fast_idct import idct_loeffler_2d
from .idct import idct_8x8
from .metadata import JpegMetadata
from .ppm import write_pgm
from .quantization import dequantize
from .zigzag import inverse_zigzag

BLOCK_SIZE = 8


def _to_int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _reconstruct_block(
    coefficients: Sequence[float],
    table: Sequence[int] | None,
    use_loeffler: bool,
) -> list[list[float]]:
    """Dequantise, reorder and inverse-transform one zigzag-ordered block."""
    block = inverse_zigzag(dequantize(coefficients, table))
    if use_loeffler:
        integers = [[_to_int16(int(value)) for value in row] for row in block]
        return [[float(value) for value in row] for row in idct_loeffler_2d(integers)]
    return idct_8x8(block)


def output_path(image_name: str | os.PathLike, extension: str) -> str:
    """Replace everything from the last dot of ``image_name`` with ``extension``."""
    name = str(image_name)
    dot = name.rfind(".")
    stem = name[:dot] if dot >= 0 else name
    return stem + extension


def decode_grayscale(meta: JpegMetadata, use_loeffler: bool = True) -> list[list[Pixel]]:
    """Decode the scan of a greyscale image into ``height`` rows of grey pixels."""
    if meta.stream is None:
        raise ValueError("scan data has not been loaded")

    blocks_across = (meta.width + BLOCK_SIZE - 1) // BLOCK_SIZE
    coefficients = extract_grayscale_blocks(meta.stream, meta)
    table = meta.quant_tables[0]

    image = [[Pixel() for _ in range(meta.width)] for _ in range(meta.height)]
    for index, vector in enumerate(coefficients):
        by, bx = divmod(index, blocks_across)
        left = bx * BLOCK_SIZE
        span = min(BLOCK_SIZE, meta.width - left)
        pixels = grayscale_to_rgb(_reconstruct_block(vector, table, use_loeffler), BLOCK_SIZE)
        for i, row in enumerate(pixels):
            y = by * BLOCK_SIZE + i
            if y >= meta.height:
                break
            image[y][left:left + span] = row[:span]
    return image


def process_grayscale_image(
    meta: JpegMetadata,
    image_name: str | os.PathLike,
    use_loeffler: bool = True,
) -> str:
    """Decode a greyscale image and write it next to ``image_name`` as a PGM file."""
    path = output_path(image_name, ".pgm")
    write_pgm(path, decode_grayscale(meta, use_loeffler), meta.width, meta.height)
    return path