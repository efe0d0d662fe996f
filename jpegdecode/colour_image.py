"""Decoding of three-component (YCbCr) images into PPM files."""

from __future__ import annotations

import os
from typing import Sequence

from .blocks import decode_mcus
from .color import Pixel, ycbcr_to_rgb
from .grayscale import _reconstruct_block, output_path
from .metadata import JpegFormatError, JpegMetadata
from .ppm import write_ppm
from .upsampling import upsample_chroma

BLOCK_SIZE = 8


def process_component(
    blocks: Sequence[Sequence[float]],
    h: int,
    v: int,
    table: Sequence[int] | None,
    use_loeffler: bool = True,
) -> list[list[float]]:
    """Turn the ``h * v`` coefficient blocks of one component into a sample plane."""
    if len(blocks) < h * v:
        raise ValueError(f"expected {h * v} blocks, got {len(blocks)}")
    output = [[0.0] * (h * BLOCK_SIZE) for _ in range(v * BLOCK_SIZE)]
    for by in range(v):
        for bx in range(h):
            spatial = _reconstruct_block(blocks[bx + by * h], table, use_loeffler)
            left = bx * BLOCK_SIZE
            for i, row in enumerate(spatial):
                output[by * BLOCK_SIZE + i][left:left + BLOCK_SIZE] = row
    return output


def decode_colour(meta: JpegMetadata, use_loeffler: bool = True) -> list[list[Pixel]]:
    """Decode the scan of a colour image into ``height`` rows of RGB pixels."""
    if meta.stream is None:
        raise ValueError("scan data has not been loaded")
    factors = (meta.h_y, meta.v_y, meta.h_cb, meta.v_cb, meta.h_cr, meta.v_cr)
    if not all(factors):
        raise JpegFormatError("sampling factors must not be zero")

    h_y, v_y = meta.h_y, meta.v_y
    mcu_width, mcu_height = h_y * BLOCK_SIZE, v_y * BLOCK_SIZE
    across = (meta.width + mcu_width - 1) // mcu_width
    down = (meta.height + mcu_height - 1) // mcu_height
    mcus = decode_mcus(across * down, meta.stream, meta)

    luma_table = meta.quant_tables[0]
    chroma_table = meta.quant_tables[1]

    image = [[Pixel() for _ in range(meta.width)] for _ in range(meta.height)]
    for index, mcu in enumerate(mcus):
        my, mx = divmod(index, across)
        y_plane = process_component(mcu.y_blocks, h_y, v_y, luma_table, use_loeffler)
        cb_plane = upsample_chroma(
            process_component(mcu.cb_blocks, meta.h_cb, meta.v_cb, chroma_table, use_loeffler),
            h_y, v_y, meta.h_cb, meta.v_cb,
        )
        cr_plane = upsample_chroma(
            process_component(mcu.cr_blocks, meta.h_cr, meta.v_cr, chroma_table, use_loeffler),
            h_y, v_y, meta.h_cr, meta.v_cr,
        )
        pixels = ycbcr_to_rgb(y_plane, cb_plane, cr_plane, mcu_height, mcu_width)

        left = mx * mcu_width
        span = min(mcu_width, meta.width - left)
        for i, row in enumerate(pixels):
            y = my * mcu_height + i
            if y >= meta.height:
                break
            image[y][left:left + span] = row[:span]
    return image


def process_colour_image(
    meta: JpegMetadata,
    image_name: str | os.PathLike,
    use_loeffler: bool = True,
) -> str:
    """Decode a colour image and write it next to ``image_name`` as a PPM file."""
    path = output_path(image_name, ".ppm")
    write_ppm(path, decode_colour(meta, use_loeffler), meta.width, meta.height)
    return path