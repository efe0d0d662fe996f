"""Parsing of baseline JPEG headers up to the start of the scan data."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import BinaryIO

from .bitstream import BitStream

SOI = 0xD8
EOI = 0xD9
SOF0 = 0xC0
DHT = 0xC4
DQT = 0xDB
SOS = 0xDA
DRI = 0xDD

MAX_TABLES = 4
MAX_COMPONENTS = 3


class JpegFormatError(Exception):
    """Raised when the file is not a JPEG this decoder can parse."""


@dataclass
class HuffmanTable:
    """A Huffman table as stored in a DHT segment."""

    lengths: list[int]
    symbols: list[int]


def _four_slots() -> list:
    return [None] * MAX_TABLES


@dataclass
class JpegMetadata:
    """Everything the headers tell about the image and its single scan."""

    width: int = 0
    height: int = 0

    quant_tables: list[list[int] | None] = field(default_factory=_four_slots)
    quant_precisions: list[int] = field(default_factory=lambda: [0] * MAX_TABLES)
    quant_table_count: int = 0

    quant_index_y: int = 0
    quant_index_cb: int = 0
    quant_index_cr: int = 0

    h_y: int = 0
    v_y: int = 0
    h_cb: int = 0
    v_cb: int = 0
    h_cr: int = 0
    v_cr: int = 0

    dc_tables: list[HuffmanTable | None] = field(default_factory=_four_slots)
    ac_tables: list[HuffmanTable | None] = field(default_factory=_four_slots)
    dc_table_count: int = 0
    ac_table_count: int = 0

    dc_index_y: int = 0
    ac_index_y: int = 0
    dc_index_cb: int = 0
    ac_index_cb: int = 0
    dc_index_cr: int = 0
    ac_index_cr: int = 0

    scan_component_count: int = 0
    scan_components: list[int] = field(default_factory=list)

    restart_interval: int = 0
    data_position: int = 0
    stream: BitStream | None = None
    image_name: str | None = None


def read_u8(file: BinaryIO) -> int:
    """Read one byte; raise :class:`JpegFormatError` at end of file."""
    data = file.read(1)
    if not data:
        raise JpegFormatError("unexpected end of file")
    return data[0]


def read_u16(file: BinaryIO) -> int:
    """Read a big-endian 16-bit integer."""
    high = read_u8(file)
    low = read_u8(file)
    return (high << 8) | low


def skip_segment(file: BinaryIO) -> None:
    """Skip a segment whose length field comes next."""
    length = read_u16(file)
    file.seek(length - 2, 1)


def parse_sof0(file: BinaryIO, meta: JpegMetadata) -> None:
    """Read image size, sampling factors and quantisation table indices."""
    read_u16(file)
    read_u8(file)  # sample precision
    meta.height = read_u16(file)
    meta.width = read_u16(file)

    count = read_u8(file)
    if count > MAX_COMPONENTS:
        raise JpegFormatError(f"too many components ({count})")

    for _ in range(count):
        component_id = read_u8(file)
        sampling = read_u8(file)
        h, v = sampling >> 4, sampling & 0x0F
        quant_index = read_u8(file)
        if component_id == 1:
            meta.quant_index_y, meta.h_y, meta.v_y = quant_index, h, v
        elif component_id == 2:
            meta.quant_index_cb, meta.h_cb, meta.v_cb = quant_index, h, v
        elif component_id == 3:
            meta.quant_index_cr, meta.h_cr, meta.v_cr = quant_index, h, v
        else:
            warnings.warn(f"unknown component {component_id}", stacklevel=2)


def parse_dqt(file: BinaryIO, meta: JpegMetadata) -> None:
    """Read every quantisation table of a DQT segment."""
    length = read_u16(file)
    consumed = 2
    while consumed < length:
        pqtq = read_u8(file)
        consumed += 1
        precision, index = pqtq >> 4, pqtq & 0x0F
        if index >= MAX_TABLES:
            raise JpegFormatError(f"invalid quantisation table index {index}")
        if precision == 0:
            table = [read_u8(file) for _ in range(64)]
            consumed += 64
        elif precision == 1:
            table = [read_u16(file) for _ in range(64)]
            consumed += 128
        else:
            raise JpegFormatError(f"unsupported quantisation precision {precision}")
        meta.quant_tables[index] = table
        meta.quant_precisions[index] = precision
        meta.quant_table_count += 1


def parse_dht(file: BinaryIO, meta: JpegMetadata) -> None:
    """Read every Huffman table of a DHT segment."""
    length = read_u16(file)
    consumed = 2
    while consumed < length:
        tcth = read_u8(file)
        consumed += 1
        table_class, index = tcth >> 4, tcth & 0x0F
        if index >= MAX_TABLES:
            raise JpegFormatError(f"invalid Huffman table index {index}")

        lengths = [read_u8(file) for _ in range(16)]
        consumed += 16
        total = sum(lengths)
        symbols = [read_u8(file) for _ in range(total)]
        consumed += total

        table = HuffmanTable(lengths=lengths, symbols=symbols)
        if table_class == 0:
            meta.dc_tables[index] = table
            meta.dc_table_count += 1
        elif table_class == 1:
            meta.ac_tables[index] = table
            meta.ac_table_count += 1
        else:
            raise JpegFormatError(f"invalid Huffman table class {table_class}")


def parse_sos(file: BinaryIO, meta: JpegMetadata) -> None:
    """Read the scan header and record where the entropy-coded data starts."""
    read_u16(file)
    count = read_u8(file)
    meta.scan_component_count = count

    for _ in range(count):
        component_id = read_u8(file)
        tdta = read_u8(file)
        dc_index, ac_index = tdta >> 4, tdta & 0x0F
        if component_id == 1:
            meta.dc_index_y, meta.ac_index_y = dc_index, ac_index
        elif component_id == 2:
            meta.dc_index_cb, meta.ac_index_cb = dc_index, ac_index
        elif component_id == 3:
            meta.dc_index_cr, meta.ac_index_cr = dc_index, ac_index
        else:
            warnings.warn(f"unknown component {component_id} in SOS", stacklevel=2)
            continue
        meta.scan_components.append(component_id)

    read_u8(file)  # spectral selection start
    read_u8(file)  # spectral selection end
    read_u8(file)  # successive approximation
    meta.data_position = file.tell()


def parse_dri(file: BinaryIO, meta: JpegMetadata) -> None:
    """Read the restart interval."""
    length = read_u16(file)
    if length != 4:
        warnings.warn(f"DRI: unexpected length {length}", stacklevel=2)
    meta.restart_interval = read_u16(file)


def read_metadata(file: BinaryIO) -> JpegMetadata:
    """Parse headers from the start of ``file`` up to and including SOS."""
    if read_u8(file) != 0xFF or read_u8(file) != SOI:
        raise JpegFormatError("not a JPEG file (missing SOI)")

    meta = JpegMetadata()
    handlers = {
        SOF0: parse_sof0,
        DQT: parse_dqt,
        DHT: parse_dht,
        DRI: parse_dri,
    }
    while True:
        if read_u8(file) != 0xFF:
            continue
        marker = read_u8(file)
        if marker == SOS:
            parse_sos(file, meta)
            return meta
        if marker == EOI:
            raise JpegFormatError("end of image reached before SOS")
        handler = handlers.get(marker)
        if handler is None:
            skip_segment(file)
        else:
            handler(file, meta)