import io

import pytest

from jpegdecode.bitstream import BitStream
from jpegdecode.blocks import read_scan_data
from jpegdecode.color import Pixel
from jpegdecode.colour_image import decode_colour, process_colour_image, process_component
from jpegdecode.metadata import read_metadata

MID_GREY = 128


def _segment(marker, payload):
    return bytes([0xFF, marker]) + (len(payload) + 2).to_bytes(2, "big") + payload


def make_colour_jpeg(width, height, y_sampling, scan_data, quant_tables=2):
    quant = b"".join(bytes([index] + [1] * 64) for index in range(quant_tables))
    components = b"".join(
        bytes([cid, y_sampling if cid == 1 else 0x11, 0 if cid == 1 else 1]) for cid in (1, 2, 3)
    )
    sof = bytes([8]) + height.to_bytes(2, "big") + width.to_bytes(2, "big") + bytes([3]) + components
    dc = bytes([0x00, 1] + [0] * 15 + [0])
    ac = bytes([0x10, 1] + [0] * 15 + [0])
    sos = bytes([3, 1, 0x00, 2, 0x00, 3, 0x00, 0, 63, 0])
    return (
        b"\xff\xd8"
        + _segment(0xDB, quant)
        + _segment(0xC0, sof)
        + _segment(0xC4, dc + ac)
        + _segment(0xDA, sos)
        + scan_data
        + b"\xff\xd9"
    )


def load(data):
    f = io.BytesIO(data)
    meta = read_metadata(f)
    meta.stream = BitStream(read_scan_data(f, meta.data_position))
    return meta


@pytest.mark.parametrize("use_loeffler", [True, False])
def test_process_component_lays_out_blocks(use_loeffler):
    blocks = [[0.0] * 64, [0.0] * 64]
    plane = process_component(blocks, 2, 1, [1] * 64, use_loeffler)
    assert len(plane) == 8
    assert all(len(row) == 16 for row in plane)
    assert all(value == float(MID_GREY) for row in plane for value in row)


def test_process_component_requires_table():
    with pytest.raises(ValueError):
        process_component([[0.0] * 64], 1, 1, None)


def test_process_component_requires_enough_blocks():
    with pytest.raises(ValueError):
        process_component([[0.0] * 64], 2, 2, [1] * 64)


@pytest.mark.parametrize("use_loeffler", [True, False])
def test_subsampled_flat_image(use_loeffler):
    meta = load(make_colour_jpeg(16, 16, 0x22, b"\x00\x00"))
    image = decode_colour(meta, use_loeffler)
    assert len(image) == 16
    assert all(len(row) == 16 for row in image)
    assert all(p == Pixel(MID_GREY, MID_GREY, MID_GREY) for row in image for p in row)


def test_several_mcus_are_cropped():
    meta = load(make_colour_jpeg(20, 10, 0x11, b"\x00" * 5))
    image = decode_colour(meta)
    assert len(image) == 10
    assert all(len(row) == 20 for row in image)
    assert all(p.g == MID_GREY for row in image for p in row)


def test_both_transforms_agree():
    data = make_colour_jpeg(16, 16, 0x22, b"\x00\x00")
    assert decode_colour(load(data), True) == decode_colour(load(data), False)


def test_missing_chroma_table_is_rejected():
    meta = load(make_colour_jpeg(8, 8, 0x11, b"\x00", quant_tables=1))
    with pytest.raises(ValueError):
        decode_colour(meta)


def test_missing_stream_is_rejected():
    meta = read_metadata(io.BytesIO(make_colour_jpeg(8, 8, 0x11, b"\x00")))
    with pytest.raises(ValueError):
        decode_colour(meta)


def test_process_writes_ppm(tmp_path):
    meta = load(make_colour_jpeg(8, 8, 0x11, b"\x00"))
    path = process_colour_image(meta, str(tmp_path / "flat.jpeg"))
    assert path == str(tmp_path / "flat.ppm")
    content = (tmp_path / "flat.ppm").read_bytes()
    header = b"P6\n8 8\n255\n"
    assert content.startswith(header)
    assert content[len(header):] == bytes([MID_GREY]) * (64 * 3)