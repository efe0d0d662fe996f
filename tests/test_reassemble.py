import pytest

from jpegdecode.reassemble import assemble_blocks


def make_blocks(count):
    return [[float(k * 1000 + i) for i in range(64)] for k in range(count)]


def test_single_block_is_rows_of_eight():
    block = make_blocks(1)[0]
    result = assemble_blocks([block], 1, 1)
    assert len(result) == 8
    assert [len(row) for row in result] == [8] * 8
    assert [value for row in result for value in row] == block


@pytest.mark.parametrize("h,v", [(1, 1), (2, 1), (1, 2), (2, 2)])
def test_shape(h, v):
    result = assemble_blocks(make_blocks(h * v), h, v)
    assert len(result) == v * 8
    assert all(len(row) == h * 8 for row in result)


def test_horizontal_layout():
    blocks = make_blocks(2)
    result = assemble_blocks(blocks, 2, 1)
    assert result[0][:8] == blocks[0][:8]
    assert result[0][8:] == blocks[1][:8]
    assert result[7][8] == blocks[1][56]


def test_vertical_layout():
    blocks = make_blocks(2)
    result = assemble_blocks(blocks, 1, 2)
    assert result[0] == blocks[0][:8]
    assert result[8] == blocks[1][:8]
    assert result[15] == blocks[1][56:]


def test_two_by_two_order():
    blocks = make_blocks(4)
    result = assemble_blocks(blocks, 2, 2)
    assert result[0][0] == blocks[0][0]
    assert result[0][8] == blocks[1][0]
    assert result[8][0] == blocks[2][0]
    assert result[15][15] == blocks[3][63]


def test_every_value_used_once():
    blocks = make_blocks(4)
    result = assemble_blocks(blocks, 2, 2)
    flat = sorted(value for row in result for value in row)
    assert flat == sorted(value for block in blocks for value in block)


def test_too_few_blocks_raises():
    with pytest.raises(ValueError):
        assemble_blocks(make_blocks(3), 2, 2)