import pytest

from jpegdecode.zigzag import inverse_zigzag


def test_known_values():
    vector = [10 * (i + 1) for i in range(64)]
    expected = [
        [10, 20, 60, 70, 150, 160, 280, 290],
        [30, 50, 80, 140, 170, 270, 300, 430],
        [40, 90, 130, 180, 260, 310, 420, 440],
        [100, 120, 190, 250, 320, 410, 450, 540],
        [110, 200, 240, 330, 400, 460, 530, 550],
        [210, 230, 340, 390, 470, 520, 560, 610],
        [220, 350, 380, 480, 510, 570, 600, 620],
        [360, 370, 490, 500, 580, 590, 630, 640],
    ]
    assert inverse_zigzag(vector) == expected


def test_sequential_positions():
    block = inverse_zigzag(list(range(64)))
    assert block[0][:3] == [0, 1, 5]
    assert block[1][0] == 2
    assert block[2][0] == 3
    assert block[7][7] == 63


def test_floats_are_all_placed():
    vector = [i * 1.5 for i in range(64)]
    block = inverse_zigzag(vector)
    assert sorted(v for row in block for v in row) == vector


def test_unordered_values_are_a_permutation():
    vector = [((i * 37) % 64) - 20.5 for i in range(64)]
    block = inverse_zigzag(vector)
    assert len(block) == 8 and all(len(row) == 8 for row in block)
    assert sorted(v for row in block for v in row) == sorted(vector)
    assert block[0][0] == vector[0]


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        inverse_zigzag([0.0] * 63)