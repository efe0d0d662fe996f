import pytest

from jpegdecode.color import Pixel, grayscale_to_rgb, ycbcr_to_rgb


def plane(height, width, value):
    return [[float(value)] * width for _ in range(height)]


def triples(image):
    return [[(p.r, p.g, p.b) for p in row] for row in image]


def test_grey_constant():
    rgb = ycbcr_to_rgb(plane(4, 4, 100), plane(4, 4, 128), plane(4, 4, 128), 4, 4)
    assert triples(rgb) == [[(100, 100, 100)] * 4 for _ in range(4)]


def test_increasing_luminance():
    y = [[float(min(i * 4 + j * 20, 255)) for j in range(4)] for i in range(4)]
    rgb = ycbcr_to_rgb(y, plane(4, 4, 128), plane(4, 4, 128), 4, 4)
    expected = [[(int(v), int(v), int(v)) for v in row] for row in y]
    assert triples(rgb) == expected


def test_arbitrary_values():
    y = plane(4, 4, 90)
    cb = plane(4, 4, 128)
    cr = plane(4, 4, 128)
    y[0][0] = 50
    y[1][1] = 200
    cb[0][0] = 140
    cr[1][1] = 160
    rgb = ycbcr_to_rgb(y, cb, cr, 4, 4)
    assert (rgb[0][0].r, rgb[0][0].g, rgb[0][0].b) == (50, 45, 71)
    assert (rgb[1][1].r, rgb[1][1].g, rgb[1][1].b) == (244, 177, 200)
    assert (rgb[2][3].r, rgb[2][3].g, rgb[2][3].b) == (90, 90, 90)


def test_primary_colours_in_corners():
    y = plane(4, 4, 128)
    cb = plane(4, 4, 128)
    cr = plane(4, 4, 128)
    y[0][0], cb[0][0], cr[0][0] = 76, 85, 255
    y[0][3], cb[0][3], cr[0][3] = 149, 44, 21
    y[3][0], cb[3][0], cr[3][0] = 29, 255, 107
    y[3][3], cb[3][3], cr[3][3] = 226, 0, 149
    rgb = triples(ycbcr_to_rgb(y, cb, cr, 4, 4))
    assert rgb[0][0] == (254, 0, 0)
    assert rgb[0][3] == (0, 254, 0)
    assert rgb[3][0] == (0, 0, 254)
    assert rgb[3][3] == (255, 255, 0)
    assert rgb[1][1] == (128, 128, 128)


def test_invader_pattern():
    values = [
        [0, 0, 0, 255, 255, 0, 0, 0],
        [0, 0, 255, 255, 255, 255, 0, 0],
        [0, 255, 255, 255, 255, 255, 255, 0],
        [255, 255, 0, 255, 255, 0, 255, 255],
        [255, 255, 255, 255, 255, 255, 255, 255],
        [0, 0, 255, 0, 0, 255, 0, 0],
        [0, 255, 0, 255, 255, 0, 255, 0],
        [255, 0, 255, 0, 0, 255, 0, 255],
    ]
    y = [[float(v) for v in row] for row in values]
    rgb = ycbcr_to_rgb(y, plane(8, 8, 128), plane(8, 8, 128), 8, 8)
    assert triples(rgb) == [[(v, v, v) for v in row] for row in values]


def test_saturation_high():
    rgb = ycbcr_to_rgb(plane(1, 1, 250), plane(1, 1, 128), plane(1, 1, 255), 1, 1)
    assert rgb[0][0].r == 255


def test_missing_plane_raises():
    with pytest.raises(ValueError):
        ycbcr_to_rgb(None, plane(2, 2, 128), plane(2, 2, 128), 2, 2)


def test_missing_row_stays_black():
    y = plane(2, 2, 100)
    y[1] = None
    with pytest.warns(UserWarning):
        rgb = ycbcr_to_rgb(y, plane(2, 2, 128), plane(2, 2, 128), 2, 2)
    assert triples(rgb) == [[(100, 100, 100)] * 2, [(0, 0, 0)] * 2]


def test_grayscale_constant():
    rgb = grayscale_to_rgb(plane(4, 4, 100), 4)
    assert rgb == [[Pixel(100, 100, 100)] * 4 for _ in range(4)]


def test_grayscale_truncates():
    rgb = grayscale_to_rgb([[200.7, 3.2], [0.0, 255.0]], 2)
    assert triples(rgb) == [[(200, 200, 200), (3, 3, 3)], [(0, 0, 0), (255, 255, 255)]]


def test_grayscale_missing_raises():
    with pytest.raises(ValueError):
        grayscale_to_rgb(None, 4)