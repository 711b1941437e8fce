import numpy as np
import pytest

import pixels
from conftest import BLACK, WHITE, checker, make_bmp
from errors import TruncatedFileError, UnsupportedBitDepthError, UnsupportedColorError


def pixel_data(blob):
    return blob[54:]


@pytest.mark.parametrize("width,bpp,stride", [
    (1, 24, 4),
    (4, 24, 12),
    (5, 24, 16),
    (3, 32, 12),
    (0, 24, 0),
])
def test_row_stride(width, bpp, stride):
    assert pixels.row_stride(width, bpp) == stride


def test_decode_24bit_bottom_up_puts_top_row_first():
    rows = [
        [BLACK, WHITE, WHITE],
        [WHITE, WHITE, BLACK],
    ]
    grid = pixels.decode_rows(pixel_data(make_bmp(rows)), 3, 2, 24)
    assert grid.shape == (2, 3, 4)
    assert grid.dtype == np.uint8
    assert tuple(grid[0, 0]) == pixels.BLACK
    assert tuple(grid[0, 1]) == pixels.WHITE
    assert tuple(grid[1, 2]) == pixels.BLACK


def test_decode_top_down_matches_bottom_up():
    rows = checker(5, 4)
    bottom_up = pixels.decode_rows(pixel_data(make_bmp(rows)), 5, 4, 24)
    top_down = pixels.decode_rows(pixel_data(make_bmp(rows, top_down=True)), 5, 4, 24, top_down=True)
    assert np.array_equal(bottom_up, top_down)


def test_decode_ignores_padding_bytes():
    rows = checker(5, 2)
    grid = pixels.decode_rows(pixel_data(make_bmp(rows, pad_byte=0xAB)), 5, 2, 24)
    assert np.array_equal(grid, pixels.decode_rows(pixel_data(make_bmp(rows)), 5, 2, 24))


def test_decode_24bit_sets_opaque_alpha():
    grid = pixels.decode_rows(pixel_data(make_bmp(checker(3, 3))), 3, 3, 24)
    assert (grid[..., 3] == 255).all()


def test_decode_32bit_keeps_alpha():
    grid = pixels.decode_rows(pixel_data(make_bmp(checker(3, 2), bpp=32, alpha=7)), 3, 2, 32)
    assert (grid[..., 3] == 7).all()


def test_unsupported_color_reports_first_pixel_in_decode_order():
    grey = (10, 10, 10)
    rows = [
        [WHITE, grey, WHITE],
        [WHITE, WHITE, grey],
    ]
    # the bottom row is stored first, so its grey pixel is found first
    with pytest.raises(UnsupportedColorError) as exc:
        pixels.decode_rows(pixel_data(make_bmp(rows)), 3, 2, 24)
    assert (exc.value.x, exc.value.y) == (2, 1)
    assert exc.value.rgb == grey
    assert "(2,1)" in str(exc.value)


def test_unsupported_color_top_down_order():
    grey = (10, 10, 10)
    rows = [
        [WHITE, grey, WHITE],
        [WHITE, WHITE, grey],
    ]
    with pytest.raises(UnsupportedColorError) as exc:
        pixels.decode_rows(pixel_data(make_bmp(rows, top_down=True)), 3, 2, 24, top_down=True)
    assert (exc.value.x, exc.value.y) == (1, 0)


def test_near_white_is_rejected():
    rows = [[WHITE, (255, 254, 255)]]
    with pytest.raises(UnsupportedColorError):
        pixels.decode_rows(pixel_data(make_bmp(rows)), 2, 1, 24)


@pytest.mark.parametrize("bpp", [1, 8, 16])
def test_unsupported_bit_depth(bpp):
    with pytest.raises(UnsupportedBitDepthError):
        pixels.decode_rows(b"\x00" * 64, 2, 2, bpp)
    with pytest.raises(UnsupportedBitDepthError):
        pixels.encode_rows(pixels.new_grid(2, 2), bpp)


def test_decode_short_pixel_data():
    data = pixel_data(make_bmp(checker(5, 3)))
    with pytest.raises(TruncatedFileError):
        pixels.decode_rows(data[:-1], 5, 3, 24)


def test_encode_matches_hand_built_rows():
    rows = checker(5, 3)
    grid = pixels.decode_rows(pixel_data(make_bmp(rows)), 5, 3, 24)
    assert pixels.encode_rows(grid, 24) == pixel_data(make_bmp(rows))


def test_encode_zero_fills_padding():
    grid = pixels.new_grid(1, 2, pixels.WHITE)
    assert pixels.encode_rows(grid, 24) == b"\xff\xff\xff\x00" * 2


def test_encode_32bit_writes_alpha():
    grid = pixels.new_grid(1, 1, (255, 255, 255, 128))
    assert pixels.encode_rows(grid, 32) == b"\xff\xff\xff\x80"


def test_predicates():
    assert pixels.is_black(pixels.BLACK)
    assert pixels.is_white(pixels.WHITE)
    assert not pixels.is_black(pixels.WHITE)
    assert not pixels.is_white((255, 255, 0, 255))
