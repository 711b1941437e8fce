import logging

import numpy as np

from errors import TruncatedFileError, UnsupportedBitDepthError, UnsupportedColorError

logger = logging.getLogger(__name__)

SUPPORTED_BPP = (24, 32)

# Grid pixels are stored as (r, g, b, a)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def is_black(pixel) -> bool:
    return bool(pixel[0] == 0 and pixel[1] == 0 and pixel[2] == 0)


def is_white(pixel) -> bool:
    return bool(pixel[0] == 255 and pixel[1] == 255 and pixel[2] == 255)


def new_grid(width: int, height: int, color=WHITE) -> np.ndarray:
    grid = np.empty((height, width, 4), dtype=np.uint8)
    grid[...] = color
    return grid


def row_stride(width: int, bits_per_pixel: int) -> int:
    return ((width * bits_per_pixel + 31) // 32) * 4


def _check_bpp(bits_per_pixel: int) -> int:
    if bits_per_pixel not in SUPPORTED_BPP:
        raise UnsupportedBitDepthError(bits_per_pixel)
    return bits_per_pixel // 8


def decode_rows(data: bytes, width: int, height: int, bits_per_pixel: int, top_down=False) -> np.ndarray:
    """Decode padded on-disk rows into an (height, width, 4) RGBA grid.

    ``data`` starts at the first byte of pixel data. Bottom-up storage is
    flipped so that grid row 0 is always the top of the picture. Every pixel
    has to be pure black or pure white; the first one that is not (in the
    order rows are stored in the file) raises UnsupportedColorError with its
    grid coordinates.
    """
    bytes_pp = _check_bpp(bits_per_pixel)
    stride = row_stride(width, bits_per_pixel)
    needed = stride * height
    if len(data) < needed:
        raise TruncatedFileError(needed, len(data), what="pixel data")
    logger.debug("decoding %dx%d @ %dbpp, stride=%d, top_down=%s", width, height, bits_per_pixel, stride, top_down)

    rows = np.frombuffer(data, dtype=np.uint8, count=needed).reshape(height, stride)
    px = rows[:, :width * bytes_pp].reshape(height, width, bytes_pp)

    bgr = px[..., :3]
    black = np.all(bgr == 0, axis=-1)
    white = np.all(bgr == 255, axis=-1)
    bad = ~(black | white)
    if bad.any():
        file_row, x = divmod(int(np.argmax(bad)), width)
        y = file_row if top_down else height - 1 - file_row
        b, g, r = (int(v) for v in bgr[file_row, x])
        raise UnsupportedColorError(x, y, (r, g, b))

    grid = np.empty((height, width, 4), dtype=np.uint8)
    grid[..., 0] = px[..., 2]
    grid[..., 1] = px[..., 1]
    grid[..., 2] = px[..., 0]
    if bytes_pp == 4:
        grid[..., 3] = px[..., 3]
    else:
        grid[..., 3] = 255

    if not top_down:
        grid = np.ascontiguousarray(grid[::-1])
    return grid


def encode_rows(grid: np.ndarray, bits_per_pixel: int) -> bytes:
    """Encode a grid as bottom-up rows padded to the row stride."""
    bytes_pp = _check_bpp(bits_per_pixel)
    height, width = grid.shape[:2]
    stride = row_stride(width, bits_per_pixel)

    px = np.empty((height, width, bytes_pp), dtype=np.uint8)
    px[..., 0] = grid[..., 2]
    px[..., 1] = grid[..., 1]
    px[..., 2] = grid[..., 0]
    if bytes_pp == 4:
        px[..., 3] = grid[..., 3]

    out = np.zeros((height, stride), dtype=np.uint8)
    out[:, :width * bytes_pp] = px[::-1].reshape(height, width * bytes_pp)
    return out.tobytes()
