import numpy as np

from pixels import BLACK


def _is_bounded(grid: np.ndarray, x: int, y: int) -> bool:
    height, width = grid.shape[:2]
    return 0 <= x < width and 0 <= y < height


def draw_line(grid: np.ndarray, x1: int, y1: int, x2: int, y2: int, color=BLACK) -> None:
    """Plot a line from (x1, y1) to (x2, y2) with integer Bresenham stepping.

    Points that fall outside the grid are skipped, so a line may start or end
    off-canvas and only its visible part gets drawn.
    """
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy

    x, y = x1, y1
    while True:
        if _is_bounded(grid, x, y):
            grid[y, x] = color
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def draw_cross(grid: np.ndarray, width=None, height=None, color=BLACK) -> None:
    if height is None:
        height = grid.shape[0]
    if width is None:
        width = grid.shape[1]
    draw_line(grid, 0, 0, width - 1, height - 1, color)
    draw_line(grid, width - 1, 0, 0, height - 1, color)
