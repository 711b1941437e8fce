import sys

from pixels import is_black as _is_black

BLACK_GLYPH = "#"
WHITE_GLYPH = "."


def render(grid, is_black=_is_black) -> str:
    return "\n".join(
        "".join(BLACK_GLYPH if is_black(p) else WHITE_GLYPH for p in row)
        for row in grid
    )


def print_grid(grid, stream=None) -> None:
    stream = stream or sys.stdout
    stream.write(render(grid) + "\n")
