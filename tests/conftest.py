import struct

import pytest

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def make_bmp(rows, bpp=24, top_down=False, compression=0, signature=b"BM", alpha=255, pad_byte=0):
    """Build a BMP blob by hand from top-to-bottom rows of (r, g, b) tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    bytes_pp = bpp // 8
    stride = ((width * bpp + 31) // 32) * 4

    stored = rows if top_down else list(reversed(rows))
    pix = bytearray()
    for row in stored:
        line = bytearray()
        for r, g, b in row:
            line += bytes((b, g, r))
            if bytes_pp == 4:
                line.append(alpha)
        line += bytes([pad_byte]) * (stride - len(line))
        pix += line

    offset = 54
    filehdr = struct.pack("<2sIHHI", signature, offset + len(pix), 0, 0, offset)
    infohdr = struct.pack(
        "<IiiHHIIiiII",
        40, width, -height if top_down else height, 1, bpp, compression, len(pix), 2835, 2835, 0, 0,
    )
    return filehdr + infohdr + bytes(pix)


def checker(width, height):
    return [[BLACK if (x + y) % 2 else WHITE for x in range(width)] for y in range(height)]


@pytest.fixture
def write_bmp(tmp_path):
    def _write(name, blob):
        path = tmp_path / name
        path.write_bytes(blob)
        return str(path)
    return _write
