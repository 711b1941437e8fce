import logging
import struct
from dataclasses import dataclass

from errors import InvalidSignatureError, TruncatedFileError, UnsupportedCompressionError

logger = logging.getLogger(__name__)

# -------- BITMAPFILEHEADER --------
# signature       2s  = b"BM"
# file_size       u32
# reserved1       u16
# reserved2       u16
# pixel_offset    u32
SIGNATURE = b"BM"
FILE_HEADER_STRUCT = "<2sIHHI"

# -------- BITMAPINFOHEADER --------
# header_size       u32
# width             i32
# height            i32  (negative = top-down rows)
# planes            u16
# bits_per_pixel    u16
# compression       u32
# image_size        u32
# x_pixels_per_m    i32
# y_pixels_per_m    i32
# colors_used       u32
# colors_important  u32
INFO_HEADER_STRUCT = "<IiiHHIIiiII"

FILE_HEADER_SIZE = struct.calcsize(FILE_HEADER_STRUCT)
INFO_HEADER_SIZE = struct.calcsize(INFO_HEADER_STRUCT)
HEADERS_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

COMPRESSION_NONE = 0


@dataclass(frozen=True)
class FileHeader:
    signature: bytes
    file_size: int
    reserved1: int
    reserved2: int
    pixel_offset: int


@dataclass(frozen=True)
class InfoHeader:
    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    @property
    def is_top_down(self) -> bool:
        return self.height < 0


def parse(data: bytes) -> tuple[FileHeader, InfoHeader]:
    """Unpack the file and info headers from the start of a BMP blob.

    The signature is checked first so that a non-BMP input is rejected
    before anything else about it is interpreted.
    """
    if len(data) < 2 or data[0:2] != SIGNATURE:
        raise InvalidSignatureError(bytes(data[0:2]))
    if len(data) < HEADERS_SIZE:
        raise TruncatedFileError(HEADERS_SIZE, len(data), what="header")

    file_header = FileHeader(*struct.unpack_from(FILE_HEADER_STRUCT, data, 0))
    info_header = InfoHeader(*struct.unpack_from(INFO_HEADER_STRUCT, data, FILE_HEADER_SIZE))
    logger.debug("file header: %s", file_header)
    logger.debug("info header: %s", info_header)

    if info_header.compression != COMPRESSION_NONE:
        raise UnsupportedCompressionError(info_header.compression)
    return file_header, info_header


def serialize(width: int, height: int, bits_per_pixel: int, image_size: int) -> bytes:
    pixel_offset = HEADERS_SIZE
    file_header = struct.pack(
        FILE_HEADER_STRUCT,
        SIGNATURE,
        pixel_offset + image_size,
        0,
        0,
        pixel_offset,
    )
    info_header = struct.pack(
        INFO_HEADER_STRUCT,
        INFO_HEADER_SIZE,
        width,
        height,
        1,  # planes
        bits_per_pixel,
        COMPRESSION_NONE,
        image_size,
        0, 0, 0, 0,
    )
    return file_header + info_header
