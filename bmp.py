import logging
from typing import Self

import numpy as np

import header
import pixels
import raster
from errors import BmpError, BmpIOError, InvalidDimensionsError

logger = logging.getLogger(__name__)


class BmpImage:
    def __init__(self):
        self.filepath = None
        self.width = 0
        self.height = 0
        self.bpp = 0
        self.pixels: np.ndarray | None = None

    @classmethod
    def from_file(cls, filepath) -> Self:
        img = cls()
        img.load(filepath)
        return img

    @classmethod
    def from_bytes(cls, bmp_bytes: bytes) -> Self:
        img = cls()
        img.load_bytes(bmp_bytes)
        return img

    def load(self, filepath) -> None:
        try:
            with open(filepath, "rb") as f:
                bmp_bytes = f.read()
        except OSError as e:
            raise BmpIOError(filepath, e.strerror or str(e)) from e
        self.load_bytes(bmp_bytes)
        self.filepath = filepath
        logger.debug("loaded %s (%dx%d, %d bpp)", filepath, self.width, self.height, self.bpp)

    def load_bytes(self, bmp_bytes: bytes) -> None:
        """Decode a whole BMP blob and replace the current image with it.

        Nothing is assigned until decoding has fully succeeded, so a failed
        load leaves the previous image in place.
        """
        file_header, info_header = header.parse(bmp_bytes)
        width = info_header.width
        height = abs(info_header.height)
        if width <= 0 or height == 0:
            raise InvalidDimensionsError(info_header.width, info_header.height)

        grid = pixels.decode_rows(
            bmp_bytes[file_header.pixel_offset:],
            width,
            height,
            info_header.bits_per_pixel,
            top_down=info_header.is_top_down,
        )

        self.width = width
        self.height = height
        self.bpp = info_header.bits_per_pixel
        self.pixels = grid

    def is_loaded(self) -> bool:
        return self.pixels is not None

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def get_bits_per_pixel(self) -> int:
        return self.bpp

    def get_stride(self) -> int:
        return pixels.row_stride(self.width, self.bpp)

    def get_image_size(self) -> int:
        return self.get_stride() * self.height

    def draw_cross(self) -> None:
        if not self.is_loaded():
            logger.warning("draw_cross called before an image was loaded; nothing to draw")
            return
        raster.draw_cross(self.pixels, self.width, self.height)

    def to_bytes(self) -> bytes:
        if not self.is_loaded():
            raise BmpError("No image loaded")
        image_size = self.get_image_size()
        hdr = header.serialize(self.width, self.height, self.bpp, image_size)
        return hdr + pixels.encode_rows(self.pixels, self.bpp)

    def save(self, filepath) -> None:
        bmp_bytes = self.to_bytes()
        try:
            with open(filepath, "wb") as f:
                f.write(bmp_bytes)
        except OSError as e:
            raise BmpIOError(filepath, e.strerror or str(e)) from e
        logger.debug("wrote %d bytes to %s", len(bmp_bytes), filepath)
