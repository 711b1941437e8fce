import logging
import sys

import console
from bmp import BmpImage
from errors import BmpError, UnsupportedColorError

logger = logging.getLogger(__name__)


class Controller:
    def __init__(self, out=None, err=None, show=True):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.show = show
        self.bmp_image: BmpImage | None = None

    def show_error(self, title: str, e: Exception):
        logger.error("%s: %s", title, e)
        self.err.write(f"{title}: {e}\n")

    def open_bmp_file(self, path: str) -> bool:
        img = self.bmp_image or BmpImage()
        try:
            img.load(path)
        except UnsupportedColorError as e:
            self.show_error("Open Error", e)
            self.err.write(f"Offending pixel: column {e.x}, row {e.y}\n")
            return False
        except BmpError as e:
            self.show_error("Open Error", e)
            return False

        self.bmp_image = img
        return True

    def display_image(self, title: str):
        if not self.show or not self.bmp_image:
            return
        self.out.write(f"\n{title}:\n")
        console.print_grid(self.bmp_image.pixels, self.out)

    def apply_cross(self):
        if not self.bmp_image:
            self.err.write("No image: open a BMP file first.\n")
            return
        self.bmp_image.draw_cross()

    def save_bmp_file(self, path: str) -> bool:
        if not self.bmp_image:
            self.err.write("No image: open a BMP file first.\n")
            return False
        try:
            self.bmp_image.save(path)
        except BmpError as e:
            self.show_error("Write Error", e)
            return False

        self.out.write(f"BMP saved successfully to {path}\n")
        return True
