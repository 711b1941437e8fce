class BmpError(ValueError):
    """Base class for everything that can go wrong reading or writing a BMP."""


class BmpIOError(BmpError, OSError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"I/O error on {path}: {reason}")


class InvalidSignatureError(BmpError):
    def __init__(self, signature: bytes):
        self.signature = signature
        super().__init__(f"Not a BMP file (expected 'BM', got {signature!r})")


class UnsupportedCompressionError(BmpError):
    def __init__(self, compression: int):
        self.compression = compression
        super().__init__(f"Unsupported compression mode: {compression} (only 0 is supported)")


class UnsupportedBitDepthError(BmpError):
    def __init__(self, bits_per_pixel: int):
        self.bits_per_pixel = bits_per_pixel
        super().__init__(f"Unsupported bits-per-pixel: {bits_per_pixel} (allowed: 24, 32)")


class UnsupportedColorError(BmpError):
    def __init__(self, x: int, y: int, rgb=None):
        self.x = x
        self.y = y
        self.rgb = rgb
        msg = f"Image contains colors other than black/white at ({x},{y})"
        if rgb is not None:
            msg += f": {tuple(rgb)}"
        super().__init__(msg)


class TruncatedFileError(BmpError):
    def __init__(self, needed: int, available: int, what="data"):
        self.needed = needed
        self.available = available
        super().__init__(f"Truncated BMP {what}: needed {needed} bytes, got {available}")


class InvalidDimensionsError(BmpError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Invalid image dimensions: {width}x{height}")
