"""PixelCanvas - flat RGBA pixel buffer the pattern is drawn into."""

from __future__ import annotations

from PIL import Image

from binaryscarf.core.color import Color

# Bytes per pixel: R, G, B, A
_BPP = 4


class PixelCanvas:
    """
    A width x height grid of RGBA pixels stored row-major in one bytearray.

    The buffer is allocated once at construction and starts out fully
    transparent black. Single pixel access is bounds-checked; rectangle
    fills are clipped to the canvas, so drawing partly or fully outside
    it is silently cut off.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty canvas.

        Args:
            width: Width in pixels
            height: Height in pixels
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._buffer = bytearray(width * height * _BPP)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Position ({x}, {y}) out of bounds ({self._width}x{self._height})")
        return (y * self._width + x) * _BPP

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Get pixel at position.

        Raises:
            IndexError: If position is out of bounds
        """
        i = self._offset(x, y)
        r, g, b, a = self._buffer[i:i + _BPP]
        return Color(r, g, b, a)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Set pixel at position.

        Raises:
            IndexError: If position is out of bounds
        """
        i = self._offset(x, y)
        self._buffer[i:i + _BPP] = bytes(color.rgba)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Fill the rectangle at (x, y) of size w x h, clipped to the canvas."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self._width), min(y + h, self._height)
        if x0 >= x1 or y0 >= y1:
            return

        span = bytes(color.rgba) * (x1 - x0)
        for py in range(y0, y1):
            start = (py * self._width + x0) * _BPP
            self._buffer[start:start + len(span)] = span

    def fill(self, color: Color) -> None:
        """Fill entire canvas with a single color."""
        self._buffer[:] = bytes(color.rgba) * (self._width * self._height)

    def to_bytes(self) -> bytes:
        """Raw RGBA bytes, row-major."""
        return bytes(self._buffer)

    def to_image(self) -> Image.Image:
        """Convert to a Pillow RGBA image."""
        return Image.frombytes("RGBA", self.size, self.to_bytes())
