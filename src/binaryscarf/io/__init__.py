"""File I/O for scarf input text and output images."""

from binaryscarf.io.reader import read_input
from binaryscarf.io.writer import encode_png, save_png

__all__ = ["read_input", "encode_png", "save_png"]
