"""Text normalization for scarf input."""

from binaryscarf.text.filter import filter_text

__all__ = ["filter_text"]
