"""Rasterizing scarf patterns."""

from binaryscarf.render.canvas import PixelCanvas
from binaryscarf.render.pattern import PatternRenderer, compute_pattern_size, draw_pattern

__all__ = ["PixelCanvas", "PatternRenderer", "compute_pattern_size", "draw_pattern"]
