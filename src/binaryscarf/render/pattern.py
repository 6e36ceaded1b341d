"""Rasterize positioned characters into a scarf pattern image."""

from __future__ import annotations

import logging
from typing import Iterable

from binaryscarf.core.char import Char
from binaryscarf.core.config import BITS_PER_CHAR, ScarfConfig
from binaryscarf.render.canvas import PixelCanvas

logger = logging.getLogger(__name__)


def compute_pattern_size(config: ScarfConfig, chars: Iterable[Char]) -> tuple[int, int]:
    """
    Return the (width, height) of the whole pattern in pixels.

    Width covers every column plus the spacing between and around them.
    Height reaches the lowest character row, plus the bottom border and
    its spacing when a border is configured.
    """
    w = config.columns * BITS_PER_CHAR + ((config.columns - 1) + 2) * config.spacing
    h = max((char.y for char in chars), default=0)

    h += config.stitch_height
    if config.border > 0:
        h += config.spacing_height + config.border_height + config.spacing_height

    return (w * config.stitch_width, h)


class PatternRenderer:
    """
    Draw a scarf pattern onto a PixelCanvas.

    Example:
        >>> canvas = PatternRenderer(config).render(chars)
        >>> canvas.to_image().save("scarf.png")
    """

    def __init__(self, config: ScarfConfig):
        self.config = config

    def render(self, chars: list[Char]) -> PixelCanvas:
        """Render characters, borders and background to a new canvas."""
        c = self.config
        width, height = compute_pattern_size(c, chars)
        canvas = PixelCanvas(width, height)

        canvas.fill(c.background)

        if c.border > 0:
            self._draw_borders(canvas)

        # Characters, top down per column
        for char in chars:
            self.plot_char(canvas, char)

        logger.info("rendered %d characters onto %dx%d canvas", len(chars), width, height)
        return canvas

    def _draw_borders(self, canvas: PixelCanvas) -> None:
        c = self.config
        x = c.spacing_width
        w = canvas.width - c.spacing_width * 2
        h = c.border_height

        canvas.fill_rect(x, c.spacing_height, w, h, c.foreground)
        canvas.fill_rect(x, canvas.height - c.spacing_height - h, w, h, c.foreground)

    def plot_char(self, canvas: PixelCanvas, char: Char) -> None:
        """Draw the 7-bit value of a character as a row of stitches."""
        if char.is_space:
            logger.debug("  %r: <ignored>", chr(char.value))
            return

        logger.debug("  %r: %s", chr(char.value), char.bit_pattern())
        sw, sh = self.config.stitch_width, self.config.stitch_height
        x = char.x
        for bit in char.bits():
            canvas.fill_rect(x, char.y, sw, sh, self.config.palette[bit])
            x += sw


def draw_pattern(config: ScarfConfig, chars: list[Char]) -> PixelCanvas:
    """Draw the pattern and return the resulting canvas."""
    return PatternRenderer(config).render(chars)
