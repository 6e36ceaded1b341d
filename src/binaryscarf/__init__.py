"""
binaryscarf: turn text into a binary scarf knitting pattern

Each character becomes a row of seven stitches spelling out its 7-bit
ASCII value. Rows run down a configurable number of columns, framed by
optional decorative borders, and the result is saved as a PNG.

Quick Start:
    >>> import binaryscarf
    >>> img = binaryscarf.render_scarf("Hello, world", columns=2)
    >>> img.save("hello.png")

    >>> pattern = binaryscarf.ScarfPattern.from_text(b"Hello", binaryscarf.ScarfConfig())
    >>> pattern.save("hello.png")
"""

from typing import Any

from PIL import Image

__version__ = "0.3.0"

# Core types
from binaryscarf.core.char import Char
from binaryscarf.core.color import Color
from binaryscarf.core.config import ScarfConfig
from binaryscarf.core.pattern import ScarfPattern

# Errors
from binaryscarf.errors import ColorParseError, ConfigError, EmptyInputError, ScarfError

# Pipeline stages
from binaryscarf.text.filter import filter_text
from binaryscarf.layout.engine import build_character_set
from binaryscarf.render.pattern import draw_pattern


def render_scarf(text: str | bytes, repeat: int = 1, **options: Any) -> Image.Image:
    """
    Render text to a scarf pattern image.

    Keyword options override ScarfConfig defaults; colors may be given as
    ``color_a``/``color_b`` in 0xRRGGBB notation.
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    config = ScarfConfig.from_options(**options)
    return ScarfPattern.from_text(data, config, repeat).to_image()


__all__ = [
    # Version
    "__version__",
    # Core types
    "Char",
    "Color",
    "ScarfConfig",
    "ScarfPattern",
    # Errors
    "ScarfError",
    "ConfigError",
    "ColorParseError",
    "EmptyInputError",
    # Pipeline
    "filter_text",
    "build_character_set",
    "draw_pattern",
    "render_scarf",
]
