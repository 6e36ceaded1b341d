"""ScarfPattern - high-level representation of a scarf pattern."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from binaryscarf.core.char import Char
from binaryscarf.core.config import ScarfConfig

if TYPE_CHECKING:
    from PIL import Image

    from binaryscarf.render.canvas import PixelCanvas


@dataclass
class ScarfPattern:
    """
    Filtered text laid out for drawing, with the config used to lay it out.

    Combines config + text + positioned characters into a single
    object for rendering or saving a pattern.
    """
    config: ScarfConfig
    text: bytes
    chars: list[Char] = field(default_factory=list)

    @classmethod
    def from_text(
        cls,
        data: bytes,
        config: ScarfConfig | None = None,
        repeat: int = 1,
    ) -> ScarfPattern:
        """Filter raw text and lay it out."""
        from binaryscarf.layout.engine import build_character_set
        from binaryscarf.text.filter import filter_text

        config = (config or ScarfConfig()).validate()
        text = filter_text(data, repeat)
        return cls(config=config, text=text, chars=build_character_set(config, text))

    @property
    def size(self) -> tuple[int, int]:
        """Pattern (width, height) in pixels."""
        from binaryscarf.render.pattern import compute_pattern_size
        return compute_pattern_size(self.config, self.chars)

    @property
    def column_count(self) -> int:
        """Number of columns that actually hold characters."""
        return len({char.x for char in self.chars})

    def render(self) -> PixelCanvas:
        """Draw the pattern onto a new canvas."""
        from binaryscarf.render.pattern import draw_pattern
        return draw_pattern(self.config, self.chars)

    def to_image(self) -> Image.Image:
        """Render to a Pillow RGBA image."""
        return self.render().to_image()

    def save(self, path: str | Path | None = None) -> Path:
        """Save as PNG to path, or to the configured output."""
        from binaryscarf.io.writer import save_png
        return save_png(self.render(), path if path is not None else self.config.output)
