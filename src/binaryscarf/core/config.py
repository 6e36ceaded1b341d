"""ScarfConfig - immutable settings for a scarf pattern."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from binaryscarf.core.color import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, Color
from binaryscarf.errors import ConfigError

# Every character is drawn as its low 7 bits.
BITS_PER_CHAR = 7


@dataclass(frozen=True)
class ScarfConfig:
    """
    Settings for laying out and drawing a scarf pattern.

    Spacing and border are measured in stitches; stitch size is in pixels.
    The palette is indexed by bit value: ``palette[0]`` is the background
    and "0" bit color, ``palette[1]`` the "1" bit and border color.

    Example:
        >>> config = ScarfConfig(columns=4, border=0)
        >>> config.column_width
        14
    """
    output: Path = Path("out.png")
    columns: int = 3
    spacing: int = 2
    border: int = 2
    stitch_width: int = 2
    stitch_height: int = 3
    palette: tuple[Color, Color] = field(
        default=(DEFAULT_BACKGROUND, DEFAULT_FOREGROUND)
    )

    @property
    def border_width(self) -> int:
        return self.border * self.stitch_width

    @property
    def border_height(self) -> int:
        return self.border * self.stitch_height

    @property
    def spacing_width(self) -> int:
        return self.spacing * self.stitch_width

    @property
    def spacing_height(self) -> int:
        return self.spacing * self.stitch_height

    @property
    def column_width(self) -> int:
        return BITS_PER_CHAR * self.stitch_width

    @property
    def background(self) -> Color:
        return self.palette[0]

    @property
    def foreground(self) -> Color:
        return self.palette[1]

    def validate(self) -> ScarfConfig:
        """
        Check that all values are in range.

        Returns the config itself so it can be chained after construction.

        Raises:
            ConfigError: On the first out-of-range value.
        """
        if not str(self.output).strip():
            raise ConfigError("output path must not be empty")
        if self.columns < 1:
            raise ConfigError(f"columns must be at least 1, got {self.columns}")
        if self.spacing < 0:
            raise ConfigError(f"spacing must not be negative, got {self.spacing}")
        if self.border < 0:
            raise ConfigError(f"border must not be negative, got {self.border}")
        if self.stitch_width < 1:
            raise ConfigError(f"stitch width must be at least 1, got {self.stitch_width}")
        if self.stitch_height < 1:
            raise ConfigError(f"stitch height must be at least 1, got {self.stitch_height}")
        if len(self.palette) != 2:
            raise ConfigError(f"palette must hold exactly 2 colors, got {len(self.palette)}")
        return self

    @classmethod
    def from_options(cls, **options: Any) -> ScarfConfig:
        """
        Build a validated config from keyword overrides of the defaults.

        Accepts ``color_a``/``color_b`` as 0xRRGGBB strings in addition to
        the dataclass fields. Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        background = options.pop("color_a", None)
        foreground = options.pop("color_b", None)

        unknown = set(options) - known
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(sorted(unknown))}")

        if "output" in options:
            output = options["output"]
            if isinstance(output, str) and not output.strip():
                raise ConfigError("output path must not be empty")
            options["output"] = Path(output)

        config = cls(**options).validate()

        if background is not None or foreground is not None:
            bg, fg = config.palette
            if background is not None:
                bg = Color.parse(background)
            if foreground is not None:
                fg = Color.parse(foreground)
            config = replace(config, palette=(bg, fg))

        return config
