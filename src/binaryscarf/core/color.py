"""Color representation for scarf patterns."""

from __future__ import annotations

import re
from dataclasses import dataclass

from binaryscarf.errors import ColorParseError

# 24-bit hexadecimal notation: 0xRRGGBB
_HEX_COLOR = re.compile(r"0x([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")


@dataclass(frozen=True, slots=True)
class Color:
    """A single RGBA color. Colors parsed from user input are always opaque."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b, self.a)):
            raise ValueError(
                f"RGBA values must be 0-255, got ({self.r}, {self.g}, {self.b}, {self.a})"
            )

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b)

    @classmethod
    def parse(cls, value: str) -> Color:
        """
        Parse a color in 24-bit hexadecimal notation, e.g. ``0x647384``.

        The prefix and digits are case-insensitive.

        Raises:
            ColorParseError: If the value is not exactly ``0x`` plus six hex digits.
        """
        v = value.lower()
        if len(v) != 8 or not v.startswith("0x"):
            raise ColorParseError(f"invalid or missing color value: {v!r}")

        match = _HEX_COLOR.fullmatch(v)
        if match is None:
            raise ColorParseError(f"invalid hexadecimal digits in color value: {v!r}")

        r, g, b = (int(group, 16) for group in match.groups())
        return cls(r, g, b)

    def to_hex(self) -> str:
        """Return the color in the same 0xRRGGBB notation ``parse`` accepts."""
        return f"0x{self.r:02x}{self.g:02x}{self.b:02x}"


# Default scarf palette: bit 0 / background, bit 1 / foreground
DEFAULT_BACKGROUND = Color(0xFF, 0xFF, 0xFF)
DEFAULT_FOREGROUND = Color(0x64, 0x73, 0x84)
