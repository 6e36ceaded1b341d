"""Char - a single character positioned on the pattern."""

from __future__ import annotations

from dataclasses import dataclass

from binaryscarf.core.config import BITS_PER_CHAR


@dataclass(frozen=True, slots=True)
class Char:
    """A byte value with the top-left pixel of its stitch row."""
    value: int
    x: int
    y: int

    @property
    def is_space(self) -> bool:
        return self.value == 0x20

    def bits(self) -> tuple[int, ...]:
        """Low 7 bits of the value, most significant first."""
        return tuple((self.value >> shift) & 1 for shift in range(BITS_PER_CHAR - 1, -1, -1))

    def bit_pattern(self) -> str:
        """The bits as a string of 0s and 1s, e.g. ``'1000001'`` for 'A'."""
        return "".join(str(bit) for bit in self.bits())
