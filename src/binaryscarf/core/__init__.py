"""Core data structures for scarf patterns."""

from binaryscarf.core.char import Char
from binaryscarf.core.color import Color
from binaryscarf.core.config import ScarfConfig
from binaryscarf.core.pattern import ScarfPattern

__all__ = ["Char", "Color", "ScarfConfig", "ScarfPattern"]
