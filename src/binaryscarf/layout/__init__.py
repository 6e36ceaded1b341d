"""Column-major layout of text into positioned characters."""

from binaryscarf.layout.engine import build_character_set, column_top, rows_per_column

__all__ = ["build_character_set", "column_top", "rows_per_column"]
