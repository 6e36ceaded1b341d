"""Lay out filtered text as positioned characters, column by column."""

from __future__ import annotations

import logging

from binaryscarf.core.char import Char
from binaryscarf.core.config import ScarfConfig

logger = logging.getLogger(__name__)

SPACE = 0x20


def rows_per_column(config: ScarfConfig, length: int) -> int:
    """Number of character rows each column holds: ceil(length / columns)."""
    return -(-length // config.columns)


def column_top(config: ScarfConfig) -> int:
    """Pixel Y of the first character row, below the top border if any."""
    top = config.spacing_height
    if config.border > 0:
        top += config.border_height + config.spacing_height
    return top


def build_character_set(config: ScarfConfig, data: bytes) -> list[Char]:
    """
    Convert text into Chars with their pixel coordinates precomputed.

    Characters fill a column top to bottom before moving to the next one.
    A space at the top of a column is dropped, and a space on a column's
    last row is dropped while moving on to the next column, so no column
    starts or ends with a blank row.

    Args:
        config: Scarf configuration
        data: Filtered text

    Returns:
        Chars in input order, minus the dropped spaces
    """
    rows = rows_per_column(config, len(data))
    top = column_top(config)
    bottom = top + rows * config.stitch_height
    step = config.column_width + config.spacing_width

    out: list[Char] = []
    x, y = config.spacing_width, top

    for b in data:
        if b == SPACE and y == top:
            continue

        if b == SPACE and y >= bottom - config.stitch_height:
            x, y = x + step, top
            continue

        out.append(Char(value=b, x=x, y=y))

        y += config.stitch_height
        if y >= bottom:
            x, y = x + step, top

    logger.info(
        "laid out %d of %d characters in %d rows per column",
        len(out), len(data), rows,
    )
    return out
