"""
Normalize raw input text before layout.

Line breaks and tabs become spaces, carriage returns are dropped, and
doubled spaces are collapsed so words are separated by one stitch row.
Works at byte level; the pattern encodes bytes, not code points.
"""

import logging

from binaryscarf.errors import ConfigError, EmptyInputError

logger = logging.getLogger(__name__)


def filter_text(data: bytes, repeat: int = 1) -> bytes:
    """
    Return the filtered text, repeated ``repeat`` times.

    The double-space collapse is a single left-to-right pass, so three
    consecutive whitespace bytes end up as two spaces, not one.

    Args:
        data: Raw input bytes
        repeat: Number of copies of the filtered text to concatenate

    Returns:
        Filtered bytes, never empty

    Raises:
        ConfigError: If repeat is less than 1
        EmptyInputError: If nothing is left after filtering
    """
    if repeat < 1:
        raise ConfigError(f"repeat must be at least 1, got {repeat}")

    v = data.replace(b"\r", b"")
    v = v.replace(b"\n", b" ")
    v = v.replace(b"\t", b" ")
    v = v.replace(b"  ", b" ")
    v = v.strip()

    if not v:
        raise EmptyInputError()

    logger.debug("filtered %d bytes down to %d, repeat=%d", len(data), len(v), repeat)
    return v * repeat
