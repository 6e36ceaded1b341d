"""Read input text."""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def read_input(path: str | Path | None = None) -> bytes:
    """
    Read raw text from a file, or from standard input when no path is given.

    Raises:
        OSError: If the file or stdin cannot be read
    """
    if path is None:
        data = sys.stdin.buffer.read()
        logger.info("read %d bytes from stdin", len(data))
        return data

    path = Path(path)
    data = path.read_bytes()
    logger.info("read %d bytes from %s", len(data), path)
    return data
