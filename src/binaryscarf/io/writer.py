"""Save scarf patterns as PNG."""

import io
import logging
from pathlib import Path

from binaryscarf.render.canvas import PixelCanvas

logger = logging.getLogger(__name__)


def encode_png(canvas: PixelCanvas) -> bytes:
    """Encode a canvas as PNG bytes."""
    buf = io.BytesIO()
    canvas.to_image().save(buf, format="PNG")
    return buf.getvalue()


def save_png(canvas: PixelCanvas, path: str | Path) -> Path:
    """
    Write a canvas to disk as PNG.

    The image is fully encoded before the file is opened, so a failed
    encode leaves no partial output behind.

    Returns:
        The path written to
    """
    path = Path(path)
    data = encode_png(canvas)
    path.write_bytes(data)
    logger.info("wrote %dx%d pattern to %s (%d bytes)", canvas.width, canvas.height, path, len(data))
    return path
