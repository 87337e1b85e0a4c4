# Font handling module

import logging
import os
from functools import lru_cache

from PIL import ImageFont

logger = logging.getLogger(__name__)

MONOSPACE_FONTS = [
    # Linux
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    # macOS
    "/System/Library/Fonts/Monaco.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "/Library/Fonts/Courier New.ttf",
    # Windows
    "C:/Windows/Fonts/consola.ttf",
    "C:/Windows/Fonts/cour.ttf",
]


@lru_cache(maxsize=16)
def get_font(font_size: int, font_path: str = None):
    """
    Get monospace font object.

    Args:
        font_size: Font size in pixels
        font_path: Optional font path, if None will search system fonts

    Returns:
        ImageFont object
    """
    if font_path:
        if os.path.exists(font_path):
            return ImageFont.truetype(font_path, font_size)
        logger.warning("Font not found: %s, falling back to system fonts", font_path)

    for path in MONOSPACE_FONTS:
        if os.path.exists(path):
            logger.debug("Using font %s at %dpx", path, font_size)
            return ImageFont.truetype(path, font_size)

    logger.warning("No monospace font found, using Pillow default font")
    return ImageFont.load_default(size=font_size)
