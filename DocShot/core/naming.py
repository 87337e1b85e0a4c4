# Output file naming

from .constants import IMAGE_EXTENSION


def page_filename(index: int) -> str:
    """
    Filename for the page at 0-based index, e.g. page_001.png.

    Names sort lexicographically in page order up to 999 pages.
    """
    return f"page_{index + 1:03d}{IMAGE_EXTENSION}"
