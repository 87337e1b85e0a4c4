# Constants definition

PADDING = 40  # Canvas padding on every side (px)
LINE_HEIGHT_MULTIPLIER = 1.6
HEADER_LINES = 2  # Header line plus one blank line before content

LINE_NUMBER_WIDTH = 5
LINE_NUMBER_ARROW = "→"
TAB_SPACES = "    "  # Tab replacement (4 spaces)

DEFAULT_TITLE = "API Documentation"
DEFAULT_IMAGE_WIDTH = 1400
DEFAULT_DENSITY = "medium"
DEFAULT_OUTPUT_DIR = "docshot"

IMAGE_EXTENSION = ".png"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
REFERENCE_MARKER = "@"
