# DocShot Core Module
# Pagination, line coloring and page rendering

from .constants import (
    DEFAULT_DENSITY,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TITLE,
    PADDING,
    PNG_SIGNATURE,
)
from .errors import (
    DocShotError,
    InputNotFound,
    DirectoryNotFound,
    NotADirectory,
    NoContentFound,
    NoImagesFound,
    InvalidConfiguration,
    ExternalProcessError,
    InputDecodeError,
)
from .fonts import get_font
from .pagination import Page, paginate, page_count, split_lines
from .syntax import ColorCategory, classify_line, KEYWORDS
from .theme import Theme, DARK_THEME, LIGHT_THEME, THEMES, get_theme
from .layout import (
    DensityPreset,
    DENSITY_PRESETS,
    RECOMMENDED_DENSITY,
    RenderConfig,
    get_density_preset,
    resolve_render_config,
)
from .naming import page_filename
from .rendering import RenderedImage, render_page, render_pages
from .references import find_images, build_reference_string

__all__ = [
    # Constants
    "DEFAULT_DENSITY",
    "DEFAULT_IMAGE_WIDTH",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_TITLE",
    "PADDING",
    "PNG_SIGNATURE",
    # Errors
    "DocShotError",
    "InputNotFound",
    "DirectoryNotFound",
    "NotADirectory",
    "NoContentFound",
    "NoImagesFound",
    "InvalidConfiguration",
    "ExternalProcessError",
    "InputDecodeError",
    # Fonts
    "get_font",
    # Pagination
    "Page",
    "paginate",
    "page_count",
    "split_lines",
    # Line coloring
    "ColorCategory",
    "classify_line",
    "KEYWORDS",
    "Theme",
    "DARK_THEME",
    "LIGHT_THEME",
    "THEMES",
    "get_theme",
    # Layout
    "DensityPreset",
    "DENSITY_PRESETS",
    "RECOMMENDED_DENSITY",
    "RenderConfig",
    "get_density_preset",
    "resolve_render_config",
    # Rendering
    "page_filename",
    "RenderedImage",
    "render_page",
    "render_pages",
    # References
    "find_images",
    "build_reference_string",
]
