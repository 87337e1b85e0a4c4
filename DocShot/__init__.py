# DocShot - Documentation to terminal-style images
#
# Simple usage:
#   from DocShot import convert_file, resolve_render_config
#   convert_file("docs/api.md", "docshot", resolve_render_config("medium"))
#
# CLI:
#   docshot convert docs/api.md --density medium
#   docload --images docshot

__version__ = "1.0.0"

from .api import (
    ConversionResult,
    BatchResult,
    load_document,
    write_image,
    convert_document,
    convert_file,
    convert_files,
    expand_inputs,
)
from .core import (
    Page,
    paginate,
    page_count,
    ColorCategory,
    classify_line,
    Theme,
    DARK_THEME,
    LIGHT_THEME,
    RenderConfig,
    DENSITY_PRESETS,
    resolve_render_config,
    RenderedImage,
    render_page,
    render_pages,
    page_filename,
    find_images,
    build_reference_string,
    DocShotError,
    InputNotFound,
    DirectoryNotFound,
    NotADirectory,
    NoContentFound,
    NoImagesFound,
    InvalidConfiguration,
    ExternalProcessError,
)

__all__ = [
    # High-level API
    "ConversionResult",
    "BatchResult",
    "load_document",
    "write_image",
    "convert_document",
    "convert_file",
    "convert_files",
    "expand_inputs",
    # Core functions
    "Page",
    "paginate",
    "page_count",
    "ColorCategory",
    "classify_line",
    "Theme",
    "DARK_THEME",
    "LIGHT_THEME",
    "RenderConfig",
    "DENSITY_PRESETS",
    "resolve_render_config",
    "RenderedImage",
    "render_page",
    "render_pages",
    "page_filename",
    "find_images",
    "build_reference_string",
    # Errors
    "DocShotError",
    "InputNotFound",
    "DirectoryNotFound",
    "NotADirectory",
    "NoContentFound",
    "NoImagesFound",
    "InvalidConfiguration",
    "ExternalProcessError",
]
