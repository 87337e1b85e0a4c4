# Core rendering module

import io
from dataclasses import dataclass
from typing import Iterator, Sequence

from PIL import Image as PIL_Image, ImageDraw

from .constants import (
    DEFAULT_TITLE, HEADER_LINES, LINE_NUMBER_ARROW, LINE_NUMBER_WIDTH, PADDING, TAB_SPACES
)
from .fonts import get_font
from .layout import RenderConfig
from .naming import page_filename
from .pagination import Page, paginate
from .syntax import classify_line
from .theme import DARK_THEME, Theme


@dataclass(frozen=True)
class RenderedImage:
    """PNG-encoded page plus the filename it is written under."""

    filename: str
    data: bytes
    page_number: int
    total_pages: int


def page_header(title: str, index: int, total_pages: int) -> str:
    return f"{title} - Page {index + 1}/{total_pages}"


def line_number_prefix(line_number: int) -> str:
    return f"{line_number:>{LINE_NUMBER_WIDTH}}{LINE_NUMBER_ARROW}"


def _display_text(line: str) -> str:
    return line.rstrip("\r").replace("\t", TAB_SPACES)


def render_page(
    page: Page,
    total_pages: int,
    config: RenderConfig,
    theme: Theme = DARK_THEME,
    title: str = DEFAULT_TITLE,
    font=None,
    font_path: str = None,
) -> RenderedImage:
    """
    Render one page as a terminal-style PNG.

    Layout (baseline coordinates):
        header at (PADDING, PADDING + font_size)
        content starts at PADDING + 2 * line_height, one line_height apart

    Each content line is drawn as a right-aligned line number and arrow in the
    muted color, then the text in its classified color. Long lines are not
    wrapped and run off the right edge.

    Args:
        page: Page to draw
        total_pages: Page count of the whole document (for the header)
        config: Page geometry
        theme: Colors
        title: Header title
        font: Preloaded font, overrides font_path
        font_path: Font file path

    Returns:
        RenderedImage
    """
    if font is None:
        font = get_font(config.font_size, font_path)

    line_height = config.line_height
    img = PIL_Image.new("RGB", config.canvas_size, color=theme.background)
    try:
        draw = ImageDraw.Draw(img)

        draw.text(
            (PADDING, PADDING + config.font_size),
            page_header(title, page.index, total_pages),
            font=font,
            fill=theme.muted,
            anchor="ls",
        )

        y = PADDING + line_height * HEADER_LINES
        for offset, line in enumerate(page.lines):
            prefix = line_number_prefix(page.start_line + offset)
            draw.text((PADDING, y), prefix, font=font, fill=theme.muted, anchor="ls")

            text = _display_text(line)
            if text:
                text_x = PADDING + draw.textlength(prefix + " ", font=font)
                draw.text(
                    (text_x, y),
                    text,
                    font=font,
                    fill=theme.color_for(classify_line(line)),
                    anchor="ls",
                )
            y += line_height

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
    finally:
        img.close()

    return RenderedImage(
        filename=page_filename(page.index),
        data=buffer.getvalue(),
        page_number=page.number,
        total_pages=total_pages,
    )


def render_pages(
    lines: Sequence[str],
    config: RenderConfig,
    theme: Theme = DARK_THEME,
    title: str = DEFAULT_TITLE,
    font_path: str = None,
) -> Iterator[RenderedImage]:
    """
    Stream render document lines to pages (generator version).

    Pages are rendered one at a time in order; only one canvas is alive at once.
    """
    pages = paginate(lines, config.lines_per_page)
    font = get_font(config.font_size, font_path)
    for page in pages:
        yield render_page(page, len(pages), config, theme=theme, title=title, font=font)
