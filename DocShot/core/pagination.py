# Pagination module

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class Page:
    """A contiguous slice of document lines rendered to one image."""

    index: int  # 0-based ordinal
    start_line: int  # 1-based number of the first line
    lines: Tuple[str, ...]

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def end_line(self) -> int:
        """1-based number of the last line (start_line - 1 for an empty page)."""
        return self.start_line + len(self.lines) - 1

    def __len__(self) -> int:
        return len(self.lines)


def split_lines(content: str) -> List[str]:
    """Split raw file content on line feeds; always yields at least one line."""
    return content.split("\n")


def page_count(num_lines: int, lines_per_page: int) -> int:
    """Number of pages needed for num_lines lines."""
    _check_lines_per_page(lines_per_page)
    return math.ceil(num_lines / lines_per_page)


def paginate(lines: Sequence[str], lines_per_page: int) -> List[Page]:
    """
    Split document lines into fixed-size pages.

    Every page except possibly the last holds exactly lines_per_page lines.
    An empty document produces no pages.

    Args:
        lines: Document lines in order
        lines_per_page: Maximum lines on one page (>= 1)

    Returns:
        List of Page objects in order
    """
    _check_lines_per_page(lines_per_page)

    pages = []
    for index, offset in enumerate(range(0, len(lines), lines_per_page)):
        pages.append(
            Page(
                index=index,
                start_line=offset + 1,
                lines=tuple(lines[offset:offset + lines_per_page]),
            )
        )
    return pages


def _check_lines_per_page(lines_per_page: int) -> None:
    if not isinstance(lines_per_page, int) or lines_per_page < 1:
        raise InvalidConfiguration(
            f"Lines per page must be a positive integer, got {lines_per_page!r}"
        )
