# Line classification module
#
# A handful of prefix heuristics, not a real highlighter: the whole line gets
# one color.

import re
from enum import Enum


class ColorCategory(Enum):
    COMMENT = "comment"
    KEYWORD = "keyword"
    DEFAULT = "default"


COMMENT_PREFIXES = ("#", "//")

KEYWORDS = (
    "function", "const", "let", "var", "class", "import", "export", "return",
    "if", "else", "for", "while", "async", "await", "interface", "type", "enum",
)

_KEYWORD_RE = re.compile(r"^(?:%s)\b" % "|".join(KEYWORDS))


def classify_line(line: str) -> ColorCategory:
    """
    Classify a line for coloring.

    Rules, first match wins:
        1. trimmed line starts with '#' or '//'  -> COMMENT
        2. trimmed line starts with a keyword     -> KEYWORD
        3. anything else                          -> DEFAULT

    Markdown headings also start with '#', so they come out as COMMENT.
    """
    trimmed = line.strip()

    if trimmed.startswith(COMMENT_PREFIXES):
        return ColorCategory.COMMENT

    if _KEYWORD_RE.match(trimmed):
        return ColorCategory.KEYWORD

    return ColorCategory.DEFAULT
