# Color themes

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidConfiguration
from .syntax import ColorCategory

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Immutable color set passed into the renderer."""

    name: str
    background: RGB
    text: RGB
    comment: RGB
    keyword: RGB
    muted: RGB  # Header and line numbers

    def color_for(self, category: ColorCategory) -> RGB:
        if category is ColorCategory.COMMENT:
            return self.comment
        if category is ColorCategory.KEYWORD:
            return self.keyword
        return self.text


# VS Code Dark+ colors
DARK_THEME = Theme(
    name="dark",
    background=(30, 30, 30),
    text=(212, 212, 212),
    comment=(106, 153, 85),
    keyword=(86, 156, 214),
    muted=(133, 133, 133),
)

# VS Code Light Modern colors
LIGHT_THEME = Theme(
    name="light",
    background=(255, 255, 255),
    text=(0, 0, 0),
    comment=(0, 128, 0),
    keyword=(0, 0, 255),
    muted=(110, 118, 129),
)

THEMES: Dict[str, Theme] = {
    DARK_THEME.name: DARK_THEME,
    LIGHT_THEME.name: LIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise InvalidConfiguration(
            f"Invalid theme '{name}'. Must be: {', '.join(THEMES)}"
        ) from None
