"""Greek mythology presentation layer over the core pieces."""

from greekchess.theme.greek import (
    GREEK_THEME,
    SIDE_NAMES,
    PieceTheme,
    ThemeManager,
    theme_manager,
)

__all__ = [
    "GREEK_THEME",
    "SIDE_NAMES",
    "PieceTheme",
    "ThemeManager",
    "theme_manager",
]
