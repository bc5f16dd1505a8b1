"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_THEME_NAMES = ("Marble", "Bronze", "Classic")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Marble"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    show_god_names: bool = True

    # Behaviour
    confirm_reset: bool = True
