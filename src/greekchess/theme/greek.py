"""Greek mythology theme: every (piece type, color) is played by a god.

White fields the Olympians, black the powers of the underworld.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from greekchess.core.enums import Color, PieceType
from greekchess.core.piece import Piece


@dataclass(frozen=True, slots=True)
class PieceTheme:
    """Display data for one themed piece."""

    name: str
    symbol: str
    description: str
    realm: str | None = None


def _pair(white: PieceTheme, black: PieceTheme) -> Mapping[Color, PieceTheme]:
    return MappingProxyType({Color.WHITE: white, Color.BLACK: black})


GREEK_THEME: Mapping[PieceType, Mapping[Color, PieceTheme]] = MappingProxyType(
    {
        PieceType.KING: _pair(
            PieceTheme(
                "Zeus",
                "♔",
                "King of the Gods, ruler of Mount Olympus",
                "Sky & Thunder",
            ),
            PieceTheme(
                "Hades",
                "♚",
                "God of the Underworld, lord of the dead",
                "Underworld",
            ),
        ),
        PieceType.QUEEN: _pair(
            PieceTheme(
                "Hera", "♕", "Queen of the Gods, goddess of marriage", "Olympus"
            ),
            PieceTheme("Persephone", "♛", "Queen of the Underworld", "Underworld"),
        ),
        PieceType.ROOK: _pair(
            PieceTheme(
                "Poseidon",
                "♖",
                "God of the Sea, wielder of the trident",
                "Seas & Oceans",
            ),
            PieceTheme("Ares", "♜", "God of War, master of battle", "Warfare"),
        ),
        PieceType.BISHOP: _pair(
            PieceTheme(
                "Apollo", "♗", "God of Light, music, and prophecy", "Sun & Arts"
            ),
            PieceTheme(
                "Artemis",
                "♝",
                "Goddess of the Hunt and Moon",
                "Moon & Wilderness",
            ),
        ),
        PieceType.KNIGHT: _pair(
            PieceTheme(
                "Hermes",
                "♘",
                "Messenger of the Gods, swift traveler",
                "Speed & Commerce",
            ),
            PieceTheme(
                "Athena",
                "♞",
                "Goddess of Wisdom and Strategic Warfare",
                "Wisdom & Strategy",
            ),
        ),
        PieceType.PAWN: _pair(
            PieceTheme(
                "Olympian", "♙", "Mortal hero blessed by the gods", "Mount Olympus"
            ),
            PieceTheme(
                "Titan",
                "♟",
                "Ancient Titan, older than the gods",
                "Primordial Era",
            ),
        ),
    }
)

SIDE_NAMES: Mapping[Color, str] = MappingProxyType(
    {Color.WHITE: "Olympians", Color.BLACK: "Underworld"}
)

_ROLE_LABELS: dict[PieceType, str] = {
    PieceType.KING: "King",
    PieceType.QUEEN: "Queen",
    PieceType.ROOK: "Rooks",
    PieceType.BISHOP: "Bishops",
    PieceType.KNIGHT: "Knights",
    PieceType.PAWN: "Pawns",
}

_ROLE_BLURBS: dict[tuple[PieceType, Color], str] = {
    (PieceType.KING, Color.WHITE): "Zeus, ruler of Mount Olympus",
    (PieceType.QUEEN, Color.WHITE): "Hera, queen of the gods",
    (PieceType.ROOK, Color.WHITE): "Poseidon, god of the seas",
    (PieceType.BISHOP, Color.WHITE): "Apollo, god of light and prophecy",
    (PieceType.KNIGHT, Color.WHITE): "Hermes, swift messenger of the gods",
    (PieceType.PAWN, Color.WHITE): "Olympian heroes",
    (PieceType.KING, Color.BLACK): "Hades, lord of the underworld",
    (PieceType.QUEEN, Color.BLACK): "Persephone, queen of the dead",
    (PieceType.ROOK, Color.BLACK): "Ares, god of war",
    (PieceType.BISHOP, Color.BLACK): "Artemis, goddess of the hunt",
    (PieceType.KNIGHT, Color.BLACK): "Athena, goddess of wisdom",
    (PieceType.PAWN, Color.BLACK): "Ancient Titans",
}

# Listing order for rosters and descriptions.
_ROSTER_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


class ThemeManager:
    """Read-only lookups into :data:`GREEK_THEME`."""

    def theme_for(self, piece: Piece) -> PieceTheme:
        return GREEK_THEME[piece.piece_type][piece.color]

    def piece_name(self, piece: Piece) -> str:
        return self.theme_for(piece).name

    def piece_symbol(self, piece: Piece) -> str:
        return self.theme_for(piece).symbol

    def piece_description(self, piece: Piece) -> str:
        return self.theme_for(piece).description

    def piece_realm(self, piece: Piece) -> str | None:
        return self.theme_for(piece).realm

    def display_string(self, piece: Piece) -> str:
        """E.g. ``Zeus (♔) - King of the Gods, ruler of Mount Olympus``."""
        theme = self.theme_for(piece)
        return f"{theme.name} ({theme.symbol}) - {theme.description}"

    def side_theme(self, color: Color) -> dict[PieceType, PieceTheme]:
        return {pt: GREEK_THEME[pt][color] for pt in _ROSTER_ORDER}

    def side_name(self, color: Color) -> str:
        return SIDE_NAMES[color]

    def all_characters(self) -> list[str]:
        """Every character name, white then black for each piece type."""
        return [
            GREEK_THEME[pt][color].name
            for pt in _ROSTER_ORDER
            for color in (Color.WHITE, Color.BLACK)
        ]

    def game_description(self) -> str:
        lines = ["Greek Gods Chess - A Battle of Olympus on the Chessboard"]
        for color in (Color.WHITE, Color.BLACK):
            lines.append("")
            lines.append(f"{color.name.capitalize()} ({SIDE_NAMES[color]}):")
            lines.extend(
                f"- {_ROLE_LABELS[pt]}: {_ROLE_BLURBS[pt, color]}"
                for pt in _ROSTER_ORDER
            )
        return "\n".join(lines)


theme_manager = ThemeManager()
