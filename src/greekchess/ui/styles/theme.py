"""Board colour schemes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # origin of the selected piece
    legal_target: QColor  # legal destination overlay
    check: QColor  # king in check
    last_move: QColor  # origin and destination of the last move
    coord_on_light: QColor
    coord_on_dark: QColor
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def marble(cls) -> BoardTheme:
        return cls(
            light_square=QColor(244, 240, 228),  # parian marble
            dark_square=QColor(128, 150, 168),  # aegean slate
            selected=QColor(255, 215, 0, 110),  # gold
            legal_target=QColor(30, 60, 90, 60),
            check=QColor(200, 30, 30, 130),
            last_move=QColor(218, 165, 32, 90),
            coord_on_light=QColor(128, 150, 168),
            coord_on_dark=QColor(244, 240, 228),
            white_piece=QColor(255, 252, 240),
            black_piece=QColor(28, 24, 32),
        )

    @classmethod
    def bronze(cls) -> BoardTheme:
        return cls(
            light_square=QColor(230, 200, 150),
            dark_square=QColor(140, 90, 45),
            selected=QColor(255, 215, 0, 110),
            legal_target=QColor(0, 0, 0, 50),
            check=QColor(200, 30, 30, 130),
            last_move=QColor(120, 170, 60, 100),
            coord_on_light=QColor(140, 90, 45),
            coord_on_dark=QColor(230, 200, 150),
            white_piece=QColor(255, 250, 235),
            black_piece=QColor(35, 20, 10),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),
            dark_square=QColor(181, 136, 99),
            selected=QColor(255, 255, 0, 100),
            legal_target=QColor(0, 0, 0, 40),
            check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_on_light=QColor(181, 136, 99),
            coord_on_dark=QColor(240, 217, 181),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Preset for a settings name; unknown names fall back to marble."""
        presets = {
            "Marble": cls.marble,
            "Bronze": cls.bronze,
            "Classic": cls.classic,
        }
        return presets.get(name, cls.marble)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #1f2a36;
}

QLabel {
    color: #f1ead8;
    font-family: "Cinzel", "Georgia", serif;
}

QLabel#turnIndicator {
    font-size: 16px;
    font-weight: bold;
    padding: 6px;
    border-radius: 4px;
    background: #f4f0e4;
    color: #1f2a36;
}
QLabel#turnIndicator[side="black"] {
    background: #2b1f2f;
    color: #f1ead8;
}

QLabel#gameStatus[state="check"] {
    color: #ffb347;
}
QLabel#gameStatus[state="checkmate"] {
    color: #ff6b6b;
}
QLabel#gameStatus[state="stalemate"] {
    color: #9ecbff;
}

QListWidget {
    background: #17202a;
    color: #e6dfcc;
    border: 1px solid #3a4a5a;
    font-family: "Georgia", serif;
    font-size: 13px;
}

QPushButton {
    background: #2f4050;
    color: #f1ead8;
    border: 1px solid #b8962e;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #3c5266;
}
QPushButton:pressed {
    background: #b8962e;
}
QPushButton:disabled {
    color: #6b7280;
    border-color: #3a4a5a;
    background: #1f2a36;
}

QMenuBar {
    background: #1f2a36;
    color: #f1ead8;
}
QMenuBar::item:selected {
    background: #2f4050;
}
QMenu {
    background: #1f2a36;
    color: #f1ead8;
    border: 1px solid #3a4a5a;
}
QMenu::item:selected {
    background: #b8962e;
}
"""
