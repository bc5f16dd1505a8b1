"""StatusPanel: turn indicator, game status and captured pieces."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from greekchess.core.enums import Color, GameStatus
from greekchess.game.state import GameState
from greekchess.theme.greek import SIDE_NAMES, theme_manager


def turn_text(color: Color) -> str:
    return f"{color.name.capitalize()}'s Turn ({SIDE_NAMES[color]})"


def status_text(status: GameStatus, side_to_move: Color) -> str:
    """Banner for *status*; empty while the game is simply in progress."""
    if status == GameStatus.CHECK:
        return "Check!"
    if status == GameStatus.CHECKMATE:
        winner = side_to_move.opposite.name.capitalize()
        return f"Checkmate! {winner} Wins!"
    if status == GameStatus.STALEMATE:
        return "Stalemate! Game Drawn"
    return ""


class StatusPanel(QWidget):
    """Shows whose turn it is, check / mate / stalemate, and captured gods."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnIndicator")
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self._status_label = QLabel()
        self._status_label.setObjectName("gameStatus")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setFont(QFont("Georgia", 14, QFont.Weight.Bold))
        layout.addWidget(self._status_label)

        # Pieces each side has lost
        self._captured_labels: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            label = QLabel()
            label.setFont(QFont("DejaVu Sans", 16))
            label.setWordWrap(True)
            layout.addWidget(label)
            self._captured_labels[color] = label

    def update_from(self, game: GameState) -> None:
        turn = game.current_turn
        self._turn_label.setText(turn_text(turn))
        self._set_property(self._turn_label, "side", str(turn))

        self._status_label.setText(status_text(game.status, turn))
        self._set_property(self._status_label, "state", game.status.name.lower())

        for color, label in self._captured_labels.items():
            captured = game.captured_pieces(color)
            label.setText("".join(theme_manager.piece_symbol(p) for p in captured))
            label.setToolTip("\n".join(theme_manager.piece_name(p) for p in captured))

    def displayed_turn(self) -> str:
        return self._turn_label.text()

    def displayed_status(self) -> str:
        return self._status_label.text()

    def displayed_captures(self, color: Color) -> str:
        return self._captured_labels[color].text()

    @staticmethod
    def _set_property(label: QLabel, name: str, value: str) -> None:
        label.setProperty(name, value)
        style = label.style()
        if style is not None:
            style.unpolish(label)
            style.polish(label)
