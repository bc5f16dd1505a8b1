"""MovePanel: scrollable list of moves in algebraic notation."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from greekchess.core.move import Move


def format_move_pairs(moves: Sequence[Move]) -> list[str]:
    """Group half-moves into numbered rows: ``["1. e4 e5", "2. Nf3"]``."""
    rows: list[str] = []
    for idx in range(0, len(moves), 2):
        row = f"{idx // 2 + 1}. {moves[idx].notation}"
        if idx + 1 < len(moves):
            row += f" {moves[idx + 1].notation}"
        rows.append(row)
    return rows


class MovePanel(QWidget):
    """Displays the game's move history, one full move per row."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Chronicle of Moves")
        self._header.setFont(QFont("Georgia", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def set_history(self, moves: Sequence[Move]) -> None:
        """Rebuild the entire move list."""
        self._list.clear()
        self._list.addItems(format_move_pairs(moves))
        self._list.scrollToBottom()

    def clear(self) -> None:
        self._list.clear()

    def rows(self) -> list[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]
