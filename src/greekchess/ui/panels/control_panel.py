"""ControlPanel: game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: undo and new game."""

    undo_clicked = pyqtSignal()
    new_game_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Georgia", 10)

        self._btn_undo = QPushButton("Undo")
        self._btn_undo.setFont(btn_font)
        self._btn_undo.setMinimumHeight(36)
        self._btn_undo.setEnabled(False)
        self._btn_undo.clicked.connect(self.undo_clicked)
        layout.addWidget(self._btn_undo)

        self._btn_new = QPushButton("New Game")
        self._btn_new.setFont(btn_font)
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

    @property
    def undo_button(self) -> QPushButton:
        return self._btn_undo

    @property
    def new_game_button(self) -> QPushButton:
        return self._btn_new

    def set_can_undo(self, enabled: bool) -> None:
        self._btn_undo.setEnabled(enabled)
