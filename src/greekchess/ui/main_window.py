"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from greekchess.core.position import Position
from greekchess.game.state import GameState
from greekchess.theme.greek import theme_manager
from greekchess.ui.board.board_view import BoardView
from greekchess.ui.panels.control_panel import ControlPanel
from greekchess.ui.panels.move_panel import MovePanel
from greekchess.ui.panels.status_panel import StatusPanel
from greekchess.ui.settings import BOARD_THEME_NAMES, AppSettings
from greekchess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: one local two-player game."""

    def __init__(
        self,
        game: GameState | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Greek Gods Chess")
        self.setMinimumSize(860, 620)
        self.resize(1040, 720)

        self._game = game if game is not None else GameState()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._board_view.board_scene.set_game(self._game)
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_panel = StatusPanel()
        right.addWidget(self._status_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        self._act_undo = QAction("Undo Move", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        menu_game.addAction(self._act_undo)

        menu_game.addSeparator()

        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        # View menu
        menu_view = menu_bar.addMenu("&View")
        assert menu_view is not None

        self._toggle_actions: dict[str, QAction] = {}
        for attr, label in (
            ("show_coordinates", "Show Coordinates"),
            ("show_legal_moves", "Show Legal Moves"),
            ("show_god_names", "Show God Names"),
        ):
            action = QAction(label, self)
            action.setCheckable(True)
            action.setChecked(getattr(self._settings, attr))
            action.toggled.connect(
                lambda checked, name=attr: self._on_toggle_setting(name, checked)
            )
            menu_view.addAction(action)
            self._toggle_actions[attr] = action

        menu_theme = menu_view.addMenu("Board Theme")
        assert menu_theme is not None
        for name in BOARD_THEME_NAMES:
            action = QAction(name, self)
            action.triggered.connect(
                lambda _checked=False, theme=name: self._on_board_theme(theme)
            )
            menu_theme.addAction(action)

        # Help menu
        menu_help = menu_bar.addMenu("&Help")
        assert menu_help is not None
        act_about = QAction("About the Gods", self)
        act_about.triggered.connect(self._on_about)
        menu_help.addAction(act_about)

    def _connect_signals(self) -> None:
        self._board_view.move_requested.connect(self._on_move_requested)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.new_game_clicked.connect(self._on_new_game)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def game(self) -> GameState:
        return self._game

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    @property
    def status_panel(self) -> StatusPanel:
        return self._status_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    def status_message(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_requested(self, from_pos: Position, to_pos: Position) -> None:
        result = self._game.make_move(from_pos, to_pos)
        if not result.success:
            _LOGGER.debug("Rejected %s-%s: %s", from_pos, to_pos, result.error)
            self._board_view.board_scene.refresh()
            self._status_label.setText(result.error or "")
            return
        self._refresh()

    def _on_undo(self) -> None:
        if not self._game.undo_move():
            self._status_label.setText("Nothing to undo")
            return
        self._refresh()

    def _on_new_game(self) -> None:
        if (
            self._settings.confirm_reset
            and self._game.move_count > 0
            and not self._confirm_reset()
        ):
            return
        self._game.reset()
        self._refresh()

    def _confirm_reset(self) -> bool:
        reply = QMessageBox.question(
            self,
            "New Game",
            "Start a new game? Current game will be lost.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def _on_toggle_setting(self, name: str, checked: bool) -> None:
        setattr(self._settings, name, checked)
        self._apply_settings()

    def _on_board_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    def _on_about(self) -> None:
        QMessageBox.about(self, "Greek Gods Chess", theme_manager.game_description())

    # ── Helpers ──────────────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_show_god_names(s.show_god_names)

    def _refresh(self) -> None:
        """Re-sync every widget with the game."""
        game = self._game
        scene = self._board_view.board_scene
        scene.refresh()
        scene.set_interactive(not game.is_game_over)
        self._move_panel.set_history(game.move_history)
        self._status_panel.update_from(game)
        self._control_panel.set_can_undo(game.move_count > 0)
        self._act_undo.setEnabled(game.move_count > 0)
        self._status_label.setText(f"Move {game.fullmove_number}")
