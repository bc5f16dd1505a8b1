"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from greekchess.core.position import BOARD_SIZE, FILES, Position, all_positions
from greekchess.game.state import GameState
from greekchess.ui.board.piece_item import PieceItem
from greekchess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    The scene only reads from the game; moves are requested through
    ``move_requested`` and executed by whoever owns the :class:`GameState`.

    Signals:
        move_requested(Position, Position): the user picked a piece and a target.
    """

    move_requested = pyqtSignal(Position, Position)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.marble()
        self._game: GameState | None = None

        self._selected: Position | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True
        self._show_god_names = True

        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Position, PieceItem] = {}
        self._selection_items: list[QGraphicsRectItem] = []
        self._legal_items: list[QGraphicsRectItem | QGraphicsEllipseItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_game(self, game: GameState) -> None:
        self._game = game
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and the last-move / check overlays from the game."""
        self._clear_selection()
        self._sync_pieces()
        self._update_last_move()
        self._update_check()

    @property
    def selected_position(self) -> Position | None:
        return self._selected

    def piece_item_at(self, position: Position) -> PieceItem | None:
        return self._piece_items.get(position)

    def legal_target_count(self) -> int:
        return len(self._legal_items)

    def has_check_highlight(self) -> bool:
        return bool(self._check_items)

    def has_last_move_highlight(self) -> bool:
        return bool(self._last_move_items)

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._game is not None:
            self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_items)

    def set_show_god_names(self, visible: bool) -> None:
        if visible == self._show_god_names:
            return
        self._show_god_names = visible
        if self._game is not None:
            self._sync_pieces()

    # ── Interaction ──────────────────────────────────────────────────────

    def handle_square_click(self, position: Position) -> None:
        """Select, deselect, switch selection or request a move."""
        if self._game is None or not self._interactive:
            return

        piece = self._game.board[position]
        own_piece = piece is not None and piece.color == self._game.current_turn

        if self._selected is None:
            if own_piece:
                self._select(position)
            return

        if position == self._selected:
            self._clear_selection()
            return

        if own_piece:
            self._select(position)
            return

        from_pos = self._selected
        self._clear_selection()
        self.move_requested.emit(from_pos, position)

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        position = self._position_at(event.scenePos())
        if position is None:
            self._clear_selection()
        else:
            self.handle_square_click(position)
        event.accept()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for item in self._square_items.values():
            self.removeItem(item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Georgia", max(9, t // 8))

        for pos in all_positions():
            is_light = (pos.row + pos.col) % 2 == 0
            rect = QGraphicsRectItem(pos.col * t, pos.row * t, t, t)
            fill = self._theme.light_square if is_light else self._theme.dark_square
            rect.setBrush(QBrush(fill))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

            ink = self._theme.coord_on_light if is_light else self._theme.coord_on_dark
            x, y = pos.col * t, pos.row * t

            # Rank numbers (left edge)
            if pos.col == 0:
                self._add_coordinate(str(pos.rank), x + 2, y + 1, ink, font)

            # File letters (bottom edge)
            if pos.row == BOARD_SIZE - 1:
                self._add_coordinate(FILES[pos.col], x + t - 12, y + t - 16, ink, font)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coordinate(
        self, label: str, x: float, y: float, color: QColor, font: QFont
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the live board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._game is None:
            return

        for pos, piece in self._game.board.occupied():
            item = PieceItem(
                piece, pos, self.TILE, self._theme, show_name=self._show_god_names
            )
            self.addItem(item)
            self._piece_items[pos] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, position: Position) -> None:
        self._clear_selection()
        self._selected = position
        self._selection_items.append(
            self._make_highlight(position, self._theme.selected, z=0.7)
        )

        if self._game is None or not self._show_legal_moves:
            return
        t = self.TILE
        for target in self._game.legal_moves(position):
            if self._game.board.is_empty(target):
                size = t * 0.3
                dot = QGraphicsEllipseItem(
                    target.col * t + (t - size) / 2,
                    target.row * t + (t - size) / 2,
                    size,
                    size,
                )
                dot.setBrush(QBrush(self._theme.legal_target))
                dot.setPen(QPen(Qt.PenStyle.NoPen))
                dot.setZValue(0.9)
                self.addItem(dot)
                self._legal_items.append(dot)
            else:
                self._legal_items.append(
                    self._make_highlight(target, self._theme.legal_target, z=0.9)
                )

    def _clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._selection_items)
        self._clear_items(self._legal_items)

    def _update_last_move(self) -> None:
        self._clear_items(self._last_move_items)
        move = self._game.last_move if self._game is not None else None
        if move is None:
            return
        for pos in (move.from_pos, move.to_pos):
            self._last_move_items.append(
                self._make_highlight(pos, self._theme.last_move, z=0.5)
            )

    def _update_check(self) -> None:
        self._clear_items(self._check_items)
        if self._game is None or not self._game.is_in_check():
            return
        king_pos = self._game.board.find_king(self._game.current_turn)
        if king_pos is not None:
            self._check_items.append(
                self._make_highlight(king_pos, self._theme.check, z=0.6)
            )

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _position_at(self, point: QPointF) -> Position | None:
        """Scene point → board position."""
        col = int(point.x() // self.TILE)
        row = int(point.y() // self.TILE)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Position(row, col)

    def _make_highlight(
        self, position: Position, color: QColor, *, z: float
    ) -> QGraphicsRectItem:
        t = self.TILE
        rect = QGraphicsRectItem(position.col * t, position.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect
