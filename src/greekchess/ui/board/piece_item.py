"""PieceItem: a themed piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from greekchess.core.enums import Color
from greekchess.core.piece import Piece
from greekchess.core.position import Position
from greekchess.theme.greek import theme_manager
from greekchess.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsSimpleTextItem):
    """Unicode symbol of a piece, optionally captioned with its god's name.

    Stores its logical *position*; clicks fall through to the scene.
    """

    _SYMBOL_RATIO = 0.62
    _CAPTION_RATIO = 0.13

    def __init__(
        self,
        piece: Piece,
        position: Position,
        tile_size: int,
        theme: BoardTheme,
        *,
        show_name: bool = True,
    ) -> None:
        super().__init__(theme_manager.piece_symbol(piece))
        self.piece = piece
        self.position = position
        self._caption: QGraphicsSimpleTextItem | None = None

        fill = theme.white_piece if piece.color == Color.WHITE else theme.black_piece
        outline = theme.black_piece if piece.color == Color.WHITE else theme.white_piece
        self.setFont(QFont("DejaVu Sans", int(tile_size * self._SYMBOL_RATIO)))
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setToolTip(theme_manager.display_string(piece))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, False)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)

        if show_name:
            caption = QGraphicsSimpleTextItem(theme_manager.piece_name(piece), self)
            caption_size = max(6, int(tile_size * self._CAPTION_RATIO))
            caption.setFont(QFont("Georgia", caption_size))
            caption.setBrush(QBrush(fill))
            caption.setPen(QPen(outline, 0.5))
            caption.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
            self._caption = caption

        self._layout(tile_size)

    @property
    def caption(self) -> QGraphicsSimpleTextItem | None:
        return self._caption

    def _layout(self, tile_size: int) -> None:
        """Centre the glyph in its tile, caption along the bottom edge."""
        bounds = self.boundingRect()
        x = tile_size * self.position.col + (tile_size - bounds.width()) / 2
        y = tile_size * self.position.row + (tile_size - bounds.height()) / 2
        if self._caption is not None:
            y -= tile_size * 0.06
        self.setPos(x, y)

        if self._caption is not None:
            cap = self._caption.boundingRect()
            # Child coordinates are relative to this item's origin.
            tile_left = tile_size * self.position.col - x
            tile_bottom = tile_size * (self.position.row + 1) - y
            self._caption.setPos(
                tile_left + (tile_size - cap.width()) / 2,
                tile_bottom - cap.height() - 1,
            )
