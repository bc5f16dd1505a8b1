"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from greekchess.core.enums import Color, PieceType
from greekchess.core.errors import NoPieceAtSourceError
from greekchess.core.piece import Piece
from greekchess.core.position import BOARD_SIZE, Position

Grid = list[list[Piece | None]]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _empty_grid() -> Grid:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board knows nothing about chess rules. Pieces are immutable
    values, so copying the rows is enough for an independent clone.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Grid | None = None) -> None:
        self._squares: Grid = squares if squares is not None else _empty_grid()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[pos.row][pos.col]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[pos.row][pos.col] = piece

    def get_piece(self, pos: Position) -> Piece | None:
        return self._squares[pos.row][pos.col]

    def set_piece(self, pos: Position, piece: Piece | None) -> None:
        self._squares[pos.row][pos.col] = piece

    def move_piece(self, from_pos: Position, to_pos: Position) -> Piece:
        """Relocate the piece on *from_pos*; whatever stood on *to_pos* is dropped.

        Returns the relocated piece with its ``has_moved`` flag set.
        """
        piece = self[from_pos]
        if piece is None:
            raise NoPieceAtSourceError(f"No piece at position: {from_pos}")
        moved = piece.moved()
        self[to_pos] = moved
        self[from_pos] = None
        return moved

    def is_empty(self, pos: Position) -> bool:
        return self._squares[pos.row][pos.col] is None

    # -- Query helpers ------------------------------------------------------

    def has_piece_of_color(self, pos: Position, color: Color) -> bool:
        piece = self[pos]
        return piece is not None and piece.color == color

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """Yield every (position, piece) pair, row by row from a8."""
        for row, squares in enumerate(self._squares):
            for col, piece in enumerate(squares):
                if piece is not None:
                    yield Position(row, col), piece

    def find_piece(self, piece_type: PieceType, color: Color) -> Position | None:
        """First square holding *color*'s *piece_type*, or ``None``."""
        for pos, piece in self.occupied():
            if piece.piece_type == piece_type and piece.color == color:
                return pos
        return None

    def find_king(self, color: Color) -> Position | None:
        return self.find_piece(PieceType.KING, color)

    def king_position(self, color: Color) -> Position:
        """Return the king square for *color*, which must exist."""
        pos = self.find_king(color)
        if pos is None:
            raise ValueError(f"No {color.name} king on board")
        return pos

    def pieces_of_color(self, color: Color) -> list[tuple[Position, Piece]]:
        """All (position, piece) pairs for *color*."""
        return [(pos, piece) for pos, piece in self.occupied() if piece.color == color]

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Read-only snapshot of the grid, row 0 first."""
        return tuple(tuple(row) for row in self._squares)

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        return Board([row.copy() for row in self._squares])

    copy = clone

    def clear(self) -> None:
        self._squares = _empty_grid()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Position(0, col)] = Piece(pt, Color.BLACK)
            b[Position(1, col)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Position(6, col)] = Piece(PieceType.PAWN, Color.WHITE)
            b[Position(7, col)] = Piece(pt, Color.WHITE)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [p.char if p else "." for p in self._squares[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
