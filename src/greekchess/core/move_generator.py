"""Pseudo-legal move generation.

Moves produced here follow each piece's movement and capture pattern but
ignore whether they leave the mover's own king exposed; that filtering is
done by :class:`~greekchess.core.move_validator.MoveValidator`.
"""

from __future__ import annotations

from greekchess.core.board import Board
from greekchess.core.enums import Color, PieceType
from greekchess.core.piece import Piece
from greekchess.core.position import Position, pawn_direction, pawn_start_row

# (row delta, col delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_STEP_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}


class MoveGenerator:
    """Generates pseudo-legal destinations for a piece on a given board."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def generate_moves(self, position: Position, piece: Piece) -> list[Position]:
        """All pseudo-legal destinations for *piece* standing on *position*."""
        if piece.piece_type == PieceType.PAWN:
            return self._gen_pawn(position, piece.color)
        if piece.piece_type in _SLIDING_DIRS:
            return self._gen_sliding(
                position, piece.color, _SLIDING_DIRS[piece.piece_type]
            )
        return self._gen_steps(position, piece.color, _STEP_OFFSETS[piece.piece_type])

    def attacked_squares(self, position: Position, piece: Piece) -> list[Position]:
        """Squares *piece* attacks (same set as its pseudo-legal moves)."""
        return self.generate_moves(position, piece)

    def can_attack(self, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
        return to_pos in self.generate_moves(from_pos, piece)

    def is_pseudo_legal(
        self, from_pos: Position, to_pos: Position, piece: Piece
    ) -> bool:
        return to_pos in self.generate_moves(from_pos, piece)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, pos: Position, color: Color) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        direction = pawn_direction(color)

        one_step = pos.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if pos.row == pawn_start_row(color):
                two_step = pos.offset(2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        # En passant needs the move history and is handled by the validator.
        for dcol in (-1, 1):
            cap = pos.offset(direction, dcol)
            if cap is None:
                continue
            target = board[cap]
            if target is not None and target.color != color:
                moves.append(cap)
        return moves

    def _gen_sliding(
        self,
        pos: Position,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        for drow, dcol in directions:
            target_pos = pos.offset(drow, dcol)
            while target_pos is not None:
                target = board[target_pos]
                if target is None:
                    moves.append(target_pos)
                    target_pos = target_pos.offset(drow, dcol)
                    continue
                if target.color != color:
                    moves.append(target_pos)
                break
        return moves

    def _gen_steps(
        self,
        pos: Position,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        for drow, dcol in offsets:
            target_pos = pos.offset(drow, dcol)
            if target_pos is None:
                continue
            target = board[target_pos]
            if target is None or target.color != color:
                moves.append(target_pos)
        return moves
