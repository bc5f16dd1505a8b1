"""Full legality: king safety, castling, en passant, mate and stalemate."""

from __future__ import annotations

from greekchess.core.board import Board
from greekchess.core.enums import CastleSide, Color, PieceType
from greekchess.core.move import Move
from greekchess.core.move_generator import MoveGenerator
from greekchess.core.piece import Piece
from greekchess.core.position import (
    Position,
    back_rank,
    en_passant_row,
    pawn_direction,
)

KING_HOME_COL = 4


class MoveValidator:
    """Turns pseudo-legal moves into legal ones for a bound board.

    Every "what if" question is answered by playing the move on a clone of
    the board and asking :meth:`is_king_in_check` about the clone, so the
    bound board is never touched.
    """

    __slots__ = ("_board", "_generator")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._generator = MoveGenerator(board)

    @property
    def board(self) -> Board:
        return self._board

    # -- Check detection ----------------------------------------------------

    @staticmethod
    def is_king_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked on *board*? A missing king is never in check."""
        king_pos = board.find_king(color)
        if king_pos is None:
            return False
        generator = MoveGenerator(board)
        for pos, piece in board.pieces_of_color(color.opposite):
            if generator.can_attack(pos, king_pos, piece):
                return True
        return False

    # -- Single-move legality -----------------------------------------------

    def is_legal_move(
        self,
        from_pos: Position,
        to_pos: Position,
        piece: Piece,
        last_move: Move | None = None,
    ) -> bool:
        if not self._generator.is_pseudo_legal(from_pos, to_pos, piece):
            if piece.piece_type == PieceType.KING and not piece.has_moved:
                side = self._castling_side(from_pos, to_pos, piece.color)
                if side is not None:
                    return self.can_castle(piece.color, side)

            if piece.piece_type == PieceType.PAWN and last_move is not None:
                if self._is_en_passant_pattern(from_pos, to_pos, piece.color, last_move):
                    return self.can_en_passant(from_pos, to_pos, piece.color, last_move)

            return False

        simulated = self._board.clone()
        simulated.move_piece(from_pos, to_pos)
        return not self.is_king_in_check(simulated, piece.color)

    def get_legal_moves(
        self,
        position: Position,
        piece: Piece,
        last_move: Move | None = None,
    ) -> list[Position]:
        """All legal destinations for *piece* on *position*, special moves included."""
        legal = [
            to_pos
            for to_pos in self._generator.generate_moves(position, piece)
            if self.is_legal_move(position, to_pos, piece, last_move)
        ]

        if piece.piece_type == PieceType.KING and not piece.has_moved:
            rank = back_rank(piece.color)
            for side in (CastleSide.KINGSIDE, CastleSide.QUEENSIDE):
                if self.can_castle(piece.color, side):
                    target = Position(rank, side.king_target_col)
                    if target not in legal:
                        legal.append(target)

        if piece.piece_type == PieceType.PAWN and last_move is not None:
            direction = pawn_direction(piece.color)
            for dcol in (-1, 1):
                target = position.offset(direction, dcol)
                if target is None or target in legal:
                    continue
                if self.can_en_passant(position, target, piece.color, last_move):
                    legal.append(target)

        return legal

    # -- Castling -----------------------------------------------------------

    def can_castle(self, color: Color, side: CastleSide | str) -> bool:
        """Whether *color* may castle on *side* (``"kingside"`` / ``"queenside"``)."""
        side = CastleSide(side)
        board = self._board
        rank = back_rank(color)
        king_pos = Position(rank, KING_HOME_COL)
        king = board[king_pos]
        if (
            king is None
            or king.piece_type != PieceType.KING
            or king.color != color
            or king.has_moved
        ):
            return False

        rook = board[Position(rank, side.rook_col)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
            or rook.has_moved
        ):
            return False

        low, high = sorted((KING_HOME_COL, side.rook_col))
        if any(not board.is_empty(Position(rank, col)) for col in range(low + 1, high)):
            return False

        if self.is_king_in_check(board, color):
            return False

        # The king may not pass through or land on an attacked square.
        step = 1 if side is CastleSide.KINGSIDE else -1
        for distance in (1, 2):
            simulated = board.clone()
            simulated.move_piece(
                king_pos, Position(rank, KING_HOME_COL + step * distance)
            )
            if self.is_king_in_check(simulated, color):
                return False
        return True

    @staticmethod
    def _castling_side(
        from_pos: Position, to_pos: Position, color: Color
    ) -> CastleSide | None:
        rank = back_rank(color)
        if from_pos != Position(rank, KING_HOME_COL) or to_pos.row != rank:
            return None
        if to_pos.col == CastleSide.KINGSIDE.king_target_col:
            return CastleSide.KINGSIDE
        if to_pos.col == CastleSide.QUEENSIDE.king_target_col:
            return CastleSide.QUEENSIDE
        return None

    # -- En passant ---------------------------------------------------------

    def can_en_passant(
        self,
        from_pos: Position,
        to_pos: Position,
        color: Color,
        last_move: Move,
    ) -> bool:
        if not last_move.is_double_pawn_push or last_move.piece.color == color:
            return False

        if from_pos.row != en_passant_row(color):
            return False

        passed = last_move.to_pos
        if passed.row != from_pos.row or abs(passed.col - from_pos.col) != 1:
            return False

        victim = self._board[passed]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == color
        ):
            return False

        if to_pos.row != from_pos.row + pawn_direction(color) or to_pos.col != passed.col:
            return False

        simulated = self._board.clone()
        simulated.move_piece(from_pos, to_pos)
        simulated.set_piece(passed, None)
        return not self.is_king_in_check(simulated, color)

    def _is_en_passant_pattern(
        self,
        from_pos: Position,
        to_pos: Position,
        color: Color,
        last_move: Move,
    ) -> bool:
        """Diagonal step into an empty square beside a pawn that just double-stepped."""
        diagonal = (
            to_pos.row == from_pos.row + pawn_direction(color)
            and abs(to_pos.col - from_pos.col) == 1
        )
        if not diagonal or not self._board.is_empty(to_pos):
            return False
        if not last_move.is_double_pawn_push:
            return False
        return (
            last_move.to_pos.row == from_pos.row
            and abs(last_move.to_pos.col - from_pos.col) == 1
        )

    # -- Game-level predicates ----------------------------------------------

    def has_any_legal_moves(self, color: Color, last_move: Move | None = None) -> bool:
        for pos, piece in self._board.pieces_of_color(color):
            if self.get_legal_moves(pos, piece, last_move):
                return True
        return False

    def is_checkmate(self, color: Color, last_move: Move | None = None) -> bool:
        return self.is_king_in_check(self._board, color) and not self.has_any_legal_moves(
            color, last_move
        )

    def is_stalemate(self, color: Color, last_move: Move | None = None) -> bool:
        return not self.is_king_in_check(
            self._board, color
        ) and not self.has_any_legal_moves(color, last_move)
