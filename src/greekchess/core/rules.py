"""High-level rules: derived game status and material predicates."""

from __future__ import annotations

from greekchess.core.board import Board
from greekchess.core.enums import Color, GameStatus, PieceType
from greekchess.core.move import Move
from greekchess.core.move_validator import MoveValidator


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Status is a pure function of (board, side to move, last move).
    # - No draw rule is automatic; DRAW is never produced.

    @staticmethod
    def game_status(
        board: Board, color: Color, last_move: Move | None = None
    ) -> GameStatus:
        """Status of *color* to move. Checkmate wins over stalemate wins over check."""
        validator = MoveValidator(board)
        if validator.is_checkmate(color, last_move):
            return GameStatus.CHECKMATE
        if validator.is_stalemate(color, last_move):
            return GameStatus.STALEMATE
        if validator.is_king_in_check(board, color):
            return GameStatus.CHECK
        return GameStatus.ACTIVE

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops).

        Advisory only: the game is not ended by it.
        """
        pieces = list(board.occupied())
        non_kings = [(pos, p) for pos, p in pieces if p.piece_type != PieceType.KING]

        # K vs K
        if not non_kings:
            return True

        # K+minor vs K
        if len(non_kings) == 1:
            return non_kings[0][1].piece_type in (PieceType.KNIGHT, PieceType.BISHOP)

        # K+B vs K+B with same-colour bishops
        if len(non_kings) == 2:
            (pos_a, a), (pos_b, b) = non_kings
            if (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                return (pos_a.row + pos_a.col) % 2 == (pos_b.row + pos_b.col) % 2

        return False
