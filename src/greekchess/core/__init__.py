"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from greekchess.core import Board, MoveValidator, Position

    board = Board.initial()
    validator = MoveValidator(board)
    e2 = Position.from_algebraic("e2")
    print(validator.get_legal_moves(e2, board[e2]))
"""

from greekchess.core.board import Board
from greekchess.core.enums import CastleSide, Color, GameStatus, MoveType, PieceType
from greekchess.core.errors import (
    ChessError,
    InvalidPositionError,
    MoveErrorKind,
    NoPieceAtSourceError,
)
from greekchess.core.move import Move, MoveResult
from greekchess.core.move_generator import MoveGenerator
from greekchess.core.move_history import HistoryEntry, MoveHistory
from greekchess.core.move_validator import MoveValidator
from greekchess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    move_notation,
)
from greekchess.core.piece import Piece
from greekchess.core.position import Position
from greekchess.core.rules import Rules

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "GameStatus",
    "MoveType",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidPositionError",
    "MoveErrorKind",
    "NoPieceAtSourceError",
    # Domain objects
    "Board",
    "HistoryEntry",
    "Move",
    "MoveGenerator",
    "MoveHistory",
    "MoveResult",
    "MoveValidator",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "move_notation",
]
