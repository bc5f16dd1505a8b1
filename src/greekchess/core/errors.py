"""Domain errors.

Only contract violations are raised. Rule rejections (wrong turn, illegal
move, ...) travel back to callers as :class:`MoveErrorKind` values inside a
:class:`~greekchess.core.move.MoveResult`.
"""

from __future__ import annotations

from enum import IntEnum


class ChessError(Exception):
    """Base class for all errors raised by the chess core."""


class InvalidPositionError(ChessError, ValueError):
    """Coordinates or algebraic notation outside the 8x8 board."""


class NoPieceAtSourceError(ChessError, ValueError):
    """A board relocation was requested from an empty square."""


class MoveErrorKind(IntEnum):
    """Why a command was rejected."""

    NO_PIECE_AT_SOURCE = 1
    WRONG_TURN = 2
    GAME_OVER = 3
    ILLEGAL_MOVE = 4
    EMPTY_HISTORY = 5
