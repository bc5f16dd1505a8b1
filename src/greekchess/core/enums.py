"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Classification of an executed move."""

    NORMAL = 0
    CAPTURE = 1
    CASTLE_KINGSIDE = 2
    CASTLE_QUEENSIDE = 3
    EN_PASSANT = 4
    PROMOTION = 5


class GameStatus(IntEnum):
    """Derived status of the side to move.

    ``DRAW`` is reserved: no rule currently produces it.
    """

    ACTIVE = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW = 4

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class CastleSide(Enum):
    """Which rook the king castles with."""

    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"

    @property
    def rook_col(self) -> int:
        return 7 if self is CastleSide.KINGSIDE else 0

    @property
    def king_target_col(self) -> int:
        return 6 if self is CastleSide.KINGSIDE else 2

    @property
    def rook_target_col(self) -> int:
        return 5 if self is CastleSide.KINGSIDE else 3
