"""Move record and command result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from greekchess.core.enums import GameStatus, MoveType, PieceType
from greekchess.core.errors import MoveErrorKind
from greekchess.core.piece import Piece
from greekchess.core.position import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of an executed move.

    ``piece`` and ``captured_piece`` are the values as they stood on the
    board before the move was played.
    """

    from_pos: Position
    to_pos: Position
    piece: Piece
    move_type: MoveType = MoveType.NORMAL
    captured_piece: Piece | None = None
    timestamp: float = 0.0
    notation: str = ""
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def is_castling(self) -> bool:
        return self.move_type in (MoveType.CASTLE_KINGSIDE, MoveType.CASTLE_QUEENSIDE)

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.to_pos.row - self.from_pos.row) == 2
        )

    def __str__(self) -> str:
        return self.notation or f"{self.from_pos}{self.to_pos}"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a ``make_move`` command.

    Callers must branch on ``success``; a failed command changed nothing.
    """

    success: bool
    move: Move | None = None
    error: str | None = None
    error_kind: MoveErrorKind | None = None
    new_status: GameStatus | None = None
    captured_piece: Piece | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failure(cls, kind: MoveErrorKind, message: str) -> MoveResult:
        return cls(success=False, error=message, error_kind=kind)
