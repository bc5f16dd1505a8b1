"""Board coordinates and per-color geometry helpers.

Layout (row/col, row 0 is the eighth rank)::

    row 0:  a8 b8 c8 d8 e8 f8 g8 h8
    row 1:  a7 ...
    ...
    row 7:  a1 b1 c1 d1 e1 f1 g1 h1
"""

from __future__ import annotations

from dataclasses import dataclass

from greekchess.core.enums import Color
from greekchess.core.errors import InvalidPositionError

BOARD_SIZE = 8
FILES = "abcdefgh"


def is_on_board(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies inside the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board coordinate."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise InvalidPositionError(
                f"Invalid position: row={self.row}, col={self.col}"
            )

    # ── Algebraic notation ───────────────────────────────────────────────

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Parse a square name, e.g. 'e4' → Position(4, 4)."""
        if len(name) != 2:
            raise InvalidPositionError(f"Invalid algebraic notation: {name!r}")
        file_char = name[0].lower()
        rank_char = name[1]
        if file_char not in FILES or rank_char not in "12345678":
            raise InvalidPositionError(f"Invalid algebraic notation: {name!r}")
        return cls(BOARD_SIZE - int(rank_char), FILES.index(file_char))

    @property
    def algebraic(self) -> str:
        """Square name, e.g. 'e4'."""
        return f"{self.file}{self.rank}"

    @property
    def file(self) -> str:
        return FILES[self.col]

    @property
    def rank(self) -> int:
        return BOARD_SIZE - self.row

    # ── Geometry ─────────────────────────────────────────────────────────

    def offset(self, drow: int, dcol: int) -> Position | None:
        """Shifted position, or ``None`` when it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if not is_on_board(row, col):
            return None
        return Position(row, col)

    def __str__(self) -> str:
        return self.algebraic


def all_positions() -> list[Position]:
    """Every square, row by row from a8 to h1."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Per-color geometry ──────────────────────────────────────────────────────


def pawn_direction(color: Color) -> int:
    """Row delta of a pawn step: white moves up the board (decreasing row)."""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def back_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


def en_passant_row(color: Color) -> int:
    """Row a pawn of *color* must stand on to capture en passant."""
    return 3 if color == Color.WHITE else 4


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Position(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Position(7, c) for c in range(8))
