"""Move notation and piece-placement (FEN board field) conversion."""

from __future__ import annotations

from greekchess.core.board import Board
from greekchess.core.enums import MoveType, PieceType
from greekchess.core.piece import PIECE_LETTERS, Piece
from greekchess.core.position import (
    BOARD_SIZE,
    Position,
    back_rank,
    pawn_start_row,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_CASTLING_NOTATION: dict[MoveType, str] = {
    MoveType.CASTLE_KINGSIDE: "O-O",
    MoveType.CASTLE_QUEENSIDE: "O-O-O",
}


def move_notation(
    from_pos: Position,
    to_pos: Position,
    piece: Piece,
    move_type: MoveType,
    captured_piece: Piece | None = None,
) -> str:
    """Short algebraic notation for a move, e.g. ``e4``, ``Nc3``, ``exd5``.

    No disambiguation and no check suffixes. Promotions always render as
    ``=Q`` because the queen is the only promotion choice.
    """
    if move_type in _CASTLING_NOTATION:
        return _CASTLING_NOTATION[move_type]

    is_capture = captured_piece is not None or move_type == MoveType.EN_PASSANT
    text = PIECE_LETTERS[piece.piece_type]
    if piece.piece_type == PieceType.PAWN and is_capture:
        text += from_pos.file
    if is_capture:
        text += "x"
    text += to_pos.algebraic
    if move_type == MoveType.PROMOTION:
        text += "=Q"
    return text


# ── Piece placement ─────────────────────────────────────────────────────────


def _is_home_square(pos: Position, piece: Piece) -> bool:
    """Squares a piece may stand on without having moved."""
    if piece.piece_type == PieceType.PAWN:
        return pos.row == pawn_start_row(piece.color)
    if piece.piece_type == PieceType.KING:
        return pos == Position(back_rank(piece.color), 4)
    if piece.piece_type == PieceType.ROOK:
        return pos.row == back_rank(piece.color) and pos.col in (0, 7)
    return pos.row == back_rank(piece.color)


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    Pieces standing off their home squares are marked as moved.
    """
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                pos = Position(row, col)
                piece = Piece.from_char(ch)
                if not _is_home_square(pos, piece):
                    piece = piece.moved()
                board[pos] = piece
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise the board to the piece-placement field of FEN."""
    rows: list[str] = []
    for squares in board.rows():
        empty = 0
        row = ""
        for piece in squares:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += piece.char
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
