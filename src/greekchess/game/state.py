"""Game state machine: executes moves, tracks turn, status and history."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from greekchess.core.board import Board
from greekchess.core.enums import CastleSide, Color, GameStatus, MoveType, PieceType
from greekchess.core.errors import MoveErrorKind
from greekchess.core.move import Move, MoveResult
from greekchess.core.move_history import MoveHistory
from greekchess.core.move_validator import MoveValidator
from greekchess.core.notation import move_notation
from greekchess.core.piece import Piece
from greekchess.core.position import Position, back_rank, promotion_row
from greekchess.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


def _side_name(color: Color) -> str:
    return color.name.capitalize()


@dataclass
class GameState:
    """Orchestrates one game: the live board, its validator, history and turn.

    ``status`` is never set directly; it is recomputed from the board, the
    side to move and the last move after every successful command.
    This is a pure data/logic class with no threading or UI.
    """

    board: Board = field(init=False)
    current_turn: Color = field(default=Color.WHITE, init=False)
    status: GameStatus = field(default=GameStatus.ACTIVE, init=False)
    _validator: MoveValidator = field(init=False, repr=False)
    _history: MoveHistory = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self) -> None:
        """Start over from the standard starting position."""
        self._install_board(Board.initial())
        self._history = MoveHistory()
        self.current_turn = Color.WHITE
        self.status = GameStatus.ACTIVE
        _LOGGER.debug("Game reset to the starting position")

    @classmethod
    def from_board(cls, board: Board, turn: Color = Color.WHITE) -> GameState:
        """Build a game around an arbitrary position with *turn* to move."""
        game = cls()
        game._install_board(board)
        game.current_turn = turn
        game._update_status()
        return game

    def _install_board(self, board: Board) -> None:
        self.board = board
        self._validator = MoveValidator(board)

    # ── Commands ─────────────────────────────────────────────────────────

    def make_move(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """Validate and play a move. A failed result leaves the game untouched."""
        piece = self.board[from_pos]
        if piece is None:
            return self._reject(
                MoveErrorKind.NO_PIECE_AT_SOURCE, "No piece at the starting position"
            )

        if piece.color != self.current_turn:
            return self._reject(
                MoveErrorKind.WRONG_TURN, f"It's {_side_name(self.current_turn)}'s turn"
            )

        if self.status.is_terminal:
            return self._reject(MoveErrorKind.GAME_OVER, "Game is already over")

        last_move = self._history.last_move
        if not self._validator.is_legal_move(from_pos, to_pos, piece, last_move):
            return self._reject(MoveErrorKind.ILLEGAL_MOVE, "Illegal move")

        board_before = self.board.clone()
        captured = self.board[to_pos]
        move_type = MoveType.CAPTURE if captured is not None else MoveType.NORMAL
        promotion: PieceType | None = None

        if piece.piece_type == PieceType.KING and abs(to_pos.col - from_pos.col) == 2:
            move_type = (
                MoveType.CASTLE_KINGSIDE
                if to_pos.col > from_pos.col
                else MoveType.CASTLE_QUEENSIDE
            )
            self._execute_castling(from_pos, to_pos, piece.color)
        elif (
            piece.piece_type == PieceType.PAWN
            and to_pos.col != from_pos.col
            and captured is None
            and last_move is not None
        ):
            move_type = MoveType.EN_PASSANT
            captured = self._execute_en_passant(from_pos, to_pos, last_move)
        elif (
            piece.piece_type == PieceType.PAWN
            and to_pos.row == promotion_row(piece.color)
        ):
            move_type = MoveType.PROMOTION
            promotion = self._execute_promotion(from_pos, to_pos)
        else:
            self.board.move_piece(from_pos, to_pos)

        move = Move(
            from_pos=from_pos,
            to_pos=to_pos,
            piece=piece,
            move_type=move_type,
            captured_piece=captured,
            timestamp=time.time(),
            notation=move_notation(from_pos, to_pos, piece, move_type, captured),
            promotion=promotion,
        )
        self._history.add_move(move, board_before)
        self.current_turn = self.current_turn.opposite
        self._update_status()

        _LOGGER.debug(
            "%s played %s (%s), status %s",
            _side_name(piece.color),
            move.notation,
            move_type.name,
            self.status.name,
        )
        return MoveResult(
            success=True,
            move=move,
            new_status=self.status,
            captured_piece=captured,
        )

    def undo_move(self) -> bool:
        """Take back the last move. Returns ``False`` when there is nothing to undo."""
        entry = self._history.undo()
        if entry is None:
            _LOGGER.debug("Undo rejected: %s", MoveErrorKind.EMPTY_HISTORY.name)
            return False

        self._install_board(entry.board_before.clone())
        self.current_turn = self.current_turn.opposite
        self._update_status()
        _LOGGER.debug("Undid %s", entry.move.notation)
        return True

    # ── Special-move execution ───────────────────────────────────────────

    def _execute_castling(
        self, king_from: Position, king_to: Position, color: Color
    ) -> None:
        rank = back_rank(color)
        kingside = king_to.col > king_from.col
        side = CastleSide.KINGSIDE if kingside else CastleSide.QUEENSIDE
        self.board.move_piece(king_from, king_to)
        self.board.move_piece(
            Position(rank, side.rook_col), Position(rank, side.rook_target_col)
        )

    def _execute_en_passant(
        self, from_pos: Position, to_pos: Position, last_move: Move
    ) -> Piece | None:
        """Move the pawn, then remove the passed pawn from its own square."""
        self.board.move_piece(from_pos, to_pos)
        passed = self.board[last_move.to_pos]
        self.board.set_piece(last_move.to_pos, None)
        return passed

    def _execute_promotion(
        self,
        from_pos: Position,
        to_pos: Position,
        promote_to: PieceType = PieceType.QUEEN,
    ) -> PieceType:
        pawn = self.board[from_pos]
        assert pawn is not None
        self.board.set_piece(from_pos, None)
        self.board.set_piece(to_pos, Piece(promote_to, pawn.color, has_moved=True))
        return promote_to

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_moves(self, position: Position) -> list[Position]:
        """Legal destinations from *position*; empty unless it holds a piece to move."""
        piece = self.board[position]
        if piece is None or piece.color != self.current_turn:
            return []
        return self._validator.get_legal_moves(position, piece, self._history.last_move)

    def is_in_check(self) -> bool:
        return self._validator.is_king_in_check(self.board, self.current_turn)

    def is_insufficient_material(self) -> bool:
        """Advisory: neither side can deliver mate. Does not end the game."""
        return Rules.is_insufficient_material(self.board)

    def captured_pieces(self, color: Color) -> list[Piece]:
        """Pieces of *color* captured so far, in capture order."""
        return [
            move.captured_piece
            for move in self._history.moves()
            if move.captured_piece is not None and move.captured_piece.color == color
        ]

    @property
    def validator(self) -> MoveValidator:
        return self._validator

    @property
    def move_history(self) -> tuple[Move, ...]:
        return self._history.moves()

    @property
    def last_move(self) -> Move | None:
        return self._history.last_move

    @property
    def move_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    @property
    def fullmove_number(self) -> int:
        """Current full-move number for display."""
        return (self.move_count // 2) + 1

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        self.status = Rules.game_status(
            self.board, self.current_turn, self._history.last_move
        )

    def _reject(self, kind: MoveErrorKind, message: str) -> MoveResult:
        _LOGGER.debug("Move rejected (%s): %s", kind.name, message)
        return MoveResult.failure(kind, message)
