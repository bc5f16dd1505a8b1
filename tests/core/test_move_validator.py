"""Tests for MoveValidator: king safety, castling, en passant, mate."""

import pytest

from greekchess.core.board import Board
from greekchess.core.enums import CastleSide, Color, MoveType, PieceType
from greekchess.core.move import Move
from greekchess.core.move_validator import MoveValidator
from greekchess.core.notation import board_from_placement
from greekchess.core.piece import Piece
from greekchess.core.position import Position


def _p(name: str) -> Position:
    return Position.from_algebraic(name)


def _names(positions: list[Position]) -> set[str]:
    return {pos.algebraic for pos in positions}


def _double_push(frm: str, to: str, color: Color) -> Move:
    return Move(_p(frm), _p(to), Piece(PieceType.PAWN, color))


class TestCheckDetection:
    def test_start_not_in_check(self) -> None:
        board = Board.initial()
        assert not MoveValidator.is_king_in_check(board, Color.WHITE)
        assert not MoveValidator.is_king_in_check(board, Color.BLACK)

    def test_rook_gives_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4R1K1")
        assert MoveValidator.is_king_in_check(board, Color.BLACK)
        assert not MoveValidator.is_king_in_check(board, Color.WHITE)

    def test_blocked_line_is_not_check(self) -> None:
        board = board_from_placement("4k3/4p3/8/8/8/8/8/4R1K1")
        assert not MoveValidator.is_king_in_check(board, Color.BLACK)

    def test_pawn_gives_check_diagonally(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/3p4/4K3")
        assert MoveValidator.is_king_in_check(board, Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        assert not MoveValidator.is_king_in_check(Board(), Color.WHITE)


class TestKingSafety:
    def test_pinned_piece_has_no_moves(self) -> None:
        board = board_from_placement("k3r3/8/8/8/8/8/4B3/4K3")
        validator = MoveValidator(board)
        assert validator.get_legal_moves(_p("e2"), board[_p("e2")]) == []

    def test_pinned_rook_may_slide_along_the_pin(self) -> None:
        board = board_from_placement("8/8/8/8/r2RK3/8/8/8")
        validator = MoveValidator(board)
        legal = _names(validator.get_legal_moves(_p("d4"), board[_p("d4")]))
        assert legal == {"a4", "b4", "c4"}

    def test_king_cannot_step_into_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/3rK3")
        validator = MoveValidator(board)
        king = board[_p("e1")]
        assert not validator.is_legal_move(_p("e1"), _p("d2"), king)
        assert not validator.is_legal_move(_p("e1"), _p("f1"), king)
        assert validator.is_legal_move(_p("e1"), _p("e2"), king)
        assert validator.is_legal_move(_p("e1"), _p("d1"), king)

    def test_must_answer_check(self) -> None:
        # Black rook on e8 checks; only blocking with the bishop or moving the king helps.
        board = board_from_placement("k3r3/8/8/8/8/8/8/2B1K3")
        validator = MoveValidator(board)
        bishop = board[_p("c1")]
        assert _names(validator.get_legal_moves(_p("c1"), bishop)) == {"e3"}

    def test_validation_does_not_touch_board(self) -> None:
        board = Board.initial()
        before = board.clone()
        validator = MoveValidator(board)
        for pos, piece in board.pieces_of_color(Color.WHITE):
            validator.get_legal_moves(pos, piece)
        assert board == before

    def test_twenty_moves_from_start(self) -> None:
        board = Board.initial()
        validator = MoveValidator(board)
        total = sum(
            len(validator.get_legal_moves(pos, piece))
            for pos, piece in board.pieces_of_color(Color.WHITE)
        )
        assert total == 20


class TestCastling:
    def test_both_sides_available(self) -> None:
        board = board_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        validator = MoveValidator(board)
        assert validator.can_castle(Color.WHITE, CastleSide.KINGSIDE)
        assert validator.can_castle(Color.WHITE, "queenside")
        assert validator.can_castle(Color.BLACK, "kingside")
        legal = _names(validator.get_legal_moves(_p("e1"), board[_p("e1")]))
        assert {"g1", "c1"} <= legal

    def test_blocked_path(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/RN2K1NR")
        validator = MoveValidator(board)
        assert not validator.can_castle(Color.WHITE, CastleSide.KINGSIDE)
        assert not validator.can_castle(Color.WHITE, CastleSide.QUEENSIDE)

    def test_queenside_b_file_must_be_empty(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/RN2K3")
        assert not MoveValidator(board).can_castle(Color.WHITE, CastleSide.QUEENSIDE)

    def test_moved_king_cannot_castle(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K2R")
        board[_p("e1")] = board[_p("e1")].moved()
        assert not MoveValidator(board).can_castle(Color.WHITE, CastleSide.KINGSIDE)

    def test_moved_rook_cannot_castle(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K2R")
        board[_p("h1")] = board[_p("h1")].moved()
        assert not MoveValidator(board).can_castle(Color.WHITE, CastleSide.KINGSIDE)

    def test_not_out_of_check(self) -> None:
        board = board_from_placement("4r1k1/8/8/8/8/8/8/4K2R")
        assert not MoveValidator(board).can_castle(Color.WHITE, CastleSide.KINGSIDE)

    def test_not_through_attacked_square(self) -> None:
        board = board_from_placement("5rk1/8/8/8/8/8/8/4K2R")
        validator = MoveValidator(board)
        assert not validator.can_castle(Color.WHITE, CastleSide.KINGSIDE)
        assert not validator.is_legal_move(_p("e1"), _p("g1"), board[_p("e1")])

    def test_not_into_attacked_square(self) -> None:
        board = board_from_placement("6rk/8/8/8/8/8/8/4K2R")
        assert not MoveValidator(board).can_castle(Color.WHITE, CastleSide.KINGSIDE)

    def test_attacked_rook_does_not_prevent_castling(self) -> None:
        board = board_from_placement("k6r/8/8/8/8/8/8/4K2R")
        assert MoveValidator(board).can_castle(Color.WHITE, CastleSide.KINGSIDE)

    def test_unknown_side_rejected(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K2R")
        with pytest.raises(ValueError):
            MoveValidator(board).can_castle(Color.WHITE, "middle")


class TestEnPassant:
    def test_capture_after_double_push(self) -> None:
        board = board_from_placement("4k3/8/8/4Pp2/8/8/8/4K3")
        validator = MoveValidator(board)
        last = _double_push("f7", "f5", Color.BLACK)
        pawn = board[_p("e5")]
        assert validator.can_en_passant(_p("e5"), _p("f6"), Color.WHITE, last)
        assert validator.is_legal_move(_p("e5"), _p("f6"), pawn, last)
        assert "f6" in _names(validator.get_legal_moves(_p("e5"), pawn, last))

    def test_black_captures_en_passant(self) -> None:
        board = board_from_placement("4k3/8/8/8/3pP3/8/8/4K3")
        validator = MoveValidator(board)
        last = _double_push("e2", "e4", Color.WHITE)
        assert validator.can_en_passant(_p("d4"), _p("e3"), Color.BLACK, last)

    def test_requires_double_push(self) -> None:
        board = board_from_placement("4k3/8/8/4Pp2/8/8/8/4K3")
        validator = MoveValidator(board)
        single = Move(_p("f6"), _p("f5"), Piece(PieceType.PAWN, Color.BLACK, True))
        assert not validator.can_en_passant(_p("e5"), _p("f6"), Color.WHITE, single)
        assert not validator.is_legal_move(_p("e5"), _p("f6"), board[_p("e5")], single)

    def test_without_last_move(self) -> None:
        board = board_from_placement("4k3/8/8/4Pp2/8/8/8/4K3")
        validator = MoveValidator(board)
        assert "f6" not in _names(validator.get_legal_moves(_p("e5"), board[_p("e5")]))

    def test_pawn_must_be_adjacent(self) -> None:
        board = board_from_placement("4k3/8/8/3P1p2/8/8/8/4K3")
        validator = MoveValidator(board)
        last = _double_push("f7", "f5", Color.BLACK)
        assert not validator.can_en_passant(_p("d5"), _p("e6"), Color.WHITE, last)

    def test_wrong_row(self) -> None:
        board = board_from_placement("4k3/8/5p2/4P3/8/8/8/4K3")
        validator = MoveValidator(board)
        last = Move(_p("f8"), _p("f6"), Piece(PieceType.PAWN, Color.BLACK))
        assert not validator.can_en_passant(_p("e5"), _p("f7"), Color.WHITE, last)

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Removing both pawns from the fifth rank opens the rook's line to the king.
        board = board_from_placement("7k/8/8/K3Pp1r/8/8/8/8")
        validator = MoveValidator(board)
        last = _double_push("f7", "f5", Color.BLACK)
        assert not validator.can_en_passant(_p("e5"), _p("f6"), Color.WHITE, last)

    def test_move_record_classification(self) -> None:
        move = Move(_p("e5"), _p("f6"), Piece(PieceType.PAWN, Color.WHITE, True),
                    MoveType.EN_PASSANT)
        assert not move.is_double_pawn_push
        assert not move.is_castling


class TestMateAndStalemate:
    def test_back_rank_mate(self) -> None:
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        validator = MoveValidator(board)
        assert validator.is_checkmate(Color.BLACK)
        assert not validator.is_stalemate(Color.BLACK)

    def test_escape_is_not_mate(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        validator = MoveValidator(board)
        assert not validator.is_checkmate(Color.WHITE)
        assert validator.has_any_legal_moves(Color.WHITE)

    def test_stalemate(self) -> None:
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        validator = MoveValidator(board)
        assert validator.is_stalemate(Color.BLACK)
        assert not validator.is_checkmate(Color.BLACK)

    @pytest.mark.parametrize(
        "placement, color",
        [
            ("R2k4/8/3K4/8/8/8/8/8", Color.BLACK),
            ("7k/8/5KQ1/8/8/8/8/8", Color.BLACK),
            ("4k3/8/8/8/8/8/8/r3K3", Color.WHITE),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", Color.WHITE),
        ],
    )
    def test_mate_and_stalemate_exclusive(self, placement: str, color: Color) -> None:
        validator = MoveValidator(board_from_placement(placement))
        assert not (validator.is_checkmate(color) and validator.is_stalemate(color))
