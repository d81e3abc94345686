"""Tests for Board state, rendering and move application."""

import logging
from collections.abc import Callable

import pytest

from chessgrid.core.board import Board, IllegalMoveError
from chessgrid.core.castling import CastlingRights
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.move import Move
from chessgrid.core.piece import Troop
from chessgrid.core.types import (
    A1, A3, A5, A8, C3, D4, D5, D6, E1, E2, E3, E4, E5, E6, E7, F3, G1, H1,
)

BoardFactory = Callable[..., Board]


class TestBoardState:
    def test_empty_board(self) -> None:
        board = Board()
        assert board.occupancy == [None] * 64
        assert board.turn == Color.WHITE
        assert not board.castling_rights.any()
        assert board.en_passant_target is None

    def test_wrong_square_count(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            Board([None] * 63)

    def test_set_and_get(self) -> None:
        board = Board()
        troop = Troop(Color.WHITE, PieceKind.PAWN)
        board[E4] = troop
        assert board[E4] == troop
        assert board.occupancy[E4] == troop
        assert board.is_empty(E2)

    def test_direct_field_mutation(self, starting_board: Board) -> None:
        starting_board.turn = Color.BLACK
        starting_board.en_passant_target = E3
        starting_board.castling_rights.white_king_side = False
        assert starting_board.moves()
        assert all(starting_board[m.start].color == Color.BLACK for m in starting_board.moves())

    def test_copy_independence(self, starting_board: Board) -> None:
        copy = starting_board.copy()
        assert starting_board == copy
        copy[E1] = None
        copy.castling_rights.black_queen_side = False
        assert starting_board != copy
        assert starting_board[E1] == Troop(Color.WHITE, PieceKind.KING)
        assert starting_board.castling_rights.black_queen_side

    def test_equality_covers_turn(self, starting_board: Board) -> None:
        other = starting_board.copy()
        other.turn = Color.BLACK
        assert starting_board != other

    def test_repr(self, starting_board: Board) -> None:
        assert repr(starting_board) == "Board(turn=White, castling=KQkq, ep=-)"


class TestRendering:
    def test_no_castling_line(self) -> None:
        board = Board.from_fen("8/8/8/8/8/8/8/8 b - - 0 1")
        lines = str(board).split("\n")
        assert lines[-1] == "Black to move"
        assert lines[0] == "| | | | | | | | |"

    def test_partial_castling(self) -> None:
        board = Board.from_fen("r3k3/8/8/8/8/8/8/4K2R w Kq - 0 1")
        lines = str(board).split("\n")
        assert lines[0] == "|r| | | |k| | | |"
        assert lines[7] == "| | | | |K| | |R|"
        assert lines[-1] == " (K) (q)"


class TestApplyMove:
    def test_double_push_sets_en_passant(self, starting_board: Board) -> None:
        captured = starting_board.apply_move(Move(E2, E4))
        assert captured is None
        assert starting_board[E2] is None
        assert starting_board[E4] == Troop(Color.WHITE, PieceKind.PAWN)
        assert starting_board.turn == Color.BLACK
        assert starting_board.en_passant_target == E3

    def test_next_move_clears_en_passant(self, starting_board: Board) -> None:
        starting_board.apply_move(Move(E2, E4))
        starting_board.apply_move(Move(E7, E6))
        assert starting_board.en_passant_target is None
        assert starting_board.turn == Color.WHITE

    def test_en_passant_capture_removes_pawn(self) -> None:
        board = Board.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        captured = board.apply_move(Move(E5, D6))
        assert captured == Troop(Color.BLACK, PieceKind.PAWN)
        assert board[D5] is None
        assert board[E5] is None
        assert board[D6] == Troop(Color.WHITE, PieceKind.PAWN)
        assert board.en_passant_target is None

    def test_black_en_passant_capture(self) -> None:
        board = Board.from_fen("4k3/8/8/8/3Pp3/8/8/4K3 b - d3 0 1")
        captured = board.apply_move(Move.from_uci("e4d3"))
        assert captured == Troop(Color.WHITE, PieceKind.PAWN)
        assert board.is_empty(D4)

    def test_en_passant_spares_own_troop(self, make_board: BoardFactory) -> None:
        board = make_board({E5: "P", D5: "N", E1: "K"})
        board.en_passant_target = D6
        captured = board.apply_move(Move(E5, D6))
        assert captured is None
        assert board[D5] == Troop(Color.WHITE, PieceKind.KNIGHT)
        assert board[D6] == Troop(Color.WHITE, PieceKind.PAWN)

    def test_capture_returns_troop(self, make_board: BoardFactory) -> None:
        board = make_board({G1: "N", F3: "b", E1: "K"})
        captured = board.apply_move(Move(G1, F3))
        assert captured == Troop(Color.BLACK, PieceKind.BISHOP)
        assert board[F3] == Troop(Color.WHITE, PieceKind.KNIGHT)

    def test_king_move_accepted(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", A8: "k"})
        board.apply_move(Move(E1, E2))
        assert board[E2] == Troop(Color.WHITE, PieceKind.KING)
        assert board.turn == Color.BLACK

    def test_castling_rights_not_revoked(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        board.apply_move(Move(A1, A5))
        board.apply_move(Move(A8, A5))
        board.apply_move(Move(E1, E2))
        assert board.castling_rights == CastlingRights.all()


class TestApplyMoveRejections:
    def test_wrong_turn(self, starting_board: Board) -> None:
        with pytest.raises(IllegalMoveError, match="turn"):
            starting_board.apply_move(Move(E7, E5))

    def test_empty_start(self, starting_board: Board) -> None:
        with pytest.raises(IllegalMoveError, match="no troop on e4"):
            starting_board.apply_move(Move(E4, E5))

    def test_not_generated(self, starting_board: Board) -> None:
        with pytest.raises(IllegalMoveError, match="White Rook cannot move there"):
            starting_board.apply_move(Move(A1, A3))

    def test_own_capture(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", E2: "P"})
        with pytest.raises(IllegalMoveError, match="own troop"):
            board.apply_move(Move(E1, E2))

    def test_null_move(self, make_board: BoardFactory) -> None:
        board = make_board({H1: "K"})
        with pytest.raises(IllegalMoveError):
            board.apply_move(Move(H1, H1))

    def test_out_of_range(self, starting_board: Board) -> None:
        with pytest.raises(IllegalMoveError, match="out of range"):
            starting_board.apply_move(Move(E2, 64))

    def test_is_value_error(self, starting_board: Board) -> None:
        with pytest.raises(ValueError):
            starting_board.apply_move(Move(C3, E4))

    def test_rejection_leaves_board_untouched(self, starting_board: Board) -> None:
        before = starting_board.copy()
        with pytest.raises(IllegalMoveError):
            starting_board.apply_move(Move(E2, E5))
        assert starting_board == before

    def test_rejection_is_logged(
        self, starting_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="chessgrid.core.board"):
            with pytest.raises(IllegalMoveError):
                starting_board.apply_move(Move(E2, E6))
        assert "Rejected move e2e6" in caplog.text
