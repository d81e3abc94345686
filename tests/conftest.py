"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.piece import Troop
from chessgrid.core.types import Square


@pytest.fixture
def starting_board() -> Board:
    return Board.starting()


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build a board from ``{square: 'N', ...}`` with the given side to move."""

    def _make(placement: dict[Square, str], turn: Color = Color.WHITE) -> Board:
        board = Board(turn=turn)
        for sq, char in placement.items():
            board[sq] = Troop.from_char(char)
        return board

    return _make
