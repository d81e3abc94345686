"""Notation package: FEN decoding."""

from chessgrid.core.notation.fen import (
    STARTING_FEN,
    FenCharacterError,
    FenEnPassantError,
    FenError,
    FenFieldCountError,
    FenRowCountError,
    FenRowWidthError,
    FenTurnError,
    board_from_fen,
)

__all__ = [
    "STARTING_FEN",
    "FenError",
    "FenFieldCountError",
    "FenTurnError",
    "FenEnPassantError",
    "FenRowCountError",
    "FenRowWidthError",
    "FenCharacterError",
    "board_from_fen",
]
