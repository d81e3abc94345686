"""Core domain layer — board model, FEN decoding and move generation.

Quick start::

    from chessgrid.core import Board

    board = Board.starting()
    for move in board.moves():
        print(move)
"""

from chessgrid.core.board import Board, IllegalMoveError
from chessgrid.core.castling import CastlingRights
from chessgrid.core.enums import (
    ALL_DIRECTIONS,
    DIAGONAL,
    ORTHOGONAL,
    Color,
    Direction,
    PieceKind,
)
from chessgrid.core.geometry import DIRECTION_OFFSETS, EDGE_DISTANCE, edge_distance
from chessgrid.core.move import Move
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.notation import (
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
from chessgrid.core.piece import Troop
from chessgrid.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "Direction",
    "PieceKind",
    "ORTHOGONAL",
    "DIAGONAL",
    "ALL_DIRECTIONS",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Geometry
    "DIRECTION_OFFSETS",
    "EDGE_DISTANCE",
    "edge_distance",
    # Domain objects
    "Board",
    "CastlingRights",
    "IllegalMoveError",
    "Move",
    "MoveGenerator",
    "Troop",
    # Notation
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
