"""Pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import (
    ALL_DIRECTIONS,
    DIAGONAL,
    ORTHOGONAL,
    Color,
    Direction,
    PieceKind,
)
from chessgrid.core.geometry import DIRECTION_OFFSETS, EDGE_DISTANCE
from chessgrid.core.move import Move
from chessgrid.core.types import Square, is_valid_square, row_of

if TYPE_CHECKING:
    from chessgrid.core.board import Board


# (long axis, short axis): two steps along the first, one along the second.
KNIGHT_JUMPS: tuple[tuple[Direction, Direction], ...] = (
    (Direction.NORTH, Direction.WEST),
    (Direction.NORTH, Direction.EAST),
    (Direction.SOUTH, Direction.WEST),
    (Direction.SOUTH, Direction.EAST),
    (Direction.WEST, Direction.NORTH),
    (Direction.WEST, Direction.SOUTH),
    (Direction.EAST, Direction.NORTH),
    (Direction.EAST, Direction.SOUTH),
)

_SLIDING_DIRECTIONS: dict[PieceKind, tuple[Direction, ...]] = {
    PieceKind.ROOK: ORTHOGONAL,
    PieceKind.BISHOP: DIAGONAL,
    PieceKind.QUEEN: ALL_DIRECTIONS,
}

# Per color: forward direction, double-push row, capture directions.
_PAWN_FORWARD: tuple[Direction, Direction] = (Direction.NORTH, Direction.SOUTH)
_PAWN_START_ROW: tuple[int, int] = (6, 1)
_PAWN_CAPTURES: tuple[tuple[Direction, Direction], tuple[Direction, Direction]] = (
    (Direction.NORTHWEST, Direction.NORTHEAST),
    (Direction.SOUTHWEST, Direction.SOUTHEAST),
)


class MoveGenerator:
    """Generates pseudo-legal moves for the side to move on a :class:`Board`.

    The generator only reads the board.  Moves that leave the mover's own
    king attacked are *not* filtered out, and king moves are not generated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves for ``board.turn``."""
        board = self._board
        color = board.turn
        candidates: list[Move] = []

        for sq, troop in enumerate(board.occupancy):
            if troop is None or troop.color != color:
                continue

            kind = troop.kind
            if kind in _SLIDING_DIRECTIONS:
                self._gen_sliding(sq, _SLIDING_DIRECTIONS[kind], candidates)
            elif kind == PieceKind.KNIGHT:
                self._gen_knight(sq, candidates)
            elif kind == PieceKind.PAWN:
                self._gen_pawn(sq, color, candidates)
            elif kind == PieceKind.KING:
                continue  # single steps and castling are left to the caller
            else:
                raise AssertionError(f"Unhandled piece kind: {kind!r}")

        return [move for move in candidates if not self._is_own_troop(move.end, color)]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        sq: Square,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        distances = EDGE_DISTANCE[sq]
        for direction in directions:
            offset = DIRECTION_OFFSETS[direction]
            to_sq = sq
            for _ in range(distances[direction]):
                to_sq += offset
                moves.append(Move(sq, to_sq))
                # The blocker stays a candidate; own troops are filtered later.
                if not board.is_empty(to_sq):
                    break

    def _gen_knight(self, sq: Square, moves: list[Move]) -> None:
        distances = EDGE_DISTANCE[sq]
        for long_dir, short_dir in KNIGHT_JUMPS:
            if distances[long_dir] < 2 or distances[short_dir] < 1:
                continue
            to_sq = sq + 2 * DIRECTION_OFFSETS[long_dir] + DIRECTION_OFFSETS[short_dir]
            moves.append(Move(sq, to_sq))

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        distances = EDGE_DISTANCE[sq]
        targets: list[Square] = []

        forward = _PAWN_FORWARD[color]
        step = DIRECTION_OFFSETS[forward]
        if distances[forward] >= 1 and board.is_empty(sq + step):
            targets.append(sq + step)
            if row_of(sq) == _PAWN_START_ROW[color] and board.is_empty(sq + 2 * step):
                targets.append(sq + 2 * step)

        en_passant = board.en_passant_target
        for direction in _PAWN_CAPTURES[color]:
            if distances[direction] < 1:
                continue
            cap_sq = sq + DIRECTION_OFFSETS[direction]
            if not board.is_empty(cap_sq) or cap_sq == en_passant:
                targets.append(cap_sq)

        moves.extend(Move(sq, to_sq) for to_sq in targets if is_valid_square(to_sq))

    def _is_own_troop(self, sq: Square, color: Color) -> bool:
        troop = self._board[sq]
        return troop is not None and troop.color == color
