"""Board - mutable position state: occupancy, turn, castling, en passant."""

from __future__ import annotations

import logging
from typing import NoReturn

from chessgrid.core.castling import CastlingRights
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.move import Move
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Troop
from chessgrid.core.types import Square, is_valid_square, square_name

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised by :meth:`Board.apply_move` for a move the board rejects."""


class Board:
    """Mutable 64-square board plus side to move and special-move state.

    Fields are public so a caller can set up positions by hand, but
    :meth:`apply_move` is the supported way to play a move.
    """

    __slots__ = ("occupancy", "turn", "castling_rights", "en_passant_target")

    def __init__(
        self,
        occupancy: list[Troop | None] | None = None,
        turn: Color = Color.WHITE,
        castling_rights: CastlingRights | None = None,
        en_passant_target: Square | None = None,
    ) -> None:
        if occupancy is None:
            occupancy = [None] * 64
        if len(occupancy) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(occupancy)}")
        self.occupancy: list[Troop | None] = occupancy
        self.turn = turn
        self.castling_rights = (
            castling_rights if castling_rights is not None else CastlingRights()
        )
        self.en_passant_target = en_passant_target

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Decode *fen*; raises :class:`~chessgrid.core.notation.FenError`."""
        from chessgrid.core.notation.fen import board_from_fen

        return board_from_fen(fen)

    @classmethod
    def starting(cls) -> Board:
        """Standard starting position."""
        from chessgrid.core.notation.fen import STARTING_FEN

        return cls.from_fen(STARTING_FEN)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Troop | None:
        return self.occupancy[sq]

    def __setitem__(self, sq: Square, troop: Troop | None) -> None:
        self.occupancy[sq] = troop

    def is_empty(self, sq: Square) -> bool:
        return self.occupancy[sq] is None

    # -- Move generation ----------------------------------------------------

    def moves(self) -> list[Move]:
        """Pseudo-legal moves for the side to move (unordered)."""
        return MoveGenerator(self).generate_pseudo_legal_moves()

    def destinations(self, sq: Square) -> set[Square]:
        """End squares of the generated moves that start on *sq*."""
        return {move.end for move in self.moves() if move.start == sq}

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, move: Move) -> Troop | None:
        """Play *move* for the side to move and return the captured troop.

        King moves are not generated, so they are only checked for turn and
        own-troop capture.  Castling rights are left untouched.
        """
        troop = self._check_move(move)

        captured = self.occupancy[move.end]
        if (
            troop.kind == PieceKind.PAWN
            and move.end == self.en_passant_target
            and captured is None
        ):
            # The pawn being taken sits one row behind the target square.
            victim_sq = move.end + (8 if troop.color == Color.WHITE else -8)
            victim = self.occupancy[victim_sq]
            if (
                victim is not None
                and victim.color != troop.color
                and victim.kind == PieceKind.PAWN
            ):
                captured = victim
                self.occupancy[victim_sq] = None

        self.occupancy[move.start] = None
        self.occupancy[move.end] = troop

        self.en_passant_target = None
        if troop.kind == PieceKind.PAWN and abs(move.end - move.start) == 16:
            self.en_passant_target = (move.start + move.end) // 2

        self.turn = self.turn.flip()
        _LOGGER.debug(
            "Applied %s (%s), captured %s", move, troop.display_name, captured
        )
        return captured

    def _check_move(self, move: Move) -> Troop:
        if not (is_valid_square(move.start) and is_valid_square(move.end)):
            self._reject(move, "square out of range")

        troop = self.occupancy[move.start]
        if troop is None:
            self._reject(move, f"no troop on {square_name(move.start)}")
        if troop.color != self.turn:
            self._reject(move, f"it is {self.turn!s}'s turn")

        target = self.occupancy[move.end]
        if target is not None and target.color == troop.color:
            self._reject(move, "cannot capture own troop")

        if troop.kind != PieceKind.KING and move not in self.moves():
            self._reject(move, f"{troop.display_name} cannot move there")
        return troop

    @staticmethod
    def _reject(move: Move, reason: str) -> NoReturn:
        _LOGGER.info("Rejected move %s: %s", move, reason)
        raise IllegalMoveError(f"Illegal move {move}: {reason}")

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        rights = self.castling_rights
        return Board(
            self.occupancy.copy(),
            self.turn,
            CastlingRights(
                rights.white_king_side,
                rights.white_queen_side,
                rights.black_king_side,
                rights.black_queen_side,
            ),
            self.en_passant_target,
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.occupancy == other.occupancy
            and self.turn == other.turn
            and self.castling_rights == other.castling_rights
            and self.en_passant_target == other.en_passant_target
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines: list[str] = []
        for row_start in range(0, 64, 8):
            cells = (
                str(troop) if troop is not None else " "
                for troop in self.occupancy[row_start : row_start + 8]
            )
            lines.append("|" + "|".join(cells) + "|")
        lines.append("")
        lines.append(f"{self.turn!s} to move")
        annotations = self.castling_rights.annotations()
        if annotations:
            lines.append(annotations)
        return "\n".join(lines)

    def __repr__(self) -> str:
        ep = "-"
        if self.en_passant_target is not None:
            ep = square_name(self.en_passant_target)
        castling = "".join(self.castling_rights.markers()) or "-"
        return f"Board(turn={self.turn!s}, castling={castling}, ep={ep})"
