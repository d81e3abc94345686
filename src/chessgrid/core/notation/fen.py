"""FEN decoding."""

from __future__ import annotations

import logging

from chessgrid.core.board import Board
from chessgrid.core.castling import CastlingRights
from chessgrid.core.enums import Color
from chessgrid.core.piece import Troop
from chessgrid.core.types import Square, parse_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_COUNT = 6
_TURN_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


# ── Error taxonomy ───────────────────────────────────────────────────────────


class FenError(ValueError):
    """Base class for malformed FEN input."""


class FenFieldCountError(FenError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Invalid FEN (need {_FIELD_COUNT} fields, got {count})")
        self.count = count


class FenTurnError(FenError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN turn field: {field!r} (expected 'w' or 'b')")
        self.field = field


class FenEnPassantError(FenError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN en-passant square: {field!r}")
        self.field = field


class FenRowCountError(FenError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Invalid FEN board (must contain 8 rows, got {count})")
        self.count = count


class FenRowWidthError(FenError):
    def __init__(self, row: int, width: int) -> None:
        super().__init__(f"Invalid FEN row {row}: expands to {width} squares, not 8")
        self.row = row
        self.width = width


class FenCharacterError(FenError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid FEN character: {char!r}")
        self.char = char


# ── Decoding ─────────────────────────────────────────────────────────────────


def board_from_fen(fen: str) -> Board:
    """Parse a 6-field FEN string into a :class:`Board`.

    Halfmove clock and fullmove number are accepted but not retained.
    Raises a :class:`FenError` subclass on malformed input; no partially
    decoded board is ever returned.
    """
    fields = fen.split(" ")
    if len(fields) != _FIELD_COUNT:
        raise FenFieldCountError(len(fields))

    placement, turn_part, castling_part, ep_part = fields[:4]

    # 1. Side to move
    try:
        turn = _TURN_CHARS[turn_part]
    except KeyError:
        raise FenTurnError(turn_part) from None

    # 2. Castling
    castling_rights = CastlingRights.from_fen_field(castling_part)

    # 3. En passant
    en_passant: Square | None = None
    if ep_part != "-":
        try:
            en_passant = parse_square(ep_part)
        except ValueError:
            raise FenEnPassantError(ep_part) from None

    # 4. Piece placement
    occupancy = _decode_placement(placement)

    _LOGGER.debug("Decoded FEN %r", fen)
    return Board(occupancy, turn, castling_rights, en_passant)


def _decode_placement(placement: str) -> list[Troop | None]:
    rows = placement.split("/")
    if len(rows) != 8:
        raise FenRowCountError(len(rows))

    occupancy: list[Troop | None] = []
    for row_idx, row_text in enumerate(rows):
        row: list[Troop | None] = []
        for ch in row_text:
            if ch in "12345678":
                row.extend([None] * int(ch))
                continue
            try:
                row.append(Troop.from_char(ch))
            except ValueError:
                raise FenCharacterError(ch) from None
        if len(row) != 8:
            raise FenRowWidthError(row_idx, len(row))
        occupancy.extend(row)
    return occupancy
