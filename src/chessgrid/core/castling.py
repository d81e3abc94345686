"""Castling availability flags."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_MARKERS: tuple[tuple[str, str], ...] = (
    ("K", "white_king_side"),
    ("Q", "white_queen_side"),
    ("k", "black_king_side"),
    ("q", "black_queen_side"),
)


@dataclass(slots=True)
class CastlingRights:
    """Four independent castling flags.

    The flags are only read from FEN; moving a king or rook does not revoke
    them.
    """

    white_king_side: bool = False
    white_queen_side: bool = False
    black_king_side: bool = False
    black_queen_side: bool = False

    @classmethod
    def from_fen_field(cls, field: str) -> CastlingRights:
        """Set a flag for each of ``KQkq`` present; other characters are ignored."""
        return cls(**{attr: marker in field for marker, attr in _MARKERS})

    @classmethod
    def all(cls) -> CastlingRights:
        return cls(True, True, True, True)

    def any(self) -> bool:
        return any(getattr(self, attr) for _, attr in _MARKERS)

    def markers(self) -> Iterator[str]:
        """FEN letters of the rights currently held, in ``KQkq`` order."""
        for marker, attr in _MARKERS:
            if getattr(self, attr):
                yield marker

    def annotations(self) -> str:
        """Rendering suffix, e.g. ' (K) (Q) (k) (q)'."""
        return "".join(f" ({marker})" for marker in self.markers())
