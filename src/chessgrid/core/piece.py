"""Troop value object: the occupant of a square."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceKind

# FEN character ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}

_SLIDING_KINDS = frozenset({PieceKind.ROOK, PieceKind.BISHOP, PieceKind.QUEEN})


@dataclass(frozen=True, slots=True)
class Troop:
    """Immutable value object: a piece kind paired with a side color."""

    color: Color
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """One-letter code (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Troop:
        """Create troop from FEN character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, kind)

    # ── Predicates ───────────────────────────────────────────────────────

    @property
    def is_sliding(self) -> bool:
        """Rook, bishop and queen move along rays until blocked."""
        return self.kind in _SLIDING_KINDS

    @property
    def display_name(self) -> str:
        """Human label, e.g. 'White Knight'."""
        return f"{self.color!s} {self.kind!s}"
