"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate relocation from *start* to *end*.

    Captures, en passant and double pushes are not tagged; callers infer them
    from the board before and after the move.
    """

    start: Square
    end: Square

    def __str__(self) -> str:
        return f"{square_name(self.start)}{square_name(self.end)}"

    @classmethod
    def from_uci(cls, text: str) -> Move:
        if len(text) != 4:
            raise ValueError(f"Invalid move notation: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
