"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def flip(self) -> Color:
        """White ↔ Black."""
        return self.opposite

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.capitalize()


class Direction(IntEnum):
    """Compass directions, in the order the geometry tables are laid out."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    NORTHWEST = 4
    SOUTHEAST = 5
    NORTHEAST = 6
    SOUTHWEST = 7


ORTHOGONAL: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
)
DIAGONAL: tuple[Direction, ...] = (
    Direction.NORTHWEST,
    Direction.SOUTHEAST,
    Direction.NORTHEAST,
    Direction.SOUTHWEST,
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONAL + DIAGONAL
