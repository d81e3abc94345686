"""Precomputed board geometry.

``EDGE_DISTANCE[sq][direction]`` is the number of squares between *sq* and
the board edge when stepping in *direction*; ``DIRECTION_OFFSETS[direction]``
is the index delta of one such step.  Stepping further than the edge
distance leaves the board (or wraps onto another row) and must never be
dereferenced.
"""

from __future__ import annotations

from chessgrid.core.enums import Direction
from chessgrid.core.types import Square, file_of, row_of

DIRECTION_OFFSETS: tuple[int, ...] = (
    -8,  # north
    8,  # south
    -1,  # west
    1,  # east
    -9,  # northwest
    9,  # southeast
    -7,  # northeast
    7,  # southwest
)


# -- Precomputed lookup tables ---------------------------------------------


def _build_edge_distances() -> tuple[tuple[int, ...], ...]:
    table: list[tuple[int, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        row_idx = row_of(sq)

        north = row_idx
        south = 7 - row_idx
        west = file_idx
        east = 7 - file_idx

        table.append(
            (
                north,
                south,
                west,
                east,
                min(north, west),
                min(south, east),
                min(north, east),
                min(south, west),
            )
        )
    return tuple(table)


EDGE_DISTANCE: tuple[tuple[int, ...], ...] = _build_edge_distances()


def edge_distance(sq: Square, direction: Direction) -> int:
    """Squares between *sq* and the edge in *direction*."""
    return EDGE_DISTANCE[sq][direction]


def ray(sq: Square, direction: Direction) -> list[Square]:
    """Every square from *sq* (exclusive) to the edge in *direction*."""
    offset = DIRECTION_OFFSETS[direction]
    return [sq + offset * step for step in range(1, EDGE_DISTANCE[sq][direction] + 1)]
