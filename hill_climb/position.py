"""Grid coordinates and cardinal directions.

``Position`` is an immutable integer coordinate used as the key type of every
lookup in the package (grid cells, frontier entries, finalized tables).
Ordering is structural: ``x`` first, then ``y``.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, List, Tuple


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def manhattan(self, other: "Position") -> int:
        """Return the Manhattan distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def step(self, direction: "Direction") -> "Position":
        """Return the adjacent position one tile towards ``direction``."""
        dx, dy = DIRECTION_OFFSETS[direction]
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(StrEnum):
    """Cardinal compass directions (y grows southwards)."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()


DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

# Canonical neighbour order; traversal order never depends on it because the
# frontier key is total, but keeping it fixed keeps neighbour lists stable.
CARDINAL_DIRECTIONS: List[Direction] = [
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
]


def direction_between(src: Position, dst: Position) -> Direction:
    """Return the direction of a single cardinal step from ``src`` to ``dst``.

    Raises:
        ValueError: If the two positions are not cardinally adjacent.
    """
    delta = (dst.x - src.x, dst.y - src.y)
    for direction, offset in DIRECTION_OFFSETS.items():
        if offset == delta:
            return direction
    raise ValueError(f"Positions {src} and {dst} are not adjacent")
