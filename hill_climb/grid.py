"""Immutable elevation grid.

The :class:`Grid` value is produced once by :func:`hill_climb.parse.parse_grid`
and never mutated afterwards; searches only read from it. Elevations are
stored row-major as a persistent vector of persistent vectors so that a grid
is hashable and safe to share between searches.

The neighbour helpers here are pure and deliberately small: they sit in the
inner loop of :func:`hill_climb.search.explore`.
"""

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np
import numpy.typing as npt
from pyrsistent.typing import PVector

from hill_climb.position import CARDINAL_DIRECTIONS, Position
from hill_climb.types import MAX_CLIMB, Elevation

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class Grid:
    """Rectangular heightmap with a designated start and goal.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        rows (PVector[PVector[int]]): ``rows[y][x]`` is the elevation at ``(x, y)``.
        start (Position): Cell decoded from ``S`` (elevation 0).
        goal (Position): Cell decoded from ``E`` (elevation 25).
    """

    width: int
    height: int
    rows: PVector[PVector[Elevation]]
    start: Position
    goal: Position

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def elevation(self, pos: Position) -> Elevation:
        """Return the elevation at ``pos``.

        Raises:
            IndexError: If ``pos`` is outside the grid.
        """
        if not self.in_bounds(pos):
            raise IndexError(
                f"Out of bounds: {pos} for grid {self.width}x{self.height}"
            )
        return self.rows[pos.y][pos.x]

    def __getitem__(self, pos: Position) -> Elevation:
        return self.elevation(pos)

    def neighbors(self, pos: Position) -> List[Position]:
        """Cardinal neighbours of ``pos`` that lie inside the grid."""
        return [
            candidate
            for candidate in (pos.step(direction) for direction in CARDINAL_DIRECTIONS)
            if self.in_bounds(candidate)
        ]

    def positions(self) -> Iterator[Position]:
        """Iterate every cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def as_array(self) -> UInt8Array:
        """Elevations as a ``(height, width)`` ``uint8`` array."""
        return np.array([list(row) for row in self.rows], dtype=np.uint8).reshape(
            self.height, self.width
        )


def is_legal_move(grid: Grid, src: Position, dst: Position) -> bool:
    """A move may climb at most ``MAX_CLIMB`` units; drops are unrestricted."""
    return grid.elevation(dst) <= grid.elevation(src) + MAX_CLIMB
