"""Route reconstruction from a finalized-distance table."""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from hill_climb.grid import Grid, is_legal_move
from hill_climb.position import Position

Route = Tuple[Position, ...]


@dataclass(frozen=True)
class Finalized:
    """Shortest known distance to a position and where it was reached from."""

    distance: int
    predecessor: Optional[Position] = None


FinalizedTable = Mapping[Position, Finalized]


def reconstruct_path(table: FinalizedTable, goal: Position) -> Optional[Route]:
    """Walk predecessor links back from ``goal`` and return the forward route.

    Returns:
        Route | None: Positions from a seed (no predecessor) to ``goal``
        inclusive, or ``None`` if ``goal`` was never finalized.
    """
    if goal not in table:
        return None
    backwards: List[Position] = []
    pos: Optional[Position] = goal
    while pos is not None:
        backwards.append(pos)
        pos = table[pos].predecessor
    backwards.reverse()
    return tuple(backwards)


def is_legal_route(grid: Grid, route: Sequence[Position]) -> bool:
    """True if every step of ``route`` is one cardinal tile and obeys the climb limit."""
    for src, dst in zip(route, route[1:]):
        if src.manhattan(dst) != 1 or not is_legal_move(grid, src, dst):
            return False
    return True
