"""Multi-source shortest-path search over an elevation grid.

The search is Dijkstra specialised to unit step costs:

* every seed enters the :class:`~hill_climb.frontier.Frontier` at distance 0;
* the best entry is popped; if its cell is already finalized at an equal or
  smaller distance the entry is stale and dropped (lazy deletion instead of
  decrease-key);
* otherwise the cell is finalized with ``(distance, predecessor)``; popping
  the goal ends the search;
* each in-bounds neighbour reachable under the climb limit is pushed at
  ``distance + 1``. With ``prune_backtrack`` the popped entry's own
  predecessor is skipped.

All traversal state (frontier, finalized table) is local to one
:func:`explore` call. The grid is only read.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from hill_climb.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from hill_climb.frontier import Frontier, FrontierEntry
from hill_climb.grid import Grid, is_legal_move
from hill_climb.path import Finalized, Route, reconstruct_path
from hill_climb.position import Position
from hill_climb.types import SearchStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """Raw result of :func:`explore`.

    Attributes:
        status (SearchStatus): How the search terminated.
        table (PMap[Position, Finalized]): Every finalized position.
        popped (int): Number of frontier entries popped, stale ones included.
    """

    status: SearchStatus
    table: PMap[Position, Finalized]
    popped: int = 0


@dataclass(frozen=True)
class PathResult:
    """Route found by :func:`shortest_path`, or the reason there is none."""

    status: SearchStatus
    route: Route = ()
    explored: int = 0

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def steps(self) -> Optional[int]:
        """Number of moves along the route; ``None`` when no route exists."""
        if not self.found:
            return None
        return len(self.route) - 1

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.route)

    def __iter__(self):
        return iter(self.route)


def explore(
    grid: Grid,
    starts: Iterable[Position],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchOutcome:
    """Run the search from every position in ``starts`` towards ``grid.goal``.

    Args:
        grid (Grid): Terrain to search.
        starts (Iterable[Position]): Seeds, each at distance 0. Duplicates are
            ignored.
        config (SearchConfig): Pruning and deadline options.

    Returns:
        SearchOutcome: Terminal status plus the finalized table.

    Raises:
        IndexError: If a start lies outside the grid.
    """
    deadline: Optional[float] = None
    if config.deadline_seconds is not None:
        deadline = time.monotonic() + config.deadline_seconds

    finalized: Dict[Position, Finalized] = {}
    frontier = Frontier()
    for start in dict.fromkeys(starts):
        frontier.push(FrontierEntry(0, grid.elevation(start), start))
    logger.debug("search seeded with %d start(s), goal=%s", len(frontier), grid.goal)

    status = SearchStatus.UNREACHABLE
    popped = 0
    stale = 0
    while frontier:
        if deadline is not None and time.monotonic() >= deadline:
            status = SearchStatus.TIMED_OUT
            break

        entry = frontier.pop()
        popped += 1
        known = finalized.get(entry.position)
        if known is not None and known.distance <= entry.distance:
            stale += 1
            continue

        finalized[entry.position] = Finalized(entry.distance, entry.predecessor)
        if entry.position == grid.goal:
            status = SearchStatus.FOUND
            break

        for neighbor in grid.neighbors(entry.position):
            if not is_legal_move(grid, entry.position, neighbor):
                continue
            if config.prune_backtrack and neighbor == entry.predecessor:
                continue
            frontier.push(
                FrontierEntry(
                    entry.distance + 1,
                    grid.elevation(neighbor),
                    neighbor,
                    entry.position,
                )
            )

    logger.debug(
        "search %s: popped=%d stale=%d finalized=%d",
        status,
        popped,
        stale,
        len(finalized),
    )
    return SearchOutcome(status=status, table=pmap(finalized), popped=popped)


def shortest_path(
    grid: Grid,
    starts: Iterable[Position],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> PathResult:
    """Shortest route from any of ``starts`` to the goal.

    Returns:
        PathResult: ``FOUND`` with the route (seed to goal inclusive), or
        ``UNREACHABLE`` / ``TIMED_OUT`` with an empty route.
    """
    outcome = explore(grid, starts, config)
    if outcome.status != SearchStatus.FOUND:
        return PathResult(status=outcome.status, explored=len(outcome.table))
    route = reconstruct_path(outcome.table, grid.goal)
    if route is None:
        return PathResult(
            status=SearchStatus.UNREACHABLE, explored=len(outcome.table)
        )
    return PathResult(status=SearchStatus.FOUND, route=route, explored=len(outcome.table))


def lowest_positions(grid: Grid) -> List[Position]:
    """Every cell no higher than the start cell, in row-major order."""
    floor = grid.elevation(grid.start)
    return [pos for pos in grid.positions() if grid.elevation(pos) <= floor]


def shortest_path_from_start(
    grid: Grid, config: SearchConfig = DEFAULT_SEARCH_CONFIG
) -> PathResult:
    return shortest_path(grid, [grid.start], config)


def shortest_path_from_lowest(
    grid: Grid, config: SearchConfig = DEFAULT_SEARCH_CONFIG
) -> PathResult:
    return shortest_path(grid, lowest_positions(grid), config)
