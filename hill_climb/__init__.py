"""hill_climb
=============

Shortest routes up an elevation grid.

A heightmap is parsed into an immutable :class:`Grid`; :func:`shortest_path`
runs a multi-source, unit-cost Dijkstra search in which a step may climb at
most one elevation unit but drop any amount. The main entry points are
re-exported here::

    from hill_climb import parse_grid, shortest_path_from_start

    grid = parse_grid(text)
    result = shortest_path_from_start(grid)
    result.steps  # None if the goal is unreachable

"""

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .errors import ParseError, ParseErrorKind
from .grid import Grid, is_legal_move
from .parse import format_grid, parse_grid
from .path import Finalized, is_legal_route, reconstruct_path
from .position import Direction, Position
from .search import (
    PathResult,
    SearchOutcome,
    explore,
    lowest_positions,
    shortest_path,
    shortest_path_from_lowest,
    shortest_path_from_start,
)
from .solver import Answer, HillClimbSolver, solve
from .types import SearchStatus

__all__ = [
    "DEFAULT_SEARCH_CONFIG",
    "SearchConfig",
    "ParseError",
    "ParseErrorKind",
    "Grid",
    "is_legal_move",
    "format_grid",
    "parse_grid",
    "Finalized",
    "is_legal_route",
    "reconstruct_path",
    "Direction",
    "Position",
    "PathResult",
    "SearchOutcome",
    "explore",
    "lowest_positions",
    "shortest_path",
    "shortest_path_from_lowest",
    "shortest_path_from_start",
    "Answer",
    "HillClimbSolver",
    "solve",
    "SearchStatus",
]
