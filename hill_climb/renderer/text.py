"""ASCII route rendering."""

from typing import Dict, List, Sequence

from hill_climb.grid import Grid
from hill_climb.position import Direction, Position, direction_between
from hill_climb.types import GOAL_MARKER

EMPTY_GLYPH = "."

ARROW_GLYPHS: Dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.SOUTH: "v",
    Direction.EAST: ">",
    Direction.WEST: "<",
}


def render_route_text(grid: Grid, route: Sequence[Position]) -> str:
    """Draw ``route`` over a blank map.

    Each route cell shows an arrow towards the next cell, the goal shows ``E``
    and every other cell shows ``.``. An empty route renders a blank map with
    only the goal marked.
    """
    canvas: List[List[str]] = [
        [EMPTY_GLYPH] * grid.width for _ in range(grid.height)
    ]
    for src, dst in zip(route, route[1:]):
        canvas[src.y][src.x] = ARROW_GLYPHS[direction_between(src, dst)]
    canvas[grid.goal.y][grid.goal.x] = GOAL_MARKER
    return "\n".join("".join(row) for row in canvas)
