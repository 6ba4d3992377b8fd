"""Puzzle-answer facade over the search.

``HillClimbSolver`` mirrors the usual two-part puzzle contract: build from an
input stream, then ask for each part's answer as text.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from hill_climb.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from hill_climb.grid import Grid
from hill_climb.parse import parse_grid
from hill_climb.search import (
    PathResult,
    shortest_path_from_lowest,
    shortest_path_from_start,
)
from hill_climb.types import SearchStatus

NO_PATH = "no path"
TIMED_OUT = "timed out"


@dataclass(frozen=True)
class Answer:
    """Step counts for both parts.

    A count is ``None`` when that part found no route; the matching status
    tells an unreachable goal apart from a search that ran out of time.
    """

    part_one: Optional[int]
    part_two: Optional[int]
    part_one_status: SearchStatus = SearchStatus.FOUND
    part_two_status: SearchStatus = SearchStatus.FOUND


def _format_steps(result: PathResult) -> str:
    if result.status == SearchStatus.TIMED_OUT:
        return TIMED_OUT
    if result.steps is None:
        return NO_PATH
    return str(result.steps)


@dataclass(frozen=True)
class HillClimbSolver:
    grid: Grid
    config: SearchConfig = DEFAULT_SEARCH_CONFIG

    @classmethod
    def from_input(
        cls, stream: TextIO, config: SearchConfig = DEFAULT_SEARCH_CONFIG
    ) -> "HillClimbSolver":
        """Parse the whole of ``stream``. Raises ``ParseError`` on bad input."""
        return cls(grid=parse_grid(stream.read()), config=config)

    def part_one_result(self) -> PathResult:
        return shortest_path_from_start(self.grid, self.config)

    def part_two_result(self) -> PathResult:
        return shortest_path_from_lowest(self.grid, self.config)

    def part_one(self) -> str:
        """Fewest steps from the marked start to the goal."""
        return _format_steps(self.part_one_result())

    def part_two(self) -> str:
        """Fewest steps from any lowest cell to the goal."""
        return _format_steps(self.part_two_result())


def solve(text: str, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> Answer:
    grid = parse_grid(text)
    one = shortest_path_from_start(grid, config)
    two = shortest_path_from_lowest(grid, config)
    return Answer(
        part_one=one.steps,
        part_two=two.steps,
        part_one_status=one.status,
        part_two_status=two.status,
    )
