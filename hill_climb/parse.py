"""Text <-> Grid conversion.

The heightmap text format is one line per row, every row the same width,
using only:

* ``S``: the start cell, elevation 0;
* ``E``: the goal cell, elevation 25;
* ``a``-``z``: elevation equal to the letter's alphabet rank.

Leading/trailing whitespace around the whole text and around each line is
ignored, so indented literals (e.g. in tests) parse as-is. ``S``/``E`` are
decoded here only; the rest of the package sees plain elevations plus the
``Grid.start`` / ``Grid.goal`` positions.
"""

import logging
from typing import List, Optional

from pyrsistent import pvector

from hill_climb.errors import ParseError, ParseErrorKind
from hill_climb.grid import Grid
from hill_climb.position import Position
from hill_climb.types import (
    GOAL_MARKER,
    MAX_ELEVATION,
    MIN_ELEVATION,
    START_MARKER,
    Elevation,
)

logger = logging.getLogger(__name__)


def decode_elevation(char: str) -> Optional[Elevation]:
    """Elevation for a terrain letter or marker; ``None`` if not a valid cell."""
    if char == START_MARKER:
        return MIN_ELEVATION
    if char == GOAL_MARKER:
        return MAX_ELEVATION
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    return None


def encode_elevation(elevation: Elevation) -> str:
    """Inverse of :func:`decode_elevation` for plain terrain cells."""
    if not MIN_ELEVATION <= elevation <= MAX_ELEVATION:
        raise ValueError(f"Elevation out of range: {elevation}")
    return chr(ord("a") + elevation)


def parse_grid(text: str) -> Grid:
    """Decode heightmap text into a :class:`Grid`.

    Args:
        text (str): Heightmap, one row per line.

    Returns:
        Grid: Immutable grid with start/goal recorded.

    Raises:
        ParseError: On a row of differing width, an unknown character, a
            duplicated ``S``/``E``, or a missing ``S``/``E``.
    """
    start: Optional[Position] = None
    goal: Optional[Position] = None
    width = 0
    rows: List[List[Elevation]] = []

    for y, raw_line in enumerate(text.strip().splitlines()):
        line = raw_line.strip()
        row: List[Elevation] = []
        for x, char in enumerate(line):
            elevation = decode_elevation(char)
            if elevation is None:
                raise ParseError(
                    ParseErrorKind.INVALID_CHARACTER,
                    f"invalid character: {char!r}",
                    line=y + 1,
                    column=x + 1,
                )
            if char == START_MARKER:
                if start is not None:
                    raise ParseError(
                        ParseErrorKind.MULTIPLE_START,
                        "multiple start positions",
                        line=y + 1,
                        column=x + 1,
                    )
                start = Position(x, y)
            elif char == GOAL_MARKER:
                if goal is not None:
                    raise ParseError(
                        ParseErrorKind.MULTIPLE_GOAL,
                        "multiple goal positions",
                        line=y + 1,
                        column=x + 1,
                    )
                goal = Position(x, y)
            row.append(elevation)

        if y == 0:
            width = len(row)
        elif len(row) != width:
            raise ParseError(
                ParseErrorKind.INCONSISTENT_WIDTH,
                f"inconsistent row length: expected {width}, got {len(row)}",
                line=y + 1,
            )
        rows.append(row)

    if start is None:
        raise ParseError(ParseErrorKind.MISSING_START, "missing start position")
    if goal is None:
        raise ParseError(ParseErrorKind.MISSING_GOAL, "missing goal position")

    logger.debug("parsed %dx%d grid, start=%s goal=%s", width, len(rows), start, goal)
    return Grid(
        width=width,
        height=len(rows),
        rows=pvector(pvector(row) for row in rows),
        start=start,
        goal=goal,
    )


def format_grid(grid: Grid) -> str:
    """Render ``grid`` back into heightmap text (start as ``S``, goal as ``E``)."""
    lines: List[str] = []
    for y, row in enumerate(grid.rows):
        chars: List[str] = []
        for x, elevation in enumerate(row):
            pos = Position(x, y)
            if pos == grid.start:
                chars.append(START_MARKER)
            elif pos == grid.goal:
                chars.append(GOAL_MARKER)
            else:
                chars.append(encode_elevation(elevation))
        lines.append("".join(chars))
    return "\n".join(lines)
