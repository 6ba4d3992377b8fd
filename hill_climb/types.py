"""Common type aliases, constants and enumerations."""

from enum import StrEnum, auto

Elevation = int

MIN_ELEVATION: Elevation = 0
MAX_ELEVATION: Elevation = 25
MAX_CLIMB: Elevation = 1

START_MARKER = "S"
GOAL_MARKER = "E"


class SearchStatus(StrEnum):
    """Terminal state of a search invocation."""

    FOUND = auto()
    UNREACHABLE = auto()
    TIMED_OUT = auto()
