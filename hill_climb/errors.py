"""Parse errors raised while decoding elevation maps."""

from enum import StrEnum, auto
from typing import Optional


class ParseErrorKind(StrEnum):
    """Reason a heightmap text could not be decoded."""

    INCONSISTENT_WIDTH = auto()
    INVALID_CHARACTER = auto()
    MULTIPLE_START = auto()
    MULTIPLE_GOAL = auto()
    MISSING_START = auto()
    MISSING_GOAL = auto()


class ParseError(ValueError):
    """Structured failure of :func:`hill_climb.parse.parse_grid`.

    Attributes:
        kind: Which rule the input broke.
        line: 1-based line number of the offending character or row, if any.
        column: 1-based column of the offending character, if any.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        location = ""
        if line is not None:
            location = f" (line {line}" + (
                f", column {column})" if column is not None else ")"
            )
        super().__init__(f"{message}{location}")
        self.kind = kind
        self.line = line
        self.column = column
