"""Search configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchConfig:
    """Tunables for :func:`hill_climb.search.explore`.

    Attributes:
        prune_backtrack: Skip pushing a neighbour that is the popped entry's
            own predecessor. Never changes route lengths.
        deadline_seconds: Wall-clock budget for a single search; ``None`` means
            unbounded. Exceeding it ends the search as ``TIMED_OUT``.
    """

    prune_backtrack: bool = True
    deadline_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.deadline_seconds is not None and not self.deadline_seconds >= 0:
            raise ValueError(
                f"deadline_seconds must be non-negative, got {self.deadline_seconds}"
            )


DEFAULT_SEARCH_CONFIG = SearchConfig()
