"""Priority queue of pending search states.

Entries are ordered best-first by:

1. smallest distance so far;
2. largest elevation of the entry's cell;
3. largest position;
4. an entry with a predecessor before one without, larger predecessor first.

Only (1) matters for correctness. (2)-(4) fix the traversal order so that
equal-length routes are always chosen the same way; the key is total, so the
order in which entries were pushed never leaks into the result.
"""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from hill_climb.position import Position
from hill_climb.types import Elevation

FrontierKey = Tuple[int, int, int, int, int, int, int]


@dataclass(frozen=True)
class FrontierEntry:
    """A candidate search state.

    Attributes:
        distance: Steps taken from the nearest seed.
        elevation: Elevation of ``position``.
        position: Cell this entry would finalize.
        predecessor: Cell the step came from; ``None`` for seeds.
    """

    distance: int
    elevation: Elevation
    position: Position
    predecessor: Optional[Position] = None

    @property
    def key(self) -> FrontierKey:
        """Ascending sort key (smaller is better)."""
        if self.predecessor is None:
            prev_key = (1, 0, 0)
        else:
            prev_key = (0, -self.predecessor.x, -self.predecessor.y)
        return (
            self.distance,
            -self.elevation,
            -self.position.x,
            -self.position.y,
            *prev_key,
        )


@dataclass
class Frontier:
    """Min-heap of :class:`FrontierEntry` keyed by :attr:`FrontierEntry.key`."""

    _heap: List[Tuple[FrontierKey, int, FrontierEntry]] = field(default_factory=list)
    # Identical entries share a key; the counter keeps heap tuples comparable.
    _counter: Iterator[int] = field(default_factory=itertools.count)

    def push(self, entry: FrontierEntry) -> None:
        heapq.heappush(self._heap, (entry.key, next(self._counter), entry))

    def pop(self) -> FrontierEntry:
        """Remove and return the best entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty frontier")
        _, _, entry = heapq.heappop(self._heap)
        return entry

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
