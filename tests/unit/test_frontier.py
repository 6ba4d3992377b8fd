import pytest

from hill_climb.frontier import Frontier, FrontierEntry
from hill_climb.position import Position


def _drain(frontier: Frontier) -> list[FrontierEntry]:
    out: list[FrontierEntry] = []
    while frontier:
        out.append(frontier.pop())
    return out


def test_smallest_distance_first() -> None:
    frontier = Frontier()
    far = FrontierEntry(3, 25, Position(0, 0), Position(0, 1))
    near = FrontierEntry(1, 0, Position(4, 4), Position(4, 3))
    frontier.push(far)
    frontier.push(near)
    assert len(frontier) == 2
    assert _drain(frontier) == [near, far]


def test_higher_elevation_breaks_distance_ties() -> None:
    frontier = Frontier()
    low = FrontierEntry(2, 3, Position(5, 5), Position(5, 4))
    high = FrontierEntry(2, 7, Position(0, 0), Position(0, 1))
    frontier.push(low)
    frontier.push(high)
    assert frontier.pop() == high


def test_larger_position_breaks_elevation_ties() -> None:
    frontier = Frontier()
    a = FrontierEntry(2, 3, Position(1, 9), None)
    b = FrontierEntry(2, 3, Position(2, 0), None)
    c = FrontierEntry(2, 3, Position(2, 1), None)
    for entry in (a, b, c):
        frontier.push(entry)
    assert _drain(frontier) == [c, b, a]


def test_entry_with_predecessor_before_seed() -> None:
    frontier = Frontier()
    seed = FrontierEntry(0, 0, Position(1, 1))
    reached = FrontierEntry(0, 0, Position(1, 1), Position(0, 1))
    frontier.push(seed)
    frontier.push(reached)
    assert frontier.pop() == reached


def test_order_independent_of_push_order() -> None:
    entries = [
        FrontierEntry(1, 4, Position(0, 0), Position(0, 1)),
        FrontierEntry(1, 4, Position(0, 0), Position(1, 0)),
        FrontierEntry(0, 2, Position(3, 3)),
        FrontierEntry(1, 9, Position(2, 2), Position(2, 1)),
    ]
    forward = Frontier()
    backward = Frontier()
    for entry in entries:
        forward.push(entry)
    for entry in reversed(entries):
        backward.push(entry)
    assert _drain(forward) == _drain(backward)


def test_duplicate_entries_are_both_returned() -> None:
    frontier = Frontier()
    entry = FrontierEntry(0, 0, Position(0, 0))
    frontier.push(entry)
    frontier.push(entry)
    assert _drain(frontier) == [entry, entry]


def test_pop_empty_raises() -> None:
    frontier = Frontier()
    assert not frontier
    with pytest.raises(IndexError):
        frontier.pop()
