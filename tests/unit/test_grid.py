import numpy as np
import pytest

from hill_climb.grid import is_legal_move
from hill_climb.position import Direction, Position, direction_between
from tests.test_utils import example_grid, make_grid


def test_neighbors_corner() -> None:
    grid = example_grid()
    neighbors = grid.neighbors(Position(0, 0))
    assert len(neighbors) == 2
    assert Position(1, 0) in neighbors
    assert Position(0, 1) in neighbors


def test_neighbors_interior() -> None:
    grid = example_grid()
    neighbors = grid.neighbors(Position(5, 2))
    assert sorted(neighbors) == [
        Position(4, 2),
        Position(5, 1),
        Position(5, 3),
        Position(6, 2),
    ]


def test_neighbors_order_is_north_south_east_west() -> None:
    grid = example_grid()
    assert grid.neighbors(Position(3, 3)) == [
        Position(3, 2),
        Position(3, 4),
        Position(4, 3),
        Position(2, 3),
    ]


def test_neighbors_far_corner() -> None:
    grid = example_grid()
    assert sorted(grid.neighbors(Position(7, 4))) == [Position(6, 4), Position(7, 3)]


def test_single_cell_row_has_no_vertical_neighbors() -> None:
    grid = make_grid([[0, 1, 2]], (0, 0), (2, 0))
    assert grid.neighbors(Position(1, 0)) == [Position(2, 0), Position(0, 0)]


def test_elevation_out_of_bounds_raises() -> None:
    grid = example_grid()
    assert not grid.in_bounds(Position(8, 0))
    with pytest.raises(IndexError):
        grid.elevation(Position(8, 0))
    with pytest.raises(IndexError):
        grid.elevation(Position(0, -1))


@pytest.mark.parametrize(
    "src_level, dst_level, legal",
    [
        (0, 0, True),
        (0, 1, True),
        (0, 2, False),
        (10, 0, True),
        (24, 25, True),
        (23, 25, False),
    ],
)
def test_is_legal_move(src_level: int, dst_level: int, legal: bool) -> None:
    grid = make_grid([[src_level, dst_level]], (0, 0), (1, 0))
    assert is_legal_move(grid, Position(0, 0), Position(1, 0)) is legal


def test_positions_row_major() -> None:
    grid = make_grid([[0, 0], [0, 0]], (0, 0), (1, 1))
    assert list(grid.positions()) == [
        Position(0, 0),
        Position(1, 0),
        Position(0, 1),
        Position(1, 1),
    ]


def test_as_array() -> None:
    grid = example_grid()
    arr = grid.as_array()
    assert arr.shape == (5, 8)
    assert arr.dtype == np.uint8
    assert arr[2, 5] == 25
    assert arr[0, 3] == grid[Position(3, 0)]


def test_grid_is_hashable_and_frozen() -> None:
    grid = example_grid()
    assert hash(grid) == hash(example_grid())
    with pytest.raises(AttributeError):
        grid.width = 3  # type: ignore[misc]


def test_position_ordering_and_distance() -> None:
    assert Position(0, 5) < Position(1, 0)
    assert Position(1, 0) < Position(1, 2)
    assert Position(0, 0).manhattan(Position(3, -4)) == 7
    assert Position(2, 2).step(Direction.NORTH) == Position(2, 1)
    assert Position(2, 2).step(Direction.WEST) == Position(1, 2)


def test_direction_between() -> None:
    assert direction_between(Position(1, 1), Position(1, 2)) == Direction.SOUTH
    assert direction_between(Position(1, 1), Position(2, 1)) == Direction.EAST
    with pytest.raises(ValueError):
        direction_between(Position(1, 1), Position(2, 2))
