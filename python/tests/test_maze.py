"""Grid maze model: indexing, adjacency, hand-built passages."""

from __future__ import annotations

import pytest

from backend.models.maze import DIRECTION_ORDER, Direction, Maze


def test_index_and_coords_are_inverse() -> None:
    maze = Maze.closed(3, 4)
    for i in range(maze.size):
        x, y = maze.coords(i)
        assert maze.index(x, y) == i
        assert (maze.cell(i).x, maze.cell(i).y) == (x, y)


def test_row_major_layout() -> None:
    maze = Maze.closed(3, 4)
    assert maze.coords(0) == (0, 0)
    assert maze.coords(3) == (3, 0)
    assert maze.coords(4) == (0, 1)
    assert maze.index(2, 2) == 10


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_closed_rejects_empty_grid(rows: int, cols: int) -> None:
    with pytest.raises(ValueError):
        Maze.closed(rows, cols)


def test_out_of_range_lookups_raise() -> None:
    maze = Maze.closed(2, 2)
    assert not maze.contains(4)
    assert not maze.contains(-1)
    with pytest.raises(ValueError):
        maze.coords(4)
    with pytest.raises(ValueError):
        maze.index(2, 0)


def test_directions() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.offset == (1, 0)
    assert Direction.UP.offset == (0, -1)
    assert DIRECTION_ORDER == (
        Direction.UP,
        Direction.DOWN,
        Direction.LEFT,
        Direction.RIGHT,
    )


def test_connect_opens_both_sides() -> None:
    maze = Maze.closed(2, 2)
    maze.connect(0, 2)
    assert maze.cell(0).openings == {Direction.DOWN}
    assert maze.cell(2).openings == {Direction.UP}
    assert maze.is_symmetric()


def test_connect_rejects_non_adjacent_cells() -> None:
    maze = Maze.closed(3, 3)
    with pytest.raises(ValueError):
        maze.connect(0, 4)
    with pytest.raises(ValueError):
        maze.connect(2, 3)  # row wrap is not adjacency


def test_neighbours_follow_expansion_order() -> None:
    maze = Maze.from_edges(3, 3, [(4, 5), (4, 3), (4, 7), (4, 1)])
    assert maze.neighbours(4) == list(DIRECTION_ORDER)
    assert maze.neighbour_indices(4) == [1, 7, 3, 5]


def test_move_follows_open_direction() -> None:
    maze = Maze.from_edges(2, 3, [(0, 1), (1, 4)])
    assert maze.move(0, Direction.RIGHT) == 1
    assert maze.move(1, Direction.DOWN) == 4
    assert maze.move(4, Direction.UP) == 1


def test_is_symmetric_detects_one_sided_opening() -> None:
    maze = Maze.closed(2, 2)
    maze.cell(0).openings.add(Direction.RIGHT)
    assert not maze.is_symmetric()


def test_is_symmetric_detects_opening_across_boundary() -> None:
    maze = Maze.closed(2, 2)
    maze.cell(0).openings.add(Direction.UP)
    assert not maze.is_symmetric()
