"""Shared fixtures: a few hand-built mazes and a batch of random ones."""

from __future__ import annotations

import pytest

from backend.engine.mazegenerator import MazeGenerator
from backend.models.maze import Maze

SEEDS = list(range(25))


@pytest.fixture
def open_5x5() -> Maze:
    """5×5 grid without internal walls."""
    return MazeGenerator.open(5, 5)


@pytest.fixture
def single_cell() -> Maze:
    return Maze.closed(1, 1)


@pytest.fixture
def split_maze() -> Maze:
    """3×3 maze cut in two by a vertical wall between columns 1 and 2.

    Left part: cells 0,1,3,4,6,7 all connected; right column 2,5,8
    connected top to bottom.
    """
    return Maze.from_edges(
        3,
        3,
        [(0, 1), (0, 3), (1, 4), (3, 4), (3, 6), (4, 7), (6, 7), (2, 5), (5, 8)],
    )


@pytest.fixture(params=SEEDS, ids=lambda s: f"seed{s}")
def random_maze(request: pytest.FixtureRequest) -> Maze:
    rng = MazeGenerator.seeded(request.param)
    return MazeGenerator.generate(8, 10, p_wall=0.35, rng=rng)
