"""Generates random mazes with symmetric passages."""

from __future__ import annotations

import logging
import random

from backend.config import DEFAULT_P_WALL
from backend.models.maze import Direction, Maze

logger = logging.getLogger(__name__)


class MazeGenerator:
    """Knocks walls down at random in a single pass over the cells."""

    @staticmethod
    def seeded(seed: int | None) -> random.Random:
        """Return a RNG; the same *seed* always yields the same maze."""
        return random.Random(seed)

    @staticmethod
    def open(rows: int, cols: int) -> Maze:
        """Return a maze with no internal walls."""
        return MazeGenerator.generate(rows, cols, p_wall=0.0)

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        p_wall: float = DEFAULT_P_WALL,
        rng: random.Random | None = None,
    ) -> Maze:
        """Return a random maze of the given size.

        Each right and bottom wall stays closed with probability *p_wall*.
        Left and top openings copy what the earlier neighbour already
        decided, so passages are symmetric without a second pass.
        """
        if not 0.0 <= p_wall <= 1.0:
            raise ValueError(f"p_wall must be within [0, 1], got {p_wall}.")
        if rng is None:
            rng = random.Random()

        maze = Maze.closed(rows, cols)
        for index in range(maze.size):
            MazeGenerator._generate_cell(maze, index, p_wall, rng)

        logger.info(
            "Generated %d×%d maze (p_wall=%.2f, %d passages)",
            cols,
            rows,
            p_wall,
            MazeGenerator.count_passages(maze),
        )
        return maze

    @staticmethod
    def count_passages(maze: Maze) -> int:
        """Number of open walls, each counted once."""
        return sum(
            len(cell.openings & {Direction.RIGHT, Direction.DOWN})
            for cell in maze.cells
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _generate_cell(
        maze: Maze, index: int, p_wall: float, rng: random.Random
    ) -> None:
        cell = maze.cells[index]
        x, y = cell.x, cell.y

        if x > 0 and maze.cells[index - 1].is_open(Direction.RIGHT):
            cell.openings.add(Direction.LEFT)
        if x < maze.cols - 1 and rng.random() >= p_wall:
            cell.openings.add(Direction.RIGHT)

        if y > 0 and maze.cells[index - maze.cols].is_open(Direction.DOWN):
            cell.openings.add(Direction.UP)
        if y < maze.rows - 1 and rng.random() >= p_wall:
            cell.openings.add(Direction.DOWN)
