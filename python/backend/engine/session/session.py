"""Session logic: one maze, a chosen algorithm, and the searches run on it."""

from __future__ import annotations

import logging
import random

from backend.config import MazeSettings
from backend.engine.mazegenerator import MazeGenerator
from backend.engine.search import Algorithm, SearchAlgorithm, create_search
from backend.models.maze import Maze
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)


class PathfindingSession:
    """Owns the current maze and hands out fresh searches over it.

    A search never outlives a regeneration in any meaningful way: the old
    instance keeps its reference to the previous maze, which is never
    mutated.
    """

    def __init__(
        self,
        settings: MazeSettings | None = None,
        algorithm: Algorithm = Algorithm.ASTAR,
    ) -> None:
        self.settings = settings or MazeSettings()
        self.algorithm = Algorithm(algorithm)
        self._rng = MazeGenerator.seeded(self.settings.seed)
        self.maze = self._generate()

    @classmethod
    def from_maze(
        cls, maze: Maze, algorithm: Algorithm = Algorithm.ASTAR, seed: int | None = None
    ) -> "PathfindingSession":
        """Create a session around an existing maze (e.g. built by hand)."""
        obj = object.__new__(cls)
        obj.settings = MazeSettings(rows=maze.rows, cols=maze.cols, seed=seed)
        obj.algorithm = Algorithm(algorithm)
        obj._rng = MazeGenerator.seeded(seed)
        obj.maze = maze
        return obj

    # -- maze -----------------------------------------------------------------

    def regenerate(self) -> Maze:
        self.maze = self._generate()
        return self.maze

    def _generate(self) -> Maze:
        return MazeGenerator.generate(
            self.settings.rows,
            self.settings.cols,
            p_wall=self.settings.p_wall,
            rng=self._rng,
        )

    # -- searching ------------------------------------------------------------

    def select(self, algorithm: Algorithm | str) -> Algorithm:
        self.algorithm = Algorithm(algorithm)
        logger.info("Using %s", self.algorithm.label)
        return self.algorithm

    def random_endpoints(self) -> tuple[int, int]:
        """Pick start and finish uniformly; they may coincide."""
        size = self.maze.size
        return self._rng.randrange(size), self._rng.randrange(size)

    def new_search(
        self, start: int | None = None, finish: int | None = None
    ) -> SearchAlgorithm:
        """Return a fresh search, picking random endpoints for missing ones."""
        if start is None or finish is None:
            rand_start, rand_finish = self.random_endpoints()
            start = rand_start if start is None else start
            finish = rand_finish if finish is None else finish
        return create_search(self.algorithm, self.maze, start, finish)

    def solve(
        self, start: int | None = None, finish: int | None = None
    ) -> SearchResult:
        result = self.new_search(start, finish).run()
        logger.info(self.describe(result))
        return result

    def compare(self, start: int, finish: int) -> dict[Algorithm, SearchResult]:
        """Run every algorithm on the same endpoints."""
        return {
            algorithm: create_search(algorithm, self.maze, start, finish).run()
            for algorithm in Algorithm
        }

    # -- reporting ------------------------------------------------------------

    def describe(self, result: SearchResult) -> str:
        a, b = self.maze.coords(result.start)
        c, d = self.maze.coords(result.finish)
        verdict = "Success" if result.succeeded else "Failure"
        return f"{verdict} from [{a}, {b}] to [{c}, {d}]"
