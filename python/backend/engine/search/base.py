"""Contract shared by every search algorithm.

Each algorithm advances through ``step()`` one unit of work at a time
(one frontier pop plus the expansions it causes) so a frontend can
animate it, or runs to completion through ``run()``.  Once a step has
returned a terminal status the instance is frozen: further steps return
that same status and change nothing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import StrEnum
from typing import ClassVar

from backend.models.maze import Maze
from backend.models.result import Link, SearchProgress, SearchResult, StepStatus

logger = logging.getLogger(__name__)


class Algorithm(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A Star",
}


class SearchAlgorithm(ABC):
    """Single-use search from *start* to *finish* over a read-only maze."""

    algorithm: ClassVar[Algorithm]

    def __init__(self, maze: Maze, start: int, finish: int) -> None:
        for name, index in (("start", start), ("finish", finish)):
            if not maze.contains(index):
                raise ValueError(
                    f"{name} index {index} is outside [0, {maze.size})."
                )
        self.maze = maze
        self.start = start
        self.finish = finish
        self._current = start
        self._status = StepStatus.PENDING
        self._steps = 0
        self._solution: list[int] | None = None

    # -- stepping -------------------------------------------------------------

    def step(self) -> StepStatus:
        """Advance by one unit of work and return the resulting status."""
        if self._status.is_terminal:
            return self._status

        self._steps += 1
        if self.start == self.finish:
            status = StepStatus.SUCCEEDED
        else:
            status = self._advance()

        logger.debug(
            "%s step %d: current=%d status=%s",
            self.algorithm.label,
            self._steps,
            self._current,
            status,
        )
        if status.is_terminal:
            self._finish(status)
        return status

    def run(self) -> SearchResult:
        """Step until the search terminates and return its result."""
        while self.step() is StepStatus.PENDING:
            pass
        return self.result()

    def iter_steps(self) -> Iterator[SearchProgress]:
        """Yield a snapshot after every step, up to and including the last."""
        while not self.is_finished:
            self.step()
            yield self.progress()

    # -- outbound state -------------------------------------------------------

    @property
    def status(self) -> StepStatus:
        return self._status

    @property
    def is_finished(self) -> bool:
        return self._status.is_terminal

    @property
    def current(self) -> int:
        """Most recently expanded cell."""
        return self._current

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def solution(self) -> list[int] | None:
        """Ordered cells from start to finish, once known."""
        if self._solution is None:
            return None
        return list(self._solution)

    @property
    @abstractmethod
    def links(self) -> list[Link]:
        """Edges of the search tree discovered so far."""

    def progress(self) -> SearchProgress:
        return SearchProgress(
            status=self._status,
            current=self._current,
            links=tuple(self.links),
            steps=self._steps,
        )

    def result(self) -> SearchResult:
        if not self.is_finished:
            raise RuntimeError(
                f"{self.algorithm.label} search has not finished yet."
            )
        return SearchResult(
            algorithm=self.algorithm,
            status=self._status,
            start=self.start,
            finish=self.finish,
            steps=self._steps,
            path=tuple(self._solution) if self._solution is not None else None,
            links=tuple(self.links),
        )

    # -- hooks ----------------------------------------------------------------

    @abstractmethod
    def _advance(self) -> StepStatus:
        """Do one unit of work; never called once terminal or when start == finish."""

    def _build_solution(self) -> list[int] | None:
        return None

    def _finish(self, status: StepStatus) -> None:
        self._status = status
        if status is StepStatus.SUCCEEDED:
            if self.start == self.finish:
                self._solution = [self.start]
            else:
                self._solution = self._build_solution()
        logger.info(
            "%s %s from %s to %s after %d steps",
            self.algorithm.label,
            status,
            self.maze.coords(self.start),
            self.maze.coords(self.finish),
            self._steps,
        )
