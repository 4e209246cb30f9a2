"""Breadth-first search: reachability plus the tree of discovered edges."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.search.base import Algorithm, SearchAlgorithm
from backend.models.maze import Maze
from backend.models.result import Link, StepStatus

logger = logging.getLogger(__name__)


class BreadthFirstSearch(SearchAlgorithm):
    """FIFO frontier; cells are marked explored as soon as they are discovered.

    Reports success the moment ``finish`` is discovered, without waiting
    for it to reach the front of the queue.
    """

    algorithm = Algorithm.BFS

    def __init__(self, maze: Maze, start: int, finish: int) -> None:
        super().__init__(maze, start, finish)
        self._frontier: deque[int] = deque([start])
        self._explored: set[int] = {start}
        self._links: list[Link] = []

    @property
    def links(self) -> list[Link]:
        return list(self._links)

    @property
    def explored(self) -> frozenset[int]:
        return frozenset(self._explored)

    @property
    def frontier(self) -> tuple[int, ...]:
        """Cells waiting to be expanded, next one first."""
        return tuple(self._frontier)

    def _pop(self) -> int:
        return self._frontier.popleft()

    def _advance(self) -> StepStatus:
        if not self._frontier:
            return StepStatus.FAILED

        node = self._pop()
        self._current = node
        if node == self.finish:
            return StepStatus.SUCCEEDED

        for neighbour in self.maze.neighbour_indices(node):
            if neighbour in self._explored:
                continue
            self._explored.add(neighbour)
            self._frontier.append(neighbour)
            self._links.append((node, neighbour))
            logger.debug("discovered %d from %d", neighbour, node)
            if neighbour == self.finish:
                return StepStatus.SUCCEEDED

        return StepStatus.PENDING
