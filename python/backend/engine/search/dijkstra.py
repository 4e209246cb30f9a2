"""Dijkstra's algorithm over the unit-cost maze graph."""

from __future__ import annotations

import heapq
import logging
from typing import ClassVar

from backend.engine.search.base import Algorithm, SearchAlgorithm
from backend.engine.search.path import reconstruct_path
from backend.engine.search.records import NodeRecord
from backend.models.maze import Maze
from backend.models.result import Link, StepStatus

logger = logging.getLogger(__name__)


class Dijkstra(SearchAlgorithm):
    """Settles one cell per step, lowest rank first.

    The frontier is a heap of ``(rank, index)`` entries.  Entries are
    never removed when a cell improves; stale ones are skipped on pop.
    Equal ranks resolve to the lowest cell index.
    """

    algorithm = Algorithm.DIJKSTRA

    # Succeed as soon as finish is relaxed instead of when it is selected.
    stop_on_discovery: ClassVar[bool] = False

    def __init__(self, maze: Maze, start: int, finish: int) -> None:
        super().__init__(maze, start, finish)
        self._records = [
            NodeRecord(heuristic=self._heuristic(i)) for i in range(maze.size)
        ]
        self._records[start].distance = 0
        self._records[start].predecessor = start
        self._settled: set[int] = set()
        self._frontier: list[tuple[tuple[int, int], int]] = []
        self._push(start)

    # -- outbound state -------------------------------------------------------

    @property
    def links(self) -> list[Link]:
        return [
            (record.predecessor, i)
            for i, record in enumerate(self._records)
            if record.predecessor is not None and i != self.start
        ]

    @property
    def settled(self) -> frozenset[int]:
        return frozenset(self._settled)

    def record(self, index: int) -> NodeRecord:
        r = self._records[index]
        return NodeRecord(r.distance, r.predecessor, r.heuristic)

    def distance(self, index: int) -> int | None:
        return self._records[index].distance

    # -- algorithm ------------------------------------------------------------

    def _heuristic(self, index: int) -> int:
        return 0

    def _push(self, index: int) -> None:
        heapq.heappush(self._frontier, (self._records[index].rank(), index))

    def _pop(self) -> int | None:
        while self._frontier:
            rank, index = heapq.heappop(self._frontier)
            if index in self._settled or rank != self._records[index].rank():
                continue
            return index
        return None

    def _advance(self) -> StepStatus:
        selected = self._pop()
        if selected is None:
            if self._records[self.finish].reached:
                return StepStatus.SUCCEEDED
            return StepStatus.FAILED

        self._settled.add(selected)
        self._current = selected
        if selected == self.finish:
            return StepStatus.SUCCEEDED

        candidate = self._records[selected].distance + 1
        if not self._records[self.finish].improves(candidate):
            # Nothing reached from here can shorten the best known route.
            return StepStatus.PENDING

        for neighbour in self.maze.neighbour_indices(selected):
            record = self._records[neighbour]
            if not record.improves(candidate):
                continue
            record.distance = candidate
            record.predecessor = selected
            self._push(neighbour)
            logger.debug("relaxed %d to %d via %d", neighbour, candidate, selected)
            if self.stop_on_discovery and neighbour == self.finish:
                return StepStatus.SUCCEEDED

        return StepStatus.PENDING

    def _build_solution(self) -> list[int] | None:
        return reconstruct_path(self._records, self.start, self.finish)
