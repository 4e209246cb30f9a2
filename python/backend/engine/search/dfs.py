"""Depth-first search: same bookkeeping as BFS with a LIFO frontier."""

from __future__ import annotations

from backend.engine.search.base import Algorithm
from backend.engine.search.bfs import BreadthFirstSearch


class DepthFirstSearch(BreadthFirstSearch):
    """Reachability only; the discovered route is generally not the shortest."""

    algorithm = Algorithm.DFS

    @property
    def frontier(self) -> tuple[int, ...]:
        """Cells waiting to be expanded, next one first."""
        return tuple(reversed(self._frontier))

    def _pop(self) -> int:
        return self._frontier.pop()
