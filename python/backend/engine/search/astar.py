"""A* search guided by Manhattan distance to the goal."""

from __future__ import annotations

from backend.engine.search.base import Algorithm
from backend.engine.search.dijkstra import Dijkstra


class AStar(Dijkstra):
    """Dijkstra ranked by ``distance + heuristic``.

    With only unit-cost cardinal moves the Manhattan distance never
    overestimates and never drops by more than one per move, so the first
    time ``finish`` is relaxed its distance is already optimal.
    """

    algorithm = Algorithm.ASTAR
    stop_on_discovery = True

    def _heuristic(self, index: int) -> int:
        x, y = self.maze.coords(index)
        fx, fy = self.maze.coords(self.finish)
        return abs(x - fx) + abs(y - fy)
