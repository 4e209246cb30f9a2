"""Pick a search implementation at runtime."""

from __future__ import annotations

from backend.engine.search.astar import AStar
from backend.engine.search.base import Algorithm, SearchAlgorithm
from backend.engine.search.bfs import BreadthFirstSearch
from backend.engine.search.dfs import DepthFirstSearch
from backend.engine.search.dijkstra import Dijkstra
from backend.models.maze import Maze

_REGISTRY: dict[Algorithm, type[SearchAlgorithm]] = {
    Algorithm.BFS: BreadthFirstSearch,
    Algorithm.DFS: DepthFirstSearch,
    Algorithm.DIJKSTRA: Dijkstra,
    Algorithm.ASTAR: AStar,
}


def create_search(
    algorithm: Algorithm | str, maze: Maze, start: int, finish: int
) -> SearchAlgorithm:
    """Return a fresh search instance for *algorithm*."""
    return _REGISTRY[Algorithm(algorithm)](maze, start, finish)
