from backend.engine.search.astar import AStar
from backend.engine.search.base import Algorithm, SearchAlgorithm
from backend.engine.search.bfs import BreadthFirstSearch
from backend.engine.search.dfs import DepthFirstSearch
from backend.engine.search.dijkstra import Dijkstra
from backend.engine.search.factory import create_search
from backend.engine.search.path import reconstruct_path
from backend.engine.search.records import NodeRecord

__all__ = [
    "AStar",
    "Algorithm",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "Dijkstra",
    "NodeRecord",
    "SearchAlgorithm",
    "create_search",
    "reconstruct_path",
]
