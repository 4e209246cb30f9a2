from backend.models.maze import DIRECTION_ORDER, Cell, Direction, Maze
from backend.models.result import SearchProgress, SearchResult, StepStatus

__all__ = [
    "DIRECTION_ORDER",
    "Cell",
    "Direction",
    "Maze",
    "SearchProgress",
    "SearchResult",
    "StepStatus",
]
