from backend.engine.mazegenerator.generator import MazeGenerator

__all__ = ["MazeGenerator"]
