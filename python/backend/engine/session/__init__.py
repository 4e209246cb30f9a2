from backend.engine.session.session import PathfindingSession

__all__ = ["PathfindingSession"]
