"""Per-cell bookkeeping for the shortest-path searches."""

from __future__ import annotations

from dataclasses import dataclass

# rank() of a cell nobody has reached yet; larger than any finite rank.
UNREACHED_RANK: tuple[int, int] = (1, 0)


@dataclass
class NodeRecord:
    """Best known route to one cell.

    ``distance is None`` marks a cell that has not been reached.  The tag
    is never used in arithmetic: comparisons go through ``rank()``.
    """

    distance: int | None = None
    predecessor: int | None = None
    heuristic: int = 0

    @property
    def reached(self) -> bool:
        return self.distance is not None

    @property
    def score(self) -> int | None:
        if self.distance is None:
            return None
        return self.distance + self.heuristic

    def rank(self) -> tuple[int, int]:
        """Sort key: unreached records tie with each other, after all others."""
        score = self.score
        if score is None:
            return UNREACHED_RANK
        return (0, score)

    def improves(self, distance: int) -> bool:
        """True if *distance* beats what is recorded."""
        return self.distance is None or distance < self.distance
