"""Values handed from the search engine to whoever renders it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class StepStatus(StrEnum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not StepStatus.PENDING


Link = tuple[int, int]


@dataclass(frozen=True)
class SearchProgress:
    """Snapshot taken after a step: enough to draw the growing search tree."""

    status: StepStatus
    current: int
    links: tuple[Link, ...]
    steps: int


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    status: StepStatus
    start: int
    finish: int
    steps: int
    path: tuple[int, ...] | None = None
    links: tuple[Link, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        return self.status is StepStatus.SUCCEEDED

    @property
    def path_length(self) -> int | None:
        """Number of edges on the path, ``None`` when no path is known."""
        if self.path is None:
            return None
        return len(self.path) - 1
