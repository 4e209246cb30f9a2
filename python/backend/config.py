"""Default maze settings.

Every value can be overridden through an environment variable, and the
CLI options override those in turn.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# -- maze defaults ------------------------------------------------------------

DEFAULT_ROWS = 5
DEFAULT_COLS = 5

# Probability that a right or bottom wall stays closed during generation.
DEFAULT_P_WALL = 0.35

MIN_SIDE = 1
MAX_SIDE = 40

# -- environment overrides ----------------------------------------------------

ENV_ROWS = "PATHFINDER_ROWS"
ENV_COLS = "PATHFINDER_COLS"
ENV_P_WALL = "PATHFINDER_P_WALL"
ENV_SEED = "PATHFINDER_SEED"


@dataclass(frozen=True)
class MazeSettings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    p_wall: float = DEFAULT_P_WALL
    seed: int | None = None

    def __post_init__(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if not MIN_SIDE <= value <= MAX_SIDE:
                raise ValueError(
                    f"{name} must be between {MIN_SIDE} and {MAX_SIDE}, "
                    f"got {value}."
                )
        if not 0.0 <= self.p_wall <= 1.0:
            raise ValueError(f"p_wall must be within [0, 1], got {self.p_wall}.")

    @classmethod
    def from_env(cls) -> MazeSettings:
        """Read overrides from ``PATHFINDER_*`` environment variables."""
        seed = os.environ.get(ENV_SEED)
        return cls(
            rows=int(os.environ.get(ENV_ROWS, DEFAULT_ROWS)),
            cols=int(os.environ.get(ENV_COLS, DEFAULT_COLS)),
            p_wall=float(os.environ.get(ENV_P_WALL, DEFAULT_P_WALL)),
            seed=int(seed) if seed else None,
        )

    @property
    def size(self) -> int:
        return self.rows * self.cols
