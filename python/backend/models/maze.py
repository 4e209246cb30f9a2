"""Grid maze model shared by the generator and every search algorithm."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        """``(dx, dy)`` step; y grows downward."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Expansion order used by every algorithm; keeps runs reproducible.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass
class Cell:
    x: int
    y: int
    openings: set[Direction] = field(default_factory=set)

    def is_open(self, direction: Direction) -> bool:
        return direction in self.openings


@dataclass
class Maze:
    """Rectangular grid of cells stored row-major.

    Cell ``i`` sits at ``(i % cols, i // cols)``.  A direction in
    ``Cell.openings`` means there is no wall on that side; openings are
    kept symmetric by whoever builds the maze.
    """

    rows: int
    cols: int
    cells: list[Cell]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def closed(cls, rows: int, cols: int) -> Maze:
        """Return a maze with every wall in place."""
        if rows < 1 or cols < 1:
            raise ValueError(
                f"A maze needs at least one row and one column, "
                f"got {rows}×{cols}."
            )
        cells = [Cell(x=i % cols, y=i // cols) for i in range(rows * cols)]
        return cls(rows=rows, cols=cols, cells=cells)

    @classmethod
    def from_edges(
        cls, rows: int, cols: int, edges: Iterable[tuple[int, int]]
    ) -> Maze:
        """Build a maze whose only passages are *edges*.

        Example::

            Maze.from_edges(2, 2, [(0, 1), (1, 3)])
        """
        maze = cls.closed(rows, cols)
        for a, b in edges:
            maze.connect(a, b)
        return maze

    def connect(self, a: int, b: int) -> None:
        """Remove the wall between two orthogonally adjacent cells."""
        direction = self.direction_between(a, b)
        if direction is None:
            raise ValueError(f"Cells {a} and {b} are not adjacent.")
        self.cells[a].openings.add(direction)
        self.cells[b].openings.add(direction.opposite)

    # -- indexing -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, index: int) -> bool:
        return 0 <= index < self.size

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise ValueError(
                f"({x}, {y}) is outside the {self.cols}×{self.rows} grid."
            )
        return x + y * self.cols

    def coords(self, index: int) -> tuple[int, int]:
        if not self.contains(index):
            raise ValueError(
                f"Cell index {index} is outside [0, {self.size})."
            )
        y, x = divmod(index, self.cols)
        return x, y

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    # -- adjacency ------------------------------------------------------------

    def neighbours(self, index: int) -> list[Direction]:
        """Open directions of cell *index* in expansion order."""
        openings = self.cells[index].openings
        return [d for d in DIRECTION_ORDER if d in openings]

    def move(self, index: int, direction: Direction) -> int:
        # Only meaningful for an open direction; callers never ask otherwise.
        dx, dy = direction.offset
        return index + dx + dy * self.cols

    def neighbour_indices(self, index: int) -> list[int]:
        return [self.move(index, d) for d in self.neighbours(index)]

    def direction_between(self, a: int, b: int) -> Direction | None:
        """Direction leading from *a* to an adjacent *b*, else ``None``."""
        ax, ay = self.coords(a)
        bx, by = self.coords(b)
        for d in DIRECTION_ORDER:
            dx, dy = d.offset
            if (ax + dx, ay + dy) == (bx, by):
                return d
        return None

    def is_symmetric(self) -> bool:
        """Check that every opening is mirrored by the neighbour behind it."""
        for i, cell in enumerate(self.cells):
            for d in cell.openings:
                dx, dy = d.offset
                nx, ny = cell.x + dx, cell.y + dy
                if not (0 <= nx < self.cols and 0 <= ny < self.rows):
                    return False
                if not self.cells[self.move(i, d)].is_open(d.opposite):
                    return False
        return True
