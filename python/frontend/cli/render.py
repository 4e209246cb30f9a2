"""Text layout of a maze and the state of a search over it.

Both terminal frontends draw from the same layout: a list of lines, each
a list of ``(text, role)`` segments.  The vanilla frontend maps roles to
ANSI codes and the Rich one to styles.

Each cell is three characters wide::

    +---+---+
    | S ─ @ |
    +---+ │ +
    |   | F |
    +---+---+
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from backend.models.maze import Direction, Maze

Segment = tuple[str, str]
Line = list[Segment]

# roles
WALL = "wall"
OPEN = "open"
START = "start"
FINISH = "finish"
CURRENT = "current"
VISITED = "visited"
LINK = "link"
PATH = "path"


def _edge(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def layout(
    maze: Maze,
    *,
    start: int | None = None,
    finish: int | None = None,
    current: int | None = None,
    links: Iterable[tuple[int, int]] = (),
    path: Sequence[int] | None = None,
) -> list[Line]:
    """Return the maze as role-tagged text segments, one list per line."""
    link_edges = {_edge(a, b) for a, b in links if a != b}
    path_edges: set[tuple[int, int]] = set()
    path_cells: set[int] = set()
    if path:
        path_cells = set(path)
        path_edges = {_edge(a, b) for a, b in zip(path, path[1:])}
    visited = {i for edge in link_edges for i in edge}

    def passage_role(a: int, b: int) -> str:
        e = _edge(a, b)
        if e in path_edges:
            return PATH
        if e in link_edges:
            return LINK
        return OPEN

    def cell_segment(i: int) -> Segment:
        if i == start:
            return " S ", START
        if i == finish:
            return " F ", FINISH
        if i == current:
            return " @ ", CURRENT
        if i in path_cells:
            return " ● ", PATH
        if i in visited:
            return " · ", VISITED
        return "   ", OPEN

    lines: list[Line] = []
    for y in range(maze.rows):
        # wall line above row y
        border: Line = []
        for x in range(maze.cols):
            i = maze.index(x, y)
            border.append(("+", WALL))
            if y > 0 and maze.cell(i).is_open(Direction.UP):
                role = passage_role(i, i - maze.cols)
                border.append((_VERTICAL[role], role))
            else:
                border.append(("---", WALL))
        border.append(("+", WALL))
        lines.append(border)

        row: Line = []
        for x in range(maze.cols):
            i = maze.index(x, y)
            if x > 0 and maze.cell(i).is_open(Direction.LEFT):
                role = passage_role(i, i - 1)
                row.append((_HORIZONTAL[role], role))
            else:
                row.append(("|", WALL))
            row.append(cell_segment(i))
        row.append(("|", WALL))
        lines.append(row)

    bottom: Line = []
    for _ in range(maze.cols):
        bottom.extend([("+", WALL), ("---", WALL)])
    bottom.append(("+", WALL))
    lines.append(bottom)
    return lines


_VERTICAL = {OPEN: "   ", LINK: " │ ", PATH: " ┃ "}
_HORIZONTAL = {OPEN: " ", LINK: "─", PATH: "━"}


def render_plain(maze: Maze, **kwargs) -> str:
    """Return the layout as a plain string (no colours)."""
    return "\n".join(
        "".join(text for text, _ in line) for line in layout(maze, **kwargs)
    )
