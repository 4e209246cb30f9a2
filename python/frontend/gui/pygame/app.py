"""Pygame GUI frontend, self-contained.

Mouse and keyboard controls:

- left click: one search step (starts a search between two random cells
  when none is in progress)
- right click: run a new search to completion and show the result
- middle click / G: generate a new maze
- F1–F4: BFS, DFS, Dijkstra, A Star
"""

from __future__ import annotations

import pygame

from backend.engine.search import Algorithm, SearchAlgorithm
from backend.engine.session import PathfindingSession
from backend.models.maze import Direction
from backend.models.result import StepStatus

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PEACH = (250, 179, 135)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 640, 520
BAR_H = 40
MAZE_H = WIN_H - BAR_H
WALL_RATIO = 0.1
LINK_RATIO = 0.05

_ALGORITHM_KEYS: dict[int, Algorithm] = {
    pygame.K_F1: Algorithm.BFS,
    pygame.K_F2: Algorithm.DFS,
    pygame.K_F3: Algorithm.DIJKSTRA,
    pygame.K_F4: Algorithm.ASTAR,
}

_STATUS_COLOURS = {
    StepStatus.PENDING: COL_YELLOW,
    StepStatus.SUCCEEDED: COL_GREEN,
    StepStatus.FAILED: COL_RED,
}


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, session: PathfindingSession) -> None:
        self._session = session
        self._search: SearchAlgorithm | None = None
        # Right click shows a finished run; left click steps a live one.
        self._stepping = False
        self._status_msg = ""

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("THE MAZE")
        self._clock = pygame.time.Clock()
        self._f_bar = pygame.font.SysFont("Helvetica", 16, bold=True)

    # ── geometry ────────────────────────────────────────────────────────────

    def _cell_size(self) -> tuple[float, float]:
        maze = self._session.maze
        return WIN_W / maze.cols, MAZE_H / maze.rows

    def _cell_origin(self, index: int) -> tuple[float, float]:
        x, y = self._session.maze.coords(index)
        w, h = self._cell_size()
        return x * w, y * h

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_maze(self) -> None:
        maze = self._session.maze
        w, h = self._cell_size()
        tw, th = w * WALL_RATIO, h * WALL_RATIO

        for i, cell in enumerate(maze.cells):
            x, y = self._cell_origin(i)
            pygame.draw.rect(
                self._surf, COL_SURFACE0, (x + tw, y + th, w - 2 * tw, h - 2 * th)
            )
            if not cell.is_open(Direction.UP):
                pygame.draw.rect(self._surf, COL_MANTLE, (x, y, w, th))
            if not cell.is_open(Direction.DOWN):
                pygame.draw.rect(self._surf, COL_MANTLE, (x, y + h - th, w, th))
            if not cell.is_open(Direction.LEFT):
                pygame.draw.rect(self._surf, COL_MANTLE, (x, y, tw, h))
            if not cell.is_open(Direction.RIGHT):
                pygame.draw.rect(self._surf, COL_MANTLE, (x + w - tw, y, tw, h))

    def _draw_link(self, n: int, m: int, colour: tuple[int, int, int]) -> None:
        if n == m:
            return
        n, m = min(n, m), max(n, m)
        w, h = self._cell_size()
        a, b = self._cell_origin(n)
        c, d = self._cell_origin(m)
        a += w / 2 - w * LINK_RATIO
        b += h / 2 - h * LINK_RATIO
        c += w / 2 + w * LINK_RATIO
        d += h / 2 + h * LINK_RATIO
        pygame.draw.rect(self._surf, colour, (a, b, c - a, d - b))

    def _draw_indicator(self, index: int, colour: tuple[int, int, int]) -> None:
        w, h = self._cell_size()
        x, y = self._cell_origin(index)
        tw, th = w * WALL_RATIO, h * WALL_RATIO
        pygame.draw.rect(
            self._surf, colour, (x + w / 2 - tw, y + h / 2 - th, 2 * tw, 2 * th)
        )

    def _draw_search(self) -> None:
        search = self._search
        if search is None:
            return

        path = search.solution
        if self._stepping or path is None:
            for n, m in search.links:
                self._draw_link(n, m, COL_GREEN)
        if path is not None and search.is_finished:
            for n, m in zip(path, path[1:]):
                self._draw_link(n, m, COL_BLUE)

        if self._stepping:
            self._draw_indicator(search.current, COL_PEACH)
        self._draw_indicator(search.start, COL_BLUE)
        self._draw_indicator(search.finish, COL_BLUE)

    def _draw_bar(self) -> None:
        pygame.draw.rect(self._surf, COL_MANTLE, (0, MAZE_H, WIN_W, BAR_H))
        label = self._session.algorithm.label
        search = self._search
        if search is None:
            text = f"{label}  ·  left click: step   right click: solve   F1-F4: algorithm"
            colour = COL_SUBTEXT
        else:
            text = f"{label}  ·  step {search.steps}  ·  {search.status.value}"
            if self._status_msg:
                text += f"  ·  {self._status_msg}"
            colour = _STATUS_COLOURS[search.status]
        rendered = self._f_bar.render(text, True, colour)
        self._surf.blit(
            rendered, (12, MAZE_H + (BAR_H - rendered.get_height()) // 2)
        )

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        self._draw_maze()
        self._draw_search()
        self._draw_bar()

    # ── actions ─────────────────────────────────────────────────────────────

    def _do_step(self) -> None:
        if self._search is None or self._search.is_finished or not self._stepping:
            self._search = self._session.new_search()
            self._stepping = True
            self._status_msg = ""
        if self._search.step().is_terminal:
            self._status_msg = self._session.describe(self._search.result())

    def _do_solve(self) -> None:
        self._search = self._session.new_search()
        self._stepping = False
        result = self._search.run()
        self._status_msg = self._session.describe(result)

    def _do_generate(self) -> None:
        self._session.regenerate()
        self._search = None
        self._status_msg = ""

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        """Apply one event.  Returns False when the app should quit."""
        if ev.type == pygame.MOUSEBUTTONDOWN:
            if ev.button == 1:
                self._do_step()
            elif ev.button == 2:
                self._do_generate()
            elif ev.button == 3:
                self._do_solve()
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                return False
            if ev.key in _ALGORITHM_KEYS:
                self._session.select(_ALGORITHM_KEYS[ev.key])
            elif ev.key == pygame.K_g:
                self._do_generate()
            elif ev.key == pygame.K_SPACE:
                self._do_step()
            elif ev.key == pygame.K_RETURN:
                self._do_solve()
        return True

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(session: PathfindingSession) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(session)
    app.run_loop()
