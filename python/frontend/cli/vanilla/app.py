"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Draws the maze, lets the user step through a search or run it at once,
switch algorithm and regenerate the maze.
"""

from __future__ import annotations

import sys

from backend.engine.search import Algorithm, SearchAlgorithm
from backend.engine.session import PathfindingSession
from backend.models.result import StepStatus
from frontend.cli import render
from frontend.cli.input_handler import get_key, get_key_timeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_B = "\033[34;1m"    # bold blue
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_ROLE_COLOURS: dict[str, str] = {
    render.WALL: _DIM,
    render.OPEN: "",
    render.START: _B,
    render.FINISH: _B,
    render.CURRENT: _Y,
    render.VISITED: _DIM,
    render.LINK: _G,
    render.PATH: _C,
}

_ALGORITHM_KEYS: dict[str, Algorithm] = {
    "1": Algorithm.BFS,
    "2": Algorithm.DFS,
    "3": Algorithm.DIJKSTRA,
    "4": Algorithm.ASTAR,
}

_PLAY_DELAY = 0.15


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- maze rendering -----------------------------------------------------------


def _render_maze(session: PathfindingSession, search: SearchAlgorithm | None) -> str:
    """Return an ANSI-coloured text representation of the maze."""
    if search is None:
        lines = render.layout(session.maze)
    else:
        lines = render.layout(
            search.maze,
            start=search.start,
            finish=search.finish,
            current=search.current,
            links=search.links,
            path=search.solution,
        )
    out: list[str] = []
    for line in lines:
        out.append(
            "  " + "".join(f"{_ROLE_COLOURS[role]}{text}{_R}" for text, role in line)
        )
    return "\n".join(out)


def _status_line(search: SearchAlgorithm | None) -> str:
    if search is None:
        return f"  {_DIM}No search yet, press space to start one.{_R}"
    x, y = search.maze.coords(search.current)
    colour = {
        StepStatus.PENDING: _Y,
        StepStatus.SUCCEEDED: _G,
        StepStatus.FAILED: _RED,
    }[search.status]
    line = (
        f"  Steps: {_Y}{search.steps}{_R}  |  "
        f"Current: {_Y}[{x}, {y}]{_R}  |  "
        f"{colour}{search.status.value}{_R}"
    )
    if search.solution is not None:
        line += f"  |  Path: {_C}{len(search.solution) - 1}{_R} moves"
    return line


# -- search helpers -----------------------------------------------------------


def _finish_message(session: PathfindingSession, search: SearchAlgorithm) -> str:
    message = session.describe(search.result())
    colour = _G if search.status is StepStatus.SUCCEEDED else _RED
    return f"{colour}{message}{_R}"


def _step(session: PathfindingSession, search: SearchAlgorithm) -> str:
    """Advance one step.  Returns a status message."""
    if search.is_finished:
        return _finish_message(session, search)
    if search.step() is StepStatus.PENDING:
        return ""
    return _finish_message(session, search)


def _play(session: PathfindingSession, search: SearchAlgorithm) -> str:
    """Animate the remaining steps.  Any key stops the animation."""
    for _ in search.iter_steps():
        _show_explorer(session, search, f"{_DIM}Playing… any key to pause.{_R}")
        if get_key_timeout(_PLAY_DELAY) is not None:
            return f"{_Y}Paused.{_R}"
    return _finish_message(session, search)


# -- screens ------------------------------------------------------------------


def _show_explorer(
    session: PathfindingSession, search: SearchAlgorithm | None, status: str = ""
) -> None:
    _clear()
    maze = session.maze
    print(
        f"  {_C}=== Maze Pathfinder ({maze.cols}×{maze.rows}) | "
        f"{session.algorithm.label} ==={_R}"
    )
    print()
    print(_render_maze(session, search))
    print()
    print(_status_line(search))
    if status:
        print(f"  {status}")
    print()
    print(
        f"  {_C}Space{_R}: step  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}P{_R}: play  |  "
        f"{_C}N{_R}: new endpoints  |  "
        f"{_C}G{_R}: new maze  |  "
        f"{_C}1-4{_R}: algorithm  |  "
        f"{_C}Q{_R}: quit"
    )


def _show_help() -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== HELP ==={_R}")
    print()
    print(f"  {_B}S{_R} / {_B}F{_R}   start and finish cells")
    print(f"  {_Y}@{_R}       cell expanded by the last step")
    print(f"  {_G}─ │{_R}     search tree discovered so far")
    print(f"  {_C}━ ┃ ●{_R}   shortest path (Dijkstra and A Star)")
    print()
    for key, algorithm in _ALGORITHM_KEYS.items():
        print(f"  {_C}{key}{_R}  {algorithm.label}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


# -- explorer loop ------------------------------------------------------------


def _explore(session: PathfindingSession) -> None:
    search: SearchAlgorithm | None = None
    status = ""

    while True:
        _show_explorer(session, search, status)
        status = ""
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in _ALGORITHM_KEYS:
            session.select(_ALGORITHM_KEYS[key])
            if search is not None:
                search = session.new_search(search.start, search.finish)
            status = f"{_C}Using {session.algorithm.label}{_R}"
        elif key == "step":
            if search is None or search.is_finished:
                search = session.new_search()
            status = _step(session, search)
        elif key == "solve":
            if search is None or search.is_finished:
                search = session.new_search()
            search.run()
            status = _finish_message(session, search)
        elif key == "play":
            if search is None or search.is_finished:
                search = session.new_search()
            status = _play(session, search)
        elif key == "new":
            search = session.new_search()
        elif key == "generate":
            session.regenerate()
            search = None
            status = f"{_Y}New maze!{_R}"
        elif key == "help":
            _show_help()


# -- public entry point -------------------------------------------------------


def run(session: PathfindingSession) -> None:
    """Launch the vanilla CLI explorer."""
    _explore(session)
