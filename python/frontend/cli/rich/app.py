"""Rich terminal frontend: coloured maze, panels and an animated solver.

Uses the ``rich`` library for styled output while sharing the same
input handler, text layout and backend as the vanilla CLI.
"""

from __future__ import annotations

import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.search import Algorithm, SearchAlgorithm
from backend.engine.session import PathfindingSession
from backend.models.result import SearchResult, StepStatus
from frontend.cli import render
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_ROLE_STYLES: dict[str, str] = {
    render.WALL: "bright_blue",
    render.OPEN: "",
    render.START: "bold white on blue",
    render.FINISH: "bold white on blue",
    render.CURRENT: "bold black on yellow",
    render.VISITED: "dim",
    render.LINK: "green",
    render.PATH: "bold cyan",
}

_STATUS_STYLES: dict[StepStatus, str] = {
    StepStatus.PENDING: "yellow",
    StepStatus.SUCCEEDED: "bold green",
    StepStatus.FAILED: "bold red",
}

_ALGORITHM_KEYS: dict[str, Algorithm] = {
    "1": Algorithm.BFS,
    "2": Algorithm.DFS,
    "3": Algorithm.DIJKSTRA,
    "4": Algorithm.ASTAR,
}

_PLAY_DELAY = 0.1


# -- maze rendering -----------------------------------------------------------


def _render_maze(session: PathfindingSession, search: SearchAlgorithm | None) -> Text:
    """Return a Rich Text block of the maze and the search drawn over it."""
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
    text = Text(no_wrap=True)
    for n, line in enumerate(lines):
        if n:
            text.append("\n")
        for segment, role in line:
            text.append(segment, style=_ROLE_STYLES[role])
    return text


def _render_stats(search: SearchAlgorithm | None) -> Text:
    stats = Text()
    if search is None:
        stats.append("  No search yet, press space to start one.", style="dim")
        return stats
    x, y = search.maze.coords(search.current)
    stats.append("  Steps: ", style="dim")
    stats.append(str(search.steps), style="bold yellow")
    stats.append("    Current: ", style="dim")
    stats.append(f"[{x}, {y}]", style="bold yellow")
    stats.append("    ")
    stats.append(search.status.value, style=_STATUS_STYLES[search.status])
    if search.solution is not None:
        stats.append("    Path: ", style="dim")
        stats.append(f"{len(search.solution) - 1} moves", style="bold cyan")
    return stats


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("Space", "step"),
        ("V", "solve"),
        ("P", "play"),
        ("N", "new endpoints"),
        ("G", "new maze"),
        ("1-4", "algorithm"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f"  {label} ", style="dim")
    return controls


# -- search helpers -----------------------------------------------------------


def _finish_message(session: PathfindingSession, search: SearchAlgorithm) -> str:
    style = _STATUS_STYLES[search.status]
    return f"[{style}]{session.describe(search.result())}[/{style}]"


def _auto_solve(session: PathfindingSession, search: SearchAlgorithm) -> str:
    """Animate the remaining steps; any key pauses."""
    for progress in search.iter_steps():
        _draw_explorer(
            session,
            search,
            f"[cyan]Solving… step {progress.steps}[/cyan] [dim](any key to pause)[/dim]",
        )
        sys.stdout.flush()
        if get_key_timeout(_PLAY_DELAY) is not None:
            return "[yellow]Paused.[/yellow]"
    return _finish_message(session, search)


# -- screens ------------------------------------------------------------------


def _draw_explorer(
    session: PathfindingSession, search: SearchAlgorithm | None, status: str = ""
) -> None:
    console.clear()
    maze = session.maze

    panel = Panel(
        Align.center(_render_maze(session, search)),
        title=(
            f"[bold cyan]Maze Pathfinder  {maze.cols}×{maze.rows}  "
            f"·  {session.algorithm.label}[/bold cyan]"
        ),
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_render_stats(search)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_help() -> None:
    console.clear()

    legend = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    legend.add_column(justify="center")
    legend.add_column(style="dim")
    legend.add_row(Text(" S  F ", style=_ROLE_STYLES[render.START]), "start and finish")
    legend.add_row(Text(" @ ", style=_ROLE_STYLES[render.CURRENT]), "cell expanded last")
    legend.add_row(Text("─ │", style=_ROLE_STYLES[render.LINK]), "search tree")
    legend.add_row(
        Text("━ ┃ ●", style=_ROLE_STYLES[render.PATH]),
        "shortest path (Dijkstra, A Star)",
    )

    algos = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    algos.add_column(style="bold cyan", justify="right")
    algos.add_column()
    for key, algorithm in _ALGORITHM_KEYS.items():
        algos.add_row(key, algorithm.label)

    panel = Panel(
        Group(Align.center(legend), Text(""), Align.center(algos)),
        title="[bold]H E L P[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def render_comparison(
    session: PathfindingSession, results: dict[Algorithm, SearchResult]
) -> Table:
    """Return a table comparing one run of every algorithm."""
    first = next(iter(results.values()))
    a, b = session.maze.coords(first.start)
    c, d = session.maze.coords(first.finish)
    table = Table(
        title=f"From [{a}, {b}] to [{c}, {d}]",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Algorithm", style="bold")
    table.add_column("Result")
    table.add_column("Steps", justify="right", style="yellow")
    table.add_column("Tree edges", justify="right", style="yellow")
    table.add_column("Path", justify="right", style="cyan")

    for algorithm, result in results.items():
        style = _STATUS_STYLES[result.status]
        table.add_row(
            algorithm.label,
            Text(result.status.value, style=style),
            str(result.steps),
            str(len(result.links)),
            "—" if result.path_length is None else str(result.path_length),
        )
    return table


# -- explorer loop ------------------------------------------------------------


def _explore(session: PathfindingSession) -> None:
    search: SearchAlgorithm | None = None
    status = ""

    while True:
        _draw_explorer(session, search, status)
        status = ""
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key in _ALGORITHM_KEYS:
            session.select(_ALGORITHM_KEYS[key])
            if search is not None:
                search = session.new_search(search.start, search.finish)
            status = f"[cyan]Using {session.algorithm.label}[/cyan]"
        elif key == "step":
            if search is None or search.is_finished:
                search = session.new_search()
            if search.step().is_terminal:
                status = _finish_message(session, search)
        elif key == "solve":
            if search is None or search.is_finished:
                search = session.new_search()
            search.run()
            status = _finish_message(session, search)
        elif key == "play":
            if search is None or search.is_finished:
                search = session.new_search()
            status = _auto_solve(session, search)
        elif key == "new":
            search = session.new_search()
        elif key == "generate":
            session.regenerate()
            search = None
            status = "[yellow]New maze![/yellow]"
        elif key == "help":
            _draw_help()


# -- public entry point -------------------------------------------------------


def run(session: PathfindingSession) -> None:
    """Launch the Rich CLI explorer."""
    _explore(session)
