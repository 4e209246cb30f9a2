#!/usr/bin/env python3
"""Maze Pathfinder.

Usage::

    python main.py                     # interactive menu
    python main.py -f rich -a bfs      # Rich terminal, BFS
    python main.py -f pygame --rows 12 --cols 16
    python main.py --compare --seed 7  # run all four algorithms once
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import MAX_SIDE, MIN_SIDE, MazeSettings  # noqa: E402
from backend.engine.search import Algorithm  # noqa: E402
from backend.engine.session import PathfindingSession  # noqa: E402

logger = logging.getLogger("pathfinder")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(frontend: Frontend, session: PathfindingSession) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(session=session)


def _print_comparison(session: PathfindingSession) -> None:
    from frontend.cli.rich.app import render_comparison

    start, finish = session.random_endpoints()
    results = session.compare(start, finish)
    Console().print(render_comparison(session, results))


def _menu_loop(session: PathfindingSession) -> None:
    while True:
        print()
        print("  ====================================")
        print("        M A Z E   P A T H F I N D E R  ")
        print("  ====================================")
        print()
        print(f"  Algorithm: {session.algorithm.label}")
        print()
        print("  1.  Explore  (Vanilla Terminal)")
        print("  2.  Explore  (Rich Terminal)")
        print("  3.  Explore  (Pygame GUI)")
        print("  4.  Compare algorithms")
        print("  5.  Change algorithm")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2", "3"):
            frontend = {
                "1": Frontend.vanilla,
                "2": Frontend.rich,
                "3": Frontend.pygame,
            }[choice]
            _launch(frontend, session)

        elif choice == "4":
            _print_comparison(session)

        elif choice == "5":
            raw = input("  bfs / dfs / dijkstra / astar: ").strip().lower()
            try:
                session.select(Algorithm(raw))
            except ValueError:
                print("  Unknown algorithm.")

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.ASTAR, "-a", "--algorithm",
        help="Search algorithm to start with.",
    ),
    rows: Optional[int] = typer.Option(
        None, "--rows",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Maze height in cells (default from PATHFINDER_ROWS or 5).",
    ),
    cols: Optional[int] = typer.Option(
        None, "--cols",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Maze width in cells (default from PATHFINDER_COLS or 5).",
    ),
    p_wall: Optional[float] = typer.Option(
        None, "--p-wall",
        min=0.0, max=1.0,
        help="Probability that a wall stays closed.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible mazes and endpoints.",
    ),
    compare: bool = typer.Option(
        False, "--compare",
        help="Run every algorithm on one random start/finish pair and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every search step.",
    ),
) -> None:
    """Maze Pathfinder."""
    _configure_logging(verbose)

    try:
        defaults = MazeSettings.from_env()
        settings = MazeSettings(
            rows=defaults.rows if rows is None else rows,
            cols=defaults.cols if cols is None else cols,
            p_wall=defaults.p_wall if p_wall is None else p_wall,
            seed=defaults.seed if seed is None else seed,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    session = PathfindingSession(settings, algorithm)
    logger.debug("Settings: %s", settings)

    if compare:
        _print_comparison(session)
        return

    if frontend is None:
        _menu_loop(session)
        return

    _launch(frontend, session)


if __name__ == "__main__":
    app()
