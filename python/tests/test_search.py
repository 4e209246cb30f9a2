"""Behaviour every search algorithm shares: stepping, termination, results."""

from __future__ import annotations

import pytest

from backend.engine.search import (
    AStar,
    Algorithm,
    BreadthFirstSearch,
    DepthFirstSearch,
    Dijkstra,
    SearchAlgorithm,
    create_search,
)
from backend.models.maze import Maze
from backend.models.result import SearchProgress, StepStatus

ALGORITHMS = list(Algorithm)


# -- helpers ------------------------------------------------------------------


def _trajectory(search: SearchAlgorithm) -> list[tuple[StepStatus, int]]:
    """Run to completion, recording (status, current) after every step."""
    out: list[tuple[StepStatus, int]] = []
    while True:
        status = search.step()
        out.append((status, search.current))
        if status.is_terminal:
            return out


def _assert_valid_path(maze: Maze, path: list[int], start: int, finish: int) -> None:
    assert path[0] == start
    assert path[-1] == finish
    for a, b in zip(path, path[1:]):
        assert b in maze.neighbour_indices(a), f"{a} -> {b} crosses a wall"


# -- factory ------------------------------------------------------------------


@pytest.mark.parametrize(
    "algorithm,cls",
    [
        (Algorithm.BFS, BreadthFirstSearch),
        (Algorithm.DFS, DepthFirstSearch),
        (Algorithm.DIJKSTRA, Dijkstra),
        (Algorithm.ASTAR, AStar),
    ],
)
def test_create_search_dispatch(algorithm: Algorithm, cls: type, open_5x5: Maze) -> None:
    search = create_search(algorithm, open_5x5, 0, 24)
    assert type(search) is cls
    assert search.algorithm is algorithm


def test_create_search_accepts_names(open_5x5: Maze) -> None:
    assert isinstance(create_search("dijkstra", open_5x5, 0, 1), Dijkstra)


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("start,finish", [(-1, 3), (0, 25), (25, 0)])
def test_out_of_range_endpoints_rejected(
    algorithm: Algorithm, start: int, finish: int, open_5x5: Maze
) -> None:
    with pytest.raises(ValueError):
        create_search(algorithm, open_5x5, start, finish)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_initial_state(algorithm: Algorithm, open_5x5: Maze) -> None:
    search = create_search(algorithm, open_5x5, 6, 18)
    assert search.status is StepStatus.PENDING
    assert not search.is_finished
    assert search.current == 6
    assert search.steps == 0
    assert search.solution is None
    assert search.links == []
    with pytest.raises(RuntimeError):
        search.result()


# -- trivial searches ---------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_start_equals_finish_succeeds_in_one_step(
    algorithm: Algorithm, open_5x5: Maze
) -> None:
    search = create_search(algorithm, open_5x5, 12, 12)
    assert search.step() is StepStatus.SUCCEEDED
    assert search.steps == 1
    assert search.solution == [12]
    assert search.links == []


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_single_cell_maze(algorithm: Algorithm, single_cell: Maze) -> None:
    result = create_search(algorithm, single_cell, 0, 0).run()
    assert result.succeeded
    assert result.path == (0,)
    assert result.path_length == 0
    assert result.steps == 1


# -- termination --------------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_unreachable_finish_fails(algorithm: Algorithm, split_maze: Maze) -> None:
    result = create_search(algorithm, split_maze, 0, 8).run()
    assert result.status is StepStatus.FAILED
    assert result.path is None
    assert all(8 not in link for link in result.links)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_walled_in_start_fails(algorithm: Algorithm) -> None:
    maze = Maze.closed(2, 2)
    result = create_search(algorithm, maze, 0, 3).run()
    assert result.status is StepStatus.FAILED
    assert result.links == ()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_step_is_idempotent_after_termination(
    algorithm: Algorithm, random_maze: Maze
) -> None:
    search = create_search(algorithm, random_maze, 0, random_maze.size - 1)
    final = search.run()

    snapshot = (
        search.current,
        search.solution,
        search.links,
        search.steps,
        search.progress(),
    )
    for _ in range(3):
        assert search.step() is final.status
    assert (
        search.current,
        search.solution,
        search.links,
        search.steps,
        search.progress(),
    ) == snapshot
    assert search.result() == final


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_runs_are_deterministic(algorithm: Algorithm, random_maze: Maze) -> None:
    finish = random_maze.size - 1
    first = create_search(algorithm, random_maze, 3, finish)
    second = create_search(algorithm, random_maze, 3, finish)
    assert _trajectory(first) == _trajectory(second)
    assert first.result() == second.result()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_run_matches_manual_stepping(algorithm: Algorithm, random_maze: Maze) -> None:
    finish = random_maze.size // 2
    stepped = create_search(algorithm, random_maze, 0, finish)
    _trajectory(stepped)
    assert create_search(algorithm, random_maze, 0, finish).run() == stepped.result()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_iter_steps_yields_one_snapshot_per_step(
    algorithm: Algorithm, open_5x5: Maze
) -> None:
    search = create_search(algorithm, open_5x5, 0, 24)
    snapshots = list(search.iter_steps())
    assert all(isinstance(s, SearchProgress) for s in snapshots)
    assert [s.steps for s in snapshots] == list(range(1, search.steps + 1))
    assert all(s.status is StepStatus.PENDING for s in snapshots[:-1])
    assert snapshots[-1].status is StepStatus.SUCCEEDED
    assert list(search.iter_steps()) == []


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_searches_share_maze_without_interference(
    algorithm: Algorithm, random_maze: Maze
) -> None:
    finish = random_maze.size - 1
    alone = create_search(algorithm, random_maze, 0, finish).run()

    a = create_search(algorithm, random_maze, 0, finish)
    b = create_search(Algorithm.BFS, random_maze, finish, 0)
    while not (a.is_finished and b.is_finished):
        a.step()
        b.step()
    assert a.result() == alone


# -- outbound links -----------------------------------------------------------


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_links_follow_open_passages(algorithm: Algorithm, random_maze: Maze) -> None:
    result = create_search(algorithm, random_maze, 0, random_maze.size - 1).run()
    for a, b in result.links:
        assert b in random_maze.neighbour_indices(a)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_result_fields(algorithm: Algorithm, open_5x5: Maze) -> None:
    result = create_search(algorithm, open_5x5, 0, 24).run()
    assert result.algorithm is algorithm
    assert result.start == 0
    assert result.finish == 24
    assert result.succeeded
    assert result.steps >= 1
    if result.path is not None:
        _assert_valid_path(open_5x5, list(result.path), 0, 24)
