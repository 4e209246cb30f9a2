"""Reachability searches: BFS and DFS."""

from __future__ import annotations

import pytest

from backend.engine.search import BreadthFirstSearch, DepthFirstSearch
from backend.models.maze import Maze
from backend.models.result import StepStatus

TREE_SEARCHES = [BreadthFirstSearch, DepthFirstSearch]


# -- helpers ------------------------------------------------------------------


def _depth(links: list[tuple[int, int]], start: int, node: int) -> int:
    """Depth of *node* in the tree described by discovery links."""
    parent = {b: a for a, b in links}
    depth = 0
    while node != start:
        node = parent[node]
        depth += 1
    return depth


# -- properties ---------------------------------------------------------------


@pytest.mark.parametrize("cls", TREE_SEARCHES, ids=lambda c: c.__name__)
def test_success_means_finish_was_discovered(cls: type, random_maze: Maze) -> None:
    finish = random_maze.size - 1
    search = cls(random_maze, 0, finish)
    result = search.run()
    if result.succeeded:
        assert finish in {b for _, b in result.links}
        assert finish in search.explored
        assert result.path is None
    else:
        assert finish not in search.explored
        assert search.frontier == ()


@pytest.mark.parametrize("cls", TREE_SEARCHES, ids=lambda c: c.__name__)
def test_links_form_a_tree_rooted_at_start(cls: type, random_maze: Maze) -> None:
    search = cls(random_maze, 0, random_maze.size - 1)
    search.run()
    targets = [b for _, b in search.links]
    assert len(targets) == len(set(targets))
    assert 0 not in targets
    assert set(targets) | {0} == search.explored


@pytest.mark.parametrize("cls", TREE_SEARCHES, ids=lambda c: c.__name__)
def test_failure_leaves_empty_frontier(cls: type, split_maze: Maze) -> None:
    search = cls(split_maze, 0, 8)
    assert search.run().status is StepStatus.FAILED
    assert search.frontier == ()
    assert search.explored == frozenset({0, 1, 3, 4, 6, 7})


@pytest.mark.parametrize("cls", TREE_SEARCHES, ids=lambda c: c.__name__)
def test_succeeds_on_discovery_not_on_pop(cls: type) -> None:
    # corridor 0 - 1 - 2
    maze = Maze.from_edges(1, 3, [(0, 1), (1, 2)])
    search = cls(maze, 0, 2)
    assert search.step() is StepStatus.PENDING
    assert search.step() is StepStatus.SUCCEEDED
    assert search.current == 1
    assert search.links == [(0, 1), (1, 2)]


def test_bfs_first_step_expands_in_direction_order(open_5x5: Maze) -> None:
    search = BreadthFirstSearch(open_5x5, 12, 0)
    assert search.step() is StepStatus.PENDING
    assert search.links == [(12, 7), (12, 17), (12, 11), (12, 13)]
    assert search.frontier == (7, 17, 11, 13)


def test_dfs_pops_last_discovered(open_5x5: Maze) -> None:
    search = DepthFirstSearch(open_5x5, 12, 0)
    search.step()
    assert search.frontier == (13, 11, 17, 7)
    search.step()
    assert search.current == 13


def test_bfs_open_grid_example(open_5x5: Maze) -> None:
    search = BreadthFirstSearch(open_5x5, 0, 24)
    result = search.run()
    assert result.succeeded
    assert result.links[-1][1] == 24
    assert _depth(list(result.links), 0, 24) <= 8


def test_bfs_tree_depth_is_shortest_distance(random_maze: Maze) -> None:
    search = BreadthFirstSearch(random_maze, 0, random_maze.size - 1)
    search.run()
    explored_by_depth = {
        node: _depth(search.links, 0, node) for node in search.explored
    }
    # BFS discovers cells in non-decreasing depth order
    order = [b for _, b in search.links]
    depths = [explored_by_depth[n] for n in order]
    assert depths == sorted(depths)
