"""Rebuild a route by walking predecessor links back from the goal."""

from __future__ import annotations

from collections.abc import Sequence

from backend.engine.search.records import NodeRecord


def reconstruct_path(
    records: Sequence[NodeRecord], start: int, finish: int
) -> list[int]:
    """Return the cells from *start* to *finish*, both included."""
    if not records[finish].reached:
        raise ValueError(f"Cell {finish} was never reached.")

    path = [finish]
    index = finish
    while index != start:
        predecessor = records[index].predecessor
        if predecessor is None or len(path) > len(records):
            raise ValueError(
                f"Predecessor chain from {finish} breaks at cell {index}."
            )
        index = predecessor
        path.append(index)

    path.reverse()
    return path
