from __future__ import annotations

from itertools import islice

from islands.config import BREADTH_FIRST, SAMPLE_GRID, TraversalConfig
from islands.counter import IslandCounter, StepEvent
from islands.grid import Cell, GridModel
from islands.rng import random_grid


def _recursive_visit_order(rows: list[list[int]]) -> list[tuple[int, int]]:
    grid = [list(row) for row in rows]
    order: list[tuple[int, int]] = []

    def sink(r: int, c: int) -> None:
        if r < 0 or c < 0 or r >= len(grid) or c >= len(grid[0]) or grid[r][c] != 1:
            return
        grid[r][c] = 0
        order.append((r, c))
        sink(r + 1, c)
        sink(r - 1, c)
        sink(r, c + 1)
        sink(r, c - 1)

    for r in range(len(grid)):
        for c in range(len(grid[0]) if grid else 0):
            sink(r, c)
    return order


def test_sample_grid_event_sequence() -> None:
    events = list(IslandCounter().traverse(GridModel(SAMPLE_GRID)))

    assert len(events) == 14
    assert events[:4] == [
        StepEvent(0, 0, Cell.IN_PROGRESS, True, 1),
        StepEvent(0, 0, Cell.WATER, False, 1),
        StepEvent(1, 0, Cell.IN_PROGRESS, False, 1),
        StepEvent(1, 0, Cell.WATER, False, 1),
    ]
    visited = [(e.row, e.col) for e in events if e.value is Cell.IN_PROGRESS]
    assert visited == [(0, 0), (1, 0), (1, 1), (0, 1), (2, 2), (3, 3), (3, 4)]
    starts = [(e.row, e.col, e.island) for e in events if e.starts_island]
    assert starts == [(0, 0, 1), (2, 2, 2), (3, 3, 3)]


def test_breadth_first_visits_by_distance() -> None:
    counter = IslandCounter(TraversalConfig(strategy=BREADTH_FIRST))
    events = counter.traverse(GridModel(SAMPLE_GRID))

    visited = [(e.row, e.col) for e in events if e.value is Cell.IN_PROGRESS]
    assert visited[:4] == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_depth_first_matches_recursive_flood_fill_order() -> None:
    for trial in range(20):
        grid = random_grid(9, 11, density=0.6, seed=700 + trial)
        expected = _recursive_visit_order(grid.to_rows())

        events = IslandCounter().traverse(grid)
        assert [(e.row, e.col) for e in events if e.value is Cell.IN_PROGRESS] == expected


def test_full_drain_matches_count() -> None:
    for trial in range(25):
        original = random_grid(1 + trial % 8, 1 + trial % 11, density=0.5, seed=990 + trial)
        counted = original.copy()
        traversed = original.copy()

        total = IslandCounter().count(counted)
        events = list(IslandCounter().traverse(traversed))

        assert sum(1 for e in events if e.starts_island) == total
        assert len(events) == 2 * original.land_cells()
        assert traversed == counted
        assert traversed.land_cells() == 0
        assert not (traversed.cells == Cell.IN_PROGRESS).any()


def test_boundary_event_streams() -> None:
    assert list(IslandCounter().traverse(GridModel([]))) == []
    assert list(IslandCounter().traverse(GridModel([[0, 0], [0, 0]]))) == []

    grid = GridModel([[1]])
    events = list(IslandCounter().traverse(grid))
    assert events == [
        StepEvent(0, 0, Cell.IN_PROGRESS, True, 1),
        StepEvent(0, 0, Cell.WATER, False, 1),
    ]
    assert grid.get(0, 0) is Cell.WATER


def test_grid_tracks_each_pulled_event() -> None:
    grid = GridModel(SAMPLE_GRID)
    for event in IslandCounter().traverse(grid):
        assert grid.get(event.row, event.col) is event.value


def test_partial_drain_leaves_intermediate_state() -> None:
    grid = GridModel(SAMPLE_GRID)
    stream = IslandCounter().traverse(grid)

    pulled = list(islice(stream, 3))
    stream.close()

    assert pulled[-1] == StepEvent(1, 0, Cell.IN_PROGRESS, False, 1)
    assert grid.to_rows() == [
        [0, 1, 0, 0, 0],
        [2, 1, 0, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 1, 1],
    ]


def test_traversal_is_lazy() -> None:
    grid = GridModel(SAMPLE_GRID)
    stream = IslandCounter().traverse(grid)

    assert grid.land_cells() == 7
    next(stream)
    assert grid.land_cells() == 6
    assert grid.get(0, 0) is Cell.IN_PROGRESS
