"""
Pytest configuration and shared fixtures.

Grids are drawn as ASCII pictures: ``.`` open, ``#`` wall, ``S`` start,
``T`` target, ``1``-``9`` open cell with that entry cost.
"""

import random
from typing import Callable, List

import pytest

from gridsearch import Grid, create_grid, grid_from_rows

ALL_ALGORITHMS = [
    "astar",
    "bfs",
    "bidirectional",
    "dfs",
    "dijkstra",
    "greedy",
    "ida_star",
    "jps",
    "weighted_astar",
]

# Algorithms that always explore every reachable cell before giving up
EXHAUSTIVE_ALGORITHMS = ["bfs", "dfs", "dijkstra", "astar"]


def reachable_cells(grid: Grid) -> set:
    """Cells connected to the start, found with a plain flood fill."""
    seen = {grid.start}
    todo = [grid.start]
    while todo:
        cell = todo.pop()
        for nxt in grid.neighbors(cell):
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen


@pytest.fixture
def empty_grid() -> Grid:
    """Open 5x5 grid from the top-left to the bottom-right corner."""
    return create_grid(5, 5, start=(0, 0), target=(4, 4))


@pytest.fixture
def gap_grid() -> Grid:
    """A wall across row 3 whose only gap is (3, 4)."""
    return grid_from_rows([
        "..S....",
        ".......",
        ".......",
        "####.##",
        ".......",
        ".......",
        "..T....",
    ])


@pytest.fixture
def enclosed_grid() -> Grid:
    """Target at (4, 4) walled in on all four sides."""
    return grid_from_rows([
        "S.......",
        "........",
        "........",
        "....#...",
        "...#T#..",
        "....#...",
        "........",
        "........",
    ])


@pytest.fixture
def random_grids() -> List[Grid]:
    """Seeded 8x10 grids with roughly a quarter of the cells walled."""
    rng = random.Random(1234)
    grids = []
    for _ in range(25):
        grid = create_grid(8, 10, start=(0, 0), target=(7, 9))
        for row in range(grid.rows):
            for col in range(grid.cols):
                if rng.random() < 0.25:
                    grid.set_traversable((row, col), False)
        grids.append(grid)
    return grids


@pytest.fixture
def check_path() -> Callable[[Grid, list], None]:
    """Assert a path runs start..target over traversable, 4-adjacent cells."""

    def _check(grid: Grid, path: list) -> None:
        assert path[0] == grid.start
        assert path[-1] == grid.target
        for cell in path:
            assert grid.is_traversable(cell), f"{cell} is not traversable"
        for a, b in zip(path, path[1:]):
            assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} is not a single step"
        assert len(set(path)) == len(path), "path revisits a cell"

    return _check
