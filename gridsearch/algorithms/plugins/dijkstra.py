from __future__ import annotations

from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch
from ._best_first import best_first_search

ALGORITHM = AlgorithmSpec(
    id="dijkstra",
    name="Dijkstra",
    description="Optimal shortest path w.r.t. cell entry costs; explores uniformly.",
    weighted=True,
    optimal=True,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target)
    return best_first_search(grid, start, target, scratch, priority=scratch.g_of)
