from __future__ import annotations

from ..heuristics import get_heuristic
from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch
from ._best_first import best_first_search

ALGORITHM = AlgorithmSpec(
    id="astar",
    name="A*",
    description="f = g + h with the selected heuristic (scaled for cell costs).",
    weighted=True,
    optimal=True,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    # Scaling by the cheapest cell keeps the heuristic admissible when costs < 1.
    scratch = Scratch(target, get_heuristic(options.heuristic), weight=1.0, scale=grid.min_cost())

    def priority(cell: Cell) -> tuple[float, float]:
        return scratch.f_of(cell), scratch.h_of(cell)

    return best_first_search(grid, start, target, scratch, priority=priority)
