from __future__ import annotations

from ..heuristics import get_heuristic
from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch
from ._best_first import best_first_search

ALGORITHM = AlgorithmSpec(
    id="weighted_astar",
    name="Weighted A*",
    description="f = g + w*h. Trades optimality for fewer expansions when w > 1.",
    weighted=True,
    optimal=False,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(
        target,
        get_heuristic(options.heuristic),
        weight=float(options.weight),
        scale=grid.min_cost(),
    )

    def priority(cell: Cell) -> tuple[float, float]:
        return scratch.f_of(cell), scratch.h_of(cell)

    result = best_first_search(grid, start, target, scratch, priority=priority)
    result.meta["weight"] = scratch.weight
    return result
