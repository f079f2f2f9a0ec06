from __future__ import annotations

from ..heuristics import get_heuristic
from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch
from ._best_first import best_first_search

ALGORITHM = AlgorithmSpec(
    id="greedy",
    name="Greedy Best-First Search",
    description="Orders purely by h. The first route found to a cell is kept.",
    weighted=True,
    optimal=False,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target, get_heuristic(options.heuristic), scale=grid.min_cost())

    def priority(cell: Cell) -> float:
        return scratch.h_of(cell)

    # A cell that already has a predecessor is never re-parented, even if a
    # cheaper route shows up later.
    return best_first_search(grid, start, target, scratch, priority=priority, first_discovery_wins=True)
