"""
Iterative-Deepening A* (IDA*).

Repeated depth-first searches, each bounded by a threshold on f = g + h. The
smallest f that was cut off becomes the next threshold.

Guardrails
----------
- ``options.ida_max_iterations``: hard cap on deepening iterations.
- ``options.ida_threshold_growth_cap``: abort when the next threshold would be
  larger than ``threshold * cap``. An iteration that cut nothing off has an
  infinite next threshold and trips this guard too.

The depth-first part runs on an explicit stack, so long corridors cannot hit
the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from math import ceil, inf
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..heuristics import get_heuristic
from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch, no_path, path_cost

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id="ida_star",
    name="IDA*",
    description="Iterative-deepening A*: memory-light, bounded by iteration and threshold guards.",
    weighted=True,
    optimal=True,
)


def _ordered_neighbors(grid: Grid, scratch: Scratch, cell: Cell) -> Iterator[Cell]:
    # Stable sort keeps up/right/down/left among equal h.
    return iter(sorted(grid.neighbors(cell), key=scratch.h_of))


def _bounded_search(
    grid: Grid,
    start: Cell,
    target: Cell,
    threshold: float,
    scratch: Scratch,
    trace: List[Cell],
    seen: Set[Cell],
) -> Tuple[Optional[List[Cell]], float, int]:
    """One deepening iteration.

    Returns (path or None, smallest pruned f, number of expansions).
    """
    scratch.clear_links()
    scratch.g[start] = 0.0
    if start not in seen:
        seen.add(start)
        trace.append(start)

    branch: List[Cell] = [start]
    on_branch: Set[Cell] = {start}
    g_stack: List[float] = [0.0]
    stack: List[Iterator[Cell]] = [_ordered_neighbors(grid, scratch, start)]
    best_g: Dict[Cell, float] = {start: 0.0}
    next_threshold = inf
    expanded = 1

    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            g_stack.pop()
            on_branch.discard(branch.pop())
            continue

        # Never walk back onto an ancestor of the current branch.
        if nxt in on_branch:
            continue

        ng = g_stack[-1] + grid.cost(nxt)
        nf = ng + scratch.h_of(nxt)
        if nf > threshold:
            if nf < next_threshold:
                next_threshold = nf
            continue

        # A sibling branch may re-enter a cell, but only on a cheaper route.
        if ng >= best_g.get(nxt, inf):
            continue
        best_g[nxt] = ng
        scratch.relax(nxt, ng, branch[-1])

        if nxt not in seen:
            seen.add(nxt)
            trace.append(nxt)
        expanded += 1

        if nxt == target:
            return branch + [nxt], threshold, expanded

        branch.append(nxt)
        on_branch.add(nxt)
        g_stack.append(ng)
        stack.append(_ordered_neighbors(grid, scratch, nxt))

    return None, next_threshold, expanded


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target, get_heuristic(options.heuristic), scale=grid.min_cost())
    max_iterations = int(options.ida_max_iterations)
    growth_cap = float(options.ida_threshold_growth_cap)

    trace: List[Cell] = []
    seen: Set[Cell] = set()
    expanded = 0
    threshold = float(ceil(scratch.h_of(start)))

    for iteration in range(1, max_iterations + 1):
        path, next_threshold, n = _bounded_search(grid, start, target, threshold, scratch, trace, seen)
        expanded += n
        logger.debug(f"IDA* iteration {iteration}: threshold={threshold} expanded={n}")

        if path is not None:
            return AlgorithmResult(
                trace=trace,
                path=path,
                success=True,
                cost=path_cost(grid, path),
                expanded=expanded,
                meta={"iterations": iteration, "threshold": threshold, "stop_reason": "found"},
            )

        if next_threshold == inf or next_threshold > threshold * growth_cap:
            logger.warning(
                f"IDA* stopped after {iteration} iterations: next threshold {next_threshold} "
                f"exceeds {growth_cap}x the current {threshold}"
            )
            return no_path(
                trace,
                expanded=expanded,
                iterations=iteration,
                threshold=threshold,
                stop_reason="threshold_cap",
            )

        threshold = next_threshold

    logger.warning(f"IDA* gave up after {max_iterations} iterations (threshold {threshold})")
    return no_path(
        trace,
        expanded=expanded,
        iterations=max_iterations,
        threshold=threshold,
        stop_reason="max_iterations",
    )
