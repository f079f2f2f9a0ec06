"""Shared loop for the relaxation-based algorithms.

Dijkstra, A*, Weighted A* and Greedy Best-First only differ in how an open
cell is prioritized and in when a neighbor may be relaxed. Everything else
(stale-entry handling, trace bookkeeping, termination) lives here.

This module starts with an underscore, so the plugin loader skips it.
"""

from __future__ import annotations

from typing import Any, Callable

from ..pqueue import PriorityQueue
from ..types import AlgorithmResult, Cell, Grid, Scratch, no_path, reconstruct_path


def best_first_search(
    grid: Grid,
    start: Cell,
    target: Cell,
    scratch: Scratch,
    priority: Callable[[Cell], Any],
    first_discovery_wins: bool = False,
) -> AlgorithmResult:
    """Run a lazy-deletion best-first search.

    ``priority`` is evaluated when a cell is enqueued. With
    ``first_discovery_wins`` a neighbor is only updated while it has no
    predecessor; otherwise it is updated whenever a strictly cheaper g is found.
    """
    scratch.g[start] = 0.0
    open_set: PriorityQueue[Cell] = PriorityQueue(key=priority)
    open_set.enqueue(start)

    trace = []

    while open_set:
        cur = open_set.dequeue()
        if cur in scratch.visited:
            # stale
            continue
        scratch.visited.add(cur)
        trace.append(cur)

        if cur == target:
            return AlgorithmResult(
                trace=trace,
                path=reconstruct_path(scratch.predecessor, start, target),
                success=True,
                cost=scratch.g[target],
                expanded=len(trace),
            )

        cur_g = scratch.g[cur]
        for nxt in grid.neighbors(cur):
            if nxt in scratch.visited:
                continue
            ng = cur_g + grid.cost(nxt)
            if first_discovery_wins:
                if nxt in scratch.predecessor:
                    continue
            elif ng >= scratch.g_of(nxt):
                continue
            scratch.relax(nxt, ng, cur)
            open_set.enqueue(nxt)

    return no_path(trace)
