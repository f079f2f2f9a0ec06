from __future__ import annotations

from collections import deque

from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch, no_path, path_cost, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="bfs",
    name="Breadth-First Search",
    description="Unweighted; explores level by level. Guarantees the fewest steps.",
    weighted=False,
    optimal=True,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target)
    scratch.g[start] = 0.0
    scratch.visited.add(start)
    q = deque([start])

    trace = []

    while q:
        cur = q.popleft()
        trace.append(cur)

        if cur == target:
            path = reconstruct_path(scratch.predecessor, start, target)
            return AlgorithmResult(
                trace=trace,
                path=path,
                success=True,
                cost=path_cost(grid, path),
                expanded=len(trace),
            )

        # Marked at enqueue time so each cell enters the queue once.
        for nxt in grid.neighbors(cur):
            if nxt in scratch.visited:
                continue
            scratch.visited.add(nxt)
            scratch.relax(nxt, scratch.g[cur] + 1, cur)
            q.append(nxt)

    return no_path(trace)
