from __future__ import annotations

from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch, no_path, path_cost, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="dfs",
    name="Depth-First Search",
    description="Unweighted; explores as far as possible before backtracking. No shortest-path guarantee.",
    weighted=False,
    optimal=False,
)


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target)
    scratch.g[start] = 0.0
    scratch.visited.add(start)
    stack = [start]

    trace = []

    while stack:
        cur = stack.pop()
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

        # Pushed in reverse so cells pop up, right, down, left.
        for nxt in reversed(grid.neighbors(cur)):
            if nxt in scratch.visited:
                continue
            scratch.visited.add(nxt)
            scratch.relax(nxt, scratch.g[cur] + 1, cur)
            stack.append(nxt)

    return no_path(trace)
