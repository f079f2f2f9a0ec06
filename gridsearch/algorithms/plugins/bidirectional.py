from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Set

from ..types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch, no_path, path_cost, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="bidirectional",
    name="Bidirectional BFS",
    description="Two BFS frontiers, from start and from target, stepped alternately until they meet.",
    weighted=False,
    optimal=True,
)


def _step(
    grid: Grid,
    queue: Deque[Cell],
    own: Scratch,
    other: Scratch,
    trace: List[Cell],
    traced: Set[Cell],
) -> Optional[Cell]:
    """Expand one cell from ``queue``. Returns the meeting cell if the frontiers touched."""
    cur = queue.popleft()
    if cur not in traced:
        traced.add(cur)
        trace.append(cur)

    if cur in other.visited:
        return cur

    for nxt in grid.neighbors(cur):
        if nxt in own.visited:
            continue
        own.visited.add(nxt)
        own.relax(nxt, own.g[cur] + 1, cur)
        queue.append(nxt)
        # Checking only on dequeue can miss the meeting by one step.
        if nxt in other.visited:
            return nxt
    return None


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    # Separate tables: the two searches must never share predecessor links.
    forward = Scratch(target)
    backward = Scratch(start)
    forward.g[start] = 0.0
    forward.visited.add(start)
    backward.g[target] = 0.0
    backward.visited.add(target)

    forward_q = deque([start])
    backward_q = deque([target])

    trace: List[Cell] = []
    traced: Set[Cell] = set()
    expanded = 0
    meeting: Optional[Cell] = None

    # Either frontier running dry means its whole component was seen without
    # touching the other search, so there is no path.
    while forward_q and backward_q:
        expanded += 1
        meeting = _step(grid, forward_q, forward, backward, trace, traced)
        if meeting is not None:
            break
        expanded += 1
        meeting = _step(grid, backward_q, backward, forward, trace, traced)
        if meeting is not None:
            break

    if meeting is None:
        return no_path(trace, expanded=expanded)

    head = reconstruct_path(forward.predecessor, start, meeting)
    tail = reconstruct_path(backward.predecessor, target, meeting)
    path = head + list(reversed(tail))[1:]
    return AlgorithmResult(
        trace=trace,
        path=path,
        success=True,
        cost=path_cost(grid, path),
        expanded=expanded,
        meta={"meeting": meeting},
    )
