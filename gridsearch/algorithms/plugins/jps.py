"""
Jump Point Search (JPS) for 4-connected grids.

A* over "jump points" instead of every cell. From a cell reached while moving
in direction ``d`` the search walks straight ahead and only stops on:

- the target,
- a cell with a forced neighbor (an obstacle edge that opens or closes beside
  the walk), or
- for vertical walks, a cell from which a horizontal walk finds a jump point.

Walls and the grid edge end a walk without a jump point. Consecutive jump
points are always collinear, so the cost between them is their Manhattan
distance. Every move costs 1 here; cell costs are ignored.
"""

from __future__ import annotations

from typing import List, Optional

from ..heuristics import get_heuristic, manhattan
from ..pqueue import PriorityQueue
from ..types import DIRECTIONS, AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions, Scratch, no_path, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="jps",
    name="Jump Point Search",
    description="A* that skips symmetric straight-line expansions; assumes uniform cost.",
    weighted=False,
    optimal=True,
)


def _direction(frm: Cell, to: Cell) -> Cell:
    dr = to[0] - frm[0]
    dc = to[1] - frm[1]
    return (dr > 0) - (dr < 0), (dc > 0) - (dc < 0)


def has_forced_neighbor(grid: Grid, cell: Cell, direction: Cell) -> bool:
    """True when a perpendicular side of ``cell`` changes between open and blocked.

    For each side ``p`` perpendicular to ``direction``:
    - the side cell is open but the one beside the previous cell is not, or
    - the side cell is blocked but the one beside the next cell is open.
    """
    r, c = cell
    dr, dc = direction
    for pr, pc in ((dc, dr), (-dc, -dr)):
        if grid.is_traversable((r + pr, c + pc)):
            if not grid.is_traversable((r - dr + pr, c - dc + pc)):
                return True
        elif grid.is_traversable((r + dr + pr, c + dc + pc)):
            return True
    return False


def jump(grid: Grid, cell: Cell, direction: Cell, target: Cell) -> Optional[Cell]:
    """Walk from ``cell`` along ``direction``; return the first jump point or None."""
    dr, dc = direction
    r, c = cell
    for _ in range(max(grid.rows, grid.cols)):
        r += dr
        c += dc
        nxt = (r, c)
        if not grid.is_traversable(nxt):
            return None
        if nxt == target or has_forced_neighbor(grid, nxt, direction):
            return nxt
        if dr != 0:
            # Horizontal walks never recurse further, so depth stays at one.
            if jump(grid, nxt, (0, 1), target) is not None or jump(grid, nxt, (0, -1), target) is not None:
                return nxt
    return None


def _successors(grid: Grid, cell: Cell, parent: Optional[Cell], target: Cell) -> List[Cell]:
    if parent is None:
        directions = DIRECTIONS
    else:
        dr, dc = _direction(parent, cell)
        # straight on, then both perpendiculars; never back
        directions = ((dr, dc), (dc, dr), (-dc, -dr))
    out: List[Cell] = []
    for d in directions:
        point = jump(grid, cell, d, target)
        if point is not None:
            out.append(point)
    return out


def _expand(waypoints: List[Cell]) -> List[Cell]:
    """Fill in the straight segments between consecutive jump points."""
    if not waypoints:
        return []
    path = [waypoints[0]]
    for a, b in zip(waypoints, waypoints[1:]):
        dr, dc = _direction(a, b)
        cur = a
        while cur != b:
            cur = (cur[0] + dr, cur[1] + dc)
            path.append(cur)
    return path


def run(grid: Grid, start: Cell, target: Cell, options: RunOptions) -> AlgorithmResult:
    scratch = Scratch(target, get_heuristic(options.heuristic))

    def priority(cell: Cell) -> tuple[float, float]:
        return scratch.f_of(cell), scratch.h_of(cell)

    scratch.g[start] = 0.0
    open_set: PriorityQueue[Cell] = PriorityQueue(key=priority)
    open_set.enqueue(start)

    trace = []

    while open_set:
        cur = open_set.dequeue()
        if cur in scratch.visited:
            continue
        scratch.visited.add(cur)
        trace.append(cur)

        if cur == target:
            waypoints = reconstruct_path(scratch.predecessor, start, target)
            return AlgorithmResult(
                trace=trace,
                path=_expand(waypoints),
                success=True,
                cost=scratch.g[target],
                expanded=len(trace),
                waypoints=waypoints,
            )

        for point in _successors(grid, cur, scratch.predecessor.get(cur), target):
            if point in scratch.visited:
                continue
            ng = scratch.g[cur] + manhattan(cur, point)
            if ng < scratch.g_of(point):
                scratch.relax(point, ng, cur)
                open_set.enqueue(point)

    return no_path(trace)
