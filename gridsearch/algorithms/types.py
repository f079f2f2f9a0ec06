from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import inf, isfinite
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Set, Tuple

from ..config import (
    DEFAULT_CELL_COST,
    DEFAULT_HEURISTIC,
    DEFAULT_WEIGHT,
    IDA_MAX_ITERATIONS,
    IDA_THRESHOLD_GROWTH_CAP,
    OPEN_CHAR,
    START_CHAR,
    TARGET_CHAR,
    WALL_CHAR,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
HeuristicFn = Callable[[Cell, Cell], float]

# (d_row, d_col) in neighbor order: up, right, down, left
DIRECTIONS: Tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class ConfigurationError(ValueError):
    """A grid or run was set up in a way no search can start from."""


class UnknownAlgorithmError(ConfigurationError):
    """No plugin is registered under the requested algorithm id."""


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for an algorithm plugin."""

    id: str
    name: str
    description: str = ""
    weighted: bool = False
    optimal: bool = False


@dataclass
class RunOptions:
    heuristic: str = DEFAULT_HEURISTIC
    weight: float = DEFAULT_WEIGHT
    ida_max_iterations: int = IDA_MAX_ITERATIONS
    ida_threshold_growth_cap: float = IDA_THRESHOLD_GROWTH_CAP


def as_cell(value: Any) -> Cell:
    """Normalize a (row, col) pair coming from callers into a Cell tuple."""
    if value is None:
        raise ConfigurationError("cell is missing")
    try:
        row, col = value
        return int(row), int(col)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"not a (row, col) pair: {value!r}") from e


@dataclass
class Grid:
    """A rectangular, 4-connected grid with one start and one target cell.

    Notes
    -----
    - Cells are (row, col) tuples; storage is row-major: id = row * cols + col
    - Neighbors are returned in a fixed order: up, right, down, left
    - Entering a cell costs ``cost(cell)`` (default 1)

    The grid is the only long-lived object. Search bookkeeping never lives on
    it; each run allocates its own Scratch table.
    """

    rows: int
    cols: int
    start: Cell
    target: Cell
    blocked: List[bool]
    costs: List[float]

    def __post_init__(self) -> None:
        n = self.rows * self.cols
        if len(self.blocked) != n:
            raise ConfigurationError(f"blocked length {len(self.blocked)} != rows*cols {n}")
        if len(self.costs) != n:
            raise ConfigurationError(f"costs length {len(self.costs)} != rows*cols {n}")
        self.start = as_cell(self.start)
        self.target = as_cell(self.target)

    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def to_id(self, cell: Cell) -> int:
        row, col = cell
        return row * self.cols + col

    def to_cell(self, cell_id: int) -> Cell:
        row = cell_id // self.cols
        return row, cell_id - row * self.cols

    def is_traversable(self, cell: Cell) -> bool:
        # Out-of-bounds cells count as walls.
        return self.in_bounds(cell) and not self.blocked[self.to_id(cell)]

    def is_endpoint(self, cell: Cell) -> bool:
        return cell == self.start or cell == self.target

    def cost(self, cell: Cell) -> float:
        return self.costs[self.to_id(cell)]

    def min_cost(self) -> float:
        return min(self.costs) if self.costs else DEFAULT_CELL_COST

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Traversable in-bounds neighbors, up/right/down/left."""
        row, col = cell
        out: List[Cell] = []
        for dr, dc in DIRECTIONS:
            nxt = (row + dr, col + dc)
            if self.is_traversable(nxt):
                out.append(nxt)
        return out

    def walls(self) -> List[Cell]:
        return [self.to_cell(i) for i, b in enumerate(self.blocked) if b]

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_traversable(self, cell: Cell, traversable: bool) -> bool:
        """Set or clear a wall. Returns False when the edit was rejected.

        Start and target can never become walls; editing them is a no-op.
        """
        cell = as_cell(cell)
        if not self.in_bounds(cell):
            raise ConfigurationError(f"cell {cell} is outside a {self.rows}x{self.cols} grid")
        if self.is_endpoint(cell):
            logger.debug(f"Ignoring wall edit on endpoint {cell}")
            return False
        self.blocked[self.to_id(cell)] = not traversable
        return True

    def toggle_wall(self, cell: Cell) -> bool:
        cell = as_cell(cell)
        return self.set_traversable(cell, not self.is_traversable(cell))

    def set_cost(self, cell: Cell, cost: float) -> None:
        cell = as_cell(cell)
        if not self.in_bounds(cell):
            raise ConfigurationError(f"cell {cell} is outside a {self.rows}x{self.cols} grid")
        cost = float(cost)
        if not isfinite(cost) or cost <= 0:
            raise ConfigurationError(f"cell cost must be finite and > 0, got {cost}")
        self.costs[self.to_id(cell)] = cost

    def move_start(self, cell: Cell) -> bool:
        cell = as_cell(cell)
        if not self.is_traversable(cell) or cell == self.target:
            return False
        self.start = cell
        return True

    def move_target(self, cell: Cell) -> bool:
        cell = as_cell(cell)
        if not self.is_traversable(cell) or cell == self.start:
            return False
        self.target = cell
        return True

    def clear_walls(self) -> None:
        self.blocked = [False] * self.size()

    def validate_endpoints(self, start: Any, target: Any) -> Tuple[Cell, Cell]:
        """Check the run preconditions and return normalized endpoints.

        Raises ConfigurationError when either endpoint is missing, outside the
        grid, a wall, or when both are the same cell.
        """
        start = as_cell(start)
        target = as_cell(target)
        for name, cell in (("start", start), ("target", target)):
            if not self.in_bounds(cell):
                raise ConfigurationError(f"{name} {cell} is outside a {self.rows}x{self.cols} grid")
            if not self.is_traversable(cell):
                raise ConfigurationError(f"{name} {cell} is a wall")
        if start == target:
            raise ConfigurationError(f"start and target are the same cell {start}")
        return start, target


def create_grid(rows: int, cols: int, start: Optional[Cell] = None, target: Optional[Cell] = None) -> Grid:
    """Build an open grid. Endpoints default to the left and right quarter of the middle row."""
    if rows <= 0 or cols <= 0:
        raise ConfigurationError(f"grid dimensions must be positive, got {rows}x{cols}")
    if start is None:
        start = (rows // 2, cols // 4)
    if target is None:
        target = (rows // 2, 3 * cols // 4)
    n = rows * cols
    grid = Grid(
        rows=rows,
        cols=cols,
        start=start,
        target=target,
        blocked=[False] * n,
        costs=[DEFAULT_CELL_COST] * n,
    )
    grid.validate_endpoints(grid.start, grid.target)
    return grid


def grid_from_rows(lines: Sequence[str]) -> Grid:
    """Parse an ASCII picture of a grid.

    ``.`` open, ``#`` wall, ``S`` start, ``T`` target, ``1``-``9`` open cell
    with that entry cost. Whitespace inside a line is ignored.
    """
    rows = [line.replace(" ", "") for line in lines if line.strip()]
    if not rows:
        raise ConfigurationError("grid picture is empty")
    cols = len(rows[0])
    if any(len(r) != cols for r in rows):
        raise ConfigurationError("grid picture rows have different widths")

    blocked: List[bool] = []
    costs: List[float] = []
    start: Optional[Cell] = None
    target: Optional[Cell] = None
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            cost = DEFAULT_CELL_COST
            if ch == START_CHAR:
                start = (r, c)
            elif ch == TARGET_CHAR:
                target = (r, c)
            elif ch.isdigit() and ch != "0":
                cost = float(ch)
            elif ch not in (OPEN_CHAR, WALL_CHAR):
                raise ConfigurationError(f"unknown grid character {ch!r} at {(r, c)}")
            blocked.append(ch == WALL_CHAR)
            costs.append(cost)

    if start is None or target is None:
        raise ConfigurationError("grid picture needs both an S and a T cell")
    grid = Grid(rows=len(rows), cols=cols, start=start, target=target, blocked=blocked, costs=costs)
    grid.validate_endpoints(grid.start, grid.target)
    return grid


class Scratch:
    """Per-run search bookkeeping, keyed by cell identity.

    A fresh table is allocated at the start of every run and never shared, so
    no run can observe state left behind by another one. ``h`` values are
    computed on first use and cached.
    """

    def __init__(
        self,
        target: Cell,
        heuristic: Optional[HeuristicFn] = None,
        weight: float = 1.0,
        scale: float = 1.0,
    ) -> None:
        self.target = target
        self.heuristic = heuristic
        self.weight = weight
        self.scale = scale
        self.g: Dict[Cell, float] = {}
        self.predecessor: Dict[Cell, Cell] = {}
        self.visited: Set[Cell] = set()
        self._h: Dict[Cell, float] = {}

    def g_of(self, cell: Cell) -> float:
        return self.g.get(cell, inf)

    def h_of(self, cell: Cell) -> float:
        h = self._h.get(cell)
        if h is None:
            h = 0.0 if self.heuristic is None else self.heuristic(cell, self.target) * self.scale
            self._h[cell] = h
        return h

    def f_of(self, cell: Cell) -> float:
        return self.g_of(cell) + self.weight * self.h_of(cell)

    def relax(self, cell: Cell, g: float, predecessor: Cell) -> None:
        self.g[cell] = g
        self.predecessor[cell] = predecessor

    def clear_links(self) -> None:
        """Forget g and predecessor links but keep the cached heuristic."""
        self.g = {}
        self.predecessor = {}


@dataclass
class AlgorithmResult:
    trace: List[Cell]
    path: List[Cell]
    success: bool
    cost: float = inf
    expanded: int = 0
    waypoints: List[Cell] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)
    runtime_ms: float = 0.0

    @property
    def path_length(self) -> int:
        """Number of steps on the path (0 when no path was found)."""
        return len(self.path) - 1 if self.path else 0


def no_path(trace: List[Cell], expanded: Optional[int] = None, **meta: Any) -> AlgorithmResult:
    return AlgorithmResult(
        trace=trace,
        path=[],
        success=False,
        cost=inf,
        expanded=len(trace) if expanded is None else expanded,
        meta=dict(meta),
    )


def reconstruct_path(predecessor: Mapping[Cell, Cell], start: Cell, goal: Cell) -> List[Cell]:
    if goal != start and goal not in predecessor:
        return []
    out: List[Cell] = []
    cur = goal
    # A chain can never be longer than the number of links in it.
    for _ in range(len(predecessor) + 1):
        out.append(cur)
        if cur == start:
            out.reverse()
            return out
        nxt = predecessor.get(cur)
        if nxt is None:
            return []
        cur = nxt
    return []


def path_cost(grid: Grid, path: List[Cell]) -> float:
    if not path:
        return inf
    return float(sum(grid.cost(cell) for cell in path[1:]))
