"""
gridsearch - search algorithms over a 4-connected 2D grid.

Nine strategies share one grid model, one priority queue and one path
reconstruction helper; ``run()`` picks one by id and returns its trace and path.
"""

from .algorithms.types import (
    AlgorithmResult,
    AlgorithmSpec,
    Cell,
    ConfigurationError,
    Grid,
    RunOptions,
    UnknownAlgorithmError,
    create_grid,
    grid_from_rows,
)
from .engine import compare, get_algorithm, grid_from_snapshot, list_algorithms, run

__all__ = [
    "AlgorithmResult",
    "AlgorithmSpec",
    "Cell",
    "ConfigurationError",
    "Grid",
    "RunOptions",
    "UnknownAlgorithmError",
    "compare",
    "create_grid",
    "get_algorithm",
    "grid_from_rows",
    "grid_from_snapshot",
    "list_algorithms",
    "run",
]
