from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError

from .algorithms.loader import LoadedAlgorithm, load_plugins
from .algorithms.loader import list_algorithms as _list_algorithms
from .algorithms.types import (
    AlgorithmResult,
    AlgorithmSpec,
    Cell,
    ConfigurationError,
    Grid,
    RunOptions,
    UnknownAlgorithmError,
    create_grid,
)
from .config import DEFAULT_HEURISTIC, DEFAULT_WEIGHT, IDA_MAX_ITERATIONS, IDA_THRESHOLD_GROWTH_CAP

logger = logging.getLogger(__name__)

REGISTRY = load_plugins()


class RunOptionsModel(BaseModel):
    heuristic: Literal["manhattan", "euclidean"] = DEFAULT_HEURISTIC
    weight: float = Field(default=DEFAULT_WEIGHT, gt=0)
    ida_max_iterations: int = Field(default=IDA_MAX_ITERATIONS, ge=1)
    ida_threshold_growth_cap: float = Field(default=IDA_THRESHOLD_GROWTH_CAP, gt=1)


class CellCostModel(BaseModel):
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    cost: float = Field(gt=0)


class GridSnapshotModel(BaseModel):
    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    start: Tuple[int, int]
    target: Tuple[int, int]
    walls: List[Tuple[int, int]] = Field(default_factory=list)
    costs: List[CellCostModel] = Field(default_factory=list)


OptionsLike = Union[RunOptions, Mapping[str, Any], None]


def _describe(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}" for err in e.errors()
    )


def resolve_options(options: OptionsLike = None) -> RunOptions:
    """Validate caller options and return a RunOptions for a single run."""
    if options is None:
        return RunOptions()
    raw = asdict(options) if isinstance(options, RunOptions) else dict(options)
    try:
        model = RunOptionsModel.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid run options: {_describe(e)}") from e
    return RunOptions(**model.model_dump())


def grid_from_snapshot(data: Mapping[str, Any]) -> Grid:
    """Build a Grid from plain data, e.g. what an editor front end sends."""
    try:
        snap = GridSnapshotModel.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid grid snapshot: {_describe(e)}") from e

    grid = create_grid(snap.rows, snap.cols, start=snap.start, target=snap.target)
    for cell in snap.walls:
        if not grid.set_traversable(cell, False):
            raise ConfigurationError(f"snapshot places a wall on endpoint {cell}")
    for c in snap.costs:
        grid.set_cost((c.row, c.col), c.cost)
    return grid


def list_algorithms() -> List[AlgorithmSpec]:
    return _list_algorithms(REGISTRY)


def get_algorithm(algorithm_id: str) -> LoadedAlgorithm:
    algo = REGISTRY.get(algorithm_id)
    if algo is None:
        raise UnknownAlgorithmError(
            f"Unknown algorithm_id: {algorithm_id!r}; expected one of {sorted(REGISTRY)}"
        )
    return algo


def run(
    grid: Grid,
    start: Optional[Cell],
    target: Optional[Cell],
    algorithm_id: str,
    options: OptionsLike = None,
) -> AlgorithmResult:
    """Run one search on ``grid``.

    ``start``/``target`` default to the grid's own endpoints. Preconditions are
    checked before the search starts and raise ConfigurationError; a missing
    path is reported through ``success=False``.
    """
    algo = get_algorithm(algorithm_id)
    start, target = grid.validate_endpoints(
        grid.start if start is None else start,
        grid.target if target is None else target,
    )
    run_opts = resolve_options(options)

    t0 = time.perf_counter()
    try:
        result = algo.run(grid, start, target, run_opts)
    except Exception:
        logger.exception(f"Algorithm {algorithm_id!r} crashed on {grid.rows}x{grid.cols} grid")
        raise
    t1 = time.perf_counter()

    result.runtime_ms = (t1 - t0) * 1000.0
    logger.info(
        f"{algorithm_id}: success={result.success} trace={len(result.trace)} "
        f"path={result.path_length} in {result.runtime_ms:.2f} ms"
    )
    return result


def compare(
    grid: Grid,
    algorithm_ids: Optional[Iterable[str]] = None,
    options: OptionsLike = None,
) -> Dict[str, AlgorithmResult]:
    """Run several algorithms on the same grid and endpoints."""
    ids = list(algorithm_ids) if algorithm_ids is not None else sorted(REGISTRY)
    return {algorithm_id: run(grid, None, None, algorithm_id, options) for algorithm_id in ids}
