from __future__ import annotations

from math import hypot
from typing import Dict

from .types import Cell, ConfigurationError, HeuristicFn


def manhattan(a: Cell, b: Cell) -> float:
    """Admissible for 4-connected movement with unit cost."""
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def euclidean(a: Cell, b: Cell) -> float:
    return hypot(a[0] - b[0], a[1] - b[1])


HEURISTICS: Dict[str, HeuristicFn] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
}


def get_heuristic(name: str) -> HeuristicFn:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        ) from None
