from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from dataclasses import dataclass
from types import ModuleType
from typing import Callable, Dict, List

from .types import AlgorithmResult, AlgorithmSpec, Cell, Grid, RunOptions

logger = logging.getLogger(__name__)

PLUGIN_PACKAGE = __package__ + ".plugins"


@dataclass
class LoadedAlgorithm:
    spec: AlgorithmSpec
    run: Callable[[Grid, Cell, Cell, RunOptions], AlgorithmResult]


def _accepts_run_arguments(run_fn: Callable) -> bool:
    # run(grid, start, target, options), called positionally by the engine
    try:
        inspect.signature(run_fn).bind(None, None, None, None)
    except TypeError:
        return False
    return True


def register_plugin(registry: Dict[str, LoadedAlgorithm], name: str, module: ModuleType) -> bool:
    """Validate one plugin module and add it to ``registry``.

    Returns False when the module is not a plugin at all (no ALGORITHM or no
    run). A module that looks like a plugin but is malformed raises TypeError;
    an id that is already registered raises ValueError.
    """
    spec = getattr(module, "ALGORITHM", None)
    run_fn = getattr(module, "run", None)
    if spec is None or run_fn is None:
        logger.debug(f"Skipping {name}: no ALGORITHM/run")
        return False
    if not isinstance(spec, AlgorithmSpec):
        raise TypeError(f"Plugin {name} ALGORITHM must be AlgorithmSpec, got {type(spec).__name__}")
    if not callable(run_fn) or not _accepts_run_arguments(run_fn):
        raise TypeError(f"Plugin {name} run must accept (grid, start, target, options)")
    if spec.id in registry:
        raise ValueError(f"Duplicate algorithm id {spec.id!r} in {name}")

    registry[spec.id] = LoadedAlgorithm(spec=spec, run=run_fn)
    logger.debug(f"Registered algorithm {spec.id!r} from {name}")
    return True


def load_plugins(package_name: str = PLUGIN_PACKAGE) -> Dict[str, LoadedAlgorithm]:
    """Import every public module of ``package_name`` and register its algorithm.

    Modules whose name starts with an underscore are shared helpers and are
    never imported as plugins.
    """
    registry: Dict[str, LoadedAlgorithm] = {}
    package = importlib.import_module(package_name)

    for m in pkgutil.iter_modules(package.__path__):
        if m.name.startswith("_"):
            continue
        module = importlib.import_module(f"{package_name}.{m.name}")
        register_plugin(registry, m.name, module)

    logger.debug(f"Loaded {len(registry)} algorithms from {package_name}")
    return registry


def list_algorithms(registry: Dict[str, LoadedAlgorithm]) -> List[AlgorithmSpec]:
    return [registry[k].spec for k in sorted(registry)]
