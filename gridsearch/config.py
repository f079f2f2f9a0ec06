"""
Default run configuration for the grid search engine.

These are only defaults. Every run receives its own RunOptions, so nothing
below is read while a search is executing.
"""

# =============================================================================
# Heuristic Configuration
# =============================================================================

# Heuristic used by the informed algorithms when the caller does not pick one
DEFAULT_HEURISTIC = "manhattan"

# Weighted A*: f = g + WEIGHT * h
DEFAULT_WEIGHT = 1.5

# =============================================================================
# IDA* Guardrails
# =============================================================================

# Maximum number of deepening iterations before giving up
IDA_MAX_ITERATIONS = 30

# Abort when the next threshold exceeds threshold * this factor
IDA_THRESHOLD_GROWTH_CAP = 100.0

# =============================================================================
# Grid Configuration
# =============================================================================

# Cost of entering a cell that was never given an explicit cost
DEFAULT_CELL_COST = 1.0

# Characters understood by grid_from_rows()
OPEN_CHAR = "."
WALL_CHAR = "#"
START_CHAR = "S"
TARGET_CHAR = "T"
