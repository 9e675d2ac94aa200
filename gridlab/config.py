# gridlab/config.py
"""
Configuration constants for gridlab.

Grid limits, defaults and tunables live here. A few of them can be
overridden from environment variables.
"""

import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# =============================================================================
# Grid Size Configuration
# =============================================================================

DEFAULT_ROWS = 20
DEFAULT_COLS = 50

# Product limits; the algorithm core itself accepts any size
MIN_ROWS = 5
MAX_ROWS = 60
MIN_COLS = 10
MAX_COLS = 120

# Column offset of the default endpoints from the left/right edges
ENDPOINT_MARGIN = 5

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Search strategy used when none is named (bfs, dfs, dijkstra, astar, greedy)
DEFAULT_ALGORITHM = os.environ.get("GRIDLAB_ALGORITHM", "astar")

# Maze generator used when none is named (division, backtracker, prim)
DEFAULT_MAZE = os.environ.get("GRIDLAB_MAZE", "backtracker")

# Fixed seed for maze generation; unset means a fresh seed per run
_seed = os.environ.get("GRIDLAB_SEED", "").strip()
try:
    DEFAULT_SEED: Optional[int] = int(_seed) if _seed else None
except ValueError:
    logger.warning(f"Ignoring non-integer GRIDLAB_SEED={_seed!r}")
    DEFAULT_SEED = None

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Helpers
# =============================================================================

def clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def clamp_size(rows: int, cols: int) -> Tuple[int, int]:
    """Clamp a requested grid size to the product limits."""
    return clamp(rows, MIN_ROWS, MAX_ROWS), clamp(cols, MIN_COLS, MAX_COLS)


def clamp_cell(cell: Tuple[int, int], rows: int, cols: int) -> Tuple[int, int]:
    """Pull a cell back inside a rows x cols grid (used after a resize)."""
    return clamp(cell[0], 0, rows - 1), clamp(cell[1], 0, cols - 1)


def default_endpoints(rows: int, cols: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Start and finish on the middle row, ENDPOINT_MARGIN columns in from each side.

    On tiny grids where both land on the same column the finish moves to the
    last column.
    """
    row = clamp(rows // 2, 0, rows - 1)
    start_col = clamp(ENDPOINT_MARGIN, 0, cols - 1)
    finish_col = clamp(cols - 1 - ENDPOINT_MARGIN, 0, cols - 1)
    if finish_col == start_col:
        finish_col = clamp(cols - 1, 0, cols - 1)
    return (row, start_col), (row, finish_col)
