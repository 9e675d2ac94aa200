# gridlab/maze/generate.py
"""
Maze generator registry.

- division:    Recursive division (walls on even lines, odd passages)
- backtracker: Recursive backtracker (perfect maze, DFS on the odd lattice)
- prim:        Randomized frontier growth (perfect maze, Prim's)
"""

import logging
import random
from typing import Dict, List, Optional, Set, Type

from gridlab import config
from gridlab.core.errors import InvalidInput
from gridlab.core.types import Cell, Grid
from gridlab.maze.backtracker import RecursiveBacktracker
from gridlab.maze.base import MazeGenerator
from gridlab.maze.division import RecursiveDivision
from gridlab.maze.prim import RandomizedPrim

logger = logging.getLogger(__name__)

GENERATORS: Dict[str, Type[MazeGenerator]] = {
    "division": RecursiveDivision,
    "backtracker": RecursiveBacktracker,
    "prim": RandomizedPrim,
}


def generator_names() -> List[str]:
    return list(GENERATORS)


def get_generator(kind: str, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> MazeGenerator:
    """
    Get a maze generator by name.

    Raises:
        InvalidInput: If the kind is unknown
    """
    key = kind.lower()
    if key not in GENERATORS:
        available = ", ".join(GENERATORS)
        raise InvalidInput(f"Unknown maze generator '{kind}'. Available: {available}")
    return GENERATORS[key](seed=seed, rng=rng)


def generate_maze(kind: str, rows: int, cols: int, start: Cell, finish: Cell, add_border: bool = True,
                  seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Set[Cell]:
    """Wall set from the named generator; start and finish are never included."""
    return get_generator(kind, seed=seed, rng=rng).generate(rows, cols, start, finish, add_border)


def build_maze_grid(kind: str, rows: int, cols: int, start: Optional[Cell] = None, finish: Optional[Cell] = None,
                    add_border: bool = True, seed: Optional[int] = None) -> Grid:
    """
    Fresh grid with a generated maze applied.

    Endpoints default to config.default_endpoints(rows, cols).
    """
    if start is None or finish is None:
        default_start, default_finish = config.default_endpoints(rows, cols)
        start = default_start if start is None else start
        finish = default_finish if finish is None else finish
    walls = generate_maze(kind, rows, cols, start, finish, add_border=add_border, seed=seed)
    grid = Grid.empty(rows, cols, start, finish)
    grid.apply_walls(walls)
    logger.info(f"{kind} maze {rows}x{cols}: {len(walls)} walls, start={grid.start}, finish={grid.finish}")
    return grid
