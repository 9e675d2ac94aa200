# gridlab/core/search.py
"""
Search strategy registry.

Provides lookup by name for the five grid search strategies:
- bfs:      Breadth-first, shortest path
- dfs:      Depth-first, any path
- dijkstra: Uniform-cost, shortest path
- astar:    Manhattan-guided, shortest path
- greedy:   Heuristic only, any path
"""

import logging
from typing import Dict, List, Optional, Type

from gridlab.core.astar import AStarAlgo
from gridlab.core.base import SearchAlgo
from gridlab.core.bfs import BFSAlgo
from gridlab.core.dfs import DFSAlgo
from gridlab.core.dijkstra import DijkstraAlgo
from gridlab.core.errors import InvalidInput
from gridlab.core.greedy import GreedyBestFirstAlgo
from gridlab.core.types import Cell, Grid, SearchResult

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Type[SearchAlgo]] = {
    "bfs": BFSAlgo,
    "dfs": DFSAlgo,
    "dijkstra": DijkstraAlgo,
    "astar": AStarAlgo,
    "greedy": GreedyBestFirstAlgo,
}

# Shortest-path guarantees on a unit-cost grid
OPTIMAL = ("bfs", "dijkstra", "astar")

_ALIASES = {
    "a*": "astar",
    "a-star": "astar",
    "greedy-best-first": "greedy",
    "gbfs": "greedy",
}


def algorithm_names() -> List[str]:
    return list(ALGORITHMS)


def get_algorithm(name: str) -> SearchAlgo:
    """
    Get a fresh (un-initialized) search algorithm by name.

    Raises:
        InvalidInput: If the name is unknown
    """
    key = _ALIASES.get(name.lower(), name.lower())
    if key not in ALGORITHMS:
        available = ", ".join(ALGORITHMS)
        raise InvalidInput(f"Unknown algorithm '{name}'. Available: {available}")
    return ALGORITHMS[key]()


def search(name: str, grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> SearchResult:
    """
    Run one strategy to completion on grid.

    Args:
        name: Algorithm identifier (see ALGORITHMS)
        grid: Grid to search; it is read, never modified
        start: Start cell, defaults to grid.start
        finish: Finish cell, defaults to grid.finish

    Returns:
        SearchResult with visited order, reconstructed path and the run's state
    """
    algo = get_algorithm(name)
    algo.init(grid, start, finish)
    result = algo.run()
    logger.info(
        f"{result.algorithm}: visited {len(result.visited)} cells, "
        + (f"path of {len(result.path)} cells" if result.found else "no path")
    )
    return result
