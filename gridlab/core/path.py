# gridlab/core/path.py
"""Backtracking over the predecessor links a search leaves behind."""

from typing import List, Optional, Sequence

from gridlab.core.types import Cell, SearchState


def reconstruct_path(state: SearchState, finish: Cell) -> List[Cell]:
    """
    Follow predecessor links from finish back to the first cell without one.

    Returns start..finish when finish was reached, [finish] when it was not,
    and [] when finish is not on the grid at all (degenerate grids).
    """
    finish = tuple(finish)
    if not state.grid.in_bounds(finish):
        return []
    path: List[Cell] = []
    cur: Optional[Cell] = finish
    while cur is not None:
        path.append(cur)
        cur = state.predecessor_of(cur)
    path.reverse()
    return path


def has_path(path: Sequence[Cell], start: Cell, finish: Cell) -> bool:
    """True when path really runs from start to finish (a lone [finish] does not)."""
    return bool(path) and tuple(path[0]) == tuple(start) and tuple(path[-1]) == tuple(finish)
