# gridlab/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search with a LIFO frontier. Finds a path, not necessarily the shortest.

Neighbors are pushed in reverse of Up, Right, Down, Left so they pop in that
order. A cell is marked visited (and given its predecessor) at push time,
which keeps it from being pushed twice.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from gridlab.core.base import SearchAlgo
from gridlab.core.types import Cell, Grid, URDL


@dataclass
class DFSAlgo(SearchAlgo):
    name: str = "DFS"

    stack: List[Cell] = field(default_factory=list)
    order: Sequence[Tuple[int, int]] = field(default=URDL, repr=False)

    def _seed(self) -> None:
        self.stack = []
        s = self.start
        self.state.mark_visited(s)
        self.state.set_distance(s, 0)
        self.stack.append(s)
        self.open_set.add(s)

    def _pop(self) -> Optional[Cell]:
        return self.stack.pop() if self.stack else None

    def _expand(self, u: Cell) -> List[Cell]:
        d = self.state.get_distance(u)
        fresh = [v for v in self._neighbors(u) if not self.state.is_visited(v)]
        for v in reversed(fresh):
            self.state.mark_visited(v)
            self.state.set_distance(v, d + 1)
            self.state.set_predecessor(v, u)
            self.stack.append(v)
            self.open_set.add(v)
        return fresh


def dfs(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> List[Cell]:
    """Cells in the order DFS expanded them."""
    algo = DFSAlgo()
    algo.init(grid, start, finish)
    return algo.run().visited
