# gridlab/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search: FIFO frontier, shortest path on an unweighted grid.

Cells are marked visited when they are enqueued, so each cell enters the
queue at most once and keeps the predecessor it was discovered from.
Neighbor order Up, Down, Left, Right fixes the tie-break between cells of
equal depth.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from gridlab.core.base import SearchAlgo
from gridlab.core.types import Cell, Grid


@dataclass
class BFSAlgo(SearchAlgo):
    name: str = "BFS"

    queue: Deque[Cell] = field(default_factory=deque)

    def _seed(self) -> None:
        self.queue = deque()
        s = self.start
        self.state.mark_visited(s)
        self.state.set_distance(s, 0)
        self.queue.append(s)
        self.open_set.add(s)

    def _pop(self) -> Optional[Cell]:
        return self.queue.popleft() if self.queue else None

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        d = self.state.get_distance(u)
        for v in self._neighbors(u):
            if self.state.is_visited(v):
                continue
            self.state.mark_visited(v)
            self.state.set_distance(v, d + 1)
            self.state.set_predecessor(v, u)
            self.queue.append(v)
            self.open_set.add(v)
            opened_now.append(v)
        return opened_now


def bfs(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> List[Cell]:
    """Cells in the order BFS expanded them."""
    algo = BFSAlgo()
    algo.init(grid, start, finish)
    return algo.run().visited
