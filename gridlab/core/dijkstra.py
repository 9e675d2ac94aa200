# gridlab/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import heapq
from math import inf

from gridlab.core.base import SearchAlgo
from gridlab.core.types import Cell, Grid


@dataclass
class DijkstraAlgo(SearchAlgo):
    """
    Dijkstra with unit edge weights.

    The frontier is a binary heap of (g, found_at, index, cell): lowest
    distance first; among equal distances, cells discovered by an earlier
    expansion first, then row-major. A cell is relaxed only on a strictly
    smaller distance; the older heap entries it leaves behind are skipped
    when popped.
    """
    name: str = "Dijkstra"

    open_pq: List[Tuple[float, int, int, Cell]] = field(default_factory=list)   # (g, found_at, index, cell)

    def _seed(self) -> None:
        self.open_pq = []
        s = self.start
        self.state.set_distance(s, 0)
        heapq.heappush(self.open_pq, (0, 0, self.grid.index(s), s))
        self.open_set.add(s)

    def _pop(self) -> Optional[Cell]:
        while self.open_pq:
            g_u, _, _, u = heapq.heappop(self.open_pq)
            # Everything left is unreachable
            if g_u == inf:
                return None
            # Ignore stale pops
            if self.state.is_visited(u) or g_u != self.state.get_distance(u):
                continue
            return u
        return None

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self._neighbors(u):
            if self.state.is_visited(v):
                continue
            alt = self.state.get_distance(u) + 1
            if alt < self.state.get_distance(v):
                self.state.set_distance(v, alt)
                self.state.set_predecessor(v, u)
                heapq.heappush(self.open_pq, (alt, self.popped_count, self.grid.index(v), v))
                if v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)
        return opened_now


def dijkstra(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> List[Cell]:
    """Cells in the order Dijkstra finalized them."""
    algo = DijkstraAlgo()
    algo.init(grid, start, finish)
    return algo.run().visited
