# gridlab/core/greedy.py
#!/usr/bin/env python3
"""
Greedy best-first search: expand whatever looks closest to the finish.

Priority is the Manhattan heuristic alone, so the path found is not
guaranteed to be the shortest. A cell keeps the predecessor it was first
discovered from, and a cell already on the open set is never pushed again.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import heapq

from gridlab.core.base import SearchAlgo
from gridlab.core.types import Cell, Grid


@dataclass
class GreedyBestFirstAlgo(SearchAlgo):
    name: str = "Greedy"

    open_pq: List[Tuple[int, int, Cell]] = field(default_factory=list)  # (h, seq, cell)

    def _seed(self) -> None:
        self.open_pq = []
        s = self.start
        h0 = self._h(s)
        self.state.set_distance(s, 0)
        self.state.set_score(s, h0)
        heapq.heappush(self.open_pq, (h0, self._bump(), s))
        self.open_set.add(s)

    def _pop(self) -> Optional[Cell]:
        while self.open_pq:
            _, _, u = heapq.heappop(self.open_pq)
            if self.state.is_visited(u):
                continue
            return u
        return None

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self._neighbors(u):
            if self.state.is_visited(v):
                continue
            # first discovery wins; greedy is not cost based
            if self.state.predecessor_of(v) is None:
                self.state.set_predecessor(v, u)
                self.state.set_distance(v, self.state.get_distance(u) + 1)
            if v in self.open_set:
                continue
            h_v = self._h(v)
            self.state.set_score(v, h_v)
            heapq.heappush(self.open_pq, (h_v, self._bump(), v))
            self.open_set.add(v)
            opened_now.append(v)
        return opened_now


def greedy_best_first(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> List[Cell]:
    """Cells in the order greedy best-first expanded them."""
    algo = GreedyBestFirstAlgo()
    algo.init(grid, start, finish)
    return algo.run().visited
