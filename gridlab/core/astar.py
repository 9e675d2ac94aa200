# gridlab/core/astar.py
#!/usr/bin/env python3
"""
A* — one expansion per step().

Heuristic:
- Manhattan distance to the finish (4-connected, unit cost), so the first
  time the finish is popped its distance is optimal.

Tie-breaking in the PQ:
- (f, seq, cell): lower f, then the order in which the cell took on that f.
- A cell first reached in an expansion is queued behind every cell already
  holding the same f.
- A cell whose f drops is queued behind the cells already at the new f, but
  ahead of cells first reached in the same expansion. Several such cells keep
  their previous relative order.

Stale heap entries are discarded on pop (their seq no longer matches the
cell's current one).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq

from gridlab.core.base import SearchAlgo
from gridlab.core.types import Cell, Grid


@dataclass
class AStarAlgo(SearchAlgo):
    name: str = "A*"

    open_pq: List[Tuple[float, int, Cell]] = field(default_factory=list)  # (f, seq, cell)
    entry_seq: Dict[Cell, int] = field(default_factory=dict)              # live seq per open cell

    def _seed(self) -> None:
        self.open_pq = []
        self.entry_seq = {}
        s = self.start
        self.state.set_distance(s, 0)
        self.state.set_score(s, self._h(s))
        self._push(s)
        self.open_set.add(s)

    def _push(self, v: Cell) -> None:
        seq = self._bump()
        self.entry_seq[v] = seq
        heapq.heappush(self.open_pq, (self.state.get_score(v), seq, v))

    def _pop(self) -> Optional[Cell]:
        while self.open_pq:
            _, seq, u = heapq.heappop(self.open_pq)
            if self.state.is_visited(u) or seq != self.entry_seq.get(u):
                continue
            del self.entry_seq[u]
            return u
        return None

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        improved: List[Tuple[float, int, Cell]] = []   # old (f, seq) of open cells with a better g
        for v in self._neighbors(u):
            if self.state.is_visited(v):
                continue
            alt = self.state.get_distance(u) + 1
            if alt < self.state.get_distance(v):
                if v in self.open_set:
                    improved.append((self.state.get_score(v), self.entry_seq[v], v))
                else:
                    self.open_set.add(v)
                    opened_now.append(v)
                self.state.set_distance(v, alt)
                self.state.set_predecessor(v, u)
                self.state.set_score(v, alt + self._h(v))

        for _, _, v in sorted(improved):
            self._push(v)
        for v in opened_now:
            self._push(v)
        return opened_now


def astar(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> List[Cell]:
    """Cells in the order A* expanded them."""
    algo = AStarAlgo()
    algo.init(grid, start, finish)
    return algo.run().visited
