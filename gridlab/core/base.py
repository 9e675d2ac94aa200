# gridlab/core/base.py
#!/usr/bin/env python3
"""
Shared machinery for the grid search strategies, one expansion per step().

Algorithm API:
- init(grid, start=None, finish=None) - reset() - step() -> StepResult
- run() -> SearchResult steps until the finish is expanded or the frontier is empty.

Subclasses only decide the frontier discipline:
- _seed()      put the start cell on the frontier
- _pop()       next cell to expand, or None once the frontier is exhausted
- _expand(u)   discover/relax the neighbors of u, return the newly opened cells

Working state lives in a SearchState allocated by reset(); the grid itself
is never written to.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from gridlab.core.path import has_path, reconstruct_path
from gridlab.core.types import Cell, Grid, SearchResult, SearchState, StepResult, UDLR, manhattan

logger = logging.getLogger(__name__)


@dataclass
class SearchAlgo:
    name: str = "search"

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    finish: Optional[Cell] = None
    state: Optional[SearchState] = None
    visited_order: List[Cell] = field(default_factory=list)
    open_set: set = field(default_factory=set)          # cells currently on the frontier
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    seq: int = 0  # monotonic counter for PQ stability

    order: Sequence[Tuple[int, int]] = field(default=UDLR, repr=False)

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> None:
        """Bind to a grid (endpoints default to the grid's own) and reset."""
        self.grid = grid
        self.start = grid.start if start is None else (int(start[0]), int(start[1]))
        self.finish = grid.finish if finish is None else (int(finish[0]), int(finish[1]))
        if not grid.is_degenerate:
            grid.check_endpoints(self.start, self.finish)
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.grid is None:
            return
        self.state = SearchState(self.grid)
        self.visited_order = []
        self.open_set = set()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.seq = 0
        if self.grid.is_degenerate:
            self.no_path = True
            return
        self._seed()

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _neighbors(self, c: Cell) -> List[Cell]:
        """In-bounds, non-wall neighbors of c in this algorithm's order."""
        return [n for n in self.grid.neighbors(c, self.order) if not self.grid.is_wall(n)]

    def _h(self, c: Cell) -> int:
        """Manhattan distance to the finish; admissible and consistent on a unit-cost grid."""
        return manhattan(c, self.finish)

    def path(self) -> List[Cell]:
        if self.state is None or self.grid.is_degenerate:
            return []
        return reconstruct_path(self.state, self.finish)

    # -------------------- frontier hooks --------------------

    def _seed(self) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Cell]:
        raise NotImplementedError

    def _expand(self, u: Cell) -> List[Cell]:
        raise NotImplementedError

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop the next frontier cell.
          - If it is the finish, reconstruct and stop.
          - Else let the subclass open/relax its neighbors.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self.path()
            return StepResult(status="done", path=path, metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        u = self._pop()
        if u is None:
            self.no_path = True
            logger.debug(f"{self.name}: frontier exhausted after {self.popped_count} expansions")
            return StepResult(status="no_path", metrics=self._metrics())

        # Finalize u
        self.popped_count += 1
        self.open_set.discard(u)
        self.state.mark_visited(u)
        self.visited_order.append(u)

        if u == self.finish:
            self.done = True
            path = self.path()
            return StepResult(
                status="done",
                closed=[u],
                current=u,
                path=path,
                metrics=self._metrics(path_len=len(path)),
            )

        opened_now = self._expand(u)
        return StepResult(
            status="running",
            opened=opened_now,
            closed=[u],
            current=u,
            metrics=self._metrics(),
        )

    def run(self) -> SearchResult:
        """Step until done/no_path and package the outcome."""
        if self.grid is None:
            raise RuntimeError(f"{self.name}: init(grid) must be called before run()")
        res = self.step()
        while res.status == "running":
            res = self.step()
        result = self.result()
        logger.debug(
            f"{self.name}: {'found' if result.found else 'no path'} "
            f"{result.start} -> {result.finish}, visited={len(result.visited)}, "
            f"path_len={result.path_length}"
        )
        return result

    def result(self) -> SearchResult:
        path = self.path()
        found = self.done and has_path(path, self.start, self.finish)
        return SearchResult(
            algorithm=self.name,
            start=self.start,
            finish=self.finish,
            visited=list(self.visited_order),
            path=path,
            found=found,
            metrics=self._metrics(path_len=len(path) if found else 0),
            state=self.state,
        )

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.visited_order),
            "path_len": path_len,
            "total_cost": path_len - 1 if path_len else None,
        }
