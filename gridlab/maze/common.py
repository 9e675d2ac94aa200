# gridlab/maze/common.py
"""
Shared pieces of the maze generators.

Walls are collected in a set of (row, col) cells. The start and finish are
"protected": nothing here ever adds them to the set. Odd (row, col) cells of
the interior form the lattice the carvers work on; even rows/cols hold the
walls between lattice cells.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Set

from gridlab.core.types import Cell, check_endpoints, manhattan

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


def random_even(rng: random.Random, lo: int, hi: int) -> Optional[int]:
    """An even integer in [lo, hi], or None if there is none."""
    first = lo if lo % 2 == 0 else lo + 1
    if first > hi:
        return None
    return first + 2 * rng.randrange((hi - first) // 2 + 1)


def random_odd(rng: random.Random, lo: int, hi: int) -> Optional[int]:
    """An odd integer in [lo, hi], or None if there is none."""
    first = lo if lo % 2 == 1 else lo + 1
    if first > hi:
        return None
    return first + 2 * rng.randrange((hi - first) // 2 + 1)


def choose_orientation(rng: random.Random, width: int, height: int, preferred: Optional[str] = None) -> str:
    """Split across the longer side; squares take the preferred side or a coin flip."""
    if width < height:
        return HORIZONTAL
    if height < width:
        return VERTICAL
    if preferred is not None:
        return preferred
    return HORIZONTAL if rng.random() < 0.5 else VERTICAL


def lattice_neighbors(c: Cell) -> List[Cell]:
    """Lattice cells two steps away: up, down, left, right."""
    r, col = c
    return [(r - 2, col), (r + 2, col), (r, col - 2), (r, col + 2)]


def midpoint(a: Cell, b: Cell) -> Cell:
    return ((a[0] + b[0]) // 2, (a[1] + b[1]) // 2)


@dataclass
class WallBuilder:
    rows: int
    cols: int
    start: Cell
    finish: Cell
    walls: Set[Cell] = field(default_factory=set)
    protected: FrozenSet[Cell] = field(init=False)

    def __post_init__(self):
        self.start = (int(self.start[0]), int(self.start[1]))
        self.finish = (int(self.finish[0]), int(self.finish[1]))
        check_endpoints(self.rows, self.cols, self.start, self.finish)
        self.protected = frozenset((self.start, self.finish))

    # -------------------- basic edits --------------------

    def in_bounds(self, c: Cell) -> bool:
        return 0 <= c[0] < self.rows and 0 <= c[1] < self.cols

    def add(self, c: Cell) -> None:
        if c in self.protected or not self.in_bounds(c):
            return
        self.walls.add(c)

    def clear(self, c: Cell) -> None:
        self.walls.discard(c)

    def is_open(self, c: Cell) -> bool:
        return self.in_bounds(c) and c not in self.walls

    def fill(self) -> None:
        for r in range(self.rows):
            for c in range(self.cols):
                self.add((r, c))

    def border_cells(self) -> List[Cell]:
        ring = []
        for r in range(self.rows):
            ring.append((r, 0))
            ring.append((r, self.cols - 1))
        for c in range(self.cols):
            ring.append((0, c))
            ring.append((self.rows - 1, c))
        return ring

    def add_border(self) -> None:
        for c in self.border_cells():
            self.add(c)

    def clear_border(self) -> None:
        for c in self.border_cells():
            self.clear(c)

    # -------------------- lattice --------------------

    def lattice_cells(self) -> List[Cell]:
        """Odd (row, col) cells strictly inside the outer ring, row-major."""
        return [(r, c) for r in range(1, self.rows - 1, 2) for c in range(1, self.cols - 1, 2)]

    def reachable(self, src: Cell) -> Set[Cell]:
        """Open cells 4-connected to src."""
        if not self.is_open(src):
            return set()
        seen = {src}
        queue = deque([src])
        while queue:
            r, c = queue.popleft()
            for n in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if n not in seen and self.is_open(n):
                    seen.add(n)
                    queue.append(n)
        return seen

    # -------------------- endpoint guarantees --------------------

    def open_endpoints(self) -> None:
        """
        Clear both endpoints and, for every border side an endpoint touches,
        the neighbor one step inward. An endpoint on the ring is never sealed
        in by it.
        """
        for r, c in (self.start, self.finish):
            self.clear((r, c))
            if r == 0 and self.rows > 1:
                self.clear((1, c))
            if r == self.rows - 1 and self.rows > 1:
                self.clear((self.rows - 2, c))
            if c == 0 and self.cols > 1:
                self.clear((r, 1))
            if c == self.cols - 1 and self.cols > 1:
                self.clear((r, self.cols - 2))

    def carve_line(self, src: Cell, dst: Cell) -> None:
        """Clear an axis-aligned stepped line from src to dst: rows first, then columns."""
        r, c = src
        self.clear((r, c))
        step = 1 if dst[0] > r else -1
        while r != dst[0]:
            r += step
            self.clear((r, c))
        step = 1 if dst[1] > c else -1
        while c != dst[1]:
            c += step
            self.clear((r, c))

    def link_endpoint(self, endpoint: Cell, anchors: Iterable[Cell]) -> Cell:
        """
        Join endpoint to the nearest anchor (Manhattan, ties row-major).

        With no anchors at all the endpoint is joined to the other endpoint.
        Returns the cell it was linked to.
        """
        best = min(anchors, key=lambda a: (manhattan(endpoint, a), a[0], a[1]), default=None)
        if best is None:
            best = self.finish if endpoint == self.start else self.start
        self.carve_line(endpoint, best)
        return best

    def result(self) -> Set[Cell]:
        walls = set(self.walls) - self.protected
        logger.debug(f"maze {self.rows}x{self.cols}: {len(walls)} walls")
        return walls
