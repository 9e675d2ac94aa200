# gridlab/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Iterable, Sequence, Set
from math import inf

import numpy as np

from gridlab.core.errors import InvalidInput

Cell = Tuple[int, int]  # (row, col)

OPEN = 0
WALL = 1

# Neighbor orders. Order decides tie-breaks between equally good frontier cells.
UP, DOWN, LEFT, RIGHT = (-1, 0), (1, 0), (0, -1), (0, 1)
UDLR = (UP, DOWN, LEFT, RIGHT)
URDL = (UP, RIGHT, DOWN, LEFT)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def check_endpoints(rows: int, cols: int, start: Cell, finish: Cell) -> None:
    """Raise InvalidInput unless start/finish are distinct in-bounds cells."""
    for label, (r, c) in (("start", start), ("finish", finish)):
        if not (0 <= r < rows and 0 <= c < cols):
            raise InvalidInput(f"{label} {(r, c)} is outside the {rows}x{cols} grid")
    if tuple(start) == tuple(finish):
        raise InvalidInput(f"start and finish are the same cell {tuple(start)}")


@dataclass(eq=False)
class Grid:
    rows: int
    cols: int
    cells: np.ndarray                  # [row][col], OPEN or WALL
    start: Cell
    finish: Cell

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            raise InvalidInput(f"grid dimensions must be non-negative, got {self.rows}x{self.cols}")
        arr = np.asarray(self.cells, dtype=np.uint8)
        if arr.size == 0 and self.rows * self.cols == 0:
            arr = arr.reshape(self.rows, self.cols)
        if arr.shape != (self.rows, self.cols):
            raise InvalidInput(f"cells shape {arr.shape} does not match {self.rows}x{self.cols}")
        self.cells = arr
        self.start = (int(self.start[0]), int(self.start[1]))
        self.finish = (int(self.finish[0]), int(self.finish[1]))

    # -------------------- construction --------------------

    @classmethod
    def empty(cls, rows: int, cols: int, start: Cell, finish: Cell) -> "Grid":
        """Wall-free grid."""
        return cls(rows, cols, np.zeros((max(rows, 0), max(cols, 0)), dtype=np.uint8), start, finish)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """
        Build a grid from text rows: '#' wall, '.' open, 'S' start, 'F' finish.

        Handy for fixtures:
            Grid.from_lines(["S.#", "..#", "..F"])
        """
        rows = len(lines)
        cols = len(lines[0]) if rows else 0
        cells = np.zeros((rows, cols), dtype=np.uint8)
        start = finish = None
        for r, line in enumerate(lines):
            if len(line) != cols:
                raise InvalidInput(f"row {r} has {len(line)} cells, expected {cols}")
            for c, ch in enumerate(line):
                if ch == "#":
                    cells[r, c] = WALL
                elif ch == "S":
                    start = (r, c)
                elif ch == "F":
                    finish = (r, c)
                elif ch != ".":
                    raise InvalidInput(f"unknown cell symbol {ch!r} at {(r, c)}")
        if start is None or finish is None:
            raise InvalidInput("grid text needs exactly one 'S' and one 'F'")
        return cls(rows, cols, cells, start, finish)

    def clone(self) -> "Grid":
        return Grid(self.rows, self.cols, self.cells.copy(), self.start, self.finish)

    # -------------------- addressing --------------------

    @property
    def is_degenerate(self) -> bool:
        return self.rows < 1 or self.cols < 1

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def index(self, c: Cell) -> int:
        return c[0] * self.cols + c[1]

    def cell_at(self, i: int) -> Cell:
        return divmod(int(i), self.cols)

    def is_wall(self, c: Cell) -> bool:
        return bool(self.cells[c[0], c[1]] == WALL)

    def is_start(self, c: Cell) -> bool:
        return tuple(c) == self.start

    def is_finish(self, c: Cell) -> bool:
        return tuple(c) == self.finish

    def neighbors(self, c: Cell, order: Sequence[Tuple[int, int]] = UDLR) -> List[Cell]:
        """In-bounds orthogonal neighbors of c in the given order. Walls included."""
        r, col = c
        out: List[Cell] = []
        for dr, dc in order:
            n = (r + dr, col + dc)
            if self.in_bounds(n):
                out.append(n)
        return out

    def check_endpoints(self, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> None:
        start = self.start if start is None else tuple(start)
        finish = self.finish if finish is None else tuple(finish)
        check_endpoints(self.rows, self.cols, start, finish)
        for label, c in (("start", start), ("finish", finish)):
            if self.is_wall(c):
                raise InvalidInput(f"{label} {c} is a wall")

    # -------------------- walls --------------------

    def walls(self) -> Set[Cell]:
        return {(int(r), int(c)) for r, c in zip(*np.nonzero(self.cells == WALL))}

    def set_wall(self, c: Cell, value: bool = True) -> None:
        if not self.in_bounds(c):
            raise InvalidInput(f"cell {tuple(c)} is outside the {self.rows}x{self.cols} grid")
        if value and (self.is_start(c) or self.is_finish(c)):
            raise InvalidInput(f"cannot put a wall on endpoint {tuple(c)}")
        self.cells[c[0], c[1]] = WALL if value else OPEN

    def apply_walls(self, walls: Iterable[Cell]) -> None:
        """Replace the layout with the given wall set. Endpoints always stay open."""
        self.cells[:, :] = OPEN
        for c in walls:
            c = (int(c[0]), int(c[1]))
            if self.in_bounds(c) and c != self.start and c != self.finish:
                self.cells[c[0], c[1]] = WALL


@dataclass(frozen=True)
class Node:
    """Snapshot of one cell: layout flags plus the working state of a run."""
    row: int
    col: int
    is_wall: bool
    is_start: bool
    is_finish: bool
    distance: float = inf
    score: float = inf
    visited: bool = False
    predecessor: Optional[Cell] = None


@dataclass(eq=False)
class SearchState:
    """
    Working state of one search run, kept off the grid.

    Flat numpy arrays indexed by Grid.index(); allocated fresh for every run.
    predecessor holds flat indices, -1 meaning none.
    """
    grid: Grid
    distance: np.ndarray = field(init=False)
    score: np.ndarray = field(init=False)
    visited: np.ndarray = field(init=False)
    predecessor: np.ndarray = field(init=False)

    def __post_init__(self):
        n = max(self.grid.rows, 0) * max(self.grid.cols, 0)
        self.distance = np.full(n, inf)
        self.score = np.full(n, inf)
        self.visited = np.zeros(n, dtype=bool)
        self.predecessor = np.full(n, -1, dtype=np.int64)

    def get_distance(self, c: Cell) -> float:
        return float(self.distance[self.grid.index(c)])

    def set_distance(self, c: Cell, d: float) -> None:
        self.distance[self.grid.index(c)] = d

    def get_score(self, c: Cell) -> float:
        return float(self.score[self.grid.index(c)])

    def set_score(self, c: Cell, s: float) -> None:
        self.score[self.grid.index(c)] = s

    def is_visited(self, c: Cell) -> bool:
        return bool(self.visited[self.grid.index(c)])

    def mark_visited(self, c: Cell) -> None:
        self.visited[self.grid.index(c)] = True

    def predecessor_of(self, c: Cell) -> Optional[Cell]:
        p = int(self.predecessor[self.grid.index(c)])
        return None if p < 0 else self.grid.cell_at(p)

    def set_predecessor(self, c: Cell, prev: Cell) -> None:
        self.predecessor[self.grid.index(c)] = self.grid.index(prev)

    def node(self, c: Cell) -> Node:
        r, col = c
        return Node(
            row=r,
            col=col,
            is_wall=self.grid.is_wall(c),
            is_start=self.grid.is_start(c),
            is_finish=self.grid.is_finish(c),
            distance=self.get_distance(c),
            score=self.get_score(c),
            visited=self.is_visited(c),
            predecessor=self.predecessor_of(c),
        )


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    algorithm: str
    start: Cell
    finish: Cell
    visited: List[Cell]           # expansion order, finish last when found
    path: List[Cell]              # start..finish when found, else [finish]
    found: bool
    metrics: Dict[str, Any] = field(default_factory=dict)
    state: Optional[SearchState] = None

    @property
    def path_length(self) -> int:
        return len(self.path) if self.found else 0
