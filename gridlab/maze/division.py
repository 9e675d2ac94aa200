# gridlab/maze/division.py
#!/usr/bin/env python3
"""
Recursive division maze.

Repeatedly splits a rectangular region with a straight wall and leaves one
passage through it:
- walls sit on even rows/cols, passages on odd ones, so every wall lands on
  the same lattice and never blocks an earlier passage;
- a region is split across its longer side; squares alternate with the
  parent's split, the very first square region flips a coin;
- regions narrower or shorter than 3 cells are left alone.
"""

from dataclasses import dataclass
from typing import Optional, Set

from gridlab.core.types import Cell
from gridlab.maze.base import MazeGenerator
from gridlab.maze.common import (
    HORIZONTAL,
    VERTICAL,
    WallBuilder,
    choose_orientation,
    random_even,
    random_odd,
)


@dataclass
class RecursiveDivision(MazeGenerator):
    name: str = "division"

    def _carve(self, b: WallBuilder, add_border: bool) -> None:
        if add_border:
            b.add_border()

        # Divide the interior region (excluding border).
        self._divide(b, 1, b.rows - 2, 1, b.cols - 2, None)

        b.open_endpoints()
        self._link_stranded_endpoints(b)

    def _divide(self, b: WallBuilder, min_row: int, max_row: int, min_col: int, max_col: int,
                preferred: Optional[str]) -> None:
        width = max_col - min_col + 1
        height = max_row - min_row + 1

        # If the region is too small to divide, stop.
        if width < 3 or height < 3:
            return

        orientation = choose_orientation(self.rng, width, height, preferred)

        if orientation == HORIZONTAL:
            # Wall row must be between min_row+1 and max_row-1.
            wall_row = random_even(self.rng, min_row + 1, max_row - 1)
            if wall_row is None:
                wall_row = (min_row + max_row) // 2
            passage_col = random_odd(self.rng, min_col, max_col)
            if passage_col is None:
                passage_col = (min_col + max_col) // 2

            for c in range(min_col, max_col + 1):
                if c != passage_col:
                    b.add((wall_row, c))

            self._divide(b, min_row, wall_row - 1, min_col, max_col, VERTICAL)
            self._divide(b, wall_row + 1, max_row, min_col, max_col, VERTICAL)
            return

        # vertical
        wall_col = random_even(self.rng, min_col + 1, max_col - 1)
        if wall_col is None:
            wall_col = (min_col + max_col) // 2
        passage_row = random_odd(self.rng, min_row, max_row)
        if passage_row is None:
            passage_row = (min_row + max_row) // 2

        for r in range(min_row, max_row + 1):
            if r != passage_row:
                b.add((r, wall_col))

        self._divide(b, min_row, max_row, min_col, wall_col - 1, HORIZONTAL)
        self._divide(b, min_row, max_row, wall_col + 1, max_col, HORIZONTAL)

    def _link_stranded_endpoints(self, b: WallBuilder) -> None:
        """
        Join an endpoint to the lattice only if the walls cut it off, e.g. an
        endpoint on an even/even cell boxed in by two crossing wall lines.
        """
        anchors = [c for c in b.lattice_cells() if b.is_open(c)]
        if not anchors:
            if b.finish not in b.reachable(b.start):
                b.link_endpoint(b.start, [])
            return
        region = b.reachable(anchors[0])
        for endpoint in (b.start, b.finish):
            if endpoint not in region:
                b.link_endpoint(endpoint, [a for a in anchors if a in region])
                region = b.reachable(anchors[0])


def recursive_division(rows: int, cols: int, start: Cell, finish: Cell, add_border: bool = True,
                       seed: Optional[int] = None) -> Set[Cell]:
    return RecursiveDivision(seed=seed).generate(rows, cols, start, finish, add_border)
