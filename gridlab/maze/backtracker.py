# gridlab/maze/backtracker.py
#!/usr/bin/env python3
"""
Recursive backtracker: a perfect maze carved by depth-first search on the odd
lattice. Cells two steps apart are joined by clearing the wall between them;
dead ends pop the stack.
"""

from dataclasses import dataclass
from typing import List, Optional, Set

from gridlab.core.types import Cell
from gridlab.maze.base import LatticeCarver
from gridlab.maze.common import WallBuilder, lattice_neighbors, midpoint


@dataclass
class RecursiveBacktracker(LatticeCarver):
    name: str = "backtracker"

    def _grow(self, b: WallBuilder) -> List[Cell]:
        lattice = b.lattice_cells()
        if not lattice:
            return []
        on_lattice = set(lattice)

        first = self.rng.choice(lattice)
        b.clear(first)
        visited = {first}
        carved = [first]
        stack = [first]

        while stack:
            cur = stack[-1]
            options = [n for n in lattice_neighbors(cur) if n in on_lattice and n not in visited]
            if not options:
                stack.pop()
                continue
            nxt = self.rng.choice(options)
            b.clear(midpoint(cur, nxt))
            b.clear(nxt)
            visited.add(nxt)
            carved.append(nxt)
            stack.append(nxt)

        return carved


def recursive_backtracker(rows: int, cols: int, start: Cell, finish: Cell, add_border: bool = True,
                          seed: Optional[int] = None) -> Set[Cell]:
    return RecursiveBacktracker(seed=seed).generate(rows, cols, start, finish, add_border)
