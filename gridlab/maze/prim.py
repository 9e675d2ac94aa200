# gridlab/maze/prim.py
#!/usr/bin/env python3
"""
Randomized frontier growth (Prim's).

One carved region grows from a random lattice seed. The frontier holds the
uncarved lattice cells two steps from the region; each round a uniformly
random frontier cell is joined, through the wall between them, to a random
carved neighbor. Ends when the frontier is empty.
"""

from dataclasses import dataclass
from typing import List, Optional, Set

from gridlab.core.types import Cell
from gridlab.maze.base import LatticeCarver
from gridlab.maze.common import WallBuilder, lattice_neighbors, midpoint


@dataclass
class RandomizedPrim(LatticeCarver):
    name: str = "prim"

    def _grow(self, b: WallBuilder) -> List[Cell]:
        lattice = b.lattice_cells()
        if not lattice:
            return []
        on_lattice = set(lattice)

        first = self.rng.choice(lattice)
        b.clear(first)
        in_maze = {first}
        carved = [first]
        frontier: List[Cell] = []
        in_frontier = set()

        def extend_frontier(c: Cell) -> None:
            for n in lattice_neighbors(c):
                if n in on_lattice and n not in in_maze and n not in in_frontier:
                    frontier.append(n)
                    in_frontier.add(n)

        extend_frontier(first)
        while frontier:
            i = self.rng.randrange(len(frontier))
            cell = frontier[i]
            # swap-remove keeps the pick O(1)
            frontier[i] = frontier[-1]
            frontier.pop()
            in_frontier.discard(cell)

            joined = self.rng.choice([n for n in lattice_neighbors(cell) if n in in_maze])
            b.clear(midpoint(cell, joined))
            b.clear(cell)
            in_maze.add(cell)
            carved.append(cell)
            extend_frontier(cell)

        return carved


def randomized_prim(rows: int, cols: int, start: Cell, finish: Cell, add_border: bool = True,
                    seed: Optional[int] = None) -> Set[Cell]:
    return RandomizedPrim(seed=seed).generate(rows, cols, start, finish, add_border)
