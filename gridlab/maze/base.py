# gridlab/maze/base.py
#!/usr/bin/env python3
"""
Maze generator API.

Every generator implements:
- generate(rows, cols, start, finish, add_border=True) -> set of wall cells

Randomness comes from the generator's own random.Random (built from `seed`
unless an `rng` is injected), never from the module-level random state, so
the same seed always produces the same walls.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Set

from gridlab.core.types import Cell
from gridlab.maze.common import WallBuilder

logger = logging.getLogger(__name__)


@dataclass
class MazeGenerator:
    name: str = "maze"
    seed: Optional[int] = None
    rng: Optional[random.Random] = field(default=None, repr=False)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.seed)

    def generate(self, rows: int, cols: int, start: Cell, finish: Cell, add_border: bool = True) -> Set[Cell]:
        """
        Wall set for a rows x cols grid. start/finish are never part of it.

        Raises:
            InvalidInput: start/finish outside the grid or equal
        """
        if rows < 1 or cols < 1:
            return set()
        builder = WallBuilder(rows, cols, start, finish)
        self._carve(builder, add_border)
        walls = builder.result()
        logger.debug(f"{self.name}: {len(walls)} walls on {rows}x{cols}, border={add_border}")
        return walls

    def _carve(self, b: WallBuilder, add_border: bool) -> None:
        raise NotImplementedError


@dataclass
class LatticeCarver(MazeGenerator):
    """
    Carvers that start fully walled and open a spanning tree of lattice cells.

    After carving, both endpoints are cleared and joined to the nearest carved
    cell by a stepped line, then the endpoint-opening pass runs. Endpoints off
    the odd lattice therefore still end up connected.
    """

    def _carve(self, b: WallBuilder, add_border: bool) -> None:
        b.fill()
        if not add_border:
            b.clear_border()
        carved = self._grow(b)
        b.clear(b.start)
        b.clear(b.finish)
        for endpoint in (b.start, b.finish):
            b.link_endpoint(endpoint, carved)
        b.open_endpoints()

    def _grow(self, b: WallBuilder) -> List[Cell]:
        """Carve the lattice; returns the carved lattice cells."""
        raise NotImplementedError
