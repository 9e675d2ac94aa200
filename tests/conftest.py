"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random

import numpy as np
import pytest

from gridlab.core.types import Grid, WALL


@pytest.fixture
def empty_5x5() -> Grid:
    """5x5 grid without walls, start top-left, finish bottom-right."""
    return Grid.empty(5, 5, (0, 0), (4, 4))


@pytest.fixture
def split_grid() -> Grid:
    """Start and finish separated by a full wall column."""
    return Grid.from_lines([
        "..#..",
        "..#..",
        "S.#.F",
        "..#..",
        "..#..",
    ])


@pytest.fixture
def detour_grid() -> Grid:
    """A wall in the way forces a detour around its lower end."""
    return Grid.from_lines([
        "S....#....",
        ".....#....",
        ".....#..F.",
        ".....#....",
        "..........",
    ])


def random_grid(seed: int, rows: int = 8, cols: int = 12, density: float = 0.3) -> Grid:
    """Seeded random wall layout with open, distinct endpoints."""
    rng = random.Random(seed)
    cells = np.zeros((rows, cols), dtype=np.uint8)
    for r in range(rows):
        for c in range(cols):
            if rng.random() < density:
                cells[r, c] = WALL
    start = (rng.randrange(rows), rng.randrange(cols))
    finish = start
    while finish == start:
        finish = (rng.randrange(rows), rng.randrange(cols))
    cells[start] = 0
    cells[finish] = 0
    return Grid(rows, cols, cells, start, finish)


def assert_valid_path(grid: Grid, path) -> None:
    """Consecutive cells are orthogonal neighbors and none is a wall."""
    assert path[0] == grid.start
    assert path[-1] == grid.finish
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
    assert not any(grid.is_wall(c) for c in path)
