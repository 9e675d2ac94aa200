"""
Unit tests for the grid model.
"""

from math import inf

import numpy as np
import pytest

from gridlab.core.errors import InvalidInput
from gridlab.core.types import Grid, SearchState, URDL


class TestNeighbors:
    """Neighbor lookup and ordering."""

    def test_interior_udlr_order(self, empty_5x5):
        """Default order is up, down, left, right."""
        assert empty_5x5.neighbors((2, 2)) == [(1, 2), (3, 2), (2, 1), (2, 3)]

    def test_interior_urdl_order(self, empty_5x5):
        """DFS order is up, right, down, left."""
        assert empty_5x5.neighbors((2, 2), URDL) == [(1, 2), (2, 3), (3, 2), (2, 1)]

    def test_corner_only_in_bounds(self, empty_5x5):
        """Corners have two neighbors."""
        assert empty_5x5.neighbors((0, 0)) == [(1, 0), (0, 1)]
        assert empty_5x5.neighbors((4, 4)) == [(3, 4), (4, 3)]

    def test_walls_are_still_neighbors(self, split_grid):
        """Callers filter walls themselves."""
        assert (1, 2) in split_grid.neighbors((1, 1))
        assert split_grid.is_wall((1, 2))


class TestConstruction:
    """Building grids."""

    def test_from_lines(self, split_grid):
        """Symbols map to walls and endpoints."""
        assert split_grid.rows == 5
        assert split_grid.cols == 5
        assert split_grid.start == (2, 0)
        assert split_grid.finish == (2, 4)
        assert split_grid.walls() == {(r, 2) for r in range(5)}

    def test_from_lines_requires_endpoints(self):
        """Missing S/F is rejected."""
        with pytest.raises(InvalidInput):
            Grid.from_lines(["...", "..F"])

    def test_from_lines_rejects_unknown_symbol(self):
        """Only . # S F are understood."""
        with pytest.raises(InvalidInput):
            Grid.from_lines(["S?F"])

    def test_negative_size_rejected(self):
        """Dimensions must not be negative."""
        with pytest.raises(InvalidInput):
            Grid.empty(-1, 5, (0, 0), (0, 1))

    def test_shape_mismatch_rejected(self):
        """cells must match rows x cols."""
        with pytest.raises(InvalidInput):
            Grid(3, 3, np.zeros((3, 4)), (0, 0), (2, 2))

    def test_zero_size_allowed(self):
        """Degenerate grids can be built."""
        grid = Grid.empty(0, 10, (0, 0), (0, 1))
        assert grid.is_degenerate
        assert grid.cells.shape == (0, 10)

    def test_index_addressing(self):
        """Flat index is row-major."""
        grid = Grid.empty(4, 7, (0, 0), (3, 6))
        assert grid.index((2, 3)) == 17
        assert grid.cell_at(17) == (2, 3)


class TestWalls:
    """Painting and applying walls."""

    def test_clone_is_independent(self, empty_5x5):
        """Changing a clone leaves the source grid alone."""
        copy = empty_5x5.clone()
        copy.set_wall((2, 2))
        assert copy.is_wall((2, 2))
        assert not empty_5x5.is_wall((2, 2))

    def test_set_wall_on_endpoint_rejected(self, empty_5x5):
        """Endpoints can never become walls by painting."""
        with pytest.raises(InvalidInput):
            empty_5x5.set_wall((0, 0))

    def test_set_wall_out_of_bounds_rejected(self, empty_5x5):
        """Painting outside the grid fails."""
        with pytest.raises(InvalidInput):
            empty_5x5.set_wall((5, 0))

    def test_clear_wall(self, split_grid):
        """set_wall(..., False) opens a cell."""
        split_grid.set_wall((2, 2), False)
        assert not split_grid.is_wall((2, 2))

    def test_apply_walls_skips_endpoints(self, empty_5x5):
        """A wall set naming an endpoint leaves it open."""
        empty_5x5.apply_walls({(0, 0), (1, 1), (4, 4), (9, 9)})
        assert empty_5x5.walls() == {(1, 1)}

    def test_apply_walls_replaces_layout(self, split_grid):
        """Previous walls are cleared first."""
        split_grid.apply_walls({(0, 0)})
        assert split_grid.walls() == {(0, 0)}


class TestEndpointChecks:
    """Endpoint validation."""

    def test_out_of_bounds(self, empty_5x5):
        """Endpoints must be on the grid."""
        with pytest.raises(InvalidInput):
            empty_5x5.check_endpoints((0, 0), (5, 5))
        with pytest.raises(InvalidInput):
            empty_5x5.check_endpoints((-1, 0), (4, 4))

    def test_same_cell(self, empty_5x5):
        """start == finish is rejected."""
        with pytest.raises(InvalidInput):
            empty_5x5.check_endpoints((1, 1), (1, 1))

    def test_on_wall(self, split_grid):
        """Endpoints must be open."""
        with pytest.raises(InvalidInput):
            split_grid.check_endpoints((0, 2), (2, 4))

    def test_invalid_input_is_value_error(self):
        """InvalidInput can be caught as ValueError."""
        assert issubclass(InvalidInput, ValueError)


class TestSearchState:
    """Per-run working state."""

    def test_fresh_state(self, empty_5x5):
        """Every cell starts undiscovered."""
        node = SearchState(empty_5x5).node((3, 3))
        assert node.distance == inf
        assert node.score == inf
        assert node.visited is False
        assert node.predecessor is None
        assert node.is_wall is False

    def test_node_flags(self, split_grid):
        """Snapshots carry layout flags."""
        state = SearchState(split_grid)
        assert state.node((2, 0)).is_start
        assert state.node((2, 4)).is_finish
        assert state.node((0, 2)).is_wall

    def test_predecessor_links(self, empty_5x5):
        """Predecessors are stored as flat indices and read back as cells."""
        state = SearchState(empty_5x5)
        state.set_predecessor((0, 1), (0, 0))
        assert state.predecessor_of((0, 1)) == (0, 0)
        assert int(state.predecessor[empty_5x5.index((0, 1))]) == 0
