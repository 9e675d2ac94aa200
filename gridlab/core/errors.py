# gridlab/core/errors.py
"""Exceptions raised by gridlab."""


class GridError(Exception):
    """Base class for errors raised on purpose by gridlab."""


class InvalidInput(GridError, ValueError):
    """
    A precondition was violated before any work started.

    Raised for endpoints outside the grid, start == finish, an endpoint sitting
    on a wall, unknown algorithm/generator names and malformed map files.
    """
