# gridlab/core/maps.py
"""
Map files: a grid layout plus its endpoints as JSON.

    {
      "rows": 5, "cols": 7,
      "start": [2, 0], "finish": [2, 6],
      "cells": [[0, 0, 1, ...], ...]     # 0 open, 1 wall
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from gridlab.core.errors import InvalidInput
from gridlab.core.types import Grid

PathLike = Union[str, Path]


def grid_to_dict(grid: Grid) -> Dict[str, Any]:
    return {
        "rows": grid.rows,
        "cols": grid.cols,
        "start": list(grid.start),
        "finish": list(grid.finish),
        "cells": grid.cells.tolist(),
    }


def grid_from_dict(data: Dict[str, Any]) -> Grid:
    try:
        rows = int(data["rows"])
        cols = int(data["cols"])
        start = tuple(data["start"])
        finish = tuple(data["finish"])
        cells = data["cells"]
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInput(f"malformed map: {e!r}") from e
    if len(start) != 2 or len(finish) != 2:
        raise InvalidInput("start and finish must be [row, col] pairs")
    try:
        start = (int(start[0]), int(start[1]))
        finish = (int(finish[0]), int(finish[1]))
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"start and finish must be integer pairs: {e!r}") from e
    if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
        raise InvalidInput("cells must be a list of rows")
    if len(cells) != rows or any(len(r) != cols for r in cells):
        raise InvalidInput("cells size mismatch")
    if any(v not in (0, 1) for r in cells for v in r):
        raise InvalidInput("cells may only contain 0 (open) or 1 (wall)")
    grid = Grid(rows, cols, cells, start, finish)
    grid.check_endpoints()
    return grid


def load_map(path: PathLike) -> Grid:
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInput(f"{path}: not valid JSON ({e})") from e
    except OSError as e:
        raise InvalidInput(f"{path}: cannot read map ({e.strerror or e})") from e
    try:
        return grid_from_dict(data)
    except InvalidInput as e:
        raise InvalidInput(f"{path}: {e}") from e


def save_map(grid: Grid, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(grid_to_dict(grid), f)
    return path
