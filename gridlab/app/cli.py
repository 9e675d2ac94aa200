# gridlab/app/cli.py
#!/usr/bin/env python3
"""
gridlab command line.

Usage:
    gridlab maze --kind division --rows 21 --cols 41 --seed 7 -o maze.json
    gridlab solve maze.json --algo astar
    gridlab compare maze.json --json

Commands:
    maze     - Generate a maze with the default endpoints and save it as a map file
    solve    - Run one search strategy on a map file and print a summary
    compare  - Run every strategy on independent copies of the same map

Environment:
    GRIDLAB_ALGORITHM, GRIDLAB_MAZE, GRIDLAB_SEED, LOG_LEVEL
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from gridlab import config
from gridlab.core.errors import InvalidInput
from gridlab.core.maps import load_map, save_map
from gridlab.core.search import algorithm_names, search
from gridlab.core.types import SearchResult
from gridlab.maze.generate import build_maze_grid, generator_names

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gridlab",
        description="Grid pathfinding and maze generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    maze = sub.add_parser("maze", help="Generate a maze map file")
    maze.add_argument(
        "--kind",
        default=config.DEFAULT_MAZE,
        choices=generator_names(),
        help=f"Maze generator (default: {config.DEFAULT_MAZE})",
    )
    maze.add_argument("--rows", type=int, default=config.DEFAULT_ROWS, help="Grid rows")
    maze.add_argument("--cols", type=int, default=config.DEFAULT_COLS, help="Grid columns")
    maze.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="Random seed")
    maze.add_argument("--no-border", action="store_true", help="Leave the outer ring open")
    maze.add_argument("--output", "-o", required=True, help="Map file to write")

    solve = sub.add_parser("solve", help="Run one search strategy on a map file")
    solve.add_argument("map", help="Map file (JSON)")
    solve.add_argument(
        "--algo",
        default=config.DEFAULT_ALGORITHM,
        help=f"One of {', '.join(algorithm_names())} (default: {config.DEFAULT_ALGORITHM})",
    )
    solve.add_argument("--json", action="store_true", help="Print the result as JSON")

    compare = sub.add_parser("compare", help="Run every strategy on the same map")
    compare.add_argument("map", help="Map file (JSON)")
    compare.add_argument("--json", action="store_true", help="Print the results as JSON")

    return parser.parse_args(argv)


def summarize(result: SearchResult) -> dict:
    return {
        "algorithm": result.algorithm,
        "start": list(result.start),
        "finish": list(result.finish),
        "found": result.found,
        "visited": len(result.visited),
        "path_len": result.path_length,
        "path": [list(c) for c in result.path] if result.found else [],
    }


def _print_line(summary: dict) -> None:
    outcome = f"path {summary['path_len']} cells" if summary["found"] else "no path"
    print(f"{summary['algorithm']:<10} visited {summary['visited']:>5}  {outcome}")


def cmd_maze(args: argparse.Namespace) -> int:
    rows, cols = config.clamp_size(args.rows, args.cols)
    if (rows, cols) != (args.rows, args.cols):
        logger.warning(f"Grid size clamped to {rows}x{cols}")
    grid = build_maze_grid(args.kind, rows, cols, add_border=not args.no_border, seed=args.seed)
    path = save_map(grid, args.output)
    print(f"Wrote {args.kind} maze {rows}x{cols} ({len(grid.walls())} walls) to {path}")
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    grid = load_map(args.map)
    summary = summarize(search(args.algo, grid))
    if args.json:
        print(json.dumps(summary))
    else:
        _print_line(summary)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    grid = load_map(args.map)
    summaries = [summarize(search(name, grid.clone())) for name in algorithm_names()]
    if args.json:
        print(json.dumps(summaries))
    else:
        for summary in summaries:
            _print_line(summary)
    return 0


COMMANDS = {
    "maze": cmd_maze,
    "solve": cmd_solve,
    "compare": cmd_compare,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        return COMMANDS[args.command](args)
    except InvalidInput as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
