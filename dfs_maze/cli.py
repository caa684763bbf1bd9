from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .errors import MazeError
from .grid import open_grid
from .presenter import write_grid
from .solver import solve_from_start
from .types import ON_PATH, REJECTED

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "DFS_MAZE_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_LOAD_FAILED = 2


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a text maze with depth-first search.")
    parser.add_argument("maze", type=str, help="Path to maze file")
    parser.add_argument("--no-solve", action="store_true", help="Print the maze without solving it")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Logging verbosity (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    args = parser.parse_args(argv)
    # argparse does not check choices against a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(f"{LOG_LEVEL_ENV} must be one of {', '.join(LOG_LEVELS)}, got {args.log_level!r}")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    maze_path = Path(args.maze)
    try:
        with open_grid(maze_path) as grid:
            if args.no_solve:
                write_grid(grid)
                return EXIT_SOLVED
            solved = solve_from_start(grid)
            write_grid(grid)
            if not solved:
                print("No solution found.")
                return EXIT_UNSOLVED
            print(f"Solved: path of {grid.count(ON_PATH)} cells, {grid.count(REJECTED)} cells rejected.")
            return EXIT_SOLVED
    except MazeError as exc:
        logger.debug("Failed to load %s", maze_path, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_LOAD_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
