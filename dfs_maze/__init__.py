"""Depth-first maze solver package.

Exposes public APIs for loading text mazes, solving them in place and
printing the annotated result.
"""

from .types import (
    Position,
    OPEN,
    START,
    END,
    ON_PATH,
    REJECTED,
)
from .errors import (
    MazeError,
    SourceUnavailable,
    MalformedHeader,
    MalformedBody,
    MarkerError,
    AllocationFailure,
    GridReleased,
)
from .grid import Grid, read_grid, parse_grid, load_grid_from_file, open_grid, release_grid
from .solver import SearchTrace, solve, solve_from_start
from .presenter import grid_to_text, write_grid

__all__ = [
    "Position",
    "OPEN",
    "START",
    "END",
    "ON_PATH",
    "REJECTED",
    "MazeError",
    "SourceUnavailable",
    "MalformedHeader",
    "MalformedBody",
    "MarkerError",
    "AllocationFailure",
    "GridReleased",
    "Grid",
    "read_grid",
    "parse_grid",
    "load_grid_from_file",
    "open_grid",
    "release_grid",
    "SearchTrace",
    "solve",
    "solve_from_start",
    "grid_to_text",
    "write_grid",
]
