"""Grid model: the maze buffer, its start/end markers, and how it is loaded.

Input format::

    <width> <height>
    <row 0: width characters>
    ...
    <row height-1>

Rows shorter than ``width`` are padded with open space, since editors tend to
strip trailing blanks. Anything after the last row is ignored.
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from .errors import (
    AllocationFailure,
    GridReleased,
    MalformedBody,
    MalformedHeader,
    MarkerError,
    SourceUnavailable,
)
from .types import END, OPEN, START, Position

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[str]]
    start: Position
    end: Position
    _released: bool = field(default=False, repr=False, compare=False)

    def __enter__(self) -> "Grid":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._released

    def require_live(self) -> None:
        if self._released:
            raise GridReleased("grid has already been released")

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.width and 0 <= row < self.height

    def cell_at(self, column: int, row: int) -> str:
        self.require_live()
        return self.cells[row][column]

    def set_cell(self, column: int, row: int, ch: str) -> None:
        self.require_live()
        self.cells[row][column] = ch

    def count(self, ch: str) -> int:
        self.require_live()
        return sum(r.count(ch) for r in self.cells)

    def render(self) -> List[str]:
        """Rows top-to-bottom, each joined in column order. Does not mutate."""
        self.require_live()
        return ["".join(r) for r in self.cells]

    def release(self) -> None:
        if self._released:
            return
        self.cells = []
        self._released = True
        logger.debug("Released %dx%d grid", self.width, self.height)


def _parse_header(line: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise MalformedHeader(f"Expected 'width height' header, got {line.rstrip()!r}")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise MalformedHeader(f"Non-numeric maze dimensions: {line.rstrip()!r}") from exc
    if width <= 0 or height <= 0:
        raise MalformedHeader(f"Maze dimensions must be positive, got {width}x{height}")
    return width, height


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _single(marker: str, found: List[Position]) -> Position:
    if len(found) != 1:
        where = ", ".join(str(p.as_tuple()) for p in found) or "nowhere"
        raise MarkerError(f"Maze must contain exactly one {marker!r}; found {len(found)} at {where}")
    return found[0]


def read_grid(stream: TextIO, source: str = "<stream>") -> Grid:
    header = stream.readline()
    if not header.strip():
        raise MalformedHeader(f"{source}: missing 'width height' header")
    width, height = _parse_header(header)

    starts: List[Position] = []
    ends: List[Position] = []
    try:
        cells: List[List[str]] = []
        for y in range(height):
            line = stream.readline()
            if line == "":
                raise MalformedBody(f"{source}: expected {height} rows, found {y}")
            text = _strip_terminator(line)
            if len(text) > width:
                raise MalformedBody(
                    f"{source}: row {y} has {len(text)} characters, expected {width}"
                )
            row = list(text.ljust(width, OPEN))
            for x, ch in enumerate(row):
                if ch == START:
                    starts.append(Position(y, x))
                elif ch == END:
                    ends.append(Position(y, x))
            cells.append(row)
    except MemoryError as exc:
        raise AllocationFailure(f"{source}: cannot allocate a {width}x{height} maze") from exc

    grid = Grid(
        width=width,
        height=height,
        cells=cells,
        start=_single(START, starts),
        end=_single(END, ends),
    )
    logger.info(
        "Loaded %dx%d maze from %s (start=%s, end=%s)",
        width,
        height,
        source,
        grid.start.as_tuple(),
        grid.end.as_tuple(),
    )
    return grid


def parse_grid(text: str) -> Grid:
    return read_grid(io.StringIO(text), source="<string>")


def load_grid_from_file(path: str | Path) -> Grid:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            return read_grid(fh, source=str(path))
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"Cannot read maze file {path}: {exc}") from exc


@contextmanager
def open_grid(path: str | Path) -> Iterator[Grid]:
    """Load a grid for the duration of a ``with`` block, releasing it on exit."""
    grid = load_grid_from_file(path)
    try:
        yield grid
    finally:
        grid.release()


def release_grid(grid: Optional[Grid]) -> None:
    if grid is None:
        return
    grid.release()
