from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grid import Grid
from .types import END, ON_PATH, OPEN, REJECTED, SEARCH_STEPS, START, Position

logger = logging.getLogger(__name__)


@dataclass
class SearchTrace:
    """Optional record of what a search did to the grid.

    ``entered`` lists every cell the search stepped onto, in order. Only the
    start cell can appear more than once, since it is never marked.
    ``writes`` lists every marker assignment in order.
    """

    entered: List[Position] = field(default_factory=list)
    writes: List[Tuple[Position, str]] = field(default_factory=list)

    def record(self, pos: Position, marker: str) -> None:
        self.writes.append((pos, marker))


@dataclass
class _Frame:
    column: int
    row: int
    is_start: bool
    next_step: int = 0


def _enter(grid: Grid, column: int, row: int, stack: List[_Frame], trace: Optional[SearchTrace]) -> Optional[bool]:
    """Try to step onto a cell.

    Returns True when the cell is the end, False when it cannot be entered, and
    None when the cell was marked and pushed for exploration.
    """
    if not grid.in_bounds(column, row):
        return False
    current = grid.cell_at(column, row)
    if current == END:
        return True
    # Walls, and cells already marked '*' or '~', are impassable
    if current != OPEN and current != START:
        return False

    is_start = current == START
    if trace is not None:
        trace.entered.append(Position(row, column))
    if not is_start:
        grid.set_cell(column, row, ON_PATH)
        if trace is not None:
            trace.record(Position(row, column), ON_PATH)
    stack.append(_Frame(column, row, is_start))
    return None


def solve(grid: Grid, column: int, row: int, trace: Optional[SearchTrace] = None) -> bool:
    """Depth-first search from (column, row) to the end marker.

    Neighbours are tried right, down, left, up and the first success wins.
    Cells on the found path are left as '*'; cells that led nowhere become '~'.
    The start and end markers are never overwritten. Frames live on an
    explicit stack, so maze size is not limited by the recursion limit.
    """
    grid.require_live()
    stack: List[_Frame] = []

    outcome = _enter(grid, column, row, stack, trace)
    if outcome is not None:
        return outcome

    while stack:
        frame = stack[-1]
        if frame.next_step == len(SEARCH_STEPS):
            stack.pop()
            if not frame.is_start:
                grid.set_cell(frame.column, frame.row, REJECTED)
                if trace is not None:
                    trace.record(Position(frame.row, frame.column), REJECTED)
            continue

        dx, dy = SEARCH_STEPS[frame.next_step]
        frame.next_step += 1
        if _enter(grid, frame.column + dx, frame.row + dy, stack, trace):
            logger.debug("Reached end from (%d, %d); path depth %d", column, row, len(stack))
            return True

    logger.debug("No path from (%d, %d)", column, row)
    return False


def solve_from_start(grid: Grid, trace: Optional[SearchTrace] = None) -> bool:
    return solve(grid, grid.start.column, grid.start.row, trace=trace)
