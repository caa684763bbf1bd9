"""
presenter.py

Turn a grid into console text.

Cell states and their default display characters (identical to the stored
markers, so the output can be fed back in as a maze file body):

- open:     ' '
- start:    'S'
- end:      'E'
- on_path:  '*'
- rejected: '~'

Walls are printed as they appear in the source file.

Usage:
    from dfs_maze.grid import load_grid_from_file
    from dfs_maze.presenter import write_grid

    grid = load_grid_from_file('mazes/small.txt')
    write_grid(grid, symbols={'rejected': '.'})
"""
from __future__ import annotations

import sys
from typing import Dict, List, Optional, TextIO

from .grid import Grid
from .types import END, ON_PATH, OPEN, REJECTED, START

# Each cell state and the character stored in the grid for it
_CELL_STATES = (
    ('open', OPEN),
    ('start', START),
    ('end', END),
    ('on_path', ON_PATH),
    ('rejected', REJECTED),
)

DEFAULT_SYMBOLS: Dict[str, str] = dict(_CELL_STATES)


def _translation(symbols: Optional[Dict[str, str]]) -> Dict[int, str]:
    syms = dict(DEFAULT_SYMBOLS)
    if symbols:
        unknown = set(symbols) - {name for name, _ in _CELL_STATES}
        if unknown:
            raise ValueError(f"Unknown cell states: {', '.join(sorted(unknown))}")
        syms.update(symbols)
    table: Dict[int, str] = {}
    for name, stored in _CELL_STATES:
        shown = syms.get(name, stored)
        if shown != stored:
            table[ord(stored)] = shown
    return table


def grid_lines(grid: Grid, symbols: Optional[Dict[str, str]] = None) -> List[str]:
    table = _translation(symbols)
    lines = grid.render()
    if not table:
        return lines
    return [line.translate(table) for line in lines]


def grid_to_text(grid: Grid, symbols: Optional[Dict[str, str]] = None) -> str:
    return "\n".join(grid_lines(grid, symbols))


def write_grid(grid: Grid, stream: Optional[TextIO] = None, symbols: Optional[Dict[str, str]] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in grid_lines(grid, symbols):
        out.write(line + "\n")
