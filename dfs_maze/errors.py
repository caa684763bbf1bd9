"""Errors raised while building or using a maze grid.

An unsolvable maze is not an error: ``solve`` simply returns ``False``.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every failure this package raises."""


class SourceUnavailable(MazeError):
    """The maze source could not be opened or read."""


class MalformedHeader(MazeError, ValueError):
    """The leading ``width height`` line is missing or unparsable."""


class MalformedBody(MazeError, ValueError):
    """The rows following the header do not match the declared size."""


class MarkerError(MazeError, ValueError):
    """The maze does not contain exactly one start and one end marker."""


class AllocationFailure(MazeError, MemoryError):
    """Storage for the cell buffer could not be obtained."""


class GridReleased(MazeError):
    """A released grid was used after its cells were dropped."""
