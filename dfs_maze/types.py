from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Cell alphabet. Anything else is a wall.
OPEN = " "
START = "S"
END = "E"
ON_PATH = "*"
REJECTED = "~"


@dataclass(frozen=True)
class Position:
    row: int
    column: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)


# Cardinal movement deltas as (dx, dy)
RIGHT = (1, 0)
DOWN = (0, 1)
LEFT = (-1, 0)
UP = (0, -1)

# Order the solver tries neighbours in; changing it changes the drawn path
SEARCH_STEPS = (RIGHT, DOWN, LEFT, UP)
