from __future__ import annotations

import logging
import random

from .grid import Grid
from .state import Cell, Snake

log = logging.getLogger(__name__)


def spawn(snake: Snake, grid: Grid, rng=random) -> Cell | None:
    """Pick a uniformly random free cell, or None if the snake covers the board.

    Rejection sampling: cheap while the board is mostly empty. A full board is
    detected up front so the loop below always has a free cell to find.
    """
    if sum(1 for c in snake if grid.in_bounds(c)) >= grid.area:
        return None
    while True:
        pos = Cell(rng.randrange(grid.width), rng.randrange(grid.height))
        if not snake.occupies(pos):
            log.debug("food spawned at %s", pos)
            return pos
