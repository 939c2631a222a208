"""
Food placement on free board cells.
"""

import logging
from typing import Collection

from .constants import FOOD_PLACEMENT_ATTEMPTS
from .grid import Cell

logger = logging.getLogger(__name__)


class GridFullError(Exception):
    """Raised when every cell of the board is occupied."""


def place_food(
    occupied: Collection[Cell],
    grid_size: int,
    rng,
    max_attempts: int = FOOD_PLACEMENT_ATTEMPTS
) -> Cell:
    """
    Pick a random cell that is not in occupied.

    Random draws are bounded by max_attempts. When they are exhausted (only
    plausible on an almost full board) the board is scanned row by row and
    the first free cell is returned.

    Args:
        occupied: cells that must not receive the food
        grid_size: board side length
        rng: object with a randrange(n) method, e.g. random.Random
        max_attempts: number of random draws before falling back to the scan

    Raises:
        GridFullError: if no free cell exists
    """
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)

    for _ in range(max_attempts):
        x = rng.randrange(grid_size)
        y = rng.randrange(grid_size)
        if (x, y) not in taken:
            return (x, y)

    logger.debug(
        "No free cell after %d random attempts, scanning %dx%d board",
        max_attempts, grid_size, grid_size
    )
    for y in range(grid_size):
        for x in range(grid_size):
            if (x, y) not in taken:
                return (x, y)

    raise GridFullError(f"No free cell left on a {grid_size}x{grid_size} board")
