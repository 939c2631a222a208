"""
Coordinate arithmetic over a square N x N board.
"""

from typing import Tuple

from .constants import DIRECTION_VECTORS, OPPOSITES, WRAP

Cell = Tuple[int, int]


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def normalize(cell: Cell, grid_size: int, policy: str) -> Tuple[Cell, bool]:
    """
    Map a candidate cell onto the board.

    Under WRAP the cell is folded onto the torus and is never out of bounds.
    Under SOLID the cell is returned unchanged together with a flag telling
    whether it fell off the board.

    Returns:
        (cell, out_of_bounds)
    """
    x, y = cell
    if policy == WRAP:
        return ((x + grid_size) % grid_size, (y + grid_size) % grid_size), False
    return (x, y), not in_bounds(cell, grid_size)


def step(cell: Cell, direction: str) -> Cell:
    """Return the neighbour of cell in the given direction (not normalized)."""
    dx, dy = DIRECTION_VECTORS[direction]
    return cell[0] + dx, cell[1] + dy


def is_opposite(a: str, b: str) -> bool:
    return OPPOSITES[a] == b
