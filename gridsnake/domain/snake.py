"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Sequence

from .grid import Cell


class Snake:
    """
    Represents the snake body on the board.

    Attributes:
        positions: deque of (x, y) from the tail at index 0 to the head at the end

    A set of the occupied cells is kept next to the deque so membership checks
    stay O(1) however long the snake gets.
    """

    def __init__(self, positions: Sequence[Cell]):
        cells = [tuple(p) for p in positions]
        if len(cells) < 2:
            raise ValueError(f"Snake needs at least 2 cells, got {len(cells)}")
        if len(set(cells)) != len(cells):
            raise ValueError(f"Snake cells must be distinct: {cells}")

        self.positions = deque(cells)
        self._occupied = set(cells)

    @property
    def head(self) -> Cell:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def tail(self) -> Cell:
        """Return the tail position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.positions)

    def cells(self) -> List[Cell]:
        return list(self.positions)

    def occupies(self, cell: Cell, vacating_tail: bool = False) -> bool:
        """
        Return True if cell is part of the body.

        With vacating_tail the current tail counts as free: on a move without
        growth the tail leaves its cell in the same tick the head arrives.
        """
        if cell not in self._occupied:
            return False
        return not (vacating_tail and cell == self.tail)

    def will_collide(self, cell: Cell, grow: bool) -> bool:
        return self.occupies(cell, vacating_tail=not grow)

    def advance(self, new_head: Cell, grow: bool = False) -> None:
        """
        Move the head onto new_head.

        The tail is dropped unless grow is set, so the length is unchanged on a
        plain move and one longer after eating. The caller checks collisions
        before advancing.
        """
        if not grow:
            old_tail = self.positions.popleft()
            self._occupied.discard(old_tail)
        self.positions.append(new_head)
        self._occupied.add(new_head)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
