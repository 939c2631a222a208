"""
Tests for the Snake body.
"""

import os
import sys
from collections import deque

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain.snake import Snake  # noqa: E402


class TestSnakeInit:
    """Tests for Snake construction."""

    def test_positions_are_tail_first(self):
        snake = Snake([(8, 10), (9, 10)])
        assert snake.tail == (8, 10)
        assert snake.head == (9, 10)
        assert len(snake) == 2

    def test_positions_is_deque(self):
        """Snake positions are stored as a deque for cheap tail removal."""
        snake = Snake([(8, 10), (9, 10)])
        assert isinstance(snake.positions, deque)

    def test_lists_are_converted_to_tuples(self):
        snake = Snake([[1, 1], [2, 1]])
        assert snake.cells() == [(1, 1), (2, 1)]

    def test_single_cell_is_rejected(self):
        with pytest.raises(ValueError):
            Snake([(5, 5)])

    def test_duplicate_cells_are_rejected(self):
        with pytest.raises(ValueError):
            Snake([(5, 5), (6, 5), (5, 5)])


class TestSnakeAdvance:
    """Tests for Snake.advance()."""

    def test_plain_move_keeps_length(self):
        snake = Snake([(8, 10), (9, 10)])
        snake.advance((10, 10))
        assert snake.cells() == [(9, 10), (10, 10)]
        assert not snake.occupies((8, 10))

    def test_grow_move_keeps_tail(self):
        snake = Snake([(8, 10), (9, 10)])
        snake.advance((10, 10), grow=True)
        assert snake.cells() == [(8, 10), (9, 10), (10, 10)]
        assert snake.occupies((8, 10))

    def test_moving_into_own_tail_keeps_cells_distinct(self):
        """The tail leaves as the head arrives, the cell stays occupied once."""
        snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6)])
        snake.advance((5, 5))
        assert snake.cells() == [(6, 5), (6, 6), (5, 6), (5, 5)]
        assert snake.occupies((5, 5))
        assert len(set(snake)) == len(snake)


class TestSnakeOccupies:
    """Tests for membership checks used by collision detection."""

    def test_occupies_every_body_cell(self):
        snake = Snake([(5, 5), (6, 5), (7, 5)])
        assert all(snake.occupies(c) for c in [(5, 5), (6, 5), (7, 5)])
        assert not snake.occupies((8, 5))

    def test_vacating_tail_counts_as_free(self):
        snake = Snake([(5, 5), (6, 5), (7, 5)])
        assert not snake.occupies((5, 5), vacating_tail=True)
        assert snake.occupies((6, 5), vacating_tail=True)

    def test_will_collide_depends_on_growth(self):
        """Growing keeps the tail, so the tail cell becomes deadly."""
        snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6)])
        assert not snake.will_collide((5, 5), grow=False)
        assert snake.will_collide((5, 5), grow=True)
        assert snake.will_collide((6, 5), grow=False)

    def test_repr(self):
        assert "head=(9, 10)" in repr(Snake([(8, 10), (9, 10)]))
