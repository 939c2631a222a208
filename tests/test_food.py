"""
Tests for food placement.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain.food import GridFullError, place_food  # noqa: E402


class TestPlaceFood:
    """Tests for place_food()."""

    def test_returns_first_free_random_draw(self, scripted_rng):
        """Occupied draws are retried until a free cell comes up."""
        rng = scripted_rng(1, 1, 2, 2)
        assert place_food({(1, 1)}, 5, rng) == (2, 2)
        assert rng.calls == 4

    def test_food_is_never_on_an_occupied_cell(self):
        rng = random.Random(7)
        occupied = {(x, y) for x in range(6) for y in range(6) if (x + y) % 3}
        for _ in range(200):
            cell = place_food(occupied, 6, rng)
            assert cell not in occupied
            assert 0 <= cell[0] < 6 and 0 <= cell[1] < 6

    def test_draws_cover_every_free_cell(self):
        """Placement is random over the free cells, not stuck on one."""
        rng = random.Random(3)
        occupied = {(0, 0), (1, 0)}
        seen = {place_food(occupied, 3, rng) for _ in range(500)}
        assert seen == {(x, y) for x in range(3) for y in range(3)} - occupied

    def test_falls_back_to_scan_when_attempts_run_out(self, scripted_rng):
        """After the bounded retries the first free cell in row order wins."""
        rng = scripted_rng(0, 0)
        occupied = {(0, 0), (1, 0), (2, 0)}
        assert place_food(occupied, 3, rng, max_attempts=10) == (0, 1)
        assert rng.calls == 20

    def test_scan_is_used_when_attempts_disabled(self, scripted_rng):
        rng = scripted_rng(0, 0)
        assert place_food({(0, 0)}, 2, rng, max_attempts=0) == (1, 0)
        assert rng.calls == 0

    def test_full_grid_raises(self, scripted_rng):
        occupied = {(x, y) for x in range(2) for y in range(2)}
        with pytest.raises(GridFullError):
            place_food(occupied, 2, scripted_rng(0, 1), max_attempts=5)

    def test_accepts_any_collection_of_cells(self, scripted_rng):
        """Lists and deques of occupied cells work as well as sets."""
        assert place_food([(0, 0)], 2, scripted_rng(0, 0, 1, 1)) == (1, 1)
