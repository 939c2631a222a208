"""
GameEngine - advances the simulation one discrete tick at a time.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .constants import (
    DEATH_BOARD_FULL,
    DEATH_SELF,
    DEATH_WALL,
    VALID_MOVES,
)
from .food import GridFullError, place_food
from .grid import Cell, is_opposite, normalize, step
from .snake import Snake

logger = logging.getLogger(__name__)

MOVED = "moved"
GREW = "grew"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of a single tick.

    Attributes:
        kind: MOVED, GREW or GAME_OVER
        score: score after the tick
        food: food cell after the tick (None once the board is full)
        tick_interval_ms: interval the host should wait before the next tick
        reason: death reason for GAME_OVER results
        interval_changed: True when the host has to re-arm its timer
    """
    kind: str
    score: int
    food: Optional[Cell]
    tick_interval_ms: int
    reason: Optional[str] = None
    interval_changed: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.kind == GAME_OVER


class GameEngine:
    """
    Owns the snake, the food and the score of one game.

    All mutation goes through set_direction() and tick(). The engine never
    schedules itself: tick_interval_ms tells the host how long to wait before
    calling tick() again.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake(self.config.start_body)
        self.direction = self.config.start_direction
        self.next_direction = self.config.start_direction
        self.score = 0
        self.tick_interval_ms = self.config.start_tick_ms
        self.tick_count = 0
        self.game_over = False
        self.death_reason: Optional[str] = None
        self._final_result: Optional[TickResult] = None

        # The config guarantees at least one free cell for the first food
        self.food: Optional[Cell] = self._place_food()

    @property
    def wall_policy(self) -> str:
        return self.config.wall_policy

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    def set_direction(self, direction: str) -> bool:
        """
        Queue a direction for the next tick.

        A reversal of the committed direction is dropped, as is any change
        after the game has ended.

        Returns:
            True if the direction was queued
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'")
        if self.game_over:
            return False
        if is_opposite(self.direction, direction):
            logger.debug("Ignoring reversal %s -> %s", self.direction, direction)
            return False
        self.next_direction = direction
        return True

    def tick(self) -> TickResult:
        """
        Execute one step:
          1) Commit the queued direction
          2) Compute the candidate head, wrapping or failing on walls
          3) Check self-collision (the tail counts as free unless growing)
          4) Advance the snake, growing if the head lands on food
          5) On growth: score, speed up, place new food
        """
        if self.game_over:
            return self._final_result

        self.tick_count += 1
        self.direction = self.next_direction

        candidate, out_of_bounds = normalize(
            step(self.snake.head, self.direction), self.grid_size, self.wall_policy
        )
        if out_of_bounds:
            return self._finish(DEATH_WALL)

        grow = candidate == self.food
        if self.snake.will_collide(candidate, grow):
            return self._finish(DEATH_SELF)

        self.snake.advance(candidate, grow=grow)

        if not grow:
            return TickResult(
                kind=MOVED,
                score=self.score,
                food=self.food,
                tick_interval_ms=self.tick_interval_ms,
            )

        self.score += 1
        previous_interval = self.tick_interval_ms
        self.tick_interval_ms = max(
            self.config.min_tick_ms, self.tick_interval_ms - self.config.tick_step_ms
        )
        interval_changed = self.tick_interval_ms != previous_interval

        try:
            self.food = self._place_food()
        except GridFullError:
            self.food = None
            return self._finish(DEATH_BOARD_FULL, interval_changed=interval_changed)

        return TickResult(
            kind=GREW,
            score=self.score,
            food=self.food,
            tick_interval_ms=self.tick_interval_ms,
            interval_changed=interval_changed,
        )

    def _place_food(self) -> Cell:
        food = place_food(
            set(self.snake), self.grid_size, self.rng, max_attempts=self.config.food_attempts
        )
        logger.debug("Placed food at %s", food)
        return food

    def _finish(self, reason: str, interval_changed: bool = False) -> TickResult:
        self.game_over = True
        self.death_reason = reason
        self._final_result = TickResult(
            kind=GAME_OVER,
            score=self.score,
            food=self.food,
            tick_interval_ms=self.tick_interval_ms,
            reason=reason,
            interval_changed=interval_changed,
        )
        logger.info(
            "Game over after %d ticks: %s (score %d)", self.tick_count, reason, self.score
        )
        return self._final_result
