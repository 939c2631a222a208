"""
Game configuration for gridsnake.

Defaults match the classic browser game (20x20 board, 160ms start tick,
55ms fastest tick, 5ms speed-up per food). Values can be overridden from the
environment (a .env file is honoured) or explicitly at construction.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from . import constants
from .grid import Cell, in_bounds, step


class ConfigError(ValueError):
    """Raised when a game configuration cannot produce a playable board."""


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = constants.GRID_SIZE
    start_tick_ms: int = constants.START_TICK_MS
    min_tick_ms: int = constants.MIN_TICK_MS
    tick_step_ms: int = constants.TICK_STEP_MS
    start_body: Optional[Tuple[Cell, ...]] = None
    start_direction: str = constants.START_DIRECTION
    wall_policy: str = constants.WRAP
    food_attempts: int = constants.FOOD_PLACEMENT_ATTEMPTS

    def __post_init__(self):
        if self.start_body is None:
            body = default_start_body(self.grid_size)
        else:
            # Normalise lists coming from callers or JSON into hashable tuples
            body = tuple(tuple(c) for c in self.start_body)
        object.__setattr__(self, "start_body", body)
        self.validate()

    def validate(self) -> None:
        """
        Check that the configuration describes a playable game.

        Raises:
            ConfigError: on the first inconsistent value found
        """
        if self.grid_size < 2:
            raise ConfigError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.start_tick_ms <= 0 or self.min_tick_ms <= 0:
            raise ConfigError("Tick intervals must be positive")
        if self.min_tick_ms > self.start_tick_ms:
            raise ConfigError(
                f"min_tick_ms ({self.min_tick_ms}) exceeds start_tick_ms ({self.start_tick_ms})"
            )
        if self.tick_step_ms < 0:
            raise ConfigError(f"tick_step_ms must not be negative, got {self.tick_step_ms}")
        if self.food_attempts < 0:
            raise ConfigError(f"food_attempts must not be negative, got {self.food_attempts}")
        if self.wall_policy not in constants.WALL_POLICIES:
            raise ConfigError(f"Unknown wall policy '{self.wall_policy}'")
        if self.start_direction not in constants.VALID_MOVES:
            raise ConfigError(f"Unknown start direction '{self.start_direction}'")

        body = self.start_body
        if len(body) < 2:
            raise ConfigError("start_body needs at least 2 cells")
        if len(set(body)) != len(body):
            raise ConfigError(f"start_body has duplicate cells: {body}")
        if len(body) >= self.grid_size * self.grid_size:
            raise ConfigError("start_body leaves no room for food")
        for cell in body:
            if not in_bounds(cell, self.grid_size):
                raise ConfigError(f"start_body cell {cell} is outside a {self.grid_size}x{self.grid_size} board")
        for (ax, ay), (bx, by) in zip(body, body[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ConfigError(f"start_body cells {(ax, ay)} and {(bx, by)} are not adjacent")

        # Heading straight back into the neck would end the game on the first tick
        if step(body[-1], self.start_direction) == body[-2]:
            raise ConfigError(
                f"start_direction {self.start_direction} points back into the snake body"
            )

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a configuration from environment variables.

        Uses environment variables (all optional):
        - SNAKE_GRID_SIZE
        - SNAKE_START_TICK_MS
        - SNAKE_MIN_TICK_MS
        - SNAKE_TICK_STEP_MS
        - SNAKE_WALL_POLICY: "wrap" or "solid"
        - SNAKE_FOOD_ATTEMPTS

        Explicit keyword overrides win over the environment.
        """
        load_dotenv()

        values = {
            "grid_size": _int_env("SNAKE_GRID_SIZE"),
            "start_tick_ms": _int_env("SNAKE_START_TICK_MS"),
            "min_tick_ms": _int_env("SNAKE_MIN_TICK_MS"),
            "tick_step_ms": _int_env("SNAKE_TICK_STEP_MS"),
            "food_attempts": _int_env("SNAKE_FOOD_ATTEMPTS"),
        }
        wall_policy = os.getenv("SNAKE_WALL_POLICY")
        if wall_policy:
            values["wall_policy"] = wall_policy.strip().lower()

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**{k: v for k, v in values.items() if v is not None})


def _int_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got '{raw}'")


def default_start_body(grid_size: int) -> Tuple[Cell, ...]:
    """
    Two cells facing right on the middle row, tail first.

    Gives ((8, 10), (9, 10)) on the default 20x20 board and stays on the
    board down to 2x2.
    """
    row = grid_size // 2
    head_x = max(1, grid_size // 2 - 1)
    return ((head_x - 1, row), (head_x, row))
