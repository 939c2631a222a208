"""
Domain entities for the gridsnake game engine.

This module contains the core game entities that are independent of
presentation and I/O concerns (rendering, input devices, storage).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    WRAP, SOLID,
    IDLE, RUNNING, PAUSED, GAME_OVER,
    DEATH_WALL, DEATH_SELF, DEATH_BOARD_FULL,
)
from .config import GameConfig, ConfigError
from .food import GridFullError, place_food
from .snake import Snake
from .engine import GameEngine, TickResult, MOVED, GREW
from .game_state import GameSnapshot
from .session import GameSession, EVENTS

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'WRAP', 'SOLID',
    'IDLE', 'RUNNING', 'PAUSED', 'GAME_OVER',
    'DEATH_WALL', 'DEATH_SELF', 'DEATH_BOARD_FULL',
    'GameConfig', 'ConfigError',
    'GridFullError', 'place_food',
    'Snake',
    'GameEngine', 'TickResult', 'MOVED', 'GREW',
    'GameSnapshot',
    'GameSession', 'EVENTS',
]
