"""
Player implementations for gridsnake.

Automatic players produce direction intents from a snapshot. They drive
headless simulations and stand in for a human at the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer, safe_moves
from .greedy_player import GreedyPlayer
from .registry import get_player_class, create_player, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'safe_moves',
    'get_player_class',
    'create_player',
    'AVAILABLE_PLAYERS',
]
