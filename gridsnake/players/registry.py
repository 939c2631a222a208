"""
Registry for automatic players.

Maps player keys (e.g., 'random', 'greedy') to player classes so the CLI and
the game loop can pick one by name.
"""

from typing import Dict, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'greedy'. If None or empty, returns RandomPlayer.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "random"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]


def create_player(player_key: Optional[str] = None, rng=None) -> Player:
    """Instantiate a player by key, passing rng to players that use randomness."""
    player_class = get_player_class(player_key)
    if player_class is RandomPlayer:
        return player_class(rng=rng)
    return player_class()
