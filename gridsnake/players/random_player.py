"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List

from gridsnake.domain.constants import DOWN, LEFT, RIGHT, UP
from gridsnake.domain.game_state import GameSnapshot
from gridsnake.domain.grid import is_opposite, normalize, step
from .base import Player

# Fixed order keeps seeded runs reproducible
MOVE_ORDER = (UP, DOWN, LEFT, RIGHT)


def safe_moves(snapshot: GameSnapshot) -> List[str]:
    """
    Return the moves that do not end the game on the next tick.

    Filters out moves that:
    1. Reverse the current direction (the engine would drop them)
    2. Hit a solid wall
    3. Hit the body (the tail is free unless the move eats the food)
    """
    body = snapshot.body
    valid_moves: List[str] = []
    for move in MOVE_ORDER:
        if is_opposite(snapshot.direction, move):
            continue

        cell, out_of_bounds = normalize(
            step(snapshot.head, move), snapshot.grid_size, snapshot.wall_policy
        )
        if out_of_bounds:
            continue

        blocking = body if cell == snapshot.food else body[1:]
        if cell in blocking:
            continue

        valid_moves.append(move)
    return valid_moves


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, snapshot: GameSnapshot) -> str:
        valid_moves = safe_moves(snapshot)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return snapshot.direction

        return self.rng.choice(valid_moves)
