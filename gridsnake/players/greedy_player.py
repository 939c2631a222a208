"""
Greedy player implementation - heads for the food along safe moves.
"""

from gridsnake.domain.constants import WRAP
from gridsnake.domain.game_state import GameSnapshot
from gridsnake.domain.grid import Cell, normalize, step
from .base import Player
from .random_player import safe_moves


def distance(a: Cell, b: Cell, grid_size: int, wall_policy: str) -> int:
    """Manhattan distance, measured around the torus when walls wrap."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if wall_policy == WRAP:
        dx = min(dx, grid_size - dx)
        dy = min(dy, grid_size - dy)
    return dx + dy


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food.

    Ties keep the current direction when possible. Without food on the board
    the first safe move is taken.
    """

    name = "greedy"

    def get_move(self, snapshot: GameSnapshot) -> str:
        valid_moves = safe_moves(snapshot)
        if not valid_moves:
            return snapshot.direction
        if snapshot.food is None:
            return valid_moves[0]

        def score(move: str):
            cell, _ = normalize(
                step(snapshot.head, move), snapshot.grid_size, snapshot.wall_policy
            )
            dist = distance(cell, snapshot.food, snapshot.grid_size, snapshot.wall_policy)
            return (dist, move != snapshot.direction)

        return min(valid_moves, key=score)
