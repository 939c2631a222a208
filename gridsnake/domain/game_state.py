"""
GameSnapshot - a read-only view of a session at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple


class GameSnapshot:
    """
    A snapshot of the game for presentation layers.

    Attributes:
        body: list of (x, y) from tail to head
        food: (x, y) of the food, or None when no game is running or the board is full
        score: food eaten in the current game
        best_score: best score known to the session
        state: session state (idle, running, paused, game_over)
        wall_policy: "wrap" or "solid"
        tick_interval_ms: current delay between ticks
        grid_size: board side length
        direction: direction committed on the last tick
        tick_count: ticks played in the current game
        death_reason: e.g. 'wall', 'self', 'board_full'
    """

    def __init__(
        self,
        body: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        best_score: int,
        state: str,
        wall_policy: str,
        tick_interval_ms: int,
        grid_size: int,
        direction: str,
        tick_count: int = 0,
        death_reason: Optional[str] = None
    ):
        self.body = body
        self.food = food
        self.score = score
        self.best_score = best_score
        self.state = state
        self.wall_policy = wall_policy
        self.tick_interval_ms = tick_interval_ms
        self.grid_size = grid_size
        self.direction = direction
        self.tick_count = tick_count
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        o = snake body
        H = snake head
        Row 0 is printed first (top of the screen), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = '*'

        for x, y in self.body[:-1]:
            board[y][x] = 'o'
        hx, hy = self.head
        board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists when dumped)."""
        return {
            "body": [list(c) for c in self.body],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "best_score": self.best_score,
            "state": self.state,
            "wall_policy": self.wall_policy,
            "tick_interval_ms": self.tick_interval_ms,
            "grid_size": self.grid_size,
            "direction": self.direction,
            "tick_count": self.tick_count,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot state={self.state}, score={self.score}, "
            f"length={len(self.body)}, food={self.food}>"
        )
