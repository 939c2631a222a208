"""
Base player interface for automatic players.

A player looks at a snapshot and answers with a direction intent; it never
touches the session directly.
"""

from gridsnake.domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a direction given the current
    snapshot of the game.
    """

    name = "player"

    def get_move(self, snapshot: GameSnapshot) -> str:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
