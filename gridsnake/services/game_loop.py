"""
Tick driver for a GameSession.

Plays the role of the browser timer: waits for the current tick interval,
lets an optional player choose a direction, then ticks the session. The
interval is re-armed from the session's tick_interval_changed notifications.
"""

import logging
import time
from typing import Callable, Optional

from gridsnake.domain.constants import GAME_OVER, IDLE, PAUSED, RUNNING
from gridsnake.domain.engine import TickResult
from gridsnake.domain.game_state import GameSnapshot
from gridsnake.domain.session import TICK_INTERVAL_CHANGED, GameSession
from gridsnake.players.base import Player

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives one session until game over, a step limit or stop().

    Args:
        session: the session to drive
        player: optional automatic player asked for a move before each tick
        sleep: called with the wait in seconds (time.sleep by default;
               pass a no-op for headless runs)
        on_tick: called with (result, snapshot) after every step
    """

    def __init__(
        self,
        session: GameSession,
        player: Optional[Player] = None,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[Callable[[Optional[TickResult], GameSnapshot], None]] = None
    ):
        self.session = session
        self.player = player
        self.sleep = sleep
        self.on_tick = on_tick
        self.interval_ms = session.tick_interval_ms
        self._stopped = False
        session.subscribe(TICK_INTERVAL_CHANGED, self._rearm)

    def _rearm(self, interval_ms: int) -> None:
        if interval_ms != self.interval_ms:
            logger.debug("Re-arming timer: %dms -> %dms", self.interval_ms, interval_ms)
        self.interval_ms = interval_ms

    def stop(self) -> None:
        self._stopped = True

    def step(self) -> Optional[TickResult]:
        """Wait one interval, ask the player for a move and tick once."""
        self.sleep(self.interval_ms / 1000.0)

        if self.player is not None and self.session.state == RUNNING:
            move = self.player.get_move(self.session.snapshot())
            self.session.set_direction(move)

        result = self.session.tick()
        if self.on_tick is not None:
            self.on_tick(result, self.session.snapshot())
        return result

    def run(self, max_steps: Optional[int] = None) -> int:
        """
        Run until the game ends.

        Starts the session if it is still idle. Steps taken while paused count
        towards max_steps but do not advance the game. Without max_steps the
        loop returns as soon as the session is paused.

        Returns:
            Number of steps taken
        """
        self._stopped = False
        if self.session.state == IDLE:
            self.session.start()

        steps = 0
        while not self._stopped and self.session.state != GAME_OVER:
            if max_steps is not None and steps >= max_steps:
                logger.info("Stopping after %d steps", steps)
                break
            if max_steps is None and self.session.state == PAUSED:
                logger.info("Session is paused, stopping after %d steps", steps)
                break
            self.step()
            steps += 1

        return steps
