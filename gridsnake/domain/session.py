"""
GameSession - lifecycle state machine around a GameEngine.

The session accepts intents from input collaborators, drives the engine when
ticked by the host timer and notifies subscribers (renderer, audio, best-score
store) about what changed. It never draws, plays sounds or writes to storage.
"""

import logging
import random
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import GameConfig
from .constants import GAME_OVER, IDLE, PAUSED, RUNNING, SOLID, WRAP
from .engine import GREW, GameEngine, TickResult
from .game_state import GameSnapshot

logger = logging.getLogger(__name__)

# Event names
SCORE_CHANGED = "score_changed"
FOOD_PLACED = "food_placed"
GAME_OVER_EVENT = "game_over"
TICK_INTERVAL_CHANGED = "tick_interval_changed"
STATE_CHANGED = "state_changed"
EVENTS = (SCORE_CHANGED, FOOD_PLACED, GAME_OVER_EVENT, TICK_INTERVAL_CHANGED, STATE_CHANGED)


class GameSession:
    """
    Holds the engine of the current game plus the lifecycle state.

    States:
        idle -> running            start()
        running <-> paused         toggle_pause()
        running -> game_over       a fatal tick
        any -> running             restart()

    Intents that make no sense in the current state are ignored. All public
    methods hold a reentrant lock, so a timer thread and an input thread can
    share one session.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None, best_score: int = 0):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()
        self.best_score = max(0, best_score)
        self.state = IDLE
        self.engine: Optional[GameEngine] = None
        self._listeners: Dict[str, List[Callable]] = {event: [] for event in EVENTS}
        self._lock = threading.RLock()

    @property
    def wall_policy(self) -> str:
        return self.config.wall_policy

    @property
    def tick_interval_ms(self) -> int:
        if self.engine is None:
            return self.config.start_tick_ms
        return self.engine.tick_interval_ms

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, event: str, callback: Callable) -> Callable:
        """
        Register callback for event. Returns the callback so it can be used
        as a decorator.

        Raises:
            ValueError: if event is not one of EVENTS
        """
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}'. Available events: {', '.join(EVENTS)}")
        self._listeners[event].append(callback)
        return callback

    def unsubscribe(self, event: str, callback: Callable) -> None:
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _emit(self, event: str, *args) -> None:
        for callback in list(self._listeners[event]):
            try:
                callback(*args)
            except Exception:
                # Don't raise - a broken subscriber must not stop the game
                logger.exception("Listener %r for '%s' failed", callback, event)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Start the first game. Only valid while idle."""
        with self._lock:
            if self.state != IDLE:
                logger.debug("Ignoring start while %s", self.state)
                return False
            self._new_game()
            return True

    def restart(self, wall_policy: Optional[str] = None) -> None:
        """
        Throw away the current game and start a fresh one, from any state.

        The wall policy can only change here, since a running game keeps the
        policy it started with.
        """
        with self._lock:
            if wall_policy is not None and wall_policy != self.config.wall_policy:
                self.config = replace(self.config, wall_policy=wall_policy)
                logger.info("Wall policy switched to %s", wall_policy)
            self._new_game()

    def toggle_wall_policy(self) -> None:
        with self._lock:
            self.restart(SOLID if self.config.wall_policy == WRAP else WRAP)

    def toggle_pause(self) -> bool:
        """
        Switch between running and paused.

        Returns:
            True if the state changed
        """
        with self._lock:
            if self.state == RUNNING:
                self._set_state(PAUSED)
            elif self.state == PAUSED:
                self._set_state(RUNNING)
            else:
                logger.debug("Ignoring pause toggle while %s", self.state)
                return False
            return True

    def set_direction(self, direction: str) -> bool:
        """
        Queue a direction change for the next tick.

        Accepted while running or paused; ignored otherwise and when the
        direction reverses the one currently committed.
        """
        with self._lock:
            if self.state not in (RUNNING, PAUSED):
                logger.debug("Ignoring direction %s while %s", direction, self.state)
                return False
            return self.engine.set_direction(direction)

    def tick(self) -> Optional[TickResult]:
        """
        Advance the game by one step if it is running.

        The session is fully updated before any listener runs. A listener
        may restart the game; the events still pending for the old game are
        then dropped.

        Returns:
            The TickResult, or None when the session is not running
        """
        with self._lock:
            if self.state != RUNNING:
                return None

            engine = self.engine
            previous_score = engine.score
            result = engine.tick()

            events = []
            if result.score != previous_score:
                self.best_score = max(self.best_score, result.score)
                events.append((SCORE_CHANGED, result.score))
            if result.interval_changed:
                events.append((TICK_INTERVAL_CHANGED, result.tick_interval_ms))
            if result.kind == GREW:
                events.append((FOOD_PLACED, result.food))
            if result.is_game_over:
                self.state = GAME_OVER
                events.append((STATE_CHANGED, GAME_OVER))
                events.append((GAME_OVER_EVENT, result.reason))

            self._emit_for(engine, events)
            return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            engine = self.engine
            if engine is None:
                return GameSnapshot(
                    body=list(self.config.start_body),
                    food=None,
                    score=0,
                    best_score=self.best_score,
                    state=self.state,
                    wall_policy=self.wall_policy,
                    tick_interval_ms=self.config.start_tick_ms,
                    grid_size=self.config.grid_size,
                    direction=self.config.start_direction,
                )
            return GameSnapshot(
                body=engine.snake.cells(),
                food=engine.food,
                score=engine.score,
                best_score=self.best_score,
                state=self.state,
                wall_policy=self.wall_policy,
                tick_interval_ms=engine.tick_interval_ms,
                grid_size=engine.grid_size,
                direction=engine.direction,
                tick_count=engine.tick_count,
                death_reason=engine.death_reason,
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_game(self) -> None:
        engine = GameEngine(self.config, self.rng)
        self.engine = engine
        logger.info(
            "New game on a %dx%d board (%s walls)",
            self.config.grid_size, self.config.grid_size, self.config.wall_policy
        )
        events = []
        if self.state != RUNNING:
            self.state = RUNNING
            events.append((STATE_CHANGED, RUNNING))
        events.append((SCORE_CHANGED, engine.score))
        events.append((TICK_INTERVAL_CHANGED, engine.tick_interval_ms))
        events.append((FOOD_PLACED, engine.food))
        self._emit_for(engine, events)

    def _emit_for(self, engine: GameEngine, events: List[Tuple[str, Any]]) -> None:
        """Emit events in order, stopping once a listener replaced the game."""
        for event, value in events:
            if self.engine is not engine:
                logger.debug("Game restarted by a listener, dropping '%s'", event)
                return
            self._emit(event, value)

    def _set_state(self, state: str) -> None:
        if state == self.state:
            return
        self.state = state
        self._emit(STATE_CHANGED, state)
