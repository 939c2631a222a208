#!/usr/bin/env python3
"""Run headless snake games with an automatic player.

Each game is driven by GameLoop without real sleeping (unless --realtime is
given) and summarised as JSON on stdout. Optionally prints the board after
every tick, writes replays and keeps a best-score file up to date.

Usage examples:

    gridsnake-simulate --games 5 --player greedy --seed 42
    gridsnake-simulate --walls solid --render --realtime
    gridsnake-simulate --games 20 --replay-dir completed_games --best-score-file best.json
"""

import argparse
import json
import logging
import random
import time
from typing import Any, Dict, List, Optional

from gridsnake.domain.config import ConfigError, GameConfig
from gridsnake.domain.constants import SOLID, WRAP
from gridsnake.domain.session import GameSession
from gridsnake.players.base import Player
from gridsnake.players.registry import AVAILABLE_PLAYERS, create_player
from gridsnake.services.best_score_store import BestScoreStore
from gridsnake.services.game_loop import GameLoop
from gridsnake.services.replay import ReplayRecorder


logger = logging.getLogger(__name__)


def _no_sleep(_seconds: float) -> None:
    return None


def run_simulation(
    config: GameConfig,
    player: Player,
    rng: random.Random,
    max_steps: Optional[int] = None,
    render: bool = False,
    realtime: bool = False,
    replay_dir: Optional[str] = None,
    best_store: Optional[BestScoreStore] = None
) -> Dict[str, Any]:
    """
    Play a single game to the end (or max_steps) and summarise it.

    Returns:
        A dictionary with score, ticks, death_reason, final tick interval,
        best score and replay path.
    """
    session = GameSession(config=config, rng=rng)
    if best_store is not None:
        best_store.attach(session)

    recorder = ReplayRecorder(session) if replay_dir else None

    def on_tick(result, snapshot):
        if recorder is not None:
            recorder.record()
        if render:
            print("\n" + snapshot.print_board() + "\n")

    loop = GameLoop(
        session,
        player=player,
        sleep=time.sleep if realtime else _no_sleep,
        on_tick=on_tick,
    )
    loop.run(max_steps=max_steps)

    snapshot = session.snapshot()
    replay_path = None
    if recorder is not None:
        saved = recorder.save(replay_dir)
        replay_path = str(saved) if saved is not None else None

    return {
        "score": snapshot.score,
        "ticks": snapshot.tick_count,
        "length": len(snapshot.body),
        "state": snapshot.state,
        "death_reason": snapshot.death_reason,
        "tick_interval_ms": snapshot.tick_interval_ms,
        "best_score": snapshot.best_score,
        "replay_path": replay_path,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run headless snake games with an automatic player.",
    )
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (default: 1)")
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Automatic player to use (default: greedy)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the player")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Board side length (default: SNAKE_GRID_SIZE or 20)")
    parser.add_argument("--walls", type=str, default=None, choices=[WRAP, SOLID],
                        help="Wall policy (default: SNAKE_WALL_POLICY or wrap)")
    parser.add_argument("--max-steps", type=int, default=5000,
                        help="Stop a game after this many steps (default: 5000)")
    parser.add_argument("--render", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep for the real tick interval between ticks")
    parser.add_argument("--replay-dir", type=str, default=None,
                        help="Directory to write snake_game_<id>.json replays to")
    parser.add_argument("--best-score-file", type=str, default=None,
                        help="JSON file holding the best score across runs")
    parser.add_argument("--log-level", type=str, default="INFO",
                        help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.games < 1:
        parser.error("--games must be at least 1")

    try:
        config = GameConfig.from_env(grid_size=args.grid_size, wall_policy=args.walls)
    except ConfigError as e:
        parser.error(str(e))

    rng = random.Random(args.seed)
    player = create_player(args.player, rng=random.Random(rng.random()))
    best_store = BestScoreStore(args.best_score_file) if args.best_score_file else None

    results = []
    for game_number in range(1, args.games + 1):
        logger.info("Starting game %d/%d with the %s player", game_number, args.games, player.name)
        result = run_simulation(
            config,
            player,
            rng,
            max_steps=args.max_steps,
            render=args.render,
            realtime=args.realtime,
            replay_dir=args.replay_dir,
            best_store=best_store,
        )
        logger.info(
            "Game %d finished: score=%d ticks=%d reason=%s",
            game_number, result["score"], result["ticks"], result["death_reason"]
        )
        results.append(result)

    scores = [r["score"] for r in results]
    summary = {
        "player": player.name,
        "wall_policy": config.wall_policy,
        "grid_size": config.grid_size,
        "games": results,
        "best_score": max(scores),
        "average_score": sum(scores) / len(scores),
    }

    print("\nSimulation Result Summary:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
