"""
Replay recording for finished games.

Collects one snapshot per tick and writes them with some metadata to a JSON
file, in the same spirit as a game history export.
"""

import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from gridsnake.domain.session import GameSession

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """
    Records snapshots of a session.

    Call record() after every tick (GameLoop's on_tick fits), then save().
    """

    def __init__(self, session: GameSession, game_id: Optional[str] = None):
        self.session = session
        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = time.time()
        self.frames: List[Dict[str, Any]] = []

    def record(self, *_args) -> None:
        self.frames.append(self.session.snapshot().to_dict())

    def to_dict(self) -> Dict[str, Any]:
        snapshot = self.session.snapshot()
        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "grid_size": snapshot.grid_size,
            "wall_policy": snapshot.wall_policy,
            "final_score": snapshot.score,
            "death_reason": snapshot.death_reason,
            "ticks": snapshot.tick_count,
        }
        return {
            "metadata": metadata,
            "frames": self.frames,
        }

    def save(self, directory: str, filename: Optional[str] = None) -> Optional[Path]:
        """
        Write the replay to directory/filename.

        Returns:
            The written path, or None if writing failed
        """
        if filename is None:
            filename = f"snake_game_{self.game_id}.json"

        path = Path(directory) / filename
        try:
            os.makedirs(directory, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            # Don't raise - a lost replay must not fail the run
            logger.warning("Failed to save replay %s to %s: %s", self.game_id, path, e)
            return None

        logger.info("Saved replay to %s", path)
        return path
