"""
JSON-file storage for the best score.

The session only reports scores upward; this collaborator compares them with
the stored best and writes the file. Storage problems are logged and never
interrupt a game.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from gridsnake.domain.session import SCORE_CHANGED, GameSession

logger = logging.getLogger(__name__)

DEFAULT_BEST_SCORE_FILE = "snake_best.json"


def _get_best_score_path() -> str:
    path = os.getenv("SNAKE_BEST_SCORE_FILE", DEFAULT_BEST_SCORE_FILE).strip()
    return path or DEFAULT_BEST_SCORE_FILE


class BestScoreStore:
    """
    Persists the best score as {"best": <int>} in a JSON file.

    Uses environment variables:
    - SNAKE_BEST_SCORE_FILE: file path (default: snake_best.json)
    """

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or _get_best_score_path())
        self._best: Optional[int] = None

    @property
    def best(self) -> int:
        if self._best is None:
            self._best = self.load()
        return self._best

    def load(self) -> int:
        """
        Read the stored best score.

        Returns:
            The stored score, or 0 if the file is missing or unreadable
        """
        if not self.path.exists():
            return 0
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get("best", 0)))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> bool:
        """
        Store score if it beats the current best.

        Returns:
            True if the file was written
        """
        if score <= self.best:
            return False
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump({"best": score}, f)
        except OSError as e:
            logger.warning("Could not write best score to %s: %s", self.path, e)
            return False
        self._best = score
        logger.info("New best score %d saved to %s", score, self.path)
        return True

    def attach(self, session: GameSession) -> None:
        """Seed the session with the stored best and save every improvement."""
        session.best_score = max(session.best_score, self.best)
        session.subscribe(SCORE_CHANGED, self.save)
