"""
Collaborators that sit around a GameSession: timer driver, best-score
storage and replay recording.
"""

from .best_score_store import BestScoreStore
from .game_loop import GameLoop
from .replay import ReplayRecorder

__all__ = [
    'BestScoreStore',
    'GameLoop',
    'ReplayRecorder',
]
