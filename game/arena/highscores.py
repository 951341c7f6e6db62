"""
Best survival time per difficulty mode, persisted as one JSON record
"""

from __future__ import annotations
import json
import math
import os
from typing import Dict, Optional

from loguru import logger

from .config import DIFFICULTY_MODES
from .entities import RunResult


DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".dodge_arena", "high_scores.json")


def default_scores() -> Dict[str, int]:
    return {key: 0 for key in DIFFICULTY_MODES}


class HighScoreStore:
    """JSON-backed mapping of mode name -> best score in seconds.

    A missing or corrupt file never raises on load: affected modes read as 0.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_PATH
        self.scores = self.load()

    def load(self) -> Dict[str, int]:
        scores = default_scores()
        if not os.path.exists(self.path):
            return scores

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read high scores from {}: {}", self.path, e)
            return scores

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed high score record in {}", self.path)
            return scores

        for key in scores:
            value = data.get(key, 0)
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not math.isfinite(value) or value < 0):
                logger.warning("Ignoring bad high score for {}: {!r}", key, value)
                continue
            scores[key] = int(value)
        return scores

    def save(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.scores, f)

    def best(self, mode: str) -> int:
        return self.scores.get(mode, 0)

    def submit(self, result: RunResult) -> bool:
        """Record a finished run; returns True if it set a new best"""
        if result.final_score <= self.best(result.mode):
            return False
        self.scores[result.mode] = int(result.final_score)
        self.save()
        logger.info("New {} high score: {}s", result.mode, result.final_score)
        return True
