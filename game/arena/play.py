"""
Play the dodge arena with the keyboard

Usage:
    python -m game.arena.play --mode hard
"""

import argparse
import random
import sys

import arcade
from loguru import logger

from .config import DIFFICULTY_MODES
from .highscores import DEFAULT_PATH, HighScoreStore
from .session import GameSession
from .window import ArenaWindow


def main(argv=None):
    parser = argparse.ArgumentParser(description="Dodge procedurally spawned hazards for as long as you can")
    parser.add_argument(
        "--mode",
        type=str,
        default="normal",
        choices=list(DIFFICULTY_MODES),
        help="Difficulty mode preselected in the menu (default: normal)",
    )
    parser.add_argument(
        "--scores",
        type=str,
        default=DEFAULT_PATH,
        help=f"High score file (default: {DEFAULT_PATH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for hazard generation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log spawns and audio cues",
    )

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    store = HighScoreStore(args.scores)
    session = GameSession(rng=random.Random(args.seed), high_scores=store, mode=args.mode)

    print("High scores: " + ", ".join(f"{k} {v}s" for k, v in store.scores.items()))
    ArenaWindow(session)
    arcade.run()


if __name__ == "__main__":
    main()
