"""
Spawn director: how many hazards appear at a spawn tick, and which kinds
"""

from __future__ import annotations
import math
from typing import List, Tuple

from loguru import logger

from .config import DifficultyMode
from .entities import Hazard
from .hazards import HazardFactory


# Upper bounds of the cumulative archetype weights
ARCHETYPE_WEIGHTS = (
    (0.3, "slash"),
    (0.5, "big_projectile"),
    (0.7, "homing"),
    (1.0, "trap"),
)


def attack_count(level: int, mode: DifficultyMode) -> int:
    """Number of hazards spawned per tick"""
    base = 1 + level // 3
    return max(1, math.floor(base * mode.attack_count_multiplier))


def choose_archetype(roll: float) -> str:
    """Map a uniform draw in [0, 1) to an archetype name"""
    for upper, kind in ARCHETYPE_WEIGHTS:
        if roll < upper:
            return kind
    return ARCHETYPE_WEIGHTS[-1][1]


def spawn_batch(
    factory: HazardFactory,
    level: int,
    player_pos: Tuple[float, float],
    mode: DifficultyMode,
    now: float,
) -> List[Hazard]:
    """Create one batch of hazards for the current spawn tick"""
    batch: List[Hazard] = []
    for _ in range(attack_count(level, mode)):
        kind = choose_archetype(factory.rng.random())
        if kind == "slash":
            batch.append(factory.create_slash(level, mode, now))
        elif kind == "big_projectile":
            batch.append(factory.create_big_projectile(level, mode, now))
        elif kind == "homing":
            batch.append(factory.create_homing_projectile(level, mode, player_pos, now))
        else:
            batch.append(factory.create_area_trap(level, now))

    logger.debug("Spawned {} at level {}", [h.kind for h in batch], level)
    return batch
