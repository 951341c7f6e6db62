"""
Hazard construction for each archetype
"""

from __future__ import annotations
import itertools
import random
from collections import deque
from typing import Deque, Optional, Tuple

from loguru import logger

from .config import (
    ARENA_SIZE, SLASH_THICKNESS, SLASH_HISTORY_SIZE, SLASH_MIN_SEPARATION,
    SLASH_MAX_ATTEMPTS, TRAP_SIZE, HOMING_SIZE, HOMING_COLOR, TRAP_COLOR,
    DifficultyMode,
)
from .entities import (
    SlashHazard, BigProjectile, HomingProjectile, AreaTrap, SlashRecord,
)
from .utils import hsl_color, normalize


SLASH_ORIENTATIONS = ("horizontal", "vertical", "diagonal-right", "diagonal-left")
EDGES = ("top", "right", "bottom", "left")


class SlashHistory:
    """Rolling record of the most recent slash placements (oldest evicted first)"""

    def __init__(self, maxlen: int = SLASH_HISTORY_SIZE, separation: float = SLASH_MIN_SEPARATION):
        self.separation = separation
        self._records: Deque[SlashRecord] = deque(maxlen=maxlen)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def is_clear(self, orientation: str, position: float) -> bool:
        """True if no remembered slash of the same orientation is too close"""
        return not any(
            r.orientation == orientation and abs(r.position - position) < self.separation
            for r in self._records
        )

    def remember(self, orientation: str, position: float, time: float):
        self._records.append(SlashRecord(orientation, position, time))

    def clear(self):
        self._records.clear()


def edge_spawn_point(rng, side: int, offset: float) -> Tuple[float, float]:
    """Random point `offset` units outside the given arena edge (0 top, 1 right, 2 bottom, 3 left)"""
    along = rng.random() * ARENA_SIZE
    if side == 0:
        return along, -offset
    if side == 1:
        return ARENA_SIZE + offset, along
    if side == 2:
        return along, ARENA_SIZE + offset
    return -offset, along


def aim(x: float, y: float, target: Tuple[float, float], speed: float) -> Tuple[float, float]:
    """Velocity of the given speed pointing from (x, y) at target"""
    nx, ny = normalize(target[0] - x, target[1] - y)
    return nx * speed, ny * speed


class HazardFactory:
    """Builds fully initialized hazards.

    Construction is pure apart from the random draws and the slash history;
    audio cues for spawns are emitted by the caller, not here.

    Args:
        rng: Source of randomness (anything with ``random()`` and ``randrange()``)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.slash_history = SlashHistory()
        self.last_slash_attempts = 0
        self._ids = itertools.count(1)

    def reset(self):
        self.slash_history.clear()
        self.last_slash_attempts = 0
        self._ids = itertools.count(1)

    def _next_id(self) -> int:
        return next(self._ids)

    # ----------------------------
    # Slash
    # ----------------------------

    def _place_slash(self, now: float) -> Tuple[str, float]:
        attempts = 0
        while True:
            orientation = SLASH_ORIENTATIONS[self.rng.randrange(len(SLASH_ORIENTATIONS))]
            position = self.rng.random() * ARENA_SIZE
            attempts += 1
            if self.slash_history.is_clear(orientation, position):
                break
            if attempts >= SLASH_MAX_ATTEMPTS:
                logger.debug("Slash placement gave up after {} attempts", attempts)
                break

        self.last_slash_attempts = attempts
        self.slash_history.remember(orientation, position, now)
        return orientation, position

    def create_slash(self, level: int, mode: DifficultyMode, now: float) -> SlashHazard:
        orientation, position = self._place_slash(now)
        speed = (3 + level * 0.5) * mode.speed_multiplier
        thickness = SLASH_THICKNESS
        color = hsl_color(180 + self.rng.random() * 60)

        if orientation == "horizontal":
            geometry = dict(x=0.0, y=position, width=ARENA_SIZE, height=thickness,
                            active_vx=speed, active_vy=0.0)
        elif orientation == "vertical":
            geometry = dict(x=position, y=0.0, width=thickness, height=ARENA_SIZE,
                            active_vx=0.0, active_vy=speed)
        elif orientation == "diagonal-right":
            geometry = dict(x=-100.0, y=-100.0, width=ARENA_SIZE * 1.5, height=thickness,
                            rotation=45.0, active_vx=speed * 0.7, active_vy=speed * 0.7)
        else:
            geometry = dict(x=ARENA_SIZE + 100.0, y=-100.0, width=ARENA_SIZE * 1.5, height=thickness,
                            rotation=-45.0, active_vx=-speed * 0.7, active_vy=speed * 0.7)

        return SlashHazard(
            id=self._next_id(),
            color=color,
            created_at=now,
            orientation=orientation,
            thickness=thickness,
            speed=speed,
            warning_time=mode.slash_warning_time,
            **geometry,
        )

    # ----------------------------
    # Projectiles
    # ----------------------------

    def create_big_projectile(self, level: int, mode: DifficultyMode, now: float) -> BigProjectile:
        side = self.rng.randrange(len(EDGES))
        size = 40 + level * 5
        speed = (2 + level * 0.3) * mode.speed_multiplier
        x, y = edge_spawn_point(self.rng, side, size)

        # Inward along the normal, small drift along the edge
        drift = (self.rng.random() - 0.5) * 2
        if side == 0:
            vx, vy = drift, speed
        elif side == 1:
            vx, vy = -speed, drift
        elif side == 2:
            vx, vy = drift, -speed
        else:
            vx, vy = speed, drift

        return BigProjectile(
            id=self._next_id(),
            color=hsl_color(300 + self.rng.random() * 60),
            created_at=now,
            x=x, y=y, vx=vx, vy=vy,
            radius=size / 2,
        )

    def create_homing_projectile(
        self,
        level: int,
        mode: DifficultyMode,
        player_pos: Tuple[float, float],
        now: float,
    ) -> HomingProjectile:
        side = self.rng.randrange(len(EDGES))
        x, y = edge_spawn_point(self.rng, side, HOMING_SIZE)
        speed = (3 + level * 0.4) * mode.speed_multiplier
        vx, vy = aim(x, y, player_pos, speed)

        return HomingProjectile(
            id=self._next_id(),
            color=HOMING_COLOR,
            created_at=now,
            x=x, y=y, vx=vx, vy=vy,
            radius=HOMING_SIZE / 2,
        )

    # ----------------------------
    # Trap
    # ----------------------------

    def create_area_trap(self, level: int, now: float) -> AreaTrap:
        x = self.rng.random() * (ARENA_SIZE - TRAP_SIZE)
        y = self.rng.random() * (ARENA_SIZE - TRAP_SIZE)

        return AreaTrap(
            id=self._next_id(),
            color=TRAP_COLOR,
            created_at=now,
            x=x, y=y,
            size=TRAP_SIZE,
            warning_time=1500 - level * 50,
        )
