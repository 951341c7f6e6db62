"""
Per-frame update step of the arena simulation.

Each function takes the previous frame's state and returns the next one;
nothing here reads values written earlier in the same frame. ``GameSession``
calls them in order: score/level, movement, spawning, hazards, particles,
collision.
"""

from __future__ import annotations
import dataclasses
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .config import (
    ARENA_SIZE, PLAYER_SPEED, DIFFICULTY_INTERVAL, MIN_SPAWN_INTERVAL,
    SPAWN_INTERVAL_STEP, OFFSCREEN_MARGIN, TRAP_ACTIVE_TIME, HOMING_TRAIL_LENGTH,
    DEATH_PARTICLES, DEATH_COLOR, PARTICLE_GRAVITY, PARTICLE_DECAY,
    Color, DifficultyMode,
)
from .entities import (
    Player, Hazard, SlashHazard, BigProjectile, HomingProjectile, AreaTrap,
    Particle, AudioCue,
    SLASH_SPAWN_CUE, SLASH_ACTIVE_CUE, TRAP_ACTIVE_CUE, BIG_PROJECTILE_CUE, HOMING_CUE,
)
from .hazards import HazardFactory, SlashHistory
from .utils import clamp


@dataclass(frozen=True)
class InputSnapshot:
    """Movement keys held during a frame"""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def direction(self) -> Tuple[int, int]:
        """Per-axis direction in {-1, 0, 1}; opposite keys cancel out"""
        return int(self.right) - int(self.left), int(self.down) - int(self.up)


@dataclass
class SimulationContext:
    """Run-scoped mutable state the update step needs besides the entities"""
    factory: HazardFactory = field(default_factory=HazardFactory)
    input: InputSnapshot = field(default_factory=InputSnapshot)
    last_spawn_time: float = 0.0

    @property
    def rng(self) -> random.Random:
        return self.factory.rng

    @property
    def slash_history(self) -> SlashHistory:
        return self.factory.slash_history


# ----------------------------
# Time-derived quantities
# ----------------------------

def difficulty_level(elapsed_ms: float) -> int:
    return int(max(0.0, elapsed_ms) // DIFFICULTY_INTERVAL) + 1


def score_for(elapsed_ms: float) -> int:
    return int(max(0.0, elapsed_ms) // 1000)


def effective_spawn_interval(mode: DifficultyMode, level: int) -> float:
    return max(mode.spawn_interval - level * SPAWN_INTERVAL_STEP, MIN_SPAWN_INTERVAL)


# ----------------------------
# Player
# ----------------------------

def move_player(player: Player, keys: InputSnapshot, speed: float = PLAYER_SPEED) -> Player:
    dx, dy = keys.direction()
    h = player.half
    return dataclasses.replace(
        player,
        x=clamp(player.x + dx * speed, h, ARENA_SIZE - h),
        y=clamp(player.y + dy * speed, h, ARENA_SIZE - h),
    )


# ----------------------------
# Hazards
# ----------------------------

def spawn_cue(hazard: Hazard) -> Optional[AudioCue]:
    """Sound that accompanies a freshly spawned hazard (traps are silent)"""
    if isinstance(hazard, SlashHazard):
        return SLASH_SPAWN_CUE
    if isinstance(hazard, BigProjectile):
        return BIG_PROJECTILE_CUE
    if isinstance(hazard, HomingProjectile):
        return HOMING_CUE
    return None


def _step_hazard(hazard: Hazard, now: float, cues: List[AudioCue]) -> Optional[Hazard]:
    if isinstance(hazard, AreaTrap):
        if not hazard.active:
            if now - hazard.created_at >= hazard.warning_time:
                cues.append(TRAP_ACTIVE_CUE)
                return dataclasses.replace(hazard, active=True, activated_at=now)
            return hazard
        if now - hazard.activated_at >= TRAP_ACTIVE_TIME:
            return None
        return hazard

    if isinstance(hazard, SlashHazard):
        warning, vx, vy = hazard.warning, hazard.vx, hazard.vy
        if warning and now - hazard.created_at >= hazard.warning_time:
            warning, vx, vy = False, hazard.active_vx, hazard.active_vy
            cues.append(SLASH_ACTIVE_CUE)
        return dataclasses.replace(
            hazard, warning=warning, vx=vx, vy=vy,
            x=hazard.x + vx, y=hazard.y + vy,
        )

    if isinstance(hazard, HomingProjectile):
        trail = (hazard.trail + [(hazard.x, hazard.y)])[-HOMING_TRAIL_LENGTH:]
        return dataclasses.replace(
            hazard, x=hazard.x + hazard.vx, y=hazard.y + hazard.vy, trail=trail,
        )

    if isinstance(hazard, BigProjectile):
        return dataclasses.replace(hazard, x=hazard.x + hazard.vx, y=hazard.y + hazard.vy)

    raise TypeError(f"Unknown hazard type: {type(hazard).__name__}")


def in_play(hazard: Hazard) -> bool:
    """Mobile hazards leave play once past the margin; traps never do"""
    if isinstance(hazard, AreaTrap):
        return True
    m = OFFSCREEN_MARGIN
    return -m < hazard.x < ARENA_SIZE + m and -m < hazard.y < ARENA_SIZE + m


def step_hazards(hazards: Iterable[Hazard], now: float) -> Tuple[List[Hazard], List[AudioCue]]:
    """Advance motion and lifecycle of every hazard, dropping finished ones"""
    cues: List[AudioCue] = []
    updated = []
    for hazard in hazards:
        nxt = _step_hazard(hazard, now, cues)
        if nxt is not None and in_play(nxt):
            updated.append(nxt)
    return updated, cues


# ----------------------------
# Particles
# ----------------------------

def step_particles(particles: Iterable[Particle]) -> List[Particle]:
    updated = []
    for p in particles:
        life = p.life - PARTICLE_DECAY
        if life <= 0:
            continue
        updated.append(dataclasses.replace(
            p, x=p.x + p.vx, y=p.y + p.vy, vy=p.vy + PARTICLE_GRAVITY, life=life,
        ))
    return updated


def burst(
    x: float,
    y: float,
    rng: random.Random,
    count: int = DEATH_PARTICLES,
    color: Color = DEATH_COLOR,
) -> List[Particle]:
    """Explosion of particles centred on (x, y)"""
    return [
        Particle(
            x=x, y=y,
            vx=(rng.random() - 0.5) * 6,
            vy=(rng.random() - 0.5) * 6,
            color=color,
            size=rng.random() * 4 + 2,
        )
        for _ in range(count)
    ]
