"""
Arena constants and difficulty presets
"""

from dataclasses import dataclass
from typing import Dict, Tuple


# Arena
ARENA_SIZE = 800
PLAYER_SIZE = 30
PLAYER_SPEED = 5  # units per frame
DIFFICULTY_INTERVAL = 15000  # ms per difficulty level

# Spawn cadence
MIN_SPAWN_INTERVAL = 800  # ms
SPAWN_INTERVAL_STEP = 100  # ms shaved off per level

# Hazards
OFFSCREEN_MARGIN = 200
HITBOX_BUFFER = 5
SLASH_THICKNESS = 40
SLASH_HISTORY_SIZE = 5
SLASH_MIN_SEPARATION = 150
SLASH_MAX_ATTEMPTS = 10
TRAP_SIZE = 80
TRAP_ACTIVE_TIME = 500  # ms
HOMING_SIZE = 15
HOMING_TRAIL_LENGTH = 10

# Particles
DEATH_PARTICLES = 30
PARTICLE_GRAVITY = 0.2
PARTICLE_DECAY = 0.02

Color = Tuple[int, int, int]

PLAYER_COLOR: Color = (0, 255, 255)
DEATH_COLOR: Color = (255, 0, 255)
HOMING_COLOR: Color = (255, 255, 0)
TRAP_COLOR: Color = (255, 0, 255)


@dataclass(frozen=True)
class DifficultyMode:
    """Fixed preset selected before a run"""
    key: str
    name: str
    spawn_interval: int  # ms
    speed_multiplier: float
    attack_count_multiplier: float
    slash_warning_time: int  # ms
    color: Color


DIFFICULTY_MODES: Dict[str, DifficultyMode] = {
    "easy": DifficultyMode("easy", "EASY", 3000, 0.7, 0.7, 800, (0, 255, 0)),
    "normal": DifficultyMode("normal", "NORMAL", 2000, 1.0, 1.0, 600, (255, 255, 0)),
    "hard": DifficultyMode("hard", "HARD", 1500, 1.3, 1.3, 400, (255, 0, 0)),
    "insane": DifficultyMode("insane", "INSANE", 1000, 1.6, 1.5, 300, (255, 0, 255)),
}


def get_mode(key: str) -> DifficultyMode:
    """Resolve a mode key, rejecting anything that is not a known preset"""
    try:
        return DIFFICULTY_MODES[key]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown difficulty mode: {key!r} (expected one of {', '.join(DIFFICULTY_MODES)})"
        ) from None
