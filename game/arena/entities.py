"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from .config import Color, PLAYER_SIZE


@dataclass
class Player:
    """Player avatar; (x, y) is the centre of a square hit-box"""
    x: float
    y: float
    size: float = PLAYER_SIZE

    @property
    def half(self) -> float:
        return self.size / 2


@dataclass
class Hazard:
    """Common envelope shared by every hazard kind"""
    kind: ClassVar[str] = "hazard"

    id: int
    color: Color
    created_at: float  # ms, simulation clock


@dataclass
class SlashHazard(Hazard):
    """Full-width or full-height band that sweeps across once its warning ends"""
    kind: ClassVar[str] = "slash"

    orientation: str  # horizontal | vertical | diagonal-right | diagonal-left
    x: float
    y: float
    width: float
    height: float
    thickness: float
    speed: float
    warning_time: float  # ms
    active_vx: float
    active_vy: float
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0  # degrees, diagonals only
    warning: bool = True

    @property
    def is_diagonal(self) -> bool:
        return self.orientation.startswith("diagonal")

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class BigProjectile(Hazard):
    """Large circle crossing the arena at constant velocity"""
    kind: ClassVar[str] = "big_projectile"

    x: float
    y: float
    vx: float
    vy: float
    radius: float


@dataclass
class HomingProjectile(Hazard):
    """Small circle aimed once at the player's position when it spawned"""
    kind: ClassVar[str] = "homing"

    x: float
    y: float
    vx: float
    vy: float
    radius: float
    trail: List[Tuple[float, float]] = field(default_factory=list)


@dataclass
class AreaTrap(Hazard):
    """Stationary square that arms after a warning and stays lethal briefly"""
    kind: ClassVar[str] = "trap"

    x: float  # top-left corner
    y: float
    size: float
    warning_time: float  # ms
    active: bool = False
    activated_at: Optional[float] = None


@dataclass
class Particle:
    """Visual-only debris"""
    x: float
    y: float
    vx: float
    vy: float
    color: Color
    size: float
    life: float = 1.0


@dataclass(frozen=True)
class AudioCue:
    """Fire-and-forget sound request"""
    frequency: float  # Hz
    duration: float  # seconds
    waveform: str = "sine"


@dataclass(frozen=True)
class SlashRecord:
    """Recent slash placement remembered for anti-clustering"""
    orientation: str
    position: float
    time: float


@dataclass(frozen=True)
class RunResult:
    """What a finished run reports to the high-score store"""
    mode: str
    final_score: int


# Audio cues
SLASH_SPAWN_CUE = AudioCue(200, 0.3, "sawtooth")
SLASH_ACTIVE_CUE = AudioCue(250, 0.2, "sawtooth")
TRAP_ACTIVE_CUE = AudioCue(600, 0.1, "square")
BIG_PROJECTILE_CUE = AudioCue(150, 0.2, "triangle")
HOMING_CUE = AudioCue(400, 0.15, "square")
DEATH_CUE = AudioCue(100, 0.5, "sawtooth")

HAZARD_KINDS = (SlashHazard, BigProjectile, HomingProjectile, AreaTrap)
