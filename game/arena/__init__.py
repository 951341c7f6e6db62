"""Dodge arena - survive procedurally spawned hazards in a square arena"""

from .config import DIFFICULTY_MODES, DifficultyMode, get_mode
from .collision import collides
from .hazards import HazardFactory, SlashHistory
from .highscores import HighScoreStore
from .session import GameSession, SessionState
from .simulation import InputSnapshot, SimulationContext
from .spawner import spawn_batch
from .dodge_env import DodgeEnv, run_random_episode

__all__ = [
    'DIFFICULTY_MODES', 'DifficultyMode', 'get_mode',
    'collides', 'HazardFactory', 'SlashHistory', 'HighScoreStore',
    'GameSession', 'SessionState', 'InputSnapshot', 'SimulationContext',
    'spawn_batch', 'DodgeEnv', 'run_random_episode',
]
