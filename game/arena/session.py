"""
Game session: menu -> playing -> gameover lifecycle and run-scoped state
"""

from __future__ import annotations
import random
from enum import Enum
from typing import List, Optional

from loguru import logger

from .collision import first_collision
from .config import ARENA_SIZE, DifficultyMode, get_mode
from .entities import AudioCue, Hazard, Particle, Player, RunResult, DEATH_CUE
from .hazards import HazardFactory
from .simulation import (
    InputSnapshot, SimulationContext, burst, difficulty_level, effective_spawn_interval,
    move_player, score_for, spawn_cue, step_hazards, step_particles,
)
from .spawner import spawn_batch


class SessionState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAMEOVER = "gameover"


class GameSession:
    """Owns one player's runs and drives the update step.

    The session never schedules itself: a presentation layer (arcade window,
    gym environment, test) calls ``advance(now)`` once per frame with a
    millisecond timestamp. Once the session leaves ``PLAYING`` further calls
    are no-ops, so a finished or restarted run cannot be mutated by a stale
    frame.

    Args:
        rng: Random source for hazard and particle generation
        high_scores: Optional store that receives each finished run
        mode: Mode preselected in the menu
    """

    def __init__(self, rng: Optional[random.Random] = None, high_scores=None, mode: str = "normal"):
        self.state = SessionState.MENU
        self.mode: DifficultyMode = get_mode(mode)
        self.high_scores = high_scores
        self.context = SimulationContext(factory=HazardFactory(rng))

        self.player = Player(ARENA_SIZE / 2, ARENA_SIZE / 2)
        self.hazards: List[Hazard] = []
        self.particles: List[Particle] = []
        self.score = 0
        self.difficulty_level = 1
        self.start_time = 0.0
        self.frame = 0
        self.last_result: Optional[RunResult] = None

    # ----------------------------
    # Transitions
    # ----------------------------

    def select_mode(self, mode: str):
        if self.state is SessionState.PLAYING:
            raise RuntimeError("Cannot change mode during a run")
        self.mode = get_mode(mode)

    def start(self, mode: str, now: float):
        """menu/gameover -> playing with a fresh run in the given mode"""
        selected = get_mode(mode)
        if self.state is SessionState.PLAYING:
            raise RuntimeError("A run is already in progress")

        self.mode = selected
        self.player = Player(ARENA_SIZE / 2, ARENA_SIZE / 2)
        self.hazards = []
        self.particles = []
        self.score = 0
        self.difficulty_level = 1
        self.start_time = now
        self.frame = 0
        self.last_result = None
        self.context.factory.reset()
        self.context.input = InputSnapshot()
        self.context.last_spawn_time = now
        self.state = SessionState.PLAYING
        logger.info("Run started in {} mode", self.mode.key)

    def restart(self, now: float):
        """gameover -> playing, keeping the mode of the previous run"""
        if self.state is not SessionState.GAMEOVER:
            raise RuntimeError(f"Cannot restart from {self.state.value}")
        self.start(self.mode.key, now)

    def main_menu(self):
        """gameover -> menu"""
        if self.state is SessionState.PLAYING:
            raise RuntimeError("Cannot leave a run in progress")
        self.state = SessionState.MENU

    def set_input(self, keys: InputSnapshot):
        self.context.input = keys

    # ----------------------------
    # Frame
    # ----------------------------

    def advance(self, now: float, keys: Optional[InputSnapshot] = None) -> List[AudioCue]:
        """Run one frame of the simulation at time ``now`` (ms).

        Returns the audio cues emitted during the frame.
        """
        if self.state is not SessionState.PLAYING:
            return []
        if keys is not None:
            self.context.input = keys

        ctx = self.context
        cues: List[AudioCue] = []
        elapsed = now - self.start_time

        self.score = score_for(elapsed)
        self.difficulty_level = difficulty_level(elapsed)
        level = self.difficulty_level

        spawn_origin = (self.player.x, self.player.y)
        self.player = move_player(self.player, ctx.input)

        hazards = list(self.hazards)
        if now - ctx.last_spawn_time > effective_spawn_interval(self.mode, level):
            batch = spawn_batch(ctx.factory, level, spawn_origin, self.mode, now)
            cues.extend(c for c in map(spawn_cue, batch) if c is not None)
            hazards.extend(batch)
            ctx.last_spawn_time = now

        self.hazards, hazard_cues = step_hazards(hazards, now)
        cues.extend(hazard_cues)
        self.particles = step_particles(self.particles)
        self.frame += 1

        hit = first_collision(self.player, self.hazards)
        if hit is not None:
            self._end_run(hit)
            cues.append(DEATH_CUE)
        return cues

    def _end_run(self, hit: Hazard):
        self.particles = self.particles + burst(self.player.x, self.player.y, self.context.rng)
        self.state = SessionState.GAMEOVER
        self.last_result = RunResult(self.mode.key, self.score)
        logger.info("Run over in {} mode after {}s (hit by {} #{})",
                    self.mode.key, self.score, hit.kind, hit.id)

        if self.high_scores is not None:
            self.high_scores.submit(self.last_result)

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.PLAYING

    @property
    def best_score(self) -> int:
        if self.high_scores is None:
            return 0
        return self.high_scores.best(self.mode.key)
