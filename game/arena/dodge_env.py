"""
DodgeEnv - Gymnasium wrapper around the dodge arena
---------------------------------------------------
- Drives a GameSession with a synthetic clock (one step = one frame)
- Discrete MultiDiscrete action space: [x axis(3), y axis(3)]
- Vector observation: player state + top-K nearest hazards
- Reward: small bonus per frame survived, bonus per level reached, penalty on death
- Arcade window for human rendering

Quick test:
    python -m game.arena.dodge_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ARENA_SIZE, get_mode
from .entities import AreaTrap, Hazard, SlashHazard, HAZARD_KINDS
from .session import GameSession, SessionState
from .simulation import InputSnapshot
from .utils import clamp, seed_everything


# Velocity scale for observations (units/frame)
MAX_HAZARD_SPEED = 12.0


def hazard_anchor(h: Hazard) -> Tuple[float, float]:
    """Representative point of a hazard for distance sorting"""
    if isinstance(h, SlashHazard):
        return h.center
    if isinstance(h, AreaTrap):
        return h.x + h.size / 2, h.y + h.size / 2
    return h.x, h.y


def hazard_is_lethal(h: Hazard) -> bool:
    if isinstance(h, SlashHazard):
        return not h.warning
    if isinstance(h, AreaTrap):
        return h.active
    return True


class DodgeEnv(gym.Env):
    """Survive as long as possible in the dodge arena"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        mode: str = "normal",
        frame_ms: float = 1000 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_hazards: int = 8,
        reward_alive: float = 0.01,
        reward_level: float = 0.5,
        penalty_death: float = 5.0,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode!r}")
        self.render_mode = render_mode
        self.mode = get_mode(mode).key
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_hazards = k_hazards

        self.reward_alive = reward_alive
        self.reward_level = reward_level
        self.penalty_death = penalty_death

        # Action space:
        # x: 0 none, 1 left, 2 right
        # y: 0 none, 1 up, 2 down
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Observation space (vector)
        # Player: pos(2) level(1)
        # Each hazard: rel pos(2) vel(2) lethal(1) kind(1)
        obs_dim = 2 + 1 + self.k_hazards * 6
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.session: GameSession = None  # type: ignore
        self._step_count = 0
        self._now = 0.0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        mode = (options or {}).get("mode", self.mode)
        self.mode = get_mode(mode).key

        self._step_count = 0
        self._now = 0.0
        self.session = GameSession(rng=random.Random(seed), mode=self.mode)
        self.session.start(self.mode, self._now)

        return self._get_obs(), self._get_info()

    def step(self, action):
        keys = self._action_to_keys(action)
        level_before = self.session.difficulty_level

        self._now += self.frame_ms
        self.session.advance(self._now, keys)
        self._step_count += 1

        terminated = self.session.state is SessionState.GAMEOVER
        truncated = not terminated and self._step_count >= self.max_steps

        reward = self.reward_alive
        if self.session.difficulty_level > level_before:
            reward += self.reward_level
        if terminated:
            reward -= self.penalty_death

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    @staticmethod
    def _action_to_keys(action) -> InputSnapshot:
        ax, ay = int(action[0]), int(action[1])
        return InputSnapshot(left=ax == 1, right=ax == 2, up=ay == 1, down=ay == 2)

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.session.player
        px = player.x / ARENA_SIZE
        py = player.y / ARENA_SIZE
        level = clamp(self.session.difficulty_level / 10.0, 0.0, 1.0)

        obs_parts: List[float] = [px * 2 - 1, py * 2 - 1, level * 2 - 1]

        def dist2(h):
            hx, hy = hazard_anchor(h)
            return (hx - player.x) ** 2 + (hy - player.y) ** 2

        nearest = sorted(self.session.hazards, key=dist2)[:self.k_hazards]
        n_kinds = len(HAZARD_KINDS) - 1
        for i in range(self.k_hazards):
            if i < len(nearest):
                h = nearest[i]
                hx, hy = hazard_anchor(h)
                vx = getattr(h, "vx", 0.0)
                vy = getattr(h, "vy", 0.0)
                obs_parts += [
                    clamp((hx - player.x) / ARENA_SIZE, -1, 1),
                    clamp((hy - player.y) / ARENA_SIZE, -1, 1),
                    clamp(vx / MAX_HAZARD_SPEED, -1, 1),
                    clamp(vy / MAX_HAZARD_SPEED, -1, 1),
                    1.0 if hazard_is_lethal(h) else -1.0,
                    HAZARD_KINDS.index(type(h)) / n_kinds * 2 - 1,
                ]
            else:
                obs_parts += [0.0] * 6

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "level": self.session.difficulty_level,
            "mode": self.mode,
            "alive": self.session.state is not SessionState.GAMEOVER,
            "num_hazards": len(self.session.hazards),
            "num_particles": len(self.session.particles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import ArenaWindow
            self._window = ArenaWindow(self.session, interactive=False)
        self._window.session = self.session
        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, mode: str = "normal", seed: int = 42):
    """Run a random-policy episode"""
    env = DodgeEnv(render_mode="human" if render else None, mode=mode)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print(f"Running {mode} episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.on_draw()
            env._window.flip()
            time.sleep(env.frame_ms / 1000)

    print(f"Random episode return: {total:.2f} "
          f"(survived {info['score']}s, level {info['level']})")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
