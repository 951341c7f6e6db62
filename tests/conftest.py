import random

import pytest

from game.arena.config import ARENA_SIZE, SLASH_THICKNESS
from game.arena.entities import AreaTrap, BigProjectile, HomingProjectile, Player, SlashHazard


class ConstantRng:
    """Always returns the same draws"""

    def __init__(self, value=0.5, index=0):
        self.value = value
        self.index = index
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value

    def randrange(self, n):
        return self.index


class ScriptedRng:
    """Returns scripted draws in order"""

    def __init__(self, values=(), indices=()):
        self.values = list(values)
        self.indices = list(indices)

    def random(self):
        return self.values.pop(0)

    def randrange(self, n):
        return self.indices.pop(0)


def make_slash(orientation="horizontal", x=0.0, y=400.0, width=ARENA_SIZE, height=SLASH_THICKNESS,
               warning=False, created_at=0.0, warning_time=600, active_vx=5.0, active_vy=0.0, **kw):
    return SlashHazard(
        id=1, color=(0, 255, 255), created_at=created_at, orientation=orientation,
        x=x, y=y, width=width, height=height, thickness=SLASH_THICKNESS, speed=5.0,
        warning_time=warning_time, active_vx=active_vx, active_vy=active_vy,
        warning=warning, **kw,
    )


def make_trap(x=360.0, y=360.0, active=False, created_at=0.0, warning_time=1450, activated_at=None):
    return AreaTrap(id=2, color=(255, 0, 255), created_at=created_at, x=x, y=y, size=80,
                    warning_time=warning_time, active=active, activated_at=activated_at)


def make_big(x=400.0, y=400.0, vx=0.0, vy=0.0, radius=22.5):
    return BigProjectile(id=3, color=(255, 0, 128), created_at=0.0, x=x, y=y, vx=vx, vy=vy, radius=radius)


def make_homing(x=400.0, y=400.0, vx=0.0, vy=3.4, radius=7.5):
    return HomingProjectile(id=4, color=(255, 255, 0), created_at=0.0, x=x, y=y, vx=vx, vy=vy, radius=radius)


@pytest.fixture
def player():
    return Player(ARENA_SIZE / 2, ARENA_SIZE / 2)


@pytest.fixture
def rng():
    return random.Random(1234)
