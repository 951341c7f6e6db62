import random

import pytest

from game.arena.config import DIFFICULTY_MODES
from game.arena.entities import AreaTrap, BigProjectile, HomingProjectile, SlashHazard
from game.arena.hazards import HazardFactory
from game.arena.spawner import attack_count, choose_archetype, spawn_batch

from conftest import ScriptedRng


@pytest.mark.parametrize("mode,level,expected", [
    ("normal", 1, 1),
    ("normal", 3, 2),
    ("normal", 6, 3),
    ("easy", 1, 1),
    ("easy", 6, 2),
    ("hard", 3, 2),
    ("insane", 6, 4),
])
def test_attack_count(mode, level, expected):
    assert attack_count(level, DIFFICULTY_MODES[mode]) == expected


@pytest.mark.parametrize("roll,kind", [
    (0.0, "slash"),
    (0.2999, "slash"),
    (0.3, "big_projectile"),
    (0.4999, "big_projectile"),
    (0.5, "homing"),
    (0.6999, "homing"),
    (0.7, "trap"),
    (0.9999, "trap"),
])
def test_choose_archetype_weights(roll, kind):
    assert choose_archetype(roll) == kind


def test_batch_size_matches_attack_count():
    mode = DIFFICULTY_MODES["insane"]
    factory = HazardFactory(random.Random(3))
    batch = spawn_batch(factory, 6, (400, 400), mode, now=1000)

    assert len(batch) == attack_count(6, mode)
    assert len({h.id for h in batch}) == len(batch)
    assert all(h.created_at == 1000 for h in batch)


def test_batch_dispatches_on_roll():
    # Each hazard: archetype roll, then the factory's own draws
    rng = ScriptedRng(
        values=[
            0.1, 0.5, 0.0,          # slash: position, colour
            0.35, 0.5, 0.5, 0.5,    # big projectile: edge point, drift, colour
            0.6, 0.5,               # homing: edge point
            0.9, 0.1, 0.1,          # trap: x, y
        ],
        indices=[0, 0, 0],
    )
    factory = HazardFactory(rng)
    batch = spawn_batch(factory, 9, (400, 400), DIFFICULTY_MODES["normal"], now=0)

    assert [type(h) for h in batch] == [SlashHazard, BigProjectile, HomingProjectile, AreaTrap]


def test_homing_in_batch_targets_given_position():
    rng = ScriptedRng(values=[0.6, 0.5], indices=[0])
    factory = HazardFactory(rng)
    (h,) = spawn_batch(factory, 1, (400, 700), DIFFICULTY_MODES["normal"], now=0)
    assert h.vx == pytest.approx(0.0)
    assert h.vy > 0
