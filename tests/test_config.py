import dataclasses

import pytest

from game.arena.config import DIFFICULTY_MODES, get_mode


def test_four_named_presets():
    assert list(DIFFICULTY_MODES) == ["easy", "normal", "hard", "insane"]


def test_presets_scale_together():
    modes = list(DIFFICULTY_MODES.values())
    assert [m.spawn_interval for m in modes] == [3000, 2000, 1500, 1000]
    assert [m.slash_warning_time for m in modes] == [800, 600, 400, 300]
    speeds = [m.speed_multiplier for m in modes]
    assert speeds == sorted(speeds)


def test_presets_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DIFFICULTY_MODES["easy"].spawn_interval = 1


@pytest.mark.parametrize("key", ["", "EASY", "nightmare", None])
def test_unknown_mode_rejected(key):
    with pytest.raises(ValueError):
        get_mode(key)


def test_get_mode():
    assert get_mode("hard").attack_count_multiplier == 1.3
