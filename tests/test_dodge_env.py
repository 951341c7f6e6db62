import numpy as np
import pytest

from game.arena.dodge_env import DodgeEnv, hazard_is_lethal

from conftest import make_slash, make_trap


@pytest.fixture
def env():
    e = DodgeEnv(max_steps=300)
    yield e
    e.close()


def test_only_human_rendering_is_supported():
    assert DodgeEnv.metadata["render_modes"] == ["human"]
    with pytest.raises(ValueError):
        DodgeEnv(render_mode="rgb_array")


def test_render_without_mode_is_a_no_op(env):
    env.reset(seed=0)
    assert env.render() is None


def test_reset_observation(env):
    obs, info = env.reset(seed=1)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0 and info["level"] == 1 and info["alive"]
    # player starts in the centre
    assert obs[0] == pytest.approx(0.0) and obs[1] == pytest.approx(0.0)


def test_episode_runs_to_completion(env):
    obs, info = env.reset(seed=2)
    terminated = truncated = False
    steps = 0
    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        steps += 1

    assert steps <= 300
    assert terminated != truncated
    assert info["step"] == steps
    assert info["alive"] == truncated


def test_survival_reward(env):
    env.reset(seed=3)
    _, reward, terminated, _, _ = env.step([0, 0])
    assert not terminated
    assert reward == pytest.approx(env.reward_alive)


def test_death_penalty(env):
    env.reset(seed=4)
    env.session.hazards = [make_trap(x=360, y=360, active=True, activated_at=0)]
    _, reward, terminated, truncated, info = env.step([0, 0])
    assert terminated and not truncated
    assert reward == pytest.approx(env.reward_alive - env.penalty_death)
    assert not info["alive"]


def test_action_mapping():
    keys = DodgeEnv._action_to_keys([1, 2])
    assert keys.left and not keys.right and keys.down and not keys.up
    assert DodgeEnv._action_to_keys([0, 0]).direction() == (0, 0)


def test_mode_override_on_reset(env):
    env.reset(seed=0, options={"mode": "insane"})
    assert env.session.mode.key == "insane"


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        DodgeEnv(mode="impossible")


def test_lethal_flag():
    assert not hazard_is_lethal(make_slash(warning=True))
    assert hazard_is_lethal(make_slash(warning=False))
    assert not hazard_is_lethal(make_trap(active=False))
