"""
Tests for the headless driver, the policies and the runner CLI.
"""

import csv

import numpy as np
import pytest

from gridsnake.config import Config
from gridsnake.geometry import Position
from autopilot.env import ACTIONS, SnakeEnv, left_of, manhattan, observe, right_of
from autopilot.policies import POLICIES, policy_eps_greedy, policy_greedy
from autopilot.policies.greedy import best_move_toward_food, decode_obs
from autopilot.run import main, run_episode
from gridsnake.direction import Direction

RIGHT = 3


@pytest.fixture
def env():
    e = SnakeEnv(cfg=Config(seed=0))
    e.reset()
    e.game.food = Position(10, 10)
    return e


class TestObservation:
    def test_reset_shape(self):
        obs = SnakeEnv(cfg=Config(seed=0)).reset()
        assert obs.shape == (9,)
        assert obs.dtype == np.float32

    def test_initial_values(self, env):
        obs = observe(env.game)
        assert obs[0] == pytest.approx(3 / 19)
        assert obs[1] == pytest.approx(1 / 19)
        assert obs[2] == pytest.approx(10 / 19)
        assert tuple(obs[4:6]) == (1.0, 0.0)
        assert tuple(obs[6:]) == (0.0, 0.0, 0.0)

    def test_danger_ahead_at_wall(self, env):
        env.game.snake.parts = [Position(19, 5), Position(18, 5), Position(17, 5)]
        assert observe(env.game)[6] == 1.0

    def test_rotation_helpers(self):
        assert left_of(Direction.UP) is Direction.LEFT
        assert right_of(Direction.UP) is Direction.RIGHT
        assert left_of(Direction.RIGHT) is Direction.UP
        assert manhattan(Position(0, 0), Position(3, 4)) == 7


class TestStep:
    def test_step_moves_one_cell(self, env):
        obs, reward, done, info = env.step(RIGHT)
        assert env.game.snake.head == (4, 1)
        assert not done
        assert info["score"] == 0
        # one cell closer to the food
        assert reward == pytest.approx(-0.001 + 0.01)

    def test_reversal_is_ignored(self, env):
        env.step(2)  # LEFT while heading right
        assert env.game.snake.head == (4, 1)

    def test_eating_is_rewarded(self, env):
        env.game.food = Position(4, 1)
        _, reward, _, info = env.step(RIGHT)
        assert reward == pytest.approx(-0.001 + 1.0)
        assert info["food_eaten"] == 1
        assert info["length"] == 4

    def test_wall_terminates(self, env):
        done = False
        steps = 0
        while not done:
            _, reward, done, _ = env.step(RIGHT)
            steps += 1
        assert steps == 17
        assert reward == pytest.approx(-0.001 - 1.0)

    def test_step_before_reset(self):
        with pytest.raises(AssertionError):
            SnakeEnv().step(0)


class TestPolicies:
    def test_best_move_prefers_food_direction(self):
        prefs = best_move_toward_food(Position(5, 5), Position(2, 9))
        assert prefs[:2] == [Direction.LEFT, Direction.UP]
        assert len(prefs) == 4

    def test_decode_round_trips_positions(self, env):
        head, food, vector, *_ = decode_obs(observe(env.game), 20)
        assert head == (3, 1)
        assert food == (10, 10)
        assert vector == (1, 0)

    def test_greedy_heads_for_food(self, env):
        action = policy_greedy(observe(env.game), env)
        assert ACTIONS[action] in (Direction.RIGHT, Direction.UP)

    def test_greedy_avoids_wall(self, env):
        env.game.snake.parts = [Position(19, 5), Position(18, 5), Position(17, 5)]
        env.game.food = Position(19, 0)
        action = policy_greedy(observe(env.game), env)
        assert ACTIONS[action] is Direction.DOWN

    @pytest.mark.parametrize("name", sorted(POLICIES))
    def test_every_policy_finishes_an_episode(self, name):
        np.random.seed(0)
        env = SnakeEnv(cfg=Config(seed=1))
        steps, total, score = run_episode(env, name, 0.1, max_steps=200)
        assert 1 <= steps <= 200
        assert score >= 0

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            run_episode(SnakeEnv(), "bogus", 0.1)


class TestRunner:
    def test_main_writes_csv(self, tmp_path, capsys):
        out = main([
            "--episodes", "2", "--policy", "greedy",
            "--max-steps", "50", "--outdir", str(tmp_path),
        ])
        with open(out, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["ep", "steps", "return", "score"]
        assert len(rows) == 3
        assert "Saved results" in capsys.readouterr().out


class TestEpsGreedy:
    def test_zero_epsilon_is_greedy(self, env):
        obs = observe(env.game)
        assert policy_eps_greedy(obs, env, epsilon=0.0) == policy_greedy(obs, env)

    def test_full_epsilon_explores(self, env):
        np.random.seed(0)
        obs = observe(env.game)
        picks = {policy_eps_greedy(obs, env, epsilon=1.0) for _ in range(50)}
        assert len(picks) > 1
