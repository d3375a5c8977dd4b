# src/autopilot/env.py
from __future__ import annotations
from dataclasses import dataclass, field
import random

import numpy as np  # type: ignore

from gridsnake.config import Config
from gridsnake.direction import Direction
from gridsnake.game import Game
from gridsnake.geometry import Position, in_bounds

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.UP,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction: Direction) -> Direction:
    """Rotate a direction 90° counter-clockwise."""
    return Direction((direction.value - 1) % 4)

def right_of(direction: Direction) -> Direction:
    """Rotate a direction 90° clockwise."""
    return Direction((direction.value + 1) % 4)

def manhattan(a: Position, b: Position) -> int:
    """Manhattan (L1) distance on the grid."""
    return abs(a.x - b.x) + abs(a.y - b.y)

def would_hit(game: Game, direction: Direction) -> bool:
    """
    True if moving the head one cell in `direction` leaves the grid or lands
    on the body. A bite is not fatal, but it costs length and score.
    """
    new_head = direction.exec(game.snake.head)
    if not in_bounds(new_head, game.cfg.grid_size):
        return True
    return game.snake.is_snake(new_head)

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(game: Game) -> np.ndarray:
    """
    9-D observation vector:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead
      7: danger_left
      8: danger_right
    """
    head = game.snake.head
    food = game.food if game.food is not None else head
    direction = game.snake.direction
    denom = max(game.cfg.grid_size - 1, 1)
    dx, dy = direction.vector

    return np.array(
        [
            head.x / denom, head.y / denom, food.x / denom, food.y / denom,
            float(dx), float(dy),
            float(would_hit(game, direction)),
            float(would_hit(game, left_of(direction))),
            float(would_hit(game, right_of(direction))),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like driver that ticks a Game once per step() instead of on a timer.

    Rewards:
      + eat_reward   when food is eaten
      + bite_reward  when the snake bites itself
      + step_penalty per step
      + death_reward on game over
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
    """
    cfg: Config = field(default_factory=Config)
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    bite_reward: float  = -0.5
    death_reward: float = -1.0
    shaping_coef: float = 0.01

    def __post_init__(self):
        self.rng = random.Random(self.cfg.seed)
        self.game: Game | None = None

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        if seed is not None:
            self.rng.seed(seed)
        self.game = Game(self.cfg, rng=self.rng)
        return observe(self.game)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        Reversals are ignored by the game, exactly as a key press would be.
        """
        assert self.game is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"
        game = self.game

        game.propose_direction(ACTIONS[action])
        eaten, length, food = game.state.food_eaten, len(game.snake), game.food
        d_before = manhattan(game.snake.head, food) if food is not None else 0
        game.tick()

        snap = game.snapshot()
        reward = self.step_penalty
        if snap.food_eaten > eaten:
            reward += self.eat_reward
        elif len(snap.body) < length:
            reward += self.bite_reward
        if snap.game_over:
            reward += self.death_reward
        elif snap.food == food and food is not None:
            reward += self.shaping_coef * (d_before - manhattan(snap.head, food))

        info = {"score": snap.score, "length": len(snap.body), "food_eaten": snap.food_eaten}
        return observe(game), reward, snap.game_over, info

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (9,)
