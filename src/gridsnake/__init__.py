"""Grid snake: the game-state simulation behind the arcade game."""

from .config import Config
from .direction import Direction, check_parallel, from_key
from .errors import ConfigError, EmptySnakeError, GridFullError, GridSnakeError
from .game import Command, Game, GameClock, GameState, Snapshot, food_score
from .geometry import Position, exec_direction, in_bounds, is_corner, is_edge
from .snake import Snake

__all__ = [
    "Config",
    "Direction", "check_parallel", "from_key",
    "ConfigError", "EmptySnakeError", "GridFullError", "GridSnakeError",
    "Command", "Game", "GameClock", "GameState", "Snapshot", "food_score",
    "Position", "exec_direction", "in_bounds", "is_corner", "is_edge",
    "Snake",
]
