# direction.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from .config import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from .geometry import Position, exec_direction


class Direction(Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 2) % 4)

    def exec(self, position: Position) -> Position:
        return exec_direction(self, position)

    def check_parallel(self, candidate: "Direction") -> bool:
        return check_parallel(self, candidate)


# (dx, dy) per direction; Up grows y
_VECTORS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}

# Screen y grows downwards while Up grows y, so the vertical arrows swap.
KEY_TO_DIRECTION = {
    KEY_LEFT: Direction.LEFT,
    KEY_UP: Direction.DOWN,
    KEY_RIGHT: Direction.RIGHT,
    KEY_DOWN: Direction.UP,
}


def check_parallel(current: Direction, candidate: Direction) -> bool:
    """True if `candidate` would reverse the snake onto itself."""
    return candidate is current.opposite


def from_key(code: int, default: Optional[Direction] = None) -> Optional[Direction]:
    """
    Map an arrow-key scancode to a direction.
    Unmapped codes return `default`; pass Direction.RIGHT for the classic
    "everything else turns right" behaviour.
    """
    return KEY_TO_DIRECTION.get(code, default)
