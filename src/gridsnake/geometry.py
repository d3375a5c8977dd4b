# geometry.py
from __future__ import annotations
from typing import NamedTuple


class Position(NamedTuple):
    """A grid cell. (0, 0) is the first cell of both axes."""
    x: int
    y: int


def exec_direction(direction, position: Position) -> Position:
    """
    Return `position` offset by one cell in `direction`.
    - Up:    y + 1
    - Down:  y - 1
    - Left:  x - 1
    - Right: x + 1
    Anything that is not a Direction leaves the position unchanged.
    """
    vector = getattr(direction, "vector", None)
    if vector is None:
        return position
    dx, dy = vector
    return Position(position.x + dx, position.y + dy)


def in_bounds(position: Position, grid_size: int) -> bool:
    return 0 <= position.x < grid_size and 0 <= position.y < grid_size


def is_corner(position: Position, grid_size: int) -> bool:
    """Both coordinates sit on the first or last row/column."""
    last = grid_size - 1
    return position.x in (0, last) and position.y in (0, last)


def is_edge(position: Position, grid_size: int) -> bool:
    """At least one coordinate sits on the first or last row/column."""
    last = grid_size - 1
    return position.x in (0, last) or position.y in (0, last)
