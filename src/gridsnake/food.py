# food.py
from __future__ import annotations
import logging
import random
from typing import Optional

from .errors import GridFullError
from .geometry import Position
from .snake import Snake

logger = logging.getLogger(__name__)


def free_cells(snake: Snake, grid_size: int) -> list[Position]:
    occupied = set(snake)
    return [
        Position(x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]


def generate(
    snake: Snake,
    grid_size: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = 1000,
) -> Position:
    """
    Pick a uniformly random cell that is not on the snake.

    Draws random cells up to `max_attempts` times; a crowded board falls back
    to choosing among the free cells directly. Raises GridFullError when the
    snake covers every cell.
    """
    rng = rng or random
    for _ in range(max_attempts):
        cell = Position(rng.randrange(grid_size), rng.randrange(grid_size))
        if not snake.is_snake(cell):
            return cell

    logger.warning(
        "Food placement missed %d times; picking from free cells", max_attempts
    )
    cells = free_cells(snake, grid_size)
    if not cells:
        raise GridFullError(grid_size)
    return rng.choice(cells)
