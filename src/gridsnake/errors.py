"""Exceptions raised by the snake simulation."""


class GridSnakeError(Exception):
    """Base class for every error raised by gridsnake."""


class ConfigError(GridSnakeError, ValueError):
    """A Config field is out of its allowed range."""


class EmptySnakeError(GridSnakeError):
    """An operation needed a body cell but the snake has none."""


class GridFullError(GridSnakeError):
    """No free cell is left on the grid to place food on."""

    def __init__(self, grid_size: int):
        super().__init__(f"no free cell left on the {grid_size}x{grid_size} grid")
        self.grid_size = grid_size
