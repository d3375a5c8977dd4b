# snake.py
from __future__ import annotations
from typing import Iterable, List, Optional

from .direction import Direction
from .errors import EmptySnakeError
from .geometry import Position

START_X, START_Y, START_LENGTH = 1, 1, 3


class Snake:
    """
    The snake's body and heading.

    parts: cells from head (index 0) to tail
    size:  length the score is scaled against; it only catches up with
           len(parts) once the game loop has accounted for a cut
    """

    def __init__(self, parts: Iterable[Position] = (), direction: Direction = Direction.RIGHT):
        self.parts: List[Position] = [Position(*p) for p in parts]
        self.direction = direction
        self.size = len(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self):
        return iter(self.parts)

    def __repr__(self) -> str:
        return f"<Snake {self.direction.name} size={self.size} parts={self.parts}>"

    @property
    def head(self) -> Optional[Position]:
        return self.parts[0] if self.parts else None

    @property
    def tail(self) -> Optional[Position]:
        return self.parts[-1] if self.parts else None

    def reset(self) -> None:
        """Back to a 3-cell segment on row 1, heading right."""
        self.direction = Direction.RIGHT
        self.parts = [
            Position(START_X + i, START_Y) for i in reversed(range(START_LENGTH))
        ]
        self.size = START_LENGTH

    def add(self, position: Position) -> None:
        """Grow by one: `position` becomes the new head."""
        self.parts.insert(0, Position(*position))

    def move(self, direction: Direction) -> None:
        """Translate by one cell; the length stays the same."""
        if not self.parts:
            raise EmptySnakeError("cannot move a snake with no body")
        new_head = direction.exec(self.parts[0])
        self.parts = [new_head] + self.parts[:-1]

    def is_snake(self, position: Position) -> bool:
        return position in self.parts

    def cut_if_snake(self, position: Position) -> bool:
        """
        If `position` is on the body at index i, keep only the first i cells
        and return True. Otherwise leave the body alone and return False.
        """
        for i, part in enumerate(self.parts):
            if part == position:
                del self.parts[i:]
                return True
        return False
