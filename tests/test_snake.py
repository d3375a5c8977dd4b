"""
Tests for gridsnake.snake - the snake body.
"""

import pytest

from gridsnake.direction import Direction
from gridsnake.errors import EmptySnakeError
from gridsnake.geometry import Position
from gridsnake.snake import Snake


@pytest.fixture
def snake():
    s = Snake()
    s.reset()
    return s


class TestReset:
    """Tests for the starting state."""

    def test_reset_builds_three_cells_on_row_one(self, snake):
        assert snake.parts == [(3, 1), (2, 1), (1, 1)]
        assert snake.direction is Direction.RIGHT
        assert snake.size == 3

    def test_reset_replaces_existing_body(self, snake):
        snake.direction = Direction.UP
        snake.add(Position(3, 2))
        snake.size = 9
        snake.reset()
        assert snake.parts == [(3, 1), (2, 1), (1, 1)]
        assert snake.direction is Direction.RIGHT
        assert snake.size == 3

    def test_new_snake_is_empty(self):
        s = Snake()
        assert len(s) == 0
        assert s.head is None
        assert s.tail is None


class TestMovement:
    """Tests for move/add."""

    def test_move_translates_and_keeps_length(self, snake):
        snake.move(Direction.RIGHT)
        assert snake.parts == [(4, 1), (3, 1), (2, 1)]
        assert len(snake) == 3

    def test_move_turning(self, snake):
        snake.move(Direction.UP)
        assert snake.parts == [(3, 2), (3, 1), (2, 1)]

    def test_add_prepends_head(self, snake):
        snake.add(Position(4, 1))
        assert snake.parts == [(4, 1), (3, 1), (2, 1), (1, 1)]
        assert snake.head == (4, 1)
        assert snake.tail == (1, 1)

    def test_move_on_empty_snake_raises(self):
        with pytest.raises(EmptySnakeError):
            Snake().move(Direction.RIGHT)

    def test_single_cell_snake_moves(self):
        s = Snake([(5, 5)])
        s.move(Direction.DOWN)
        assert s.parts == [(5, 4)]


class TestCut:
    """Tests for membership and self-bite truncation."""

    def test_is_snake(self, snake):
        assert snake.is_snake(Position(2, 1))
        assert not snake.is_snake(Position(2, 2))

    def test_cut_truncates_at_index(self):
        s = Snake([(5, 5), (5, 4), (6, 4), (6, 5), (6, 6)])
        assert s.cut_if_snake(Position(6, 4)) is True
        assert s.parts == [(5, 5), (5, 4)]

    def test_cut_at_tail_drops_only_tail(self):
        s = Snake([(5, 5), (5, 4), (6, 4), (6, 5), (6, 6)])
        assert s.cut_if_snake(Position(6, 6)) is True
        assert len(s) == 4

    def test_cut_miss_leaves_body_alone(self, snake):
        before = list(snake.parts)
        assert snake.cut_if_snake(Position(10, 10)) is False
        assert snake.parts == before

    def test_cut_does_not_touch_size(self):
        """The game loop owns reconciling size after a cut."""
        s = Snake([(5, 5), (5, 4), (6, 4), (6, 5), (6, 6)])
        s.cut_if_snake(Position(6, 5))
        assert len(s) == 3
        assert s.size == 5

    def test_iterates_head_to_tail(self, snake):
        assert list(snake) == [(3, 1), (2, 1), (1, 1)]
        assert Position(2, 1) in set(snake)
