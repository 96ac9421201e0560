"""
Тесты змейки: направления, движение, столкновения.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import INITIAL_SNAKE_LENGTH, SNAKE_START
from snake import Coordinate, Direction, Heading, Snake


class TestDirection:
    def test_vectors(self):
        assert Direction.UP.vector == (0, -1)
        assert Direction.DOWN.vector == (0, 1)
        assert Direction.LEFT.vector == (-1, 0)
        assert Direction.RIGHT.vector == (1, 0)

    def test_opposites(self):
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT


class TestHeading:
    def test_default_is_right(self):
        assert Heading().current == Direction.RIGHT

    @pytest.mark.parametrize("current", list(Direction))
    @pytest.mark.parametrize("requested", list(Direction))
    def test_safe_change_rejects_only_reverse(self, current, requested):
        """Направление не меняется только при развороте на 180°."""
        heading = Heading(current)
        changed = heading.safe_change(requested)

        if requested == current.opposite:
            assert changed is False
            assert heading.current == current
        else:
            assert changed is True
            assert heading.current == requested

    def test_vector_follows_current(self):
        heading = Heading(Direction.UP)
        assert heading.vector() == (0, -1)


class TestSnake:
    def test_initial_state(self):
        snake = Snake()
        assert snake.length == INITIAL_SNAKE_LENGTH
        assert snake.path == [Coordinate(*SNAKE_START)]
        assert snake.head == SNAKE_START

    def test_move_prepends_head(self):
        snake = Snake((8, 8))
        snake.move(Direction.RIGHT)
        assert snake.head == Coordinate(9, 8)
        assert snake.path[1] == Coordinate(8, 8)

        snake.move(Direction.DOWN)
        assert snake.head == Coordinate(9, 9)

    def test_path_length_after_moves(self):
        """После N ходов без роста длина пути = min(N + 1, length)."""
        snake = Snake((5, 5), length=4)
        for n in range(1, 10):
            snake.move(Direction.DOWN)
            assert len(snake.path) == min(n + 1, 4)
            assert len(snake.path) <= snake.length

    def test_grow_adds_segment_on_next_move(self):
        snake = Snake((5, 5), length=4)
        for _ in range(3):
            snake.move(Direction.RIGHT)
        assert len(snake.path) == 4

        snake.grow()
        assert snake.length == 5
        assert len(snake.path) == 4

        snake.move(Direction.RIGHT)
        assert len(snake.path) == 5

    def test_valid_inside_board(self):
        snake = Snake((5, 5))
        assert snake.is_valid(10, 10)

    @pytest.mark.parametrize("head", [(0, 5), (5, 0), (10, 5), (5, 10), (-1, 5), (5, 11)])
    def test_invalid_on_or_outside_border(self, head):
        """Крайний ряд клеток тоже стена."""
        snake = Snake(head)
        assert not snake.is_valid(10, 10)

    def test_invalid_on_self_collision(self):
        snake = Snake((5, 5), length=5)
        for direction in (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP):
            snake.move(direction)

        assert snake.head == Coordinate(5, 5)
        assert not snake.is_valid(10, 10)

    def test_is_valid_does_not_mutate(self):
        snake = Snake((5, 5))
        snake.move(Direction.RIGHT)
        path = list(snake.path)
        snake.is_valid(10, 10)
        assert snake.path == path

    def test_runs_off_board(self):
        """Голова из (8, 8) вправо 5 раз на поле 10x10 -> (13, 8), вне поля."""
        snake = Snake((8, 8), length=4)
        for _ in range(5):
            snake.move(Direction.RIGHT)

        assert snake.head == Coordinate(13, 8)
        assert not snake.is_valid(10, 10)

    def test_occupies(self):
        snake = Snake((5, 5))
        snake.move(Direction.RIGHT)
        assert snake.occupies(Coordinate(5, 5))
        assert snake.occupies(Coordinate(6, 5))
        assert not snake.occupies(Coordinate(7, 5))
