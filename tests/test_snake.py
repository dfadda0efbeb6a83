"""
Tests for domain/snake.py and the direction constants.
"""

import os
import random
import sys
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction, decode_key
from domain.snake import Snake


class TestDirections:
    """Tests for direction constants and key decoding."""

    def test_deltas(self):
        """UP decreases y, RIGHT increases x."""
        assert UP.delta == (0, -1)
        assert DOWN.delta == (0, 1)
        assert LEFT.delta == (-1, 0)
        assert RIGHT.delta == (1, 0)

    def test_valid_moves(self):
        """VALID_MOVES contains exactly the four directions."""
        assert VALID_MOVES == set(Direction)

    @pytest.mark.parametrize("key,expected", [
        ("w", UP), ("a", LEFT), ("s", DOWN), ("d", RIGHT),
        ("up", UP), ("left", LEFT), ("down", DOWN), ("right", RIGHT),
        ("W", UP), ("D", RIGHT),
    ])
    def test_decode_key(self, key, expected):
        """W/A/S/D and the arrow keys map to directions."""
        assert decode_key(key) is expected

    @pytest.mark.parametrize("key", ["q", "space", "esc", ""])
    def test_decode_unknown_key(self, key):
        """Other keys decode to None."""
        assert decode_key(key) is None


class TestSnake:
    """Tests for the Snake class."""

    def test_initialization(self):
        """Snake keeps its body as a deque, head first."""
        snake = Snake([(3, 3), (2, 3)], 6, 6)
        assert isinstance(snake.positions, deque)
        assert snake.head == (3, 3)
        assert snake.tail == (2, 3)
        assert len(snake) == 2

    def test_requires_a_segment(self):
        """An empty body is rejected."""
        with pytest.raises(ValueError):
            Snake([], 6, 6)

    def test_spawn_inside_bounds(self):
        """Spawned snakes always start strictly inside the border."""
        for seed in range(100):
            snake = Snake.spawn(4, 7, random.Random(seed))
            x, y = snake.head
            assert 1 <= x < 4
            assert 1 <= y < 7
            assert len(snake) == 1

    def test_spawn_is_seeded(self):
        """The same seed spawns at the same cell."""
        assert Snake.spawn(20, 20, random.Random(5)).head == Snake.spawn(20, 20, random.Random(5)).head

    def test_spawn_single_cell_grid(self):
        """On a 1x1 playfield the only spawn point is (1, 1)."""
        assert Snake.spawn(2, 2, random.Random(9)).head == (1, 1)

    def test_move_does_not_touch_body(self):
        """move() only advances the pending head coordinate."""
        snake = Snake([(3, 3)], 6, 6)
        assert snake.move(RIGHT) is True
        assert (snake.pos_x, snake.pos_y) == (4, 3)
        assert list(snake.positions) == [(3, 3)]

    def test_commit_pushes_head_and_pops_tail(self):
        """commit() keeps the length constant."""
        snake = Snake([(3, 3), (2, 3), (1, 3)], 6, 6)
        snake.move(DOWN)
        snake.commit()
        assert list(snake.positions) == [(3, 4), (3, 3), (2, 3)]

    def test_grow_reattaches_previous_tail(self):
        """grow() after commit() adds one segment."""
        snake = Snake([(3, 3), (2, 3)], 6, 6)
        prev = snake.tail
        snake.move(UP)
        snake.commit()
        snake.grow(prev)
        assert list(snake.positions) == [(3, 2), (3, 3), (2, 3)]
        assert len(snake) == 3

    @pytest.mark.parametrize("start,direction", [
        ((1, 3), LEFT),
        ((5, 3), RIGHT),
        ((3, 1), UP),
        ((3, 5), DOWN),
    ])
    def test_border_moves_rejected(self, start, direction):
        """A step onto the border is refused and changes nothing."""
        snake = Snake([start], 6, 6)
        assert snake.can_move(direction) is False
        assert snake.move(direction) is False
        assert (snake.pos_x, snake.pos_y) == start
        assert snake.head == start

    def test_walk_never_reaches_border(self):
        """Repeated steps in one direction stop at the last interior cell."""
        snake = Snake([(3, 3)], 6, 6)
        for direction, expected in [(LEFT, (1, 3)), (UP, (1, 1)), (RIGHT, (5, 1)), (DOWN, (5, 5))]:
            for _ in range(10):
                if snake.move(direction):
                    snake.commit()
            assert snake.head == expected

    def test_repr(self):
        """Snake has a useful string representation."""
        assert "length=1" in repr(Snake([(2, 2)], 4, 4))
