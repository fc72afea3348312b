"""
Tests for the SnakeGame engine.
"""

import random
from collections import deque

import pytest

from termsnake.domain import (
    APPLE_SCORE,
    BodySegment,
    DOWN,
    GameState,
    LEFT,
    OpenSpace,
    Point,
    RIGHT,
    UP,
)
from termsnake.game import SnakeGame


def _place(game, segments, apple):
    """Put the game into a hand-built position with a consistent OpenSpace."""
    game.snake.body = deque(segments)
    game.open_space = OpenSpace.for_grid(game.height, game.width, excluded=game.snake.positions())
    game.apple = apple


def _assert_consistent(game):
    cells = game.snake.positions()
    assert len(cells) == len(set(cells))
    for cell in cells:
        assert cell not in game.open_space
    assert game.apple not in cells
    assert game.apple in game.open_space


class TestSnakeGameInit:
    """Tests for SnakeGame construction."""

    def test_initial_layout(self):
        """Two-segment snake heading right, apple at (1, 5), score 0."""
        game = SnakeGame(10, 20)
        assert game.snake.positions() == [Point(1, 2), Point(1, 1)]
        assert game.snake.heading is RIGHT
        assert game.apple == Point(1, 5)
        assert game.score == 0
        assert game.state is GameState.CONTINUE

    def test_open_space_is_interior_minus_snake(self):
        """Every interior cell except the snake's two cells is open."""
        game = SnakeGame(10, 20)
        assert len(game.open_space) == 8 * 18 - 2
        _assert_consistent(game)

    @pytest.mark.parametrize("height,width", [(2, 20), (10, 2), (0, 0), (10, 6)])
    def test_too_small_grid_is_rejected(self, height, width):
        """Grids that cannot hold the start layout raise ValueError."""
        with pytest.raises(ValueError):
            SnakeGame(height, width)

    def test_smallest_grid_is_accepted(self):
        """3x7 leaves exactly one row with room for snake and apple."""
        game = SnakeGame(3, 7)
        assert len(game.open_space) == 3


class TestSnakeGameUpdate:
    """Tests for SnakeGame.update."""

    def test_move_right(self):
        """Head moves to (1, 3) and the tail follows to (1, 2)."""
        game = SnakeGame(10, 20)
        state = game.update(RIGHT)
        assert state is GameState.CONTINUE
        assert game.snake.positions() == [Point(1, 3), Point(1, 2)]
        assert Point(1, 1) in game.open_space
        _assert_consistent(game)

    def test_eating_apple_grows_and_scores(self):
        """The old tail is kept, score rises by 100 and a new apple appears."""
        game = SnakeGame(10, 20, rng=random.Random(3))
        _place(game, [BodySegment.at(1, 4, RIGHT), BodySegment.at(1, 3, RIGHT)], Point(1, 5))
        state = game.update(RIGHT)
        assert state is GameState.CONTINUE
        assert game.snake.positions() == [Point(1, 5), Point(1, 4), Point(1, 3)]
        assert game.score == APPLE_SCORE
        assert game.apple != Point(1, 5)
        _assert_consistent(game)

    def test_walking_to_the_first_apple(self):
        """From the start, three moves right eat the first apple."""
        game = SnakeGame(10, 20, rng=random.Random(0))
        for _ in range(3):
            assert game.update(RIGHT) is GameState.CONTINUE
        assert game.score == APPLE_SCORE
        assert len(game.snake) == 3

    @pytest.mark.parametrize("segments,direction", [
        ([BodySegment.at(1, 5, UP)], UP),          # row 0
        ([BodySegment.at(8, 5, DOWN)], DOWN),      # row height - 1
        ([BodySegment.at(4, 1, LEFT)], LEFT),      # col 0
        ([BodySegment.at(4, 18, RIGHT)], RIGHT),   # col width - 1
    ])
    def test_border_collision_is_over(self, segments, direction):
        """Touching any border cell ends the game."""
        game = SnakeGame(10, 20)
        _place(game, segments, Point(5, 5))
        assert game.update(direction) is GameState.OVER
        assert game.state is GameState.OVER

    def test_self_collision_is_over(self):
        """Turning into the body ends the game."""
        game = SnakeGame(10, 20)
        _place(game, [
            BodySegment.at(2, 2, LEFT),
            BodySegment.at(2, 3, LEFT),
            BodySegment.at(3, 3, UP),
            BodySegment.at(3, 2, RIGHT),
            BodySegment.at(3, 1, RIGHT),
        ], Point(6, 6))
        assert game.update(DOWN) is GameState.OVER

    def test_following_the_tail_is_allowed(self):
        """Moving into the cell the tail is leaving is not a collision."""
        game = SnakeGame(10, 20)
        _place(game, [
            BodySegment.at(2, 2, LEFT),
            BodySegment.at(2, 3, LEFT),
            BodySegment.at(3, 3, UP),
            BodySegment.at(3, 2, RIGHT),
        ], Point(6, 6))
        assert game.update(DOWN) is GameState.CONTINUE
        assert game.snake.head.pos == Point(3, 2)
        _assert_consistent(game)

    def test_eating_last_open_cell_is_win(self):
        """When the apple was the only open cell, eating it wins."""
        game = SnakeGame(3, 7)
        _place(game, [
            BodySegment.at(1, 4, RIGHT),
            BodySegment.at(1, 3, RIGHT),
            BodySegment.at(1, 2, RIGHT),
            BodySegment.at(1, 1, RIGHT),
        ], Point(1, 5))
        assert len(game.open_space) == 1
        assert game.update(RIGHT) is GameState.WIN
        assert game.state is GameState.WIN

    def test_no_spurious_game_over(self):
        """Circling inside the board never ends the game on its own."""
        game = SnakeGame(12, 12, rng=random.Random(7))
        _place(game, [BodySegment.at(5, 5, RIGHT), BodySegment.at(5, 4, RIGHT)], Point(10, 10))
        loop = [RIGHT, DOWN, LEFT, UP]
        for i in range(200):
            state = game.update(loop[i % 4])
            assert state is GameState.CONTINUE
            _assert_consistent(game)

    def test_invariants_hold_on_random_walk(self):
        """Snake, OpenSpace and apple stay consistent while the game continues."""
        rng = random.Random(11)
        game = SnakeGame(15, 25, rng=random.Random(5))
        for _ in range(500):
            heading = game.snake.heading
            choices = [d for d in (UP, DOWN, LEFT, RIGHT) if d is not heading.opposite]
            if game.update(rng.choice(choices)) is not GameState.CONTINUE:
                break
            _assert_consistent(game)
            assert len(game.open_space) + len(game.snake) == 13 * 23
