import random
from collections import deque

import pytest

from quadkit.snake import DOWN, LEFT, RIGHT, SQUARES, UP, SnakeGame


@pytest.fixture
def game():
    g = SnakeGame(random.Random(1))
    g.fruit = (SQUARES - 1, SQUARES - 1)
    return g


def test_reset_state():
    g = SnakeGame(random.Random(7))
    assert g.head == (0, 0)
    assert g.direction == RIGHT
    assert list(g.body) == []
    assert g.score == 0
    assert g.speed == pytest.approx(0.3)
    assert not g.game_over
    assert 0 <= g.fruit[0] < SQUARES and 0 <= g.fruit[1] < SQUARES


def test_step_moves_head(game):
    game.step()
    assert game.head == (1, 0)
    assert list(game.body) == []
    assert not game.game_over


def test_eating_fruit_grows_and_speeds_up(game):
    game.fruit = (1, 0)
    game.step()
    assert game.score == 100
    assert game.speed == pytest.approx(0.3 * 0.9)
    assert list(game.body) == [(0, 0)]
    assert 0 <= game.fruit[0] < SQUARES and 0 <= game.fruit[1] < SQUARES


def test_wall_ends_game(game):
    assert game.turn(UP)
    game.step()
    assert game.head == (0, -1)
    assert game.game_over


def test_reverse_turn_rejected(game):
    assert not game.turn(LEFT)
    assert game.direction == RIGHT


def test_navigation_lock(game):
    assert game.turn(DOWN)
    assert not game.turn(RIGHT)
    assert game.direction == DOWN
    game.step()
    assert game.head == (0, 1)
    assert game.turn(RIGHT)


def test_invalid_direction(game):
    with pytest.raises(ValueError):
        game.turn((2, 0))


def test_self_collision(game):
    game.head = (5, 5)
    game.direction = RIGHT
    game.body = deque([(4, 5), (4, 6), (5, 6), (6, 6), (6, 5), (7, 5)])
    game.step()
    assert game.head == (6, 5)
    assert game.game_over


def test_step_after_game_over_is_ignored(game):
    game.turn(UP)
    game.step()
    head = game.head
    game.step()
    assert game.head == head


def test_reset_after_game_over(game):
    game.turn(UP)
    game.step()
    game.reset()
    assert not game.game_over
    assert game.head == (0, 0)
    assert game.score == 0


def test_body_length_constant_without_fruit(game):
    game.body = deque([(0, 0)])
    game.head = (1, 0)
    for _ in range(5):
        game.step()
    assert len(game.body) == 1
    assert game.head == (6, 0)