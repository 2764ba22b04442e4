"""Tests for the snake simulation."""

import random

import pytest

from arcade.game.base import Lifecycle
from arcade.game.snake import DOWN, GRID_SIZE, LEFT, RIGHT, UP, SnakeGame
from arcade.scores import GameId, MemoryScoreStore


def _playing(**kwargs) -> SnakeGame:
    game = SnakeGame(rng=random.Random(7), **kwargs)
    game.toggle_play()
    return game


def test_initial_state():
    game = SnakeGame()
    assert game.lifecycle is Lifecycle.IDLE
    assert game.snake == [(10, 10)]
    assert game.direction == (1, 0)
    assert game.food == (15, 15)
    assert game.score == 0


def test_step_moves_head_and_keeps_length():
    game = _playing()
    game.step()
    assert game.snake == [(11, 10)]
    assert game.lifecycle is Lifecycle.PLAYING


def test_reverse_direction_is_rejected():
    game = _playing()
    game.step()
    assert game.set_direction(LEFT) is False
    assert game.direction == (1, 0)
    assert game.set_direction(UP) is True
    assert game.direction == UP


def test_direction_ignored_when_not_playing():
    game = SnakeGame()
    assert game.set_direction(DOWN) is False
    assert game.direction == RIGHT


def test_step_is_noop_when_idle():
    game = SnakeGame()
    game.step()
    assert game.snake == [(10, 10)]


@pytest.mark.parametrize(
    "start, direction",
    [
        ((GRID_SIZE - 1, 5), RIGHT),
        ((0, 5), LEFT),
        ((5, 0), UP),
        ((5, GRID_SIZE - 1), DOWN),
    ],
)
def test_leaving_the_grid_loses(start, direction):
    game = _playing()
    game.snake = [start]
    game.direction = direction
    game.step()
    assert game.lifecycle is Lifecycle.LOST
    assert game.snake == [start]


def test_running_into_body_loses():
    game = _playing()
    game.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    game.direction = DOWN
    game.step()
    assert game.lifecycle is Lifecycle.LOST


def test_eating_food_grows_and_scores():
    game = _playing()
    game.food = (11, 10)
    game.step()
    assert game.snake == [(11, 10), (10, 10)]
    assert game.score == 10
    assert game.food not in game.snake


def test_food_never_lands_on_the_snake():
    game = _playing()
    game.snake = [(x, y) for y in range(GRID_SIZE) for x in range(GRID_SIZE) if (x, y) != (0, 0)]
    for _ in range(20):
        game._place_food()
        assert game.food == (0, 0)


def test_filling_the_grid_wins():
    game = _playing()
    path = [
        (x if y % 2 == 0 else GRID_SIZE - 1 - x, y)
        for y in range(GRID_SIZE)
        for x in range(GRID_SIZE)
    ]
    game.food = path[0]
    game.snake = path[1:]
    game.direction = LEFT
    game.step()
    assert len(game.snake) == GRID_SIZE * GRID_SIZE
    assert game.lifecycle is Lifecycle.WON
    assert game.score == 10


def test_loss_offers_score_to_best_score_store():
    store = MemoryScoreStore()
    game = _playing(store=store)
    game.score = 40
    game.snake = [(GRID_SIZE - 1, 0)]
    game.step()
    assert game.lifecycle is Lifecycle.LOST
    assert store.get(GameId.SNAKE) == 40
    assert game.best_score == 40


def test_reset_twice_matches_reset_once():
    game = _playing()
    game.food = (11, 10)
    game.step()
    game.step()
    once = game.reset()
    twice = game.reset()
    assert once == twice
    assert once["snake"] == [(10, 10)]
    assert once["score"] == 0
    assert once["lifecycle"] is Lifecycle.IDLE


def test_toggle_on_ended_round_resets():
    game = _playing()
    game.snake = [(GRID_SIZE - 1, 0)]
    game.step()
    game.toggle_play()
    assert game.lifecycle is Lifecycle.IDLE
    assert game.snake == [(10, 10)]
