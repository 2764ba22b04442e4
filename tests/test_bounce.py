"""Tests for the breakout simulation."""

import pytest

from arcade.game.base import Lifecycle
from arcade.game.bounce import (
    BALL_SIZE,
    BRICK_ROWS,
    BRICKS_PER_ROW,
    GAME_HEIGHT,
    GAME_WIDTH,
    PADDLE_WIDTH,
    PADDLE_Y,
    Ball,
    BounceGame,
)
from arcade.scores import GameId, MemoryScoreStore


def _playing(**kwargs) -> BounceGame:
    game = BounceGame(**kwargs)
    game.toggle_play()
    return game


def _clear_bricks(game: BounceGame, keep: int = 0) -> None:
    for brick in game.bricks[keep:]:
        brick.destroyed = True


def test_initial_layout():
    game = BounceGame()
    assert len(game.bricks) == BRICKS_PER_ROW * BRICK_ROWS
    assert game.bricks[0].x == 0 and game.bricks[0].y == 50
    assert game.bricks[-1].x == 270 and game.bricks[-1].y == 125
    assert (game.ball.x, game.ball.y, game.ball.vx, game.ball.vy) == (150, 300, 3, -3)
    assert game.paddle_x == 120


def test_step_moves_ball_by_velocity():
    game = _playing()
    game.step()
    assert (game.ball.x, game.ball.y) == (153, 297)


def test_side_walls_reflect_horizontal_velocity():
    game = _playing()
    game.ball = Ball(1, 200, -3, 2)
    game.step()
    assert game.ball.vx == 3
    game.ball = Ball(GAME_WIDTH - BALL_SIZE - 1, 200, 3, 2)
    game.step()
    assert game.ball.vx == -3


def test_top_wall_reflects_vertical_velocity():
    game = _playing()
    _clear_bricks(game, keep=1)
    game.ball = Ball(150, 2, 1, -3)
    game.step()
    assert game.ball.vy == 3


def test_paddle_sends_ball_up_and_steers_it():
    game = _playing()
    game.paddle_x = 100
    # Ball lands on the paddle's left edge.
    game.ball = Ball(100, PADDLE_Y - BALL_SIZE, 0, 3)
    game.step()
    assert game.ball.vy == -3
    assert game.ball.vx == pytest.approx(-3.0)

    # Ball lands in the middle of the paddle.
    game.ball = Ball(100 + PADDLE_WIDTH / 2, PADDLE_Y - BALL_SIZE, 0, 3)
    game.step()
    assert game.ball.vy == -3
    assert game.ball.vx == pytest.approx(0.0)


def test_paddle_never_sends_ball_down():
    game = _playing()
    game.paddle_x = 100
    game.ball = Ball(110, PADDLE_Y, 0, -3)
    game.step()
    assert game.ball.vy == -3


def test_only_first_brick_is_destroyed_per_tick():
    game = _playing()
    # Overlaps bricks 0 and 1 (both in the first row) after moving.
    game.ball = Ball(25, 60, 0, -1)
    game.step()
    destroyed = [b.id for b in game.bricks if b.destroyed]
    assert destroyed == [0]
    assert game.ball.vy == 1
    assert game.score == 10


def test_clearing_all_bricks_wins_with_bonus():
    store = MemoryScoreStore()
    game = _playing(store=store)
    _clear_bricks(game, keep=1)
    game.score = 590
    brick = game.bricks[0]
    game.ball = Ball(brick.x + 5, brick.y + 5, 0, -1)
    game.step()
    assert game.lifecycle is Lifecycle.WON
    assert game.score == 590 + 10 + 1000
    assert store.get(GameId.BOUNCE) == 1600


def test_ball_below_field_loses():
    game = _playing()
    game.ball = Ball(5, GAME_HEIGHT - 1, 0, 3)
    game.step()
    assert game.lifecycle is Lifecycle.LOST


def test_move_paddle_clamped_and_ignored_when_idle():
    game = BounceGame()
    game.move_paddle("left")
    assert game.paddle_x == 120
    game.toggle_play()
    for _ in range(10):
        game.move_paddle("left")
    assert game.paddle_x == 0
    for _ in range(10):
        game.move_paddle("right")
    assert game.paddle_x == GAME_WIDTH - PADDLE_WIDTH


def test_reset_twice_matches_reset_once():
    game = _playing()
    for _ in range(30):
        game.step()
    once = game.reset()
    twice = game.reset()
    assert once == twice
    assert not any(destroyed for *_, destroyed in once["bricks"])
