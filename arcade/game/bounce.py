"""
Ball-and-paddle breakout.

The ball bounces off the side and top walls, the paddle and the bricks.
Where the ball lands on the paddle steers its horizontal speed. Clearing
every brick wins the round with a bonus; letting the ball fall past the
bottom edge loses it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.geometry import Rect, clamp, overlaps
from arcade.scores import GameId

GAME_WIDTH = 300
GAME_HEIGHT = 400
BALL_SIZE = 12
PADDLE_WIDTH = 60
PADDLE_HEIGHT = 8
PADDLE_Y = GAME_HEIGHT - PADDLE_HEIGHT - 10
PADDLE_STEP = 30

BRICK_WIDTH = 30
BRICK_HEIGHT = 15
BRICKS_PER_ROW = 10
BRICK_ROWS = 6
BRICK_TOP = 50

BALL_START = (GAME_WIDTH / 2, GAME_HEIGHT - 100)
BALL_START_VELOCITY = (3.0, -3.0)
# Horizontal speed range when deflecting off the paddle: (-3, 3).
PADDLE_DEFLECTION = 6.0

BRICK_REWARD = 10
WIN_BONUS = 1000


@dataclass
class Ball:
    x: float
    y: float
    vx: float
    vy: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, BALL_SIZE, BALL_SIZE)


@dataclass
class Brick:
    id: int
    x: float
    y: float
    destroyed: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, BRICK_WIDTH, BRICK_HEIGHT)


def build_bricks() -> list[Brick]:
    """Lay out the starting wall of bricks in row-major order."""
    return [
        Brick(
            id=row * BRICKS_PER_ROW + col,
            x=col * BRICK_WIDTH,
            y=row * BRICK_HEIGHT + BRICK_TOP,
        )
        for row in range(BRICK_ROWS)
        for col in range(BRICKS_PER_ROW)
    ]


class BounceGame(ArcadeGame):
    """Breakout simulation.

    Attributes:
        ball: The ball's position and velocity.
        paddle_x: Left edge of the paddle.
        bricks: Every brick, destroyed or not, in hit-test order.
    """

    GAME_ID = GameId.BOUNCE
    TIMERS = {"step": 16}

    def _reset_state(self) -> None:
        self.ball = Ball(*BALL_START, *BALL_START_VELOCITY)
        self.paddle_x: float = GAME_WIDTH / 2 - PADDLE_WIDTH / 2
        self.bricks: list[Brick] = build_bricks()

    @property
    def paddle_rect(self) -> Rect:
        return Rect(self.paddle_x, PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT)

    @property
    def bricks_left(self) -> int:
        return sum(1 for brick in self.bricks if not brick.destroyed)

    def move_paddle(self, direction: str) -> None:
        """Slide the paddle one step ``"left"`` or ``"right"``, staying on the field."""
        if not self.is_playing:
            return
        if direction == "left":
            new_x = self.paddle_x - PADDLE_STEP
        elif direction == "right":
            new_x = self.paddle_x + PADDLE_STEP
        else:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.paddle_x = clamp(new_x, 0, GAME_WIDTH - PADDLE_WIDTH)

    def step(self) -> None:
        """Move the ball one tick and resolve walls, paddle and bricks."""
        if not self.is_playing:
            return

        ball = self.ball
        ball.x += ball.vx
        ball.y += ball.vy

        if ball.x <= 0:
            ball.vx = abs(ball.vx)
        elif ball.x >= GAME_WIDTH - BALL_SIZE:
            ball.vx = -abs(ball.vx)
        if ball.y <= 0:
            ball.vy = abs(ball.vy)

        if overlaps(ball.rect, self.paddle_rect):
            ball.vy = -abs(ball.vy)
            hit = (ball.x - self.paddle_x) / PADDLE_WIDTH
            ball.vx = (hit - 0.5) * PADDLE_DEFLECTION

        self._hit_brick()
        if self.bricks_left == 0:
            self.score += WIN_BONUS
            self._finish(Lifecycle.WON)
            return

        if ball.y > GAME_HEIGHT:
            self._finish(Lifecycle.LOST)

    def _hit_brick(self) -> None:
        """Destroy the first standing brick the ball overlaps, if any."""
        ball_rect = self.ball.rect
        for brick in self.bricks:
            if brick.destroyed:
                continue
            if overlaps(ball_rect, brick.rect):
                brick.destroyed = True
                self.ball.vy = -self.ball.vy
                self.score += BRICK_REWARD
                return

    def _snapshot(self) -> dict[str, Any]:
        return {
            "width": GAME_WIDTH,
            "height": GAME_HEIGHT,
            "ball": (self.ball.x, self.ball.y, self.ball.vx, self.ball.vy),
            "paddle_x": self.paddle_x,
            "bricks": [(b.id, b.x, b.y, b.destroyed) for b in self.bricks],
        }
