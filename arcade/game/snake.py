"""
Snake on a square grid.

The snake moves one cell per tick in its current direction, grows by one
segment when it eats, and dies on the wall or on its own body.
"""

from __future__ import annotations

from typing import Any

from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.geometry import cell_rect, overlaps
from arcade.scores import GameId

GRID_SIZE = 20
INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((10, 10),)
INITIAL_DIRECTION = (1, 0)
INITIAL_FOOD = (15, 15)
FOOD_REWARD = 10

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)


class SnakeGame(ArcadeGame):
    """Snake simulation.

    Attributes:
        snake: Segments as (x, y) cells, head first.
        direction: (dx, dy) applied on the next step.
        food: Cell holding the food.
    """

    GAME_ID = GameId.SNAKE
    TIMERS = {"step": 150}

    def _reset_state(self) -> None:
        self.snake: list[tuple[int, int]] = list(INITIAL_SNAKE)
        self.direction: tuple[int, int] = INITIAL_DIRECTION
        self.food: tuple[int, int] = INITIAL_FOOD

    def set_direction(self, direction: tuple[int, int]) -> bool:
        """Change direction for the next step.

        Reversing straight into the body is refused.

        Returns:
            True if the direction was accepted.
        """
        if not self.is_playing:
            return False
        dx, dy = direction
        if (dx, dy) == (-self.direction[0], -self.direction[1]):
            return False
        self.direction = (dx, dy)
        return True

    def step(self) -> None:
        """Advance the snake by one cell."""
        if not self.is_playing:
            return

        head_x, head_y = self.snake[0]
        head = (head_x + self.direction[0], head_y + self.direction[1])

        if self._hits_wall(head) or self._hits_body(head):
            self._finish(Lifecycle.LOST)
            return

        self.snake.insert(0, head)
        if overlaps(cell_rect(*head), cell_rect(*self.food)):
            self.score += FOOD_REWARD
            self._place_food()
        else:
            self.snake.pop()

    def _hits_wall(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE)

    def _hits_body(self, cell: tuple[int, int]) -> bool:
        head = cell_rect(*cell)
        return any(overlaps(head, cell_rect(*segment)) for segment in self.snake)

    def _place_food(self) -> None:
        """Move the food to a random cell not covered by the snake.

        A snake that fills the whole grid has nowhere left to go and wins.
        """
        occupied = set(self.snake)
        free = [
            (x, y)
            for y in range(GRID_SIZE)
            for x in range(GRID_SIZE)
            if (x, y) not in occupied
        ]
        if not free:
            self._finish(Lifecycle.WON)
            return
        self.food = self._rng.choice(free)

    def _snapshot(self) -> dict[str, Any]:
        return {
            "grid_size": GRID_SIZE,
            "snake": list(self.snake),
            "direction": self.direction,
            "food": self.food,
        }
