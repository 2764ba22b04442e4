"""
Vertical space shooter.

The player slides along the bottom edge and fires bullets upward; enemies
spawn at the top on their own timer and fall. A round is lost when an enemy
reaches the bottom of the field or touches the player.

Coordinates are pixels with y growing downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.geometry import Rect, clamp, overlaps
from arcade.scores import GameId

GAME_WIDTH = 300
GAME_HEIGHT = 400
PLAYER_SIZE = 20
BULLET_SIZE = 4
ENEMY_SIZE = 16

BULLET_SPEED = 5
ENEMY_SPEED = 2
PLAYER_STEP = 20
HIT_REWARD = 100

# Bullets leave the muzzle this far above the player's top edge.
MUZZLE_GAP = 10


@dataclass
class Bullet:
    id: int
    x: float
    y: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, BULLET_SIZE, BULLET_SIZE)


@dataclass
class Enemy:
    id: int
    x: float
    y: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, ENEMY_SIZE, ENEMY_SIZE)


class ShooterGame(ArcadeGame):
    """Space shooter simulation.

    Attributes:
        player_x: Left edge of the player ship.
        bullets: Bullets in flight, oldest first.
        enemies: Enemies on the field, oldest first.
    """

    GAME_ID = GameId.SHOOTER
    TIMERS = {"step": 50, "spawn_enemy": 2000}

    def _reset_state(self) -> None:
        self.player_x: float = GAME_WIDTH / 2 - PLAYER_SIZE / 2
        self.bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self._next_bullet_id = 0
        self._next_enemy_id = 0

    @property
    def player_rect(self) -> Rect:
        return Rect(self.player_x, GAME_HEIGHT - PLAYER_SIZE, PLAYER_SIZE, PLAYER_SIZE)

    def move_player(self, direction: str) -> None:
        """Slide the ship one step ``"left"`` or ``"right"``, staying on the field."""
        if not self.is_playing:
            return
        if direction == "left":
            new_x = self.player_x - PLAYER_STEP
        elif direction == "right":
            new_x = self.player_x + PLAYER_STEP
        else:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.player_x = clamp(new_x, 0, GAME_WIDTH - PLAYER_SIZE)

    def shoot(self) -> None:
        """Fire one bullet from the centre of the ship."""
        if not self.is_playing:
            return
        self.bullets.append(
            Bullet(
                id=self._next_bullet_id,
                x=self.player_x + PLAYER_SIZE / 2 - BULLET_SIZE / 2,
                y=GAME_HEIGHT - PLAYER_SIZE - MUZZLE_GAP,
            )
        )
        self._next_bullet_id += 1

    def spawn_enemy(self) -> None:
        """Drop a new enemy in just above the top edge at a random column."""
        if not self.is_playing:
            return
        self.enemies.append(
            Enemy(
                id=self._next_enemy_id,
                x=self._rng.random() * (GAME_WIDTH - ENEMY_SIZE),
                y=-ENEMY_SIZE,
            )
        )
        self._next_enemy_id += 1

    def step(self) -> None:
        """Advance bullets and enemies, then resolve hits."""
        if not self.is_playing:
            return

        for bullet in self.bullets:
            bullet.y -= BULLET_SPEED
        self.bullets = [b for b in self.bullets if b.y > -BULLET_SIZE]

        # An enemy that was already at the bottom edge before moving got past.
        breached = any(enemy.y >= GAME_HEIGHT for enemy in self.enemies)
        for enemy in self.enemies:
            enemy.y += ENEMY_SPEED
        self.enemies = [e for e in self.enemies if e.y < GAME_HEIGHT + ENEMY_SIZE]
        if breached:
            self._finish(Lifecycle.LOST)
            return

        self._resolve_hits()

        player = self.player_rect
        if any(overlaps(enemy.rect, player) for enemy in self.enemies):
            self._finish(Lifecycle.LOST)

    def _resolve_hits(self) -> None:
        """Remove each bullet together with the first enemy it overlaps."""
        spent: set[int] = set()
        destroyed: set[int] = set()
        for bullet in self.bullets:
            for enemy in self.enemies:
                if enemy.id in destroyed:
                    continue
                if overlaps(bullet.rect, enemy.rect):
                    spent.add(bullet.id)
                    destroyed.add(enemy.id)
                    self.score += HIT_REWARD
                    break
        if spent:
            self.bullets = [b for b in self.bullets if b.id not in spent]
            self.enemies = [e for e in self.enemies if e.id not in destroyed]

    def _snapshot(self) -> dict[str, Any]:
        return {
            "width": GAME_WIDTH,
            "height": GAME_HEIGHT,
            "player_x": self.player_x,
            "bullets": [(b.id, b.x, b.y) for b in self.bullets],
            "enemies": [(e.id, e.x, e.y) for e in self.enemies],
        }
