"""
Keyboard play mode.

One loop per frame: drain pygame events into game commands, advance the
tick clock by the frame time, then render. Commands and ticks therefore run
in a single ordered sequence on the main thread.

Controls:
  - Arrow keys: steer / move / soft drop (Up rotates in the puzzle)
  - Space: shoot (shooter) or rotate (puzzle)
  - P: start / pause (restarts an ended round)
  - R: reset
  - Escape / close window: quit
"""

from __future__ import annotations

import logging
from typing import Any, Callable

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from arcade.clock import GameClock
from arcade.game import GAME_CLASSES
from arcade.game.base import ArcadeGame
from arcade.game.bounce import BounceGame
from arcade.game.puzzle import Move, PuzzleGame
from arcade.game.shooter import ShooterGame
from arcade.game.snake import DOWN, LEFT, RIGHT, UP, SnakeGame
from arcade.renderer import ArcadeRenderer
from arcade.scores import GameId, ScoreStore

logger = logging.getLogger(__name__)


def build_key_map(game: ArcadeGame) -> dict[int, Callable[[], Any]]:
    """Map pygame key codes to the game's discrete commands."""
    if isinstance(game, SnakeGame):
        return {
            pygame.K_UP: lambda: game.set_direction(UP),
            pygame.K_DOWN: lambda: game.set_direction(DOWN),
            pygame.K_LEFT: lambda: game.set_direction(LEFT),
            pygame.K_RIGHT: lambda: game.set_direction(RIGHT),
        }
    if isinstance(game, ShooterGame):
        return {
            pygame.K_LEFT: lambda: game.move_player("left"),
            pygame.K_RIGHT: lambda: game.move_player("right"),
            pygame.K_SPACE: game.shoot,
        }
    if isinstance(game, BounceGame):
        return {
            pygame.K_LEFT: lambda: game.move_paddle("left"),
            pygame.K_RIGHT: lambda: game.move_paddle("right"),
        }
    if isinstance(game, PuzzleGame):
        return {
            pygame.K_LEFT: lambda: game.move(Move.LEFT),
            pygame.K_RIGHT: lambda: game.move(Move.RIGHT),
            pygame.K_DOWN: lambda: game.move(Move.DOWN),
            pygame.K_UP: lambda: game.move(Move.ROTATE),
            pygame.K_SPACE: lambda: game.move(Move.ROTATE),
        }
    raise TypeError(f"No key map for {type(game).__name__}")


def play_manual(
    game_id: GameId,
    config: dict[str, Any],
    store: ScoreStore | None = None,
) -> None:
    """Run one game in keyboard play mode until the window is closed.

    Args:
        game_id: Which game to play.
        config: Config dict loaded from arcade.yaml.
        store: Best-score store shared across sessions.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    fps = config.get("fps", 60)
    scale = config.get("scale", 1.5)
    periods = config.get("periods", {}).get(game_id.value, {})

    game = GAME_CLASSES[game_id](store)
    clock = GameClock(game, periods)
    renderer = ArcadeRenderer(game, scale=scale)
    # Force renderer init before event loop (pygame must be initialized for event.get())
    elapsed_ms = renderer.render(fps)

    key_map = build_key_map(game)
    logger.info("Starting %s (best score %d)", game_id.value, game.best_score)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                running = False
                break
            elif event.key == pygame.K_p:
                game.toggle_play()
            elif event.key == pygame.K_r:
                game.reset()
                clock.reset()
            elif event.key in key_map:
                key_map[event.key]()

        if not running:
            break

        clock.advance(elapsed_ms)
        elapsed_ms = renderer.render(fps)

    renderer.close()
