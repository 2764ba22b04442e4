"""
Pygame renderer for the arcade games.

Draws a game's ``get_state()`` snapshot: the playfield on the left and a
sidebar with score, best score and the round's status on the right. The
renderer only reads state; it never calls game commands.
"""

from __future__ import annotations

from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from arcade.game import bounce, shooter
from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.pieces import COLORS
from arcade.scores import GameId


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (30, 30, 30)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
MUTED_TEXT_COLOR = (150, 150, 160)
SIDEBAR_BG_COLOR = (20, 20, 20)
EMPTY_CELL_COLOR = (0, 0, 0)
OVERLAY_ALPHA = 150

SNAKE_HEAD_COLOR = (0, 255, 0)
SNAKE_BODY_COLOR = (0, 255, 255)
FOOD_COLOR = (255, 165, 0)
PLAYER_COLOR = (0, 255, 0)
BULLET_COLOR = (255, 165, 0)
ENEMY_COLOR = (255, 60, 60)
BALL_COLOR = (0, 255, 0)
PADDLE_COLOR = (0, 255, 255)
BRICK_ROW_COLORS = [
    (255, 60, 60), (255, 165, 0), (255, 255, 0),
    (0, 255, 0), (0, 255, 255), (160, 32, 240),
]

# ── Piece kind value -> RGB color mapping ─────────────────────────────────
PIECE_COLORS: dict[int, tuple[int, int, int]] = {
    int(kind): color for kind, color in COLORS.items()
}

TITLES: dict[GameId, str] = {
    GameId.SNAKE: "SNAKE",
    GameId.SHOOTER: "SPACE SHOOTER",
    GameId.BOUNCE: "BOUNCE BALL",
    GameId.PUZZLE: "BLOCK PUZZLE",
}

# Playfield size in pixels before scaling (grid games use 20 px cells).
CELL_PIXELS = 20


class ArcadeRenderer:
    """Pygame-based renderer for one arcade game.

    Attributes:
        game: The game being rendered.
        scale: Pixel multiplier applied to the playfield.
        field_width: Pixel width of the playfield.
        field_height: Pixel height of the playfield.
        sidebar_width: Pixel width of the sidebar.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH: int = 180

    def __init__(self, game: ArcadeGame, scale: float = 1.5) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().

        Args:
            game: The game instance to render.
            scale: Pixel multiplier for the playfield.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.game = game
        self.scale = scale
        base_width, base_height = self._field_size(game.get_state())
        self.field_width = int(base_width * scale)
        self.field_height = int(base_height * scale)
        self.sidebar_width = self.SIDEBAR_WIDTH
        self.window_width = self.field_width + self.sidebar_width
        self.window_height = self.field_height

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def render(self, fps: int = 60) -> int:
        """Draw the current game state and wait for the next frame.

        Args:
            fps: Target frames per second for the display clock.

        Returns:
            Milliseconds elapsed since the previous frame.
        """
        if not self._initialized:
            self._init_pygame()

        state = self.game.get_state()
        self.screen.fill(BACKGROUND_COLOR)
        pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (0, 0, self.field_width, self.field_height))

        draw = {
            GameId.SNAKE: self._draw_snake,
            GameId.SHOOTER: self._draw_shooter,
            GameId.BOUNCE: self._draw_bounce,
            GameId.PUZZLE: self._draw_puzzle,
        }[state["game_id"]]
        draw(state)

        pygame.draw.rect(self.screen, BORDER_COLOR, (0, 0, self.field_width, self.field_height), 2)
        self._draw_sidebar(state)
        if state["lifecycle"].ended:
            self._draw_game_over_overlay(state)

        pygame.display.flip()
        return self._clock.tick(fps)

    def _init_pygame(self) -> None:
        """Initialize Pygame display, clock, and fonts.

        Called once on the first render() invocation.
        """
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(TITLES[self.game.GAME_ID])
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20)
        self._small_font = pygame.font.SysFont("monospace", 14)
        self._large_font = pygame.font.SysFont("monospace", 36, bold=True)
        self._initialized = True

    @staticmethod
    def _field_size(state: dict[str, Any]) -> tuple[int, int]:
        if "grid_size" in state:
            size = state["grid_size"] * CELL_PIXELS
            return size, size
        if "board_grid" in state:
            rows, cols = state["board_grid"].shape
            return cols * CELL_PIXELS, rows * CELL_PIXELS
        return state["width"], state["height"]

    def _rect(self, x: float, y: float, w: float, h: float) -> tuple[int, int, int, int]:
        """Scale a playfield rectangle to screen pixels."""
        s = self.scale
        return int(x * s), int(y * s), max(1, int(w * s)), max(1, int(h * s))

    def _draw_cell(self, col: int, row: int, color: tuple[int, int, int]) -> None:
        rect = self._rect(col * CELL_PIXELS, row * CELL_PIXELS, CELL_PIXELS, CELL_PIXELS)
        pygame.draw.rect(self.screen, color, rect)
        # Draw a slightly darker border for 3D effect
        darker = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(self.screen, darker, rect, 1)

    def _draw_snake(self, state: dict[str, Any]) -> None:
        fx, fy = state["food"]
        self._draw_cell(fx, fy, FOOD_COLOR)
        for index, (x, y) in enumerate(state["snake"]):
            self._draw_cell(x, y, SNAKE_HEAD_COLOR if index == 0 else SNAKE_BODY_COLOR)

    def _draw_shooter(self, state: dict[str, Any]) -> None:
        height = state["height"]
        pygame.draw.rect(
            self.screen,
            PLAYER_COLOR,
            self._rect(state["player_x"], height - shooter.PLAYER_SIZE, shooter.PLAYER_SIZE, shooter.PLAYER_SIZE),
        )
        for _, x, y in state["bullets"]:
            pygame.draw.rect(self.screen, BULLET_COLOR, self._rect(x, y, shooter.BULLET_SIZE, shooter.BULLET_SIZE))
        for _, x, y in state["enemies"]:
            pygame.draw.rect(self.screen, ENEMY_COLOR, self._rect(x, y, shooter.ENEMY_SIZE, shooter.ENEMY_SIZE))

    def _draw_bounce(self, state: dict[str, Any]) -> None:
        for brick_id, x, y, destroyed in state["bricks"]:
            if destroyed:
                continue
            color = BRICK_ROW_COLORS[(brick_id // bounce.BRICKS_PER_ROW) % len(BRICK_ROW_COLORS)]
            rect = self._rect(x, y, bounce.BRICK_WIDTH, bounce.BRICK_HEIGHT)
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BACKGROUND_COLOR, rect, 1)

        pygame.draw.rect(
            self.screen,
            PADDLE_COLOR,
            self._rect(state["paddle_x"], bounce.PADDLE_Y, bounce.PADDLE_WIDTH, bounce.PADDLE_HEIGHT),
        )
        bx, by, _, _ = state["ball"]
        pygame.draw.ellipse(self.screen, BALL_COLOR, self._rect(bx, by, bounce.BALL_SIZE, bounce.BALL_SIZE))

    def _draw_puzzle(self, state: dict[str, Any]) -> None:
        grid = state["board_grid"]
        rows, cols = grid.shape
        for row in range(rows):
            for col in range(cols):
                cell_value = int(grid[row, col])
                if cell_value != 0:
                    self._draw_cell(col, row, PIECE_COLORS.get(cell_value, (128, 128, 128)))
                else:
                    # Grid lines
                    rect = self._rect(col * CELL_PIXELS, row * CELL_PIXELS, CELL_PIXELS, CELL_PIXELS)
                    pygame.draw.rect(self.screen, GRID_LINE_COLOR, rect, 1)

        piece = state["current_piece"]
        if piece is None:
            return
        for col, row in state["current_cells"]:
            if 0 <= row < rows and 0 <= col < cols:
                self._draw_cell(col, row, piece.color)

    def _draw_sidebar(self, state: dict[str, Any]) -> None:
        """Draw the sidebar with title, score, best score and status."""
        sidebar_x = self.field_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )
        pygame.draw.line(
            self.screen,
            BORDER_COLOR,
            (sidebar_x, 0),
            (sidebar_x, self.window_height),
            2,
        )

        text_x = sidebar_x + 15
        text_y = 20
        self._draw_text(TITLES[state["game_id"]], text_x, text_y, font=self._small_font)

        text_y += 45
        self._draw_text("SCORE", text_x, text_y)
        self._draw_text(str(state["score"]), text_x, text_y + 25)

        text_y += 65
        self._draw_text("BEST", text_x, text_y)
        self._draw_text(str(state["best_score"]), text_x, text_y + 25)

        if "lines_cleared" in state:
            text_y += 65
            self._draw_text("LINES", text_x, text_y)
            self._draw_text(str(state["lines_cleared"]), text_x, text_y + 25)

        text_y += 65
        status = {
            Lifecycle.IDLE: "P: start",
            Lifecycle.PLAYING: "P: pause",
            Lifecycle.WON: "YOU WIN",
            Lifecycle.LOST: "GAME OVER",
        }[state["lifecycle"]]
        self._draw_text(status, text_x, text_y, color=MUTED_TEXT_COLOR, font=self._small_font)
        self._draw_text("R: reset", text_x, text_y + 20, color=MUTED_TEXT_COLOR, font=self._small_font)

    def _draw_game_over_overlay(self, state: dict[str, Any]) -> None:
        """Draw a semi-transparent overlay with the round's result."""
        overlay = pygame.Surface((self.field_width, self.field_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        self.screen.blit(overlay, (0, 0))

        won = state["lifecycle"] is Lifecycle.WON
        title = "YOU WIN!" if won else "GAME OVER"
        text_title = self._large_font.render(title, True, (50, 255, 50) if won else (255, 50, 50))
        text_score = self._font.render(f"Final Score: {state['score']}", True, TEXT_COLOR)
        text_restart = self._small_font.render("Press P or R to play again", True, MUTED_TEXT_COLOR)

        cx = self.field_width // 2
        cy = self.field_height // 2
        self.screen.blit(text_title, (cx - text_title.get_width() // 2, cy - 40))
        self.screen.blit(text_score, (cx - text_score.get_width() // 2, cy + 10))
        self.screen.blit(text_restart, (cx - text_restart.get_width() // 2, cy + 40))

    def _draw_text(
        self,
        text: str,
        x: int,
        y: int,
        color: tuple[int, int, int] = TEXT_COLOR,
        font: Any = None,
    ) -> None:
        """Render text onto the screen.

        Args:
            text: String to display.
            x: Pixel X position.
            y: Pixel Y position.
            color: RGB color tuple for the text.
            font: Font to use; defaults to the regular sidebar font.
        """
        surface = (font or self._font).render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
