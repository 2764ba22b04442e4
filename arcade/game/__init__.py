"""Game logic: shared geometry and lifecycle, and the four simulations."""

from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.board import Board
from arcade.game.bounce import BounceGame
from arcade.game.geometry import Rect, overlaps
from arcade.game.pieces import PIECE_KINDS, Piece, PieceKind
from arcade.game.puzzle import Move, PuzzleGame
from arcade.game.shooter import ShooterGame
from arcade.game.snake import SnakeGame
from arcade.scores import GameId

GAME_CLASSES: dict[GameId, type[ArcadeGame]] = {
    GameId.SNAKE: SnakeGame,
    GameId.SHOOTER: ShooterGame,
    GameId.BOUNCE: BounceGame,
    GameId.PUZZLE: PuzzleGame,
}

__all__ = [
    "ArcadeGame",
    "Lifecycle",
    "Board",
    "BounceGame",
    "Rect",
    "overlaps",
    "PIECE_KINDS",
    "Piece",
    "PieceKind",
    "Move",
    "PuzzleGame",
    "ShooterGame",
    "SnakeGame",
    "GAME_CLASSES",
]
