"""
Falling-block puzzle: movement, locking, line clears and spawning.

Gravity and the player's soft drop share one path: both call
``move(Move.DOWN)``. A downward move that is blocked locks the piece,
clears complete rows, scores them and spawns the next piece.
"""

from __future__ import annotations

import enum
import random
from typing import Any

from arcade.game.base import ArcadeGame, Lifecycle
from arcade.game.board import Board
from arcade.game.pieces import PIECE_KINDS, Piece, PieceKind, spawn_piece
from arcade.scores import GameId, ScoreStore

BOARD_WIDTH = 10
BOARD_HEIGHT = 20
LINE_REWARD = 100


class Move(enum.Enum):
    """Player moves for the falling piece."""
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"


class PuzzleGame(ArcadeGame):
    """Falling-block puzzle game.

    Attributes:
        board: The game board.
        current_piece: The falling piece, or None before the first spawn
            and after a lost round.
        lines_cleared: Total rows cleared this round.
    """

    GAME_ID = GameId.PUZZLE
    TIMERS = {"drop": 1000}

    def __init__(
        self,
        store: ScoreStore | None = None,
        rng: random.Random | None = None,
        board_width: int = BOARD_WIDTH,
        board_height: int = BOARD_HEIGHT,
    ) -> None:
        self.board = Board(board_width, board_height)
        super().__init__(store, rng)

    def _reset_state(self) -> None:
        self.board.reset()
        self.current_piece: Piece | None = None
        self.lines_cleared: int = 0

    def _on_start(self) -> None:
        if self.current_piece is None:
            self._spawn_piece()

    def move(self, direction: Move | str) -> bool:
        """Try to move or rotate the falling piece.

        A blocked LEFT, RIGHT or ROTATE is ignored. A blocked DOWN locks
        the piece in place.

        Args:
            direction: A Move or its string value.

        Returns:
            True if the piece moved or rotated.
        """
        direction = Move(direction)
        if not self.is_playing or self.current_piece is None:
            return False

        piece = self.current_piece
        if direction is Move.LEFT:
            candidate = piece.moved(-1, 0)
        elif direction is Move.RIGHT:
            candidate = piece.moved(1, 0)
        elif direction is Move.DOWN:
            candidate = piece.moved(0, 1)
        else:
            # No wall kicks: the rotated shape must fit at the same anchor.
            candidate = piece.rotated()

        if self.board.is_valid_position(candidate.shape, candidate.x, candidate.y):
            self.current_piece = candidate
            return True
        if direction is Move.DOWN:
            self._lock_piece()
        return False

    def drop(self) -> None:
        """Automatic descent; identical to a soft drop."""
        self.move(Move.DOWN)

    def _lock_piece(self) -> None:
        """Write the falling piece into the board, clear lines and spawn the next."""
        piece = self.current_piece
        self.current_piece = None
        hidden = self.board.place_piece(piece.shape, piece.x, piece.y, int(piece.kind))

        lines = self.board.clear_lines()
        if lines:
            self.lines_cleared += lines
            self.score += LINE_REWARD * lines

        if hidden:
            # Locked with cells still above the top edge.
            self._finish(Lifecycle.LOST)
            return
        self._spawn_piece()

    def _spawn_piece(self, kind: PieceKind | None = None) -> bool:
        """Spawn a random piece centred on the top row.

        Returns:
            True if the piece fits, False if the spawn is blocked (game over).
        """
        if kind is None:
            kind = self._rng.choice(PIECE_KINDS)
        piece = spawn_piece(kind, self.board.width)
        if not self.board.is_valid_position(piece.shape, piece.x, piece.y):
            self._finish(Lifecycle.LOST)
            return False
        self.current_piece = piece
        return True

    def _snapshot(self) -> dict[str, Any]:
        piece = self.current_piece
        return {
            "board_grid": self.board.get_grid(),
            "current_piece": piece,
            "current_cells": piece.cells() if piece is not None else [],
            "lines_cleared": self.lines_cleared,
        }
