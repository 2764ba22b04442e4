"""
Falling-block piece definitions with all 4 rotation states.

Each kind carries a fixed table of pre-rotated shapes instead of rotating a
matrix at runtime. Rotation state r+1 is state r turned 90 degrees
clockwise, so rotating four times returns to the spawn shape.

Coordinate convention:
  - Shapes are 2D numpy arrays where 1 marks a filled cell, using the
    smallest bounding box that fits the piece.
  - On the board, row 0 is the top and row increases downward.
  - A piece's (x, y) anchor is the top-left corner of its bounding box.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

import numpy as np

# =============================================================================
# Piece Colors (RGB)
# =============================================================================

COLOR_CYAN   = (0, 255, 255)    # I
COLOR_ORANGE = (255, 165, 0)    # O
COLOR_PURPLE = (160, 32, 240)   # T
COLOR_RED    = (255, 0, 0)      # S
COLOR_GREEN  = (0, 255, 0)      # Z


class PieceKind(enum.IntEnum):
    """Piece type. The value is the cell tag written into the board."""
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5


# =============================================================================
# Rotation Tables
# =============================================================================
# Rotation order: [0=spawn, 1=CW, 2=180, 3=CCW]

SHAPES: dict[PieceKind, list[np.ndarray]] = {
    PieceKind.I: [
        np.array([[1, 1, 1, 1]], dtype=np.int8),
        np.array([[1], [1], [1], [1]], dtype=np.int8),
        np.array([[1, 1, 1, 1]], dtype=np.int8),
        np.array([[1], [1], [1], [1]], dtype=np.int8),
    ],
    PieceKind.O: [
        # All 4 rotations are identical for the O-piece
        np.array([[1, 1], [1, 1]], dtype=np.int8),
        np.array([[1, 1], [1, 1]], dtype=np.int8),
        np.array([[1, 1], [1, 1]], dtype=np.int8),
        np.array([[1, 1], [1, 1]], dtype=np.int8),
    ],
    PieceKind.T: [
        np.array([
            [0, 1, 0],
            [1, 1, 1],
        ], dtype=np.int8),
        np.array([
            [1, 0],
            [1, 1],
            [1, 0],
        ], dtype=np.int8),
        np.array([
            [1, 1, 1],
            [0, 1, 0],
        ], dtype=np.int8),
        np.array([
            [0, 1],
            [1, 1],
            [0, 1],
        ], dtype=np.int8),
    ],
    PieceKind.S: [
        np.array([
            [0, 1, 1],
            [1, 1, 0],
        ], dtype=np.int8),
        np.array([
            [1, 0],
            [1, 1],
            [0, 1],
        ], dtype=np.int8),
        np.array([
            [0, 1, 1],
            [1, 1, 0],
        ], dtype=np.int8),
        np.array([
            [1, 0],
            [1, 1],
            [0, 1],
        ], dtype=np.int8),
    ],
    PieceKind.Z: [
        np.array([
            [1, 1, 0],
            [0, 1, 1],
        ], dtype=np.int8),
        np.array([
            [0, 1],
            [1, 1],
            [1, 0],
        ], dtype=np.int8),
        np.array([
            [1, 1, 0],
            [0, 1, 1],
        ], dtype=np.int8),
        np.array([
            [0, 1],
            [1, 1],
            [1, 0],
        ], dtype=np.int8),
    ],
}

COLORS: dict[PieceKind, tuple[int, int, int]] = {
    PieceKind.I: COLOR_CYAN,
    PieceKind.O: COLOR_ORANGE,
    PieceKind.T: COLOR_PURPLE,
    PieceKind.S: COLOR_RED,
    PieceKind.Z: COLOR_GREEN,
}

NUM_ROTATIONS = 4

PIECE_KINDS: list[PieceKind] = list(PieceKind)


@dataclass(frozen=True)
class Piece:
    """A falling piece: its kind, anchor and rotation state."""
    kind: PieceKind
    x: int
    y: int
    rotation: int = 0

    @property
    def shape(self) -> np.ndarray:
        return SHAPES[self.kind][self.rotation]

    @property
    def color(self) -> tuple[int, int, int]:
        return COLORS[self.kind]

    def moved(self, dx: int, dy: int) -> Piece:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> Piece:
        """Return the piece turned 90 degrees clockwise about the same anchor."""
        return replace(self, rotation=(self.rotation + 1) % NUM_ROTATIONS)

    def cells(self) -> list[tuple[int, int]]:
        """Absolute (x, y) board cells covered by the piece."""
        rows, cols = np.nonzero(self.shape)
        return [(self.x + int(c), self.y + int(r)) for r, c in zip(rows, cols)]


def spawn_piece(kind: PieceKind, board_width: int) -> Piece:
    """Create a piece horizontally centred on the top row of the board."""
    shape_width = SHAPES[kind][0].shape[1]
    return Piece(kind, x=board_width // 2 - shape_width // 2, y=0)
