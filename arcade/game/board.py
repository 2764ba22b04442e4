"""
Board logic for the falling-block puzzle grid.

The board is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell
  - 1-5 = PieceKind value of the piece that filled the cell (used for coloring)

There is no hidden buffer zone. Pieces may hang above row 0 while falling;
those cells are legal but are never written into the grid.
"""

from __future__ import annotations

import numpy as np

EMPTY = 0


class Board:
    """Puzzle board with collision detection and line clearing.

    Attributes:
        width: Number of columns (default 10).
        height: Number of rows (default 20).
        grid: 2D numpy array of shape (height, width), dtype int8.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        self.width = width
        self.height = height
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def is_valid_position(self, shape: np.ndarray, x: int, y: int) -> bool:
        """Check whether a shape anchored at (x, y) fits on the board.

        A position is valid if every filled cell of the shape:
          - Is within the side walls (0 <= col < width).
          - Is above the floor (row < height). Rows above the top are allowed.
          - Does not overlap a filled cell on the grid, when on the board.

        Args:
            shape: 2D array where nonzero marks a filled cell.
            x: Column of the shape's top-left corner.
            y: Row of the shape's top-left corner.

        Returns:
            True if the position is valid, False otherwise.
        """
        rows, cols = shape.shape
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] != 0:
                    board_row = y + r
                    board_col = x + c
                    if board_col < 0 or board_col >= self.width:
                        return False
                    if board_row >= self.height:
                        return False
                    if board_row >= 0 and self.grid[board_row, board_col] != EMPTY:
                        return False
        return True

    def place_piece(self, shape: np.ndarray, x: int, y: int, cell_value: int) -> int:
        """Lock a shape onto the board at the given position.

        Writes ``cell_value`` into the grid at each filled cell that lies on
        the board. Does NOT check validity first; the caller must ensure the
        position is valid.

        Args:
            shape: 2D array where nonzero marks a filled cell.
            x: Column of the shape's top-left corner.
            y: Row of the shape's top-left corner.
            cell_value: Value to write (the piece kind).

        Returns:
            Number of filled cells that were above the board and not written.
        """
        skipped = 0
        rows, cols = shape.shape
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] != 0:
                    if y + r < 0:
                        skipped += 1
                        continue
                    self.grid[y + r, x + c] = cell_value
        return skipped

    def full_rows(self) -> list[int]:
        """Return the indices of rows with no empty cell, top to bottom."""
        return [int(r) for r in np.flatnonzero(np.all(self.grid != EMPTY, axis=1))]

    def clear_lines(self) -> int:
        """Remove all full rows at once and shift everything above them down.

        Returns:
            The number of lines cleared.
        """
        full_rows = self.full_rows()
        if not full_rows:
            return 0

        lines_cleared = len(full_rows)
        # Remove full rows and prepend empty rows at the top
        mask = np.ones(self.height, dtype=bool)
        mask[full_rows] = False
        remaining = self.grid[mask]
        empty_rows = np.zeros((lines_cleared, self.width), dtype=np.int8)
        self.grid = np.vstack([empty_rows, remaining])
        return lines_cleared

    def get_grid(self) -> np.ndarray:
        """Return a copy of the board grid.

        Returns:
            A numpy array of shape (height, width), dtype int8.
        """
        return self.grid.copy()

    def reset(self) -> None:
        """Clear the entire board, setting all cells to 0."""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
