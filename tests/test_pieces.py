"""Tests for piece rotation tables."""

import numpy as np
import pytest

from arcade.game.pieces import (
    COLOR_GREEN,
    COLOR_RED,
    NUM_ROTATIONS,
    PIECE_KINDS,
    SHAPES,
    Piece,
    PieceKind,
    spawn_piece,
)


@pytest.mark.parametrize("kind", PIECE_KINDS)
def test_each_rotation_is_the_clockwise_turn_of_the_previous(kind):
    shapes = SHAPES[kind]
    assert len(shapes) == NUM_ROTATIONS
    for r in range(NUM_ROTATIONS):
        expected = np.rot90(shapes[r], k=-1)
        assert np.array_equal(shapes[(r + 1) % NUM_ROTATIONS], expected)


@pytest.mark.parametrize("kind", PIECE_KINDS)
def test_rotation_preserves_cell_count(kind):
    counts = {int(np.count_nonzero(shape)) for shape in SHAPES[kind]}
    assert counts == {4}


def test_o_piece_twice_rotated_is_unchanged():
    piece = Piece(PieceKind.O, 4, 0)
    twice = piece.rotated().rotated()
    assert np.array_equal(twice.shape, piece.shape)


def test_four_rotations_return_to_spawn():
    piece = Piece(PieceKind.T, 3, 5)
    turned = piece.rotated().rotated().rotated().rotated()
    assert turned == piece


def test_cells_are_offset_by_anchor():
    piece = Piece(PieceKind.T, 3, 5)
    assert sorted(piece.cells()) == [(3, 6), (4, 5), (4, 6), (5, 6)]


@pytest.mark.parametrize(
    "kind, x",
    [(PieceKind.I, 3), (PieceKind.O, 4), (PieceKind.T, 4), (PieceKind.S, 4), (PieceKind.Z, 4)],
)
def test_spawn_is_centred_on_the_top_row(kind, x):
    piece = spawn_piece(kind, 10)
    assert (piece.x, piece.y, piece.rotation) == (x, 0, 0)


def test_green_piece_steps_down_to_the_right():
    green = Piece(PieceKind.Z, 0, 0)
    assert green.color == COLOR_GREEN
    assert np.array_equal(green.shape, np.array([[1, 1, 0], [0, 1, 1]]))
    assert Piece(PieceKind.S, 0, 0).color == COLOR_RED
