"""
Axis-aligned rectangle geometry shared by every game.

All collision checks in the arcade go through ``overlaps`` so that edge
behaviour is identical everywhere: rectangles whose edges only touch do not
collide, and rectangles with a zero or negative size never collide.
"""

from __future__ import annotations

from typing import NamedTuple


class Rect(NamedTuple):
    """Axis-aligned rectangle given by its top-left corner and size."""
    x: float
    y: float
    width: float
    height: float


def overlaps(a: Rect, b: Rect) -> bool:
    """Return True if the interiors of two rectangles intersect.

    Uses half-open intervals on both axes, so ``a.x + a.width == b.x`` is
    not a collision. A rectangle with no area never collides, even when it
    sits inside another one.

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        True if the rectangles overlap on both axes.
    """
    if a.width <= 0 or a.height <= 0 or b.width <= 0 or b.height <= 0:
        return False
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def cell_rect(x: int, y: int) -> Rect:
    """Return the unit rectangle covering grid cell (x, y)."""
    return Rect(x, y, 1, 1)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into the closed interval [low, high]."""
    return max(low, min(high, value))
