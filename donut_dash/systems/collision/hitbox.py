"""
hitbox.py
---------
Axis-aligned rectangle geometry shared by every collision check.

Projectiles are circles but collide as their bounding square; there is no
true circle-rectangle test anywhere in the game.
"""

from typing import NamedTuple


class Rect(NamedTuple):
    """Top-left anchored rectangle."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self):
        return (self.x + self.width / 2, self.y + self.height / 2)


def overlaps(a, b) -> bool:
    """
    Strict AABB overlap test.

    Rectangles that only share an edge do not overlap.

    Args:
        a, b: Anything with x, y, width, height attributes

    Returns:
        bool: True if the interiors intersect
    """
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


def circle_bounds(x: float, y: float, radius: float) -> Rect:
    """Bounding square of a circle centred at (x, y)."""
    return Rect(x - radius, y - radius, radius * 2, radius * 2)
