"""
collision_hitbox.py
-------------------
Axis-aligned collision bounds and the overlap test used by every
collision check in the game.

Screen convention: y grows downward, so ``top`` is the smaller y value.
Bounds are never stored on entities; each entity derives a fresh Bounds
from its position and size every time it is queried.
"""

from typing import NamedTuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


class Bounds(NamedTuple):
    """Axis-aligned rectangle described by its four edges."""
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float,
                  inset: float = 0.0) -> "Bounds":
        """
        Build bounds for a box at (x, y), shrunk by ``inset`` on every side.

        An inset makes the hitbox smaller than the visual box.
        """
        return cls(x + inset, x + width - inset, y + inset, y + height - inset)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self):
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    def as_rect(self):
        """Return (x, y, w, h) for drawing."""
        return self.left, self.top, self.width, self.height


def intersects(a: Bounds, b: Bounds) -> bool:
    """
    Return True if the two boxes overlap on both axes.

    Edges that exactly touch count as overlapping.
    """
    return not (b.left > a.right or
                b.right < a.left or
                b.top > a.bottom or
                b.bottom < a.top)
