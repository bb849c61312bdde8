"""
Axis-aligned rectangles and point containment.

Screen coordinates are used throughout: y grows downward, so "north" is
the smaller y and a rectangle's ``top`` is its minimum y.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class Rectangle:
    """
    An axis-aligned region defined by its center and dimensions.

    Attributes:
        x, y: Center of the region
        width, height: Dimensions of the region
        left, right, top, bottom: Edges (derived)
    """

    x: float
    y: float
    width: float
    height: float

    left: float = field(init=False, repr=False)
    right: float = field(init=False, repr=False)
    top: float = field(init=False, repr=False)
    bottom: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "left", self.x - self.width / 2)
        object.__setattr__(self, "right", self.x + self.width / 2)
        object.__setattr__(self, "top", self.y - self.height / 2)
        object.__setattr__(self, "bottom", self.y + self.height / 2)

    @classmethod
    def from_edges(cls, left: float, top: float, right: float, bottom: float) -> Rectangle:
        """
        Build a rectangle whose edges are exactly the given values.

        Recomputing edges from a center and a size can round differently
        from the parent's edges; keeping them verbatim lets sibling
        quadrants share their common edges bit for bit.
        """
        rect = cls((left + right) / 2, (top + bottom) / 2, right - left, bottom - top)
        object.__setattr__(rect, "left", left)
        object.__setattr__(rect, "right", right)
        object.__setattr__(rect, "top", top)
        object.__setattr__(rect, "bottom", bottom)
        return rect

    @property
    def area(self) -> float:
        return (self.right - self.left) * (self.bottom - self.top)

    @property
    def size(self) -> float:
        """Largest side length, used by the Barnes-Hut opening test."""
        return max(self.width, self.height)

    def quadrants(self) -> Tuple[Rectangle, Rectangle, Rectangle, Rectangle]:
        """
        Split into four quadrants.

        Returns:
            (northwest, northeast, southeast, southwest)
        """
        cx, cy = self.x, self.y
        return (
            Rectangle.from_edges(self.left, self.top, cx, cy),
            Rectangle.from_edges(cx, self.top, self.right, cy),
            Rectangle.from_edges(cx, cy, self.right, self.bottom),
            Rectangle.from_edges(self.left, cy, cx, self.bottom),
        )


def rect_contains(rect: Rectangle, point: Any) -> bool:
    """
    Check whether a point lies inside a rectangle.

    All four edges are inclusive: a point exactly on an edge belongs to
    the rectangle.

    Args:
        rect: Region to test
        point: Any object with ``x`` and ``y`` attributes
    """
    return rect.left <= point.x <= rect.right and rect.top <= point.y <= rect.bottom


__all__ = ["Rectangle", "rect_contains"]
