"""Tests for rectangles and point containment."""

import pytest

from gravity_sim import Particle, Rectangle, rect_contains


class TestRectangle:
    """Tests for the Rectangle dataclass."""

    def test_edges_from_center(self):
        """Edges are derived from center and size."""
        rect = Rectangle(x=50.0, y=40.0, width=100.0, height=60.0)
        assert rect.left == 0.0
        assert rect.right == 100.0
        assert rect.top == 10.0
        assert rect.bottom == 70.0

    def test_area_and_size(self):
        """Area and largest side."""
        rect = Rectangle(0.0, 0.0, 8.0, 6.0)
        assert rect.area == 48.0
        assert rect.size == 8.0

    def test_immutable(self):
        """Rectangles cannot be modified after creation."""
        rect = Rectangle(0.0, 0.0, 1.0, 1.0)
        with pytest.raises(AttributeError):
            rect.x = 5.0  # type: ignore[misc]

    def test_from_edges_keeps_edges(self):
        """from_edges stores the given edges verbatim."""
        rect = Rectangle.from_edges(0.1, 0.2, 0.7, 0.9)
        assert rect.left == 0.1
        assert rect.top == 0.2
        assert rect.right == 0.7
        assert rect.bottom == 0.9
        assert rect.x == pytest.approx(0.4)
        assert rect.y == pytest.approx(0.55)

    def test_quadrants_order_and_corners(self):
        """Quadrants come back NW, NE, SE, SW with the expected corners."""
        nw, ne, se, sw = Rectangle(0.0, 0.0, 8.0, 6.0).quadrants()

        assert (nw.left, nw.top, nw.right, nw.bottom) == (-4.0, -3.0, 0.0, 0.0)
        assert (ne.left, ne.top, ne.right, ne.bottom) == (0.0, -3.0, 4.0, 0.0)
        assert (se.left, se.top, se.right, se.bottom) == (0.0, 0.0, 4.0, 3.0)
        assert (sw.left, sw.top, sw.right, sw.bottom) == (-4.0, 0.0, 0.0, 3.0)

    def test_quadrants_half_size_centers(self):
        """Each quadrant has half the size, centered at +/- width/4, height/4."""
        rect = Rectangle(10.0, 20.0, 40.0, 80.0)
        nw, ne, se, sw = rect.quadrants()

        for quad in (nw, ne, se, sw):
            assert quad.width == 20.0
            assert quad.height == 40.0

        assert (nw.x, nw.y) == (0.0, 0.0)
        assert (ne.x, ne.y) == (20.0, 0.0)
        assert (se.x, se.y) == (20.0, 40.0)
        assert (sw.x, sw.y) == (0.0, 40.0)

    def test_quadrants_tile_parent(self):
        """Quadrant areas sum to the parent area and share edges exactly."""
        rect = Rectangle(0.3, 0.7, 1.1, 2.9)
        nw, ne, se, sw = rect.quadrants()

        assert nw.area + ne.area + se.area + sw.area == pytest.approx(rect.area)
        assert nw.right == ne.left == se.left == sw.right
        assert nw.bottom == sw.top == ne.bottom == se.top
        assert nw.left == sw.left == rect.left
        assert ne.right == se.right == rect.right
        assert nw.top == ne.top == rect.top
        assert sw.bottom == se.bottom == rect.bottom


class TestRectContains:
    """Tests for closed-interval containment."""

    def test_inside(self):
        """Interior points are contained."""
        rect = Rectangle(50.0, 50.0, 100.0, 100.0)
        assert rect_contains(rect, Particle(25.0, 75.0))
        assert rect_contains(rect, Particle(50.0, 50.0))

    def test_edges_and_corners_inclusive(self):
        """Points exactly on edges or corners are contained."""
        rect = Rectangle(50.0, 50.0, 100.0, 100.0)
        assert rect_contains(rect, Particle(0.0, 50.0))
        assert rect_contains(rect, Particle(100.0, 50.0))
        assert rect_contains(rect, Particle(50.0, 0.0))
        assert rect_contains(rect, Particle(50.0, 100.0))
        assert rect_contains(rect, Particle(0.0, 0.0))
        assert rect_contains(rect, Particle(100.0, 100.0))

    def test_outside(self):
        """Points beyond any edge are not contained."""
        rect = Rectangle(50.0, 50.0, 100.0, 100.0)
        assert not rect_contains(rect, Particle(-0.001, 50.0))
        assert not rect_contains(rect, Particle(100.001, 50.0))
        assert not rect_contains(rect, Particle(50.0, -0.001))
        assert not rect_contains(rect, Particle(50.0, 100.001))

    def test_accepts_any_point_like(self):
        """Any object with x and y works."""

        class Point:
            x = 1.0
            y = 1.0

        assert rect_contains(Rectangle(0.0, 0.0, 4.0, 4.0), Point())
