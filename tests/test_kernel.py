"""Tests for the pairwise gravity kernel."""

import math

import pytest

from gravity_sim import Particle, apply_force, attraction, clamp, distance, integrate
from gravity_sim.kernel import MAX_FORCE


class TestDistance:
    """Tests for distance()."""

    def test_pythagorean(self):
        """3-4-5 triangle."""
        sep = distance(Particle(0.0, 0.0), Particle(3.0, 4.0))
        assert sep.distance == 5.0
        assert sep.dist_sq == 25.0
        assert sep.dx == -3.0
        assert sep.dy == -4.0

    def test_tuple_unpacking(self):
        """Separation unpacks as (distance, dist_sq, dx, dy)."""
        d, d_sq, dx, dy = distance(Particle(1.0, 1.0), Particle(1.0, 1.0))
        assert (d, d_sq, dx, dy) == (0.0, 0.0, 0.0, 0.0)


class TestAttraction:
    """Tests for attraction()."""

    def test_magnitude_and_direction(self):
        """F = G mA mB / d^2, pulling A toward B."""
        fx, fy = attraction(-10.0, 0.0, 100.0, 10.0, 100.0, 100.0, 3.0)
        assert fx == pytest.approx(300.0)
        assert fy == pytest.approx(0.0)

    def test_diagonal_direction(self):
        """Components follow the unit vector from A to B."""
        sep = distance(Particle(0.0, 0.0), Particle(3.0, 4.0))
        fx, fy = attraction(sep.dx, sep.dy, sep.dist_sq, sep.distance, 1.0, 1.0, 25.0)
        # |F| = 25 * 1 * 1 / 25 = 1
        assert fx == pytest.approx(0.6)
        assert fy == pytest.approx(0.8)

    def test_inverse_square(self):
        """Doubling the distance quarters the force."""
        near, _ = attraction(-1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0)
        far, _ = attraction(-2.0, 0.0, 4.0, 2.0, 1.0, 1.0, 1.0)
        assert near == pytest.approx(4 * far)

    def test_coincident_points_no_force(self):
        """Zero separation yields zero force instead of a division error."""
        assert attraction(0.0, 0.0, 0.0, 0.0, 5.0, 5.0, 3.0) == (0.0, 0.0)

    def test_min_distance_clamps_magnitude(self):
        """Separations below min_distance use min_distance for the magnitude."""
        fx, fy = attraction(-0.001, 0.0, 1e-6, 0.001, 1.0, 1.0, 2.0, min_distance=1.0)
        assert fx == pytest.approx(2.0)
        assert fy == 0.0

    def test_subnormal_separation_stays_finite(self):
        """A tiny separation without softening gives a finite force and no NaN."""
        fx, fy = attraction(0.0, -1e-160, 1e-320, 1e-160, 1.0, 1.0, 3.0, min_distance=0.0)
        assert fx == 0.0
        assert math.isfinite(fy)
        assert fy > 0

    def test_force_capped(self):
        """The magnitude never exceeds MAX_FORCE."""
        fx, _ = attraction(-1e-150, 0.0, 1e-300, 1e-150, 1e10, 1e10, 1e10)
        assert fx == MAX_FORCE

    def test_min_distance_ignored_when_far(self):
        """min_distance has no effect beyond it."""
        plain = attraction(-10.0, 0.0, 100.0, 10.0, 1.0, 1.0, 1.0)
        clamped = attraction(-10.0, 0.0, 100.0, 10.0, 1.0, 1.0, 1.0, min_distance=1.0)
        assert plain == clamped


class TestClamp:
    """Tests for clamp()."""

    def test_within_range(self):
        assert clamp(0.05, 0.1) == 0.05

    def test_upper_and_lower(self):
        assert clamp(5.0, 0.1) == 0.1
        assert clamp(-5.0, 0.1) == -0.1


class TestApplyForce:
    """Tests for the eager pairwise update."""

    def test_equal_and_opposite(self):
        """A gains f/mA, B loses f/mB, then both advance."""
        a = Particle(0.0, 0.0, mass=1.0)
        b = Particle(10.0, 0.0, mass=2.0)

        apply_force(a, b, (0.05, 0.0), max_velocity=1.0)

        assert a.vx == pytest.approx(0.05)
        assert b.vx == pytest.approx(-0.025)
        assert a.mass * a.vx + b.mass * b.vx == pytest.approx(0.0)
        assert a.x == pytest.approx(0.05)
        assert b.x == pytest.approx(9.975)
        assert a.y == 0.0 and b.y == 0.0

    def test_velocity_clamped_per_axis(self):
        """Each velocity component is clamped independently."""
        a = Particle(0.0, 0.0, mass=1.0)
        b = Particle(1.0, 1.0, mass=1.0)

        apply_force(a, b, (100.0, -100.0), max_velocity=0.1)

        assert (a.vx, a.vy) == (0.1, -0.1)
        assert (b.vx, b.vy) == (-0.1, 0.1)
        assert a.x == pytest.approx(0.1)
        assert a.y == pytest.approx(-0.1)
        assert b.x == pytest.approx(0.9)
        assert b.y == pytest.approx(1.1)


class TestIntegrate:
    """Tests for the single-particle update."""

    def test_velocity_then_position(self):
        """Velocity changes by f/m, position by the new velocity."""
        p = Particle(5.0, 5.0, vx=0.01, vy=0.0, mass=4.0)
        integrate(p, 0.2, -0.2, max_velocity=1.0)
        assert p.vx == pytest.approx(0.06)
        assert p.vy == pytest.approx(-0.05)
        assert p.x == pytest.approx(5.06)
        assert p.y == pytest.approx(4.95)

    def test_clamped(self):
        """Huge forces still respect the clamp."""
        p = Particle(0.0, 0.0, mass=1e-9)
        integrate(p, 1e12, -1e12, max_velocity=0.1)
        assert p.vx == 0.1
        assert p.vy == -0.1
        assert math.isfinite(p.x) and math.isfinite(p.y)
