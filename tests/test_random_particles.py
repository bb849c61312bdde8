"""
Tests for random particle initialization.
"""

import re

import pytest

from gravity_sim import InvalidCanvasSizeError, Particle, ValidationError, random_particles


class TestRandomParticlesBasic:
    """Basic functionality tests."""

    def test_count(self):
        """The requested number of particles is created."""
        particles = random_particles(25, (800, 600))
        assert len(particles) == 25
        assert all(isinstance(p, Particle) for p in particles)

    def test_within_canvas(self):
        """Particles lie inside the canvas."""
        for p in random_particles(200, (800, 600), random_seed=3):
            assert 0 <= p.x <= 800
            assert 0 <= p.y <= 600

    def test_at_rest(self):
        """Particles start with zero velocity."""
        for p in random_particles(10, (100, 100), random_seed=1):
            assert (p.vx, p.vy) == (0.0, 0.0)

    def test_ranges(self):
        """Mass and radius are drawn from the given ranges."""
        particles = random_particles(
            100, (100, 100), mass_range=(2.0, 4.0), radius_range=(0.5, 1.0), random_seed=8
        )
        for p in particles:
            assert 2.0 <= p.mass <= 4.0
            assert 0.5 <= p.radius <= 1.0

    def test_colors(self):
        """Colors are #rrggbb strings."""
        for p in random_particles(20, (100, 100), random_seed=4):
            assert re.fullmatch(r"#[0-9a-f]{6}", p.color)

    def test_empty(self):
        """Zero particles is allowed."""
        assert random_particles(0, (100, 100)) == []


class TestRandomParticlesConfiguration:
    """Seed, margin and validation tests."""

    def test_seed_reproducible(self):
        """The same seed gives the same particles."""
        a = random_particles(30, (500, 500), random_seed=42)
        b = random_particles(30, (500, 500), random_seed=42)
        assert [(p.x, p.y, p.mass, p.color) for p in a] == [(p.x, p.y, p.mass, p.color) for p in b]

    def test_different_seeds(self):
        """Different seeds give different positions."""
        a = random_particles(30, (500, 500), random_seed=1)
        b = random_particles(30, (500, 500), random_seed=2)
        assert [(p.x, p.y) for p in a] != [(p.x, p.y) for p in b]

    def test_margin(self):
        """Margin keeps particles away from the edges."""
        for p in random_particles(100, (400, 300), margin=50, random_seed=6):
            assert 50 <= p.x <= 350
            assert 50 <= p.y <= 250

    def test_margin_too_large(self):
        """An oversized margin falls back to the full canvas."""
        for p in random_particles(50, (100, 100), margin=80, random_seed=6):
            assert 0 <= p.x <= 100
            assert 0 <= p.y <= 100

    def test_negative_count_raises(self):
        with pytest.raises(ValidationError, match="count"):
            random_particles(-1, (100, 100))

    def test_non_positive_mass_range_raises(self):
        with pytest.raises(ValidationError, match="mass_range"):
            random_particles(5, (100, 100), mass_range=(0.0, 1.0))

    def test_invalid_size_raises(self):
        with pytest.raises(InvalidCanvasSizeError):
            random_particles(5, (0, 100))
