"""
Input validation utilities for the gravity simulation.

Provides centralized validation functions for particles, canvas size,
and simulation parameters. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Sequence


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidCanvasSizeError(ValidationError):
    """Raised when canvas dimensions are invalid."""

    pass


class InvalidParticleError(ValidationError):
    """Raised when a particle is malformed."""

    pass


class InvalidMassError(InvalidParticleError):
    """Raised when a particle mass is not a positive finite number."""

    pass


class InvalidConfigError(ValidationError):
    """Raised when a simulation parameter is out of range."""

    pass


def validate_canvas_size(size: Sequence[float]) -> tuple[float, float]:
    """
    Validate canvas size dimensions.

    Args:
        size: [width, height] sequence

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidCanvasSizeError: If dimensions are invalid
    """
    if len(size) < 2:
        raise InvalidCanvasSizeError(
            f"Canvas size must have 2 elements [width, height], got {len(size)}"
        )

    width, height = float(size[0]), float(size[1])

    if not width > 0:
        raise InvalidCanvasSizeError(f"Canvas width must be positive, got {width}")
    if not height > 0:
        raise InvalidCanvasSizeError(f"Canvas height must be positive, got {height}")

    return width, height


def validate_mass(mass: float) -> float:
    """
    Validate a particle mass.

    The force kernel divides by mass, so zero, negative and non-finite
    masses are rejected when the particle is created.

    Raises:
        InvalidMassError: If mass is not a positive finite number
    """
    mass = float(mass)
    if not math.isfinite(mass) or mass <= 0:
        raise InvalidMassError(f"mass must be a positive finite number, got {mass}")
    return mass


def validate_position(x: float, y: float) -> tuple[float, float]:
    """
    Validate a particle position.

    Raises:
        InvalidParticleError: If either coordinate is not a finite number
    """
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidParticleError(f"position must be finite, got ({x}, {y})")
    return x, y


def validate_capacity(capacity: int) -> int:
    """Validate node capacity (particles held before subdividing)."""
    if not math.isfinite(capacity) or int(capacity) != capacity or capacity < 1:
        raise InvalidConfigError(f"capacity must be an integer >= 1, got {capacity}")
    return int(capacity)


def validate_max_depth(max_depth: int) -> int:
    """Validate the quadtree depth bound."""
    if not math.isfinite(max_depth) or int(max_depth) != max_depth or max_depth < 0:
        raise InvalidConfigError(f"max_depth must be an integer >= 0, got {max_depth}")
    return int(max_depth)


def validate_theta(theta: float) -> float:
    """
    Validate the Barnes-Hut threshold.

    Raises:
        InvalidConfigError: If theta is negative or not finite
    """
    theta = float(theta)
    if not math.isfinite(theta) or theta < 0:
        raise InvalidConfigError(f"theta must be >= 0, got {theta}")
    return theta


def validate_max_velocity(max_velocity: float) -> float:
    """Validate the per-axis velocity clamp."""
    max_velocity = float(max_velocity)
    if not max_velocity > 0:
        raise InvalidConfigError(f"max_velocity must be positive, got {max_velocity}")
    return max_velocity


def validate_min_distance(min_distance: float) -> float:
    """Validate the minimum interaction distance."""
    min_distance = float(min_distance)
    if not math.isfinite(min_distance) or min_distance < 0:
        raise InvalidConfigError(f"min_distance must be >= 0, got {min_distance}")
    return min_distance


def validate_gravitational_constant(g: float) -> float:
    """Validate the gravitational constant (any finite value)."""
    g = float(g)
    if not math.isfinite(g):
        raise InvalidConfigError(f"G must be finite, got {g}")
    return g


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is positive.

    Raises:
        ValidationError: If iterations < 1
    """
    if iterations < 1:
        raise ValidationError(f"iterations must be >= 1, got {iterations}")
    return iterations


__all__ = [
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidParticleError",
    "InvalidMassError",
    "InvalidConfigError",
    "validate_canvas_size",
    "validate_mass",
    "validate_position",
    "validate_capacity",
    "validate_max_depth",
    "validate_theta",
    "validate_max_velocity",
    "validate_min_distance",
    "validate_gravitational_constant",
    "validate_iterations",
]
