"""
Pairwise gravity primitives.

Pure functions for the separation between two mass points, the attraction
between them, and the velocity/position updates that follow. Every velocity
update is clamped per axis to keep the stylized simulation stable.
"""

from __future__ import annotations

import math
import sys
from typing import Any, NamedTuple, Tuple

# Upper bound on a single attraction. Leaves headroom for rounding in the
# unit vector and for summing several capped forces.
MAX_FORCE = sys.float_info.max / 16


class Separation(NamedTuple):
    """Distance information between two points (``dx = p1.x - p2.x``)."""

    distance: float
    dist_sq: float
    dx: float
    dy: float


def distance(p1: Any, p2: Any) -> Separation:
    """
    Euclidean separation between two points.

    Args:
        p1, p2: Objects with ``x`` and ``y`` attributes

    Returns:
        Separation(distance, dist_sq, dx, dy)
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    dist_sq = dx * dx + dy * dy
    return Separation(math.sqrt(dist_sq), dist_sq, dx, dy)


def attraction(
    dx: float,
    dy: float,
    dist_sq: float,
    distance: float,
    mass_a: float,
    mass_b: float,
    G: float,
    min_distance: float = 0.0,
) -> Tuple[float, float]:
    """
    Gravitational force pulling body A toward body B.

    F = G * mA * mB / d^2, directed along -(dx, dy) / d.

    Coincident bodies have no defined direction and exert no force on each
    other. Separations below ``min_distance`` are clamped to it so the
    magnitude stays bounded as bodies approach. The magnitude is always
    finite, so an axis with no offset never receives NaN.

    Args:
        dx, dy: Offset of A relative to B
        dist_sq, distance: Squared and plain separation
        mass_a, mass_b: Masses of A and B
        G: Gravitational constant
        min_distance: Softening floor on the separation

    Returns:
        (fx, fy) force on A; B receives the opposite
    """
    if distance == 0:
        return 0.0, 0.0

    if distance < min_distance:
        dist_sq = min_distance * min_distance

    force = clamp(G * mass_a * mass_b / dist_sq, MAX_FORCE)
    fx = -force * (dx / distance)
    fy = -force * (dy / distance)
    return fx, fy


def clamp(value: float, limit: float) -> float:
    """Clamp value to [-limit, limit]."""
    return max(-limit, min(value, limit))


def apply_force(
    point_a: Any,
    point_b: Any,
    force: Tuple[float, float],
    max_velocity: float,
) -> None:
    """
    Apply an equal and opposite impulse to a pair, then advance both.

    A gains ``force / mA``, B loses ``force / mB``; each velocity axis is
    clamped to [-max_velocity, max_velocity] and positions then move by
    the clamped velocity.
    """
    fx, fy = force
    point_a.vx = clamp(point_a.vx + fx / point_a.mass, max_velocity)
    point_a.vy = clamp(point_a.vy + fy / point_a.mass, max_velocity)
    point_b.vx = clamp(point_b.vx - fx / point_b.mass, max_velocity)
    point_b.vy = clamp(point_b.vy - fy / point_b.mass, max_velocity)

    point_a.x += point_a.vx
    point_a.y += point_a.vy
    point_b.x += point_b.vx
    point_b.y += point_b.vy


def integrate(particle: Any, fx: float, fy: float, max_velocity: float) -> None:
    """Apply a net force to one particle and advance it by one step."""
    particle.vx = clamp(particle.vx + fx / particle.mass, max_velocity)
    particle.vy = clamp(particle.vy + fy / particle.mass, max_velocity)
    particle.x += particle.vx
    particle.y += particle.vy


__all__ = [
    "Separation",
    "distance",
    "attraction",
    "clamp",
    "apply_force",
    "integrate",
    "MAX_FORCE",
]
