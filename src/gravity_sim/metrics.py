"""
Simulation diagnostics.

Provides quantitative measures over a set of particles:
- Total mass and center of mass
- Linear momentum and kinetic energy
- Direct-sum reference forces and the error of an approximate force field

All metrics are pure functions of the current particle state.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .config import DEFAULT_G
from .kernel import attraction, distance
from .types import Particle


def total_mass(particles: Sequence[Particle]) -> float:
    """Sum of particle masses."""
    return math.fsum(p.mass for p in particles)


def center_of_mass(particles: Sequence[Particle]) -> Tuple[float, float]:
    """
    Mass-weighted average position.

    Raises:
        ValueError: If there are no particles
    """
    if not particles:
        raise ValueError("center_of_mass requires at least one particle")

    mass = total_mass(particles)
    cx = math.fsum(p.x * p.mass for p in particles) / mass
    cy = math.fsum(p.y * p.mass for p in particles) / mass
    return cx, cy


def linear_momentum(particles: Sequence[Particle]) -> Tuple[float, float]:
    """Total momentum (sum of m * v)."""
    px = math.fsum(p.mass * p.vx for p in particles)
    py = math.fsum(p.mass * p.vy for p in particles)
    return px, py


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """Total kinetic energy (sum of m * |v|^2 / 2)."""
    return math.fsum(0.5 * p.mass * (p.vx * p.vx + p.vy * p.vy) for p in particles)


def max_speed(particles: Sequence[Particle]) -> float:
    """Largest speed among the particles (0 if there are none)."""
    return max((math.hypot(p.vx, p.vy) for p in particles), default=0.0)


def direct_forces(
    particles: Sequence[Particle],
    G: float = DEFAULT_G,
    min_distance: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Net force on every particle by direct summation over all pairs.

    Time Complexity: O(n^2). Used as the reference when measuring the
    Barnes-Hut approximation error.
    """
    n = len(particles)
    fx = np.zeros(n, dtype=np.float64)
    fy = np.zeros(n, dtype=np.float64)

    for i in range(n):
        for j in range(i + 1, n):
            sep = distance(particles[i], particles[j])
            gx, gy = attraction(
                sep.dx,
                sep.dy,
                sep.dist_sq,
                sep.distance,
                particles[i].mass,
                particles[j].mass,
                G,
                min_distance,
            )
            fx[i] += gx
            fy[i] += gy
            fx[j] -= gx
            fy[j] -= gy

    return fx, fy


def force_error(
    approx: Tuple[np.ndarray, np.ndarray],
    exact: Tuple[np.ndarray, np.ndarray],
) -> float:
    """
    Mean relative error of an approximate force field.

    Each particle contributes |F_approx - F_exact| / |F_exact|; particles
    with zero exact force are ignored.
    """
    ax, ay = approx
    ex, ey = exact
    exact_norm = np.hypot(ex, ey)
    mask = exact_norm > 0
    if not np.any(mask):
        return 0.0
    diff = np.hypot(ax - ex, ay - ey)
    return float(np.mean(diff[mask] / exact_norm[mask]))


__all__ = [
    "total_mass",
    "center_of_mass",
    "linear_momentum",
    "kinetic_energy",
    "max_speed",
    "direct_forces",
    "force_error",
]
