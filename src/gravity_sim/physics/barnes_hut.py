"""
Barnes-Hut simulation step.

One step rebuilds the quadtree from the live particles, accumulates the
net gravitational force on every particle, then integrates each particle
exactly once:

1. Near field: exact pairwise attraction among the particles sharing a
   leaf, applied equal and opposite.
2. Far field: for every particle, a root traversal that approximates
   distant nodes by their mass center and interacts exactly with the
   particles of nearby leaves. The particle's own leaf is skipped since
   phase 1 already covered it.

Forces are summed into side buffers before any particle moves, so the
result does not depend on the order in which pairs are visited.
"""

from __future__ import annotations

import warnings
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import SimulationConfig
from ..geometry import Rectangle
from ..kernel import attraction, distance, integrate
from ..spatial.quadtree import QuadTree, QuadTreeNode
from ..types import Particle


class ParticleOutOfBoundsWarning(UserWarning):
    """Warning raised when particles fall outside the simulation boundary."""

    pass


def accumulate_forces(
    particles: Sequence[Particle],
    tree: QuadTree,
    G: float,
    min_distance: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Net force on every particle.

    Args:
        particles: Particles, in the order of the returned arrays
        tree: Quadtree populated from ``particles``
        G: Gravitational constant
        min_distance: Softening floor on separations

    Returns:
        (fx, fy) arrays aligned with ``particles``. Particles missing from
        the tree get zero force.
    """
    n = len(particles)
    fx = np.zeros(n, dtype=np.float64)
    fy = np.zeros(n, dtype=np.float64)
    index: Dict[Particle, int] = {p: i for i, p in enumerate(particles)}

    own_leaf: Dict[Particle, QuadTreeNode] = {}
    for leaf in tree.leaves():
        points = leaf.points
        for p in points:
            own_leaf[p] = leaf
        _leaf_forces(points, index, fx, fy, G, min_distance)

    for p, leaf in own_leaf.items():
        i = index[p]
        pfx, pfy = tree.calculate_force(p, G, min_distance, skip=leaf)
        fx[i] += pfx
        fy[i] += pfy

    return fx, fy


def _leaf_forces(
    points: List[Particle],
    index: Dict[Particle, int],
    fx: np.ndarray,
    fy: np.ndarray,
    G: float,
    min_distance: float,
) -> None:
    """Exact pairwise attraction within one leaf."""
    k = len(points)
    for a in range(k):
        pa = points[a]
        ia = index[pa]
        for b in range(a + 1, k):
            pb = points[b]
            ib = index[pb]
            sep = distance(pa, pb)
            gx, gy = attraction(
                sep.dx, sep.dy, sep.dist_sq, sep.distance, pa.mass, pb.mass, G, min_distance
            )
            fx[ia] += gx
            fy[ia] += gy
            fx[ib] -= gx
            fy[ib] -= gy


def step(
    particles: Sequence[Particle],
    config: Optional[SimulationConfig] = None,
    boundary: Optional[Rectangle] = None,
) -> QuadTree:
    """
    Advance particles by one simulation step, in place.

    Args:
        particles: Particles to update
        config: Step options (defaults to ``SimulationConfig()``)
        boundary: Root region of the tree. If None, a padded square around
            the particles is used so that none are dropped.

    Returns:
        The quadtree used for this step (read-only, for overlays)

    Raises:
        QuadTreeInvariantError: If tree construction breaks its invariant.
    """
    if config is None:
        config = SimulationConfig()

    tree = QuadTree.from_particles(
        particles,
        boundary,
        capacity=config.capacity,
        max_depth=config.max_depth,
        theta=config.theta,
    )

    if tree.dropped:
        warnings.warn(
            f"{len(tree.dropped)} particle(s) outside the simulation boundary "
            "were left out of this step.",
            ParticleOutOfBoundsWarning,
            stacklevel=2,
        )

    fx, fy = accumulate_forces(particles, tree, config.G, config.min_distance)

    dropped = set(tree.dropped)
    for i, particle in enumerate(particles):
        if particle in dropped:
            continue
        integrate(particle, float(fx[i]), float(fy[i]), config.max_velocity)

    return tree


def stepped(
    particles: Sequence[Particle],
    config: Optional[SimulationConfig] = None,
    boundary: Optional[Rectangle] = None,
) -> List[Particle]:
    """Pure variant of :func:`step`: returns advanced copies, inputs untouched."""
    copies = [p.copy() for p in particles]
    step(copies, config, boundary)
    return copies


__all__ = [
    "ParticleOutOfBoundsWarning",
    "accumulate_forces",
    "step",
    "stepped",
]
