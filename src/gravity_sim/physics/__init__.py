"""
Gravity simulation drivers.

This module provides:
- step / stepped: One Barnes-Hut simulation step (in place / on copies)
- accumulate_forces: Net force on every particle from a populated quadtree
- GravitySimulation: Iterative simulation with lifecycle events
"""

from .barnes_hut import ParticleOutOfBoundsWarning, accumulate_forces, step, stepped
from .simulation import GravitySimulation

__all__ = [
    "GravitySimulation",
    "ParticleOutOfBoundsWarning",
    "accumulate_forces",
    "step",
    "stepped",
]
