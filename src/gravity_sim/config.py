"""
Simulation parameters.

The reference values are tuned for a stylized on-screen simulation, not
for physical accuracy.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .validation import (
    validate_capacity,
    validate_gravitational_constant,
    validate_max_depth,
    validate_max_velocity,
    validate_min_distance,
    validate_theta,
)

DEFAULT_G = 3.0
DEFAULT_MAX_VELOCITY = 0.1
DEFAULT_CAPACITY = 1
DEFAULT_MAX_DEPTH = 8
DEFAULT_THETA = 0.5
DEFAULT_MIN_DISTANCE = 0.01


@dataclass(frozen=True)
class SimulationConfig:
    """
    Options recognised by one simulation step.

    Attributes:
        G: Gravitational constant
        max_velocity: Per-axis velocity clamp applied after every update
        capacity: Particles a quadtree node holds before subdividing
        max_depth: Depth at which nodes stop subdividing and keep every particle
        theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
        min_distance: Separations below this are clamped before computing force
    """

    G: float = DEFAULT_G
    max_velocity: float = DEFAULT_MAX_VELOCITY
    capacity: int = DEFAULT_CAPACITY
    max_depth: int = DEFAULT_MAX_DEPTH
    theta: float = DEFAULT_THETA
    min_distance: float = DEFAULT_MIN_DISTANCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "G", validate_gravitational_constant(self.G))
        object.__setattr__(self, "max_velocity", validate_max_velocity(self.max_velocity))
        object.__setattr__(self, "capacity", validate_capacity(self.capacity))
        object.__setattr__(self, "max_depth", validate_max_depth(self.max_depth))
        object.__setattr__(self, "theta", validate_theta(self.theta))
        object.__setattr__(self, "min_distance", validate_min_distance(self.min_distance))

    def replace(self, **changes: Any) -> SimulationConfig:
        """Return a copy with the given fields changed (and re-validated)."""
        return dataclasses.replace(self, **changes)


__all__ = [
    "SimulationConfig",
    "DEFAULT_G",
    "DEFAULT_MAX_VELOCITY",
    "DEFAULT_CAPACITY",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_THETA",
    "DEFAULT_MIN_DISTANCE",
]
