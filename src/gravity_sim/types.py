"""
Common types for the gravity simulation.

This module provides the fundamental types shared by the simulation:
- Particle: Point mass with position, velocity and rendering attributes
- EventType: Simulation lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Optional, Sequence, TypedDict, Union

from .validation import validate_mass, validate_position


class EventType(IntEnum):
    """
    Simulation lifecycle events.

    - start: Simulation steps have begun
    - tick: Fired once per step (for animation)
    - end: Simulation has stopped
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    step: int
    particle_count: int
    kinetic_energy: Optional[float]


@dataclass(eq=False)
class Particle:
    """
    A point mass.

    Particles compare and hash by identity: the same object is updated in
    place every step and outlives the quadtree built from it.

    Attributes:
        x, y: Position, finite
        vx, vy: Velocity (distance per step)
        mass: Mass, strictly positive
        radius: Drawing radius (not used by the physics)
        color: Drawing color (not used by the physics)
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    mass: float = 1.0
    radius: float = 1.0
    color: str = "#ffffff"

    def __post_init__(self) -> None:
        self.x, self.y = validate_position(self.x, self.y)
        self.mass = validate_mass(self.mass)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    def copy(self) -> Particle:
        """Return an independent copy of this particle."""
        return replace(self)

    def __repr__(self) -> str:
        return f"Particle(x={self.x:.2f}, y={self.y:.2f}, mass={self.mass:g})"


# Type aliases for Pythonic API
ParticleLike = Union[Particle, dict[str, Any], Any]
"""Input type for particles: Particle objects, dicts, or objects with x/y/mass."""

SizeType = Union[tuple[float, float], list[float], Sequence[float]]
"""Canvas size: (width, height) tuple, list, or sequence."""


__all__ = [
    "EventType",
    "Event",
    "Particle",
    "ParticleLike",
    "SizeType",
]
