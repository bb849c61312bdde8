"""
Base classes for simulations.

This module provides abstract base classes that define the common interface
and shared functionality for simulations:

- BaseSimulation: Abstract base with event system, particle management
- IterativeSimulation: For animated simulations with a tick loop
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import (
    Event,
    EventType,
    Particle,
    ParticleLike,
    SizeType,
)
from .validation import InvalidParticleError, validate_canvas_size, validate_iterations

_PARTICLE_FIELDS = ("x", "y", "vx", "vy", "mass", "radius", "color")


class BaseSimulation(ABC):
    """
    Abstract base class for simulations.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Particle management via properties
    - Position initialization
    - Canvas size management

    Example:
        sim = SomeSimulation(
            particles=particles,
            size=(800, 600),
        )
        sim.run()

        # Access results via properties
        for p in sim.particles:
            print(f"({p.x}, {p.y})")
    """

    def __init__(
        self,
        *,
        particles: Optional[Sequence[ParticleLike]] = None,
        size: SizeType = (1.0, 1.0),
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize simulation with configuration.

        Args:
            particles: Particle objects, dicts, or objects with x/y attributes
            size: Canvas size as (width, height)
            random_seed: Random seed for reproducible initialization
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._particles: list[Particle] = []
        self._canvas_size: tuple[float, float] = (1.0, 1.0)
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}
        self._random_seed: Optional[int] = None

        if particles is not None:
            self.particles = particles
        self.size = size
        if random_seed is not None:
            self.random_seed = random_seed

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def particles(self) -> list[Particle]:
        """Get the list of particles."""
        return self._particles

    @particles.setter
    def particles(self, value: Sequence[ParticleLike]) -> None:
        """
        Set particles from a sequence of Particle objects, dicts, or objects.

        Particle objects are kept as-is (identity persists across steps);
        anything else is converted into a new Particle.

        Raises:
            InvalidParticleError: If an entry has no finite position.
            InvalidMassError: If an entry has a non-positive mass.
        """
        self._particles = []
        for i, data in enumerate(value):
            if isinstance(data, Particle):
                self._particles.append(data)
                continue

            if isinstance(data, dict):
                attrs = {k: data[k] for k in _PARTICLE_FIELDS if k in data}
            else:
                # Generic object - copy known attributes
                attrs = {k: getattr(data, k) for k in _PARTICLE_FIELDS if hasattr(data, k)}

            if "x" not in attrs or "y" not in attrs:
                raise InvalidParticleError(f"Particle {i}: missing x/y position")
            self._particles.append(Particle(**attrs))

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        """
        Set canvas size.

        Raises:
            InvalidCanvasSizeError: If width or height is not positive.
        """
        width, height = validate_canvas_size(value)
        self._canvas_size = (width, height)

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible initialization."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        self._random_seed = value

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a simulation event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """
        Run the simulation.

        Returns:
            self (for chaining)
        """
        pass

    def stop(self) -> Self:
        """Stop the simulation."""
        return self

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _initialize_positions(self) -> None:
        """Scatter particles uniformly over the canvas, at rest."""
        if self._random_seed is not None:
            random.seed(self._random_seed)

        w, h = self._canvas_size
        for particle in self._particles:
            particle.x = random.uniform(0, w)
            particle.y = random.uniform(0, h)
            particle.vx = 0.0
            particle.vy = 0.0


class IterativeSimulation(BaseSimulation):
    """
    Base class for step-by-step simulations.

    Provides:
    - Tick-based iteration loop
    - Start/stop control

    Example:
        sim = SomeSimulation(
            particles=particles,
            size=(800, 600),
            iterations=300,
        )
        sim.run()
    """

    def __init__(
        self,
        *,
        particles: Optional[Sequence[ParticleLike]] = None,
        size: SizeType = (1.0, 1.0),
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        iterations: int = 300,
    ) -> None:
        """
        Initialize iterative simulation.

        Args:
            particles: Particles to simulate
            size: Canvas size as (width, height)
            random_seed: Random seed for reproducible initialization
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations: Number of steps performed by run()
        """
        super().__init__(
            particles=particles,
            size=size,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )
        self._running: bool = False
        self._iterations: int = validate_iterations(int(iterations))

    @property
    def iterations(self) -> int:
        """Get the number of steps performed by run()."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        self._iterations = validate_iterations(int(value))

    @property
    def running(self) -> bool:
        """True while kick() is stepping."""
        return self._running

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one step.

        Returns:
            True if the simulation should stop, False otherwise.
        """
        pass

    def kick(self) -> None:
        """Run tick() repeatedly until stopped or max iterations."""
        self._running = True
        for _ in range(self._iterations):
            if not self._running or self.tick():
                break
        self._running = False

    def stop(self) -> Self:
        """Stop the simulation after the current step."""
        self._running = False
        return self


__all__ = [
    "BaseSimulation",
    "IterativeSimulation",
]
