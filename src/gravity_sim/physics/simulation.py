"""
Interactive gravity simulation.

Wraps the Barnes-Hut step in the iterative lifecycle: a rendering loop
calls tick() once per frame, reads particle positions between ticks and
may draw the last quadtree as an overlay.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from ..base import IterativeSimulation
from ..config import (
    DEFAULT_CAPACITY,
    DEFAULT_G,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_VELOCITY,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_THETA,
    SimulationConfig,
)
from ..geometry import Rectangle
from ..metrics import kinetic_energy
from ..spatial.quadtree import QuadTree
from ..types import Event, EventType, ParticleLike, SizeType
from ..validation import (
    validate_capacity,
    validate_gravitational_constant,
    validate_max_depth,
    validate_max_velocity,
    validate_min_distance,
    validate_theta,
)
from .barnes_hut import step


class GravitySimulation(IterativeSimulation):
    """
    Newtonian gravity among point masses, approximated with Barnes-Hut.

    Each tick rebuilds a quadtree over the particles, computes near-field
    forces exactly and far-field forces from aggregated mass centers, and
    moves every particle once.

    Example:
        sim = GravitySimulation(
            particles=random_particles(500, (1000, 1000), random_seed=1),
            size=(1000, 1000),
            theta=0.5,
            iterations=100,
        )
        sim.run()

        for p in sim.particles:
            print(f"({p.x:.1f}, {p.y:.1f})")
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
        # IterativeSimulation parameters
        iterations: int = 300,
        # Gravity-specific parameters
        G: float = DEFAULT_G,
        max_velocity: float = DEFAULT_MAX_VELOCITY,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        theta: float = DEFAULT_THETA,
        min_distance: float = DEFAULT_MIN_DISTANCE,
        bounded: bool = False,
    ) -> None:
        """
        Initialize gravity simulation.

        Args:
            particles: Particles to simulate
            size: Canvas size as (width, height)
            random_seed: Random seed for random_init
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations: Number of steps performed by run()
            G: Gravitational constant. Default 3.
            max_velocity: Per-axis velocity clamp. Default 0.1.
            capacity: Particles per quadtree node before subdividing. Default 1.
            max_depth: Quadtree depth bound. Default 8.
            theta: Barnes-Hut accuracy (0 = exact, 0.5 = balanced).
            min_distance: Softening floor on separations. Default 0.01.
            bounded: If True, the tree covers only the canvas and particles
                leaving it stop being simulated. If False, the tree follows
                the particles.
        """
        super().__init__(
            particles=particles,
            size=size,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
            iterations=iterations,
        )
        self._G: float = validate_gravitational_constant(G)
        self._max_velocity: float = validate_max_velocity(max_velocity)
        self._capacity: int = validate_capacity(capacity)
        self._max_depth: int = validate_max_depth(max_depth)
        self._theta: float = validate_theta(theta)
        self._min_distance: float = validate_min_distance(min_distance)
        self._bounded: bool = bool(bounded)

        self._tree: Optional[QuadTree] = None
        self._step_count: int = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def G(self) -> float:
        """Get gravitational constant."""
        return self._G

    @G.setter
    def G(self, value: float) -> None:
        self._G = validate_gravitational_constant(value)

    @property
    def max_velocity(self) -> float:
        """Get per-axis velocity clamp."""
        return self._max_velocity

    @max_velocity.setter
    def max_velocity(self, value: float) -> None:
        self._max_velocity = validate_max_velocity(value)

    @property
    def capacity(self) -> int:
        """Get quadtree node capacity."""
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = validate_capacity(value)

    @property
    def max_depth(self) -> int:
        """Get quadtree depth bound."""
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        self._max_depth = validate_max_depth(value)

    @property
    def theta(self) -> float:
        """Get Barnes-Hut theta parameter (accuracy)."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        self._theta = validate_theta(value)

    @property
    def min_distance(self) -> float:
        """Get softening floor on separations."""
        return self._min_distance

    @min_distance.setter
    def min_distance(self, value: float) -> None:
        self._min_distance = validate_min_distance(value)

    @property
    def bounded(self) -> bool:
        """Get whether the tree is restricted to the canvas."""
        return self._bounded

    @bounded.setter
    def bounded(self, value: bool) -> None:
        self._bounded = bool(value)

    @property
    def config(self) -> SimulationConfig:
        """Snapshot of the current step options."""
        return SimulationConfig(
            G=self._G,
            max_velocity=self._max_velocity,
            capacity=self._capacity,
            max_depth=self._max_depth,
            theta=self._theta,
            min_distance=self._min_distance,
        )

    @property
    def boundary(self) -> Optional[Rectangle]:
        """Root region of the tree: the canvas when bounded, else None."""
        if not self._bounded:
            return None
        w, h = self._canvas_size
        return Rectangle(w / 2, h / 2, w, h)

    @property
    def tree(self) -> Optional[QuadTree]:
        """Quadtree built by the last tick (read-only, for overlays)."""
        return self._tree

    @property
    def step_count(self) -> int:
        """Number of ticks performed so far."""
        return self._step_count

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def run(self, **kwargs: Any) -> Self:
        """
        Run the simulation for ``iterations`` steps.

        Keyword Args:
            random_init: Scatter particles over the canvas first (default: False)

        Returns:
            self for chaining
        """
        if kwargs.get("random_init", False):
            self._initialize_positions()

        self.trigger(
            {
                "type": EventType.start,
                "step": self._step_count,
                "particle_count": len(self._particles),
            }
        )

        self.kick()

        self.trigger(
            {
                "type": EventType.end,
                "step": self._step_count,
                "particle_count": len(self._particles),
                "kinetic_energy": kinetic_energy(self._particles),
            }
        )
        return self

    def tick(self) -> bool:
        """
        Perform one simulation step.

        Returns:
            True if there is nothing left to simulate, False otherwise.
        """
        if not self._particles:
            return True

        self._tree = step(self._particles, self.config, self.boundary)
        self._step_count += 1

        self.trigger(
            {
                "type": EventType.tick,
                "step": self._step_count,
                "particle_count": self._tree.particle_count,
                "kinetic_energy": kinetic_energy(self._particles),
            }
        )
        return False


__all__ = ["GravitySimulation"]
