"""
gravity-sim: 2D Newtonian gravity among point masses.

Pairwise attraction is approximated in O(n log n) per step with a region
quadtree and the Barnes-Hut mass-aggregation scheme.

Available modules:
- geometry: Rectangles and point containment
- kernel: Pairwise distance, attraction and velocity/position updates
- spatial: Quadtree with running mass centers
- physics: Simulation step driver and iterative simulation
- metrics: Energy, momentum and force-error diagnostics
- export: SVG snapshots with quadtree overlay
"""

__version__ = "0.1.0"

# Base classes for building simulations
from .base import BaseSimulation, IterativeSimulation

# Random initialization
from .basic import random_particles

# Configuration
from .config import SimulationConfig
from .geometry import Rectangle, rect_contains

# Force kernel
from .kernel import apply_force, attraction, clamp, distance, integrate

# Diagnostics
from .metrics import (
    center_of_mass,
    direct_forces,
    force_error,
    kinetic_energy,
    linear_momentum,
    max_speed,
    total_mass,
)

# Simulation drivers
from .physics import (
    GravitySimulation,
    ParticleOutOfBoundsWarning,
    accumulate_forces,
    step,
    stepped,
)

# Spatial data structures
from .spatial import QuadTree, QuadTreeInvariantError, QuadTreeNode, build_tree
from .types import Event, EventType, Particle, ParticleLike, SizeType

# Validation utilities
from .validation import (
    InvalidCanvasSizeError,
    InvalidConfigError,
    InvalidMassError,
    InvalidParticleError,
    ValidationError,
    validate_canvas_size,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Particle",
    "Rectangle",
    "rect_contains",
    "EventType",
    "Event",
    "ParticleLike",
    "SizeType",
    # Configuration
    "SimulationConfig",
    # Base classes
    "BaseSimulation",
    "IterativeSimulation",
    # Force kernel
    "distance",
    "attraction",
    "clamp",
    "apply_force",
    "integrate",
    # Spatial data structures
    "QuadTree",
    "QuadTreeNode",
    "QuadTreeInvariantError",
    "build_tree",
    # Simulation
    "GravitySimulation",
    "ParticleOutOfBoundsWarning",
    "accumulate_forces",
    "step",
    "stepped",
    # Initialization
    "random_particles",
    # Metrics
    "total_mass",
    "center_of_mass",
    "linear_momentum",
    "kinetic_energy",
    "max_speed",
    "direct_forces",
    "force_error",
    # Validation
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidParticleError",
    "InvalidMassError",
    "InvalidConfigError",
    "validate_canvas_size",
]
