"""
Random particle initialization.

Scatters particles at random positions within the canvas bounds.
Useful as the starting state of an interactive run and as a
reproducible workload for benchmarks and tests.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from ..types import Particle, SizeType
from ..validation import ValidationError, validate_canvas_size


def random_color(rng: random.Random) -> str:
    """Random opaque color as a #rrggbb string."""
    return "#{:02x}{:02x}{:02x}".format(rng.randrange(256), rng.randrange(256), rng.randrange(256))


def random_particles(
    count: int,
    size: SizeType,
    *,
    mass_range: Tuple[float, float] = (1.0, 10.0),
    radius_range: Tuple[float, float] = (1.0, 3.0),
    margin: float = 0.0,
    random_seed: Optional[int] = None,
) -> list[Particle]:
    """
    Create particles at uniformly random positions, at rest.

    Args:
        count: Number of particles
        size: Canvas size as (width, height)
        mass_range: (low, high) bounds for uniformly drawn masses
        radius_range: (low, high) bounds for uniformly drawn radii
        margin: Padding from canvas edges. Ignored along an axis where it
            leaves no room.
        random_seed: Seed for reproducible output

    Returns:
        List of new particles

    Raises:
        ValidationError: If count is negative or mass_range allows mass <= 0
        InvalidCanvasSizeError: If the canvas size is invalid
    """
    if count < 0:
        raise ValidationError(f"count must be >= 0, got {count}")
    if min(mass_range) <= 0:
        raise ValidationError(f"mass_range must be positive, got {mass_range}")

    width, height = validate_canvas_size(size)
    rng = random.Random(random_seed)

    margin = max(0.0, float(margin))
    min_x, max_x = margin, width - margin
    min_y, max_y = margin, height - margin

    # Handle case where margin is too large for canvas
    if max_x <= min_x:
        min_x, max_x = 0.0, width
    if max_y <= min_y:
        min_y, max_y = 0.0, height

    return [
        Particle(
            x=rng.uniform(min_x, max_x),
            y=rng.uniform(min_y, max_y),
            mass=rng.uniform(*mass_range),
            radius=rng.uniform(*radius_range),
            color=random_color(rng),
        )
        for _ in range(count)
    ]


__all__ = ["random_particles", "random_color"]
