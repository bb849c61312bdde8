"""
Basic helpers for setting up simulations.

- random_particles: Uniformly scattered particles for a canvas
"""

from .random import random_color, random_particles

__all__ = ["random_particles", "random_color"]
