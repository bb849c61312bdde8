"""
Spatial data structures for efficient force calculations.

Provides quadtree implementation for Barnes-Hut O(n log n) force approximation.
"""

from .quadtree import (
    QuadTree,
    QuadTreeInvariantError,
    QuadTreeNode,
    bounding_square,
    build_tree,
)

__all__ = [
    "QuadTree",
    "QuadTreeNode",
    "QuadTreeInvariantError",
    "bounding_square",
    "build_tree",
]
