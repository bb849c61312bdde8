"""
Quadtree implementation for Barnes-Hut gravity approximation.

The quadtree recursively subdivides 2D space into quadrants,
enabling O(n log n) approximate n-body force calculations. Every node
keeps a running center of mass of all particles inserted through it, so
the tree is ready for force queries as soon as insertion finishes.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH, DEFAULT_THETA
from ..geometry import Rectangle, rect_contains
from ..kernel import attraction, distance
from ..types import Particle
from ..validation import validate_capacity, validate_max_depth, validate_theta


class QuadTreeInvariantError(RuntimeError):
    """Raised when a particle inside a node's boundary cannot be placed."""

    pass


class QuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        boundary: Region covered by this node
        capacity: Particles held directly before subdividing
        points: Particles stored directly (leaves and depth-capped nodes only)
        mass_total: Total mass inserted into this subtree
        mass_center: Center of mass of this subtree, None until first insertion
        divided: True once the four children exist
        northwest, northeast, southeast, southwest: Child quadrants
        depth: Distance from the root
        max_depth: Depth at which the node accepts any number of particles
    """

    def __init__(
        self,
        boundary: Rectangle,
        capacity: int = DEFAULT_CAPACITY,
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.boundary = boundary
        self.capacity = capacity
        self.depth = depth
        self.max_depth = max_depth

        self.points: List[Particle] = []
        self.mass_total: float = 0.0
        self.mass_center: Optional[Tuple[float, float]] = None

        self.divided = False
        self.northwest: Optional[QuadTreeNode] = None
        self.northeast: Optional[QuadTreeNode] = None
        self.southeast: Optional[QuadTreeNode] = None
        self.southwest: Optional[QuadTreeNode] = None

    def __repr__(self) -> str:
        return (
            f"QuadTreeNode(depth={self.depth}, points={len(self.points)}, "
            f"divided={self.divided}, mass_total={self.mass_total:g})"
        )

    @property
    def children(self) -> List[QuadTreeNode]:
        """Child quadrants in NW, NE, SE, SW order (empty for a leaf)."""
        if not self.divided:
            return []
        return [self.northwest, self.northeast, self.southeast, self.southwest]  # type: ignore[list-item]

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.divided

    def is_empty(self) -> bool:
        """True if no particle has been inserted into this subtree."""
        return self.mass_center is None

    def insert(self, particle: Particle) -> bool:
        """
        Insert a particle into this subtree.

        Returns:
            False if the particle lies outside this node's boundary,
            True once it has been stored in this node or a descendant.

        Raises:
            QuadTreeInvariantError: If the particle is inside the boundary
                but no child accepts it.
        """
        if not rect_contains(self.boundary, particle):
            return False

        self._add_mass(particle)

        if not self.divided and len(self.points) < self.capacity:
            self.points.append(particle)
            return True

        # Depth cap overrides capacity
        if self.depth >= self.max_depth:
            self.points.append(particle)
            return True

        if not self.divided:
            self.subdivide()
            for point in self.points:
                self._insert_into_children(point)
            self.points = []

        self._insert_into_children(particle)
        return True

    def _add_mass(self, particle: Particle) -> None:
        """Fold a particle into the running mass total and center."""
        if self.mass_center is None:
            self.mass_center = (particle.x, particle.y)
        else:
            cx, cy = self.mass_center
            total = self.mass_total + particle.mass
            self.mass_center = (
                (cx * self.mass_total + particle.x * particle.mass) / total,
                (cy * self.mass_total + particle.y * particle.mass) / total,
            )
        self.mass_total += particle.mass

    def _insert_into_children(self, particle: Particle) -> None:
        """Give the particle to the first child (NW, NE, SE, SW) that accepts it."""
        for child in self.children:
            if child.insert(particle):
                return
        raise QuadTreeInvariantError(
            f"{particle!r} lies inside {self.boundary!r} at depth {self.depth} "
            "but no child quadrant accepted it"
        )

    def subdivide(self) -> None:
        """Create the four child quadrants tiling this node's boundary."""
        nw, ne, se, sw = self.boundary.quadrants()
        child_depth = self.depth + 1
        self.northwest = QuadTreeNode(nw, self.capacity, child_depth, self.max_depth)
        self.northeast = QuadTreeNode(ne, self.capacity, child_depth, self.max_depth)
        self.southeast = QuadTreeNode(se, self.capacity, child_depth, self.max_depth)
        self.southwest = QuadTreeNode(sw, self.capacity, child_depth, self.max_depth)
        self.divided = True

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def walk(self) -> Iterator[QuadTreeNode]:
        """Pre-order iteration over this node and all descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> Iterator[QuadTreeNode]:
        """Depth-first iteration over leaves that hold particles."""
        for node in self.walk():
            if node.is_leaf() and node.points:
                yield node

    def find_first_leaf(self) -> Optional[QuadTreeNode]:
        """First leaf holding particles, or None if the subtree is empty."""
        return next(self.leaves(), None)

    def count_particles(self) -> int:
        """Number of particles stored in this subtree."""
        return sum(len(node.points) for node in self.walk())

    def height(self) -> int:
        """Deepest level below this node (0 for a leaf)."""
        if not self.divided:
            return 0
        return 1 + max(child.height() for child in self.children)


class QuadTree:
    """
    Barnes-Hut quadtree for approximate gravity calculations.

    The Barnes-Hut algorithm uses a quadtree to approximate long-range
    forces. For distant clusters, the algorithm treats the cluster as
    a single body at its center of mass, reducing complexity from
    O(n^2) to O(n log n).

    Usage:
        tree = QuadTree(Rectangle(500, 500, 1000, 1000), capacity=4)
        for particle in particles:
            tree.insert(particle)

        # Far-field force on a particle
        fx, fy = tree.calculate_force(particle, G=3.0)

    The theta parameter controls the accuracy/speed tradeoff:
    - theta = 0: Exact calculation (no approximation)
    - theta = 0.5: Good balance (recommended)
    - theta = 1.0+: Fast but less accurate
    """

    def __init__(
        self,
        boundary: Rectangle,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        theta: float = DEFAULT_THETA,
    ):
        """
        Initialize an empty quadtree.

        Args:
            boundary: Region covered by the root
            capacity: Particles per node before subdividing
            max_depth: Depth at which nodes stop subdividing
            theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
        """
        self.root = QuadTreeNode(
            boundary,
            validate_capacity(capacity),
            depth=0,
            max_depth=validate_max_depth(max_depth),
        )
        self.theta = validate_theta(theta)
        self.particle_count = 0
        self.dropped: List[Particle] = []

    @property
    def boundary(self) -> Rectangle:
        return self.root.boundary

    def insert(self, particle: Particle) -> bool:
        """Insert a particle; out-of-bounds particles are recorded in ``dropped``."""
        if self.root.insert(particle):
            self.particle_count += 1
            return True
        self.dropped.append(particle)
        return False

    def walk(self) -> Iterator[QuadTreeNode]:
        return self.root.walk()

    def leaves(self) -> Iterator[QuadTreeNode]:
        return self.root.leaves()

    def calculate_force(
        self,
        particle: Particle,
        G: float,
        min_distance: float = 0.0,
        skip: Optional[QuadTreeNode] = None,
    ) -> Tuple[float, float]:
        """
        Calculate approximate attraction on a particle.

        Uses Barnes-Hut approximation: if a cluster is sufficiently
        far away (size/distance < theta), treat it as a single mass.
        Nodes whose boundary contains the particle are always opened, so
        a particle never attracts itself through an aggregate.

        Args:
            particle: The particle to calculate force on
            G: Gravitational constant
            min_distance: Softening floor on separations
            skip: Leaf whose particles are excluded (handled exactly elsewhere)

        Returns:
            (fx, fy) force vector (attractive, toward other bodies)
        """
        return self._calculate_force(self.root, particle, G, min_distance, skip)

    def _calculate_force(
        self,
        node: QuadTreeNode,
        particle: Particle,
        G: float,
        min_distance: float,
        skip: Optional[QuadTreeNode],
    ) -> Tuple[float, float]:
        """Recursively calculate force contribution from node."""
        if node.mass_center is None or node is skip:
            return 0.0, 0.0

        if node.is_leaf():
            fx, fy = 0.0, 0.0
            for other in node.points:
                if other is particle:
                    continue
                sep = distance(particle, other)
                pfx, pfy = attraction(
                    sep.dx, sep.dy, sep.dist_sq, sep.distance,
                    particle.mass, other.mass, G, min_distance,
                )
                fx += pfx
                fy += pfy
            return fx, fy

        cx, cy = node.mass_center
        dx = particle.x - cx
        dy = particle.y - cy
        dist_sq = dx * dx + dy * dy
        dist = math.sqrt(dist_sq)

        # Barnes-Hut criterion: s/d < theta
        if (
            dist > 0
            and node.boundary.size / dist < self.theta
            and not rect_contains(node.boundary, particle)
        ):
            return attraction(dx, dy, dist_sq, dist, particle.mass, node.mass_total, G, min_distance)

        # Node is too close - recurse into children
        fx, fy = 0.0, 0.0
        for child in node.children:
            cfx, cfy = self._calculate_force(child, particle, G, min_distance, skip)
            fx += cfx
            fy += cfy
        return fx, fy

    @classmethod
    def from_particles(
        cls,
        particles: Sequence[Particle],
        boundary: Optional[Rectangle] = None,
        capacity: int = DEFAULT_CAPACITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        theta: float = DEFAULT_THETA,
        padding: float = 10.0,
    ) -> QuadTree:
        """
        Build a quadtree from a list of particles.

        Args:
            particles: Particles to insert
            boundary: Root region. If None, a padded square around the particles.
            capacity: Particles per node before subdividing
            max_depth: Depth at which nodes stop subdividing
            theta: Barnes-Hut threshold
            padding: Padding around the bounding box when boundary is None

        Returns:
            QuadTree with all particles inside the boundary inserted
        """
        if boundary is None:
            boundary = bounding_square(particles, padding)

        tree = cls(boundary, capacity=capacity, max_depth=max_depth, theta=theta)
        for particle in particles:
            tree.insert(particle)
        return tree


def bounding_square(particles: Iterable[Particle], padding: float = 10.0) -> Rectangle:
    """Smallest padded square centered on the particles' bounding box."""
    particles = list(particles)
    if not particles:
        return Rectangle(50.0, 50.0, 100.0, 100.0)

    min_x = min(p.x for p in particles) - padding
    min_y = min(p.y for p in particles) - padding
    max_x = max(p.x for p in particles) + padding
    max_y = max(p.y for p in particles) + padding

    # Use max dimension to ensure square region
    side = max(max_x - min_x, max_y - min_y, 1.0)
    return Rectangle((min_x + max_x) / 2, (min_y + max_y) / 2, side, side)


def build_tree(
    particles: Sequence[Particle],
    boundary: Rectangle,
    capacity: int = DEFAULT_CAPACITY,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> QuadTree:
    """
    Construct and populate a quadtree.

    Particles outside ``boundary`` are not inserted; they are listed in
    ``tree.dropped``.
    """
    return QuadTree.from_particles(particles, boundary, capacity=capacity, max_depth=max_depth)


__all__ = [
    "QuadTree",
    "QuadTreeNode",
    "QuadTreeInvariantError",
    "bounding_square",
    "build_tree",
]
