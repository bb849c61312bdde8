"""
SVG export for simulation snapshots.

Draws particles as filled circles and, optionally, the quadtree built for
the step as an overlay of node boundaries and mass centers. The tree is
only read, never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from ..spatial.quadtree import QuadTree, QuadTreeNode
    from ..types import Particle


def to_svg(
    particles: Sequence[Particle],
    tree: Optional[QuadTree] = None,
    *,
    size: Optional[Tuple[float, float]] = None,
    background: Optional[str] = "#000000",
    tree_color: str = "#3c8c3c",
    tree_width: float = 0.5,
    show_mass_centers: bool = False,
    mass_center_color: str = "#d94a4a",
    mass_center_radius: float = 1.5,
    min_radius: float = 0.5,
) -> str:
    """
    Export a simulation snapshot to SVG format.

    Args:
        particles: Particles to draw (position, radius and color are used)
        tree: Quadtree to overlay (default None for no overlay)
        size: Canvas (width, height). If None, the tree boundary or the
            particles' bounding box is used.
        background: Background color (default black, None for transparent)
        tree_color: Stroke color for node boundaries
        tree_width: Stroke width for node boundaries
        show_mass_centers: Mark the mass center of every non-empty node
        mass_center_color: Fill color for mass center markers
        mass_center_radius: Radius of mass center markers
        min_radius: Smallest radius drawn for a particle

    Returns:
        SVG string representation of the snapshot
    """
    width, height = _canvas_size(particles, tree, size)

    if not particles and tree is None:
        return _empty_svg(width, height, background)

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    if tree is not None:
        svg_parts.append('  <g class="quadtree">')
        for node in tree.walk():
            svg_parts.append(_render_boundary(node, tree_color, tree_width))
        svg_parts.append("  </g>")

        if show_mass_centers:
            svg_parts.append('  <g class="mass-centers">')
            for node in tree.walk():
                if node.mass_center is not None:
                    svg_parts.append(
                        _render_mass_center(node, mass_center_color, mass_center_radius)
                    )
            svg_parts.append("  </g>")

    svg_parts.append('  <g class="particles">')
    for particle in particles:
        svg_parts.append(_render_particle(particle, min_radius))
    svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _canvas_size(
    particles: Sequence[Particle],
    tree: Optional[QuadTree],
    size: Optional[Tuple[float, float]],
) -> Tuple[float, float]:
    """Pick the drawing area."""
    if size is not None:
        return float(size[0]), float(size[1])
    if tree is not None:
        return tree.boundary.right, tree.boundary.bottom
    if not particles:
        return 100.0, 100.0
    return (
        max(p.x + p.radius for p in particles),
        max(p.y + p.radius for p in particles),
    )


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _render_boundary(node: QuadTreeNode, stroke: str, stroke_width: float) -> str:
    """Render a node boundary."""
    b = node.boundary
    return (
        f'    <rect x="{b.left:.2f}" y="{b.top:.2f}" '
        f'width="{b.right - b.left:.2f}" height="{b.bottom - b.top:.2f}" '
        f'fill="none" stroke="{escape(stroke)}" stroke-width="{stroke_width}" '
        f'data-depth="{node.depth}"/>'
    )


def _render_mass_center(node: QuadTreeNode, fill: str, radius: float) -> str:
    """Render a node's mass center."""
    assert node.mass_center is not None
    cx, cy = node.mass_center
    return f'    <circle cx="{cx:.2f}" cy="{cy:.2f}" r="{radius:.1f}" fill="{escape(fill)}"/>'


def _render_particle(particle: Particle, min_radius: float) -> str:
    """Render a particle."""
    r = max(particle.radius, min_radius)
    return (
        f'    <circle cx="{particle.x:.2f}" cy="{particle.y:.2f}" r="{r:.2f}" '
        f'fill="{escape(particle.color)}"/>'
    )


__all__ = ["to_svg"]
