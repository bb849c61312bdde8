#!/usr/bin/env python3
"""
Visualization script for the gravity simulation.

Renders snapshots of a random particle cloud, with the quadtree of each
step drawn underneath, into ./build/

Usage:
    uv run python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle as RectPatch

from gravity_sim import GravitySimulation, random_particles
from gravity_sim.export import to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

SIZE = (600, 600)


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def visualize(sim, title="Gravity Simulation", ax=None, show_tree=True):
    """Draw the current state of a simulation on an axis."""
    if show_tree and sim.tree is not None:
        for node in sim.tree.walk():
            b = node.boundary
            ax.add_patch(
                RectPatch(
                    (b.left, b.top),
                    b.right - b.left,
                    b.bottom - b.top,
                    fill=False,
                    edgecolor="#3c8c3c",
                    linewidth=0.4,
                )
            )

    xs = [p.x for p in sim.particles]
    ys = [p.y for p in sim.particles]
    sizes = [max(p.radius, 0.5) * 8 for p in sim.particles]
    colors = [p.color for p in sim.particles]
    ax.scatter(xs, ys, s=sizes, c=colors, zorder=5, linewidths=0)

    ax.set_title(title, fontsize=12, fontweight="bold", color="white")
    ax.set_xlim(0, SIZE[0])
    # Screen coordinates: y grows downward
    ax.set_ylim(SIZE[1], 0)
    ax.set_aspect("equal")
    ax.set_facecolor("black")
    ax.axis("off")


def make_simulation(count=300, theta=0.5, seed=42):
    """Create a simulation over a reproducible particle cloud."""
    particles = random_particles(count, SIZE, margin=50, random_seed=seed)
    return GravitySimulation(particles=particles, size=SIZE, theta=theta, capacity=1)


def save_snapshots(steps=(0, 50, 200, 500), filename="snapshots.png"):
    """Render the same cloud after increasing numbers of steps."""
    sim = make_simulation()

    fig, axes = plt.subplots(1, len(steps), figsize=(5 * len(steps), 5), facecolor="black")
    done = 0
    for ax, target in zip(axes, steps):
        while done < target:
            sim.tick()
            done += 1
        visualize(sim, f"Step {target}", ax=ax)

    plt.tight_layout()
    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="black")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def save_theta_comparison(thetas=(0.0, 0.5, 1.0), steps=200, filename="comparison_theta.png"):
    """Render the outcome of the same run under different thresholds."""
    fig, axes = plt.subplots(1, len(thetas), figsize=(5 * len(thetas), 5), facecolor="black")
    for ax, theta in zip(axes, thetas):
        sim = make_simulation(theta=theta)
        for _ in range(steps):
            sim.tick()
        visualize(sim, f"theta = {theta}", ax=ax, show_tree=False)

    plt.tight_layout()
    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="black")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def save_svg(steps=100, filename="snapshot.svg"):
    """Write an SVG snapshot with quadtree and mass-center overlay."""
    sim = make_simulation()
    for _ in range(steps):
        sim.tick()

    filepath = BUILD_DIR / filename
    filepath.write_text(to_svg(sim.particles, sim.tree, size=SIZE, show_mass_centers=True))
    print(f"  Saved: {filepath}")


def generate_all():
    """Generate all visualization images."""
    ensure_build_dir()

    print("Generating snapshot images...")
    save_snapshots()

    print("Generating comparison images...")
    save_theta_comparison()

    print("Generating SVG snapshot...")
    save_svg()

    print()
    print(f"All images saved to: {BUILD_DIR.absolute()}")


if __name__ == "__main__":
    generate_all()
