"""
Export functionality for simulation snapshots.

Example usage:
    from gravity_sim import GravitySimulation, random_particles
    from gravity_sim.export import to_svg

    sim = GravitySimulation(
        particles=random_particles(200, (800, 600), random_seed=7),
        size=(800, 600),
        iterations=50,
    ).run()

    svg_content = to_svg(sim.particles, sim.tree, size=sim.size)
    with open("snapshot.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import to_svg

__all__ = ["to_svg"]
