"""
Profiling script for gravity-sim performance analysis.

Times the Barnes-Hut step across particle counts and thresholds, and
compares the approximate forces against direct summation.
"""

import cProfile
import io
import pstats
import sys
import time
from pathlib import Path
from pstats import SortKey

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gravity_sim import (  # noqa: E402
    QuadTree,
    SimulationConfig,
    accumulate_forces,
    direct_forces,
    force_error,
    random_particles,
    step,
)

SIZE = (1000, 1000)


# =============================================================================
# Step Profiles
# =============================================================================


def make_step_profile(count, steps=5, **config):
    """Build a scenario running `steps` steps over `count` particles."""

    def run():
        particles = random_particles(count, SIZE, random_seed=42)
        cfg = SimulationConfig(**config)
        for _ in range(steps):
            step(particles, cfg)

    return run


def benchmark_scenario(name, func, profile=True):
    """Run a single benchmark scenario."""
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")

    if profile:
        profiler = cProfile.Profile()
        start_time = time.time()
        profiler.enable()
        func()
        profiler.disable()
        elapsed = time.time() - start_time

        # Print brief stats
        s = io.StringIO()
        ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
        ps.print_stats(10)

        print(f"Time: {elapsed:.3f}s")
        print("\nTop 10 functions:")
        for line in s.getvalue().split("\n")[5:16]:
            if line.strip():
                print(line)

        return elapsed, profiler
    else:
        start_time = time.time()
        func()
        elapsed = time.time() - start_time
        print(f"Time: {elapsed:.3f}s")
        return elapsed, None


def report_accuracy(count=500, thetas=(0.0, 0.3, 0.5, 0.8, 1.2)):
    """Print the mean relative force error for several thresholds."""
    particles = random_particles(count, SIZE, random_seed=7)
    exact = direct_forces(particles, G=1.0)

    print(f"\n{'theta':<10} {'mean rel. error':>16}")
    print("-" * 27)
    for theta in thetas:
        tree = QuadTree.from_particles(particles, theta=theta)
        approx = accumulate_forces(particles, tree, G=1.0)
        print(f"{theta:<10} {force_error(approx, exact):>16.2e}")


def main():
    """Run all profiling scenarios."""
    print("=" * 60)
    print("  gravity-sim Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Step: Small (100 particles)", make_step_profile(100)),
        ("Step: Medium (1000 particles)", make_step_profile(1000)),
        ("Step: Large (5000 particles)", make_step_profile(5000, steps=2)),
        ("Step: Medium, capacity 8", make_step_profile(1000, capacity=8)),
        ("Step: Medium, theta 1.0", make_step_profile(1000, theta=1.0)),
        ("Step: Medium, exact (theta 0)", make_step_profile(1000, steps=1, theta=0.0)),
    ]

    results = {}
    for name, func in scenarios:
        elapsed, _ = benchmark_scenario(name, func, profile="-p" in sys.argv)
        results[name] = elapsed

    # Print summary table
    print("\n" + "=" * 60)
    print("  Summary")
    print("=" * 60)
    print(f"\n{'Scenario':<35} {'Time':>10}")
    print("-" * 47)
    for name, elapsed in results.items():
        print(f"{name:<35} {elapsed:>10.3f}s")

    report_accuracy()


if __name__ == "__main__":
    main()
