"""
Tests for GravitySimulation.
"""

import pytest

from gravity_sim import (
    EventType,
    GravitySimulation,
    InvalidConfigError,
    InvalidMassError,
    InvalidParticleError,
    Particle,
    ParticleOutOfBoundsWarning,
    QuadTree,
    Rectangle,
    SimulationConfig,
    random_particles,
)

# =============================================================================
# Test Fixtures
# =============================================================================


def create_pair():
    """Two equal masses 10 apart on the x-axis."""
    return [
        {"x": 0.0, "y": 0.0, "mass": 100.0},
        {"x": 10.0, "y": 0.0, "mass": 100.0},
    ]


# =============================================================================
# Configuration
# =============================================================================


class TestGravitySimulationConfig:
    """Tests for simulation parameters."""

    def test_defaults(self):
        """Reference parameter values."""
        sim = GravitySimulation()
        assert sim.G == 3.0
        assert sim.max_velocity == 0.1
        assert sim.capacity == 1
        assert sim.max_depth == 8
        assert sim.theta == 0.5
        assert sim.min_distance == 0.01
        assert sim.bounded is False
        assert sim.iterations == 300
        assert sim.particles == []
        assert sim.tree is None
        assert sim.step_count == 0

    def test_config_snapshot(self):
        """config mirrors the current properties."""
        sim = GravitySimulation(G=1.5, theta=0.8, capacity=4, max_depth=6)
        sim.max_velocity = 0.5
        assert sim.config == SimulationConfig(
            G=1.5, max_velocity=0.5, capacity=4, max_depth=6, theta=0.8
        )

    def test_setters_validate(self):
        """Out-of-range values are rejected."""
        sim = GravitySimulation()
        with pytest.raises(InvalidConfigError):
            sim.theta = -1.0
        with pytest.raises(InvalidConfigError):
            sim.capacity = 0
        with pytest.raises(InvalidConfigError):
            sim.max_depth = -2
        with pytest.raises(InvalidConfigError):
            sim.max_velocity = 0.0
        with pytest.raises(InvalidConfigError):
            sim.min_distance = -0.5
        with pytest.raises(InvalidConfigError):
            sim.G = float("nan")

    def test_constructor_validates(self):
        """Invalid constructor arguments are rejected."""
        with pytest.raises(InvalidConfigError, match="theta"):
            GravitySimulation(theta=-0.1)

    def test_boundary_follows_bounded_flag(self):
        """boundary is the canvas when bounded, else None."""
        sim = GravitySimulation(size=(800, 600))
        assert sim.boundary is None

        sim.bounded = True
        b = sim.boundary
        assert b == Rectangle(400.0, 300.0, 800.0, 600.0)
        assert (b.left, b.top, b.right, b.bottom) == (0.0, 0.0, 800.0, 600.0)


# =============================================================================
# Particles
# =============================================================================


class TestParticleInput:
    """Tests for particle normalisation."""

    def test_from_dicts(self):
        """Dicts are converted into Particle objects."""
        sim = GravitySimulation(particles=create_pair())
        assert all(isinstance(p, Particle) for p in sim.particles)
        assert sim.particles[1].x == 10.0
        assert sim.particles[1].mass == 100.0

    def test_particle_identity_kept(self):
        """Particle objects are used as-is."""
        p = Particle(1.0, 2.0)
        sim = GravitySimulation(particles=[p])
        assert sim.particles[0] is p

    def test_from_generic_objects(self):
        """Objects with x/y attributes are accepted."""

        class Body:
            def __init__(self, x, y):
                self.x = x
                self.y = y
                self.mass = 3.0

        sim = GravitySimulation(particles=[Body(5.0, 6.0)])
        assert sim.particles[0].position == (5.0, 6.0)
        assert sim.particles[0].mass == 3.0

    def test_missing_position_raises(self):
        """Entries without a position are rejected."""
        with pytest.raises(InvalidParticleError, match="Particle 0"):
            GravitySimulation(particles=[{"mass": 1.0}])

    def test_non_finite_position_raises(self):
        """A NaN position is rejected before it can poison the tree boundary."""
        particles = [{"x": float("nan"), "y": 0.0}] + create_pair()
        with pytest.raises(InvalidParticleError, match="position must be finite"):
            GravitySimulation(particles=particles)

    def test_non_positive_mass_raises(self):
        """Zero or negative mass is rejected at creation."""
        with pytest.raises(InvalidMassError):
            GravitySimulation(particles=[{"x": 0.0, "y": 0.0, "mass": 0.0}])
        with pytest.raises(InvalidMassError):
            Particle(0.0, 0.0, mass=-1.0)


# =============================================================================
# Lifecycle
# =============================================================================


class TestGravitySimulationRun:
    """Tests for tick/run and events."""

    def test_tick_advances_particles(self):
        """One tick is one simulation step."""
        sim = GravitySimulation(particles=create_pair(), size=(100, 100))
        assert sim.tick() is False

        a, b = sim.particles
        assert a.x == pytest.approx(0.1)
        assert b.x == pytest.approx(9.9)
        assert sim.step_count == 1
        assert isinstance(sim.tree, QuadTree)
        assert sim.tree.particle_count == 2

    def test_run_performs_iterations(self):
        """run() performs exactly `iterations` ticks."""
        sim = GravitySimulation(particles=create_pair(), iterations=7)
        result = sim.run()
        assert result is sim
        assert sim.step_count == 7
        assert sim.running is False

    def test_events_fired(self):
        """start, tick and end events are delivered."""
        events = []
        sim = GravitySimulation(
            particles=create_pair(),
            iterations=3,
            on_start=lambda e: events.append(e["type"]),
            on_tick=lambda e: events.append(e["type"]),
            on_end=lambda e: events.append(e["type"]),
        )
        sim.run()
        assert events == [EventType.start, EventType.tick, EventType.tick, EventType.tick, EventType.end]

    def test_tick_event_payload(self):
        """Tick events carry step number and energy."""
        payloads = []
        sim = GravitySimulation(particles=create_pair(), iterations=2)
        sim.on("tick", payloads.append)
        sim.run()

        assert [e["step"] for e in payloads] == [1, 2]
        assert all(e["particle_count"] == 2 for e in payloads)
        assert payloads[-1]["kinetic_energy"] > 0

    def test_stop_from_callback(self):
        """stop() during a tick ends the run early."""
        sim = GravitySimulation(particles=create_pair(), iterations=100)

        def on_tick(event):
            if event["step"] == 3:
                sim.stop()

        sim.on(EventType.tick, on_tick)
        sim.run()
        assert sim.step_count == 3

    def test_empty_simulation(self):
        """Without particles the run ends immediately."""
        sim = GravitySimulation(iterations=10)
        sim.run()
        assert sim.step_count == 0
        assert sim.tree is None

    def test_random_init_reproducible(self):
        """random_init scatters particles over the canvas with the seed."""
        first = GravitySimulation(
            particles=random_particles(20, (400, 300), random_seed=1),
            size=(400, 300),
            random_seed=99,
            iterations=1,
        )
        second = GravitySimulation(
            particles=random_particles(20, (400, 300), random_seed=2),
            size=(400, 300),
            random_seed=99,
            iterations=1,
        )
        first._initialize_positions()
        second._initialize_positions()

        for p, q in zip(first.particles, second.particles):
            assert (p.x, p.y) == (q.x, q.y)
            assert 0 <= p.x <= 400 and 0 <= p.y <= 300

    def test_bounded_drops_escaped_particles(self):
        """A bounded simulation warns about particles off the canvas."""
        particles = create_pair() + [{"x": 500.0, "y": 500.0}]
        sim = GravitySimulation(particles=particles, size=(100, 100), bounded=True)

        with pytest.warns(ParticleOutOfBoundsWarning):
            sim.tick()
        assert sim.tree.dropped == [sim.particles[2]]
