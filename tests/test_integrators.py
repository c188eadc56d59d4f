"""Tests for numerical integrators."""

import math
import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator, GRAVITATIONAL_CONSTANT
from nbody_sim.physics.diagnostics import Diagnostics, relative_energy_drift
from nbody_sim.physics.integrators.euler import EulerIntegrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator
from nbody_sim.physics.integrators.yoshida import YoshidaIntegrator, YOSHIDA_W1, YOSHIDA_W0


def circular_binary(M=1.0, m=1e-3, a=1.0, G=GRAVITATIONAL_CONSTANT):
    """Star and planet on a circular orbit about their centre of mass."""
    total = M + m
    omega = math.sqrt(G * total / a ** 3)
    r_star = a * m / total
    r_planet = a * M / total
    return [
        Body("Star", M, (-r_star, 0.0), (0.0, -omega * r_star)),
        Body("Planet", m, (r_planet, 0.0), (0.0, omega * r_planet)),
    ]


def eccentric_binary(speed_factor=0.8, M=1.0, m=1e-3, G=GRAVITATIONAL_CONSTANT):
    """Bound orbit starting at apocentre r = 1 AU with a sub-circular speed."""
    total = M + m
    v_rel = speed_factor * math.sqrt(G * total)
    return [
        Body("Star", M, (-m / total, 0.0), (0.0, -v_rel * m / total)),
        Body("Planet", m, (M / total, 0.0), (0.0, v_rel * M / total)),
    ]


def max_energy_drift(integrator, bodies, dt, n_steps):
    diagnostics = Diagnostics()
    E0 = diagnostics.compute_total_energy(bodies)
    worst = 0.0
    for _ in range(n_steps):
        integrator.advance(bodies, dt)
        worst = max(worst, relative_energy_drift(E0, diagnostics.compute_total_energy(bodies)))
    return worst


def test_integrator_metadata():
    """Test names, orders and symplectic flags."""
    assert (EulerIntegrator().name, EulerIntegrator().order) == ("euler", 1)
    assert (VerletIntegrator().name, VerletIntegrator().order) == ("verlet", 2)
    assert (YoshidaIntegrator().name, YoshidaIntegrator().order) == ("yoshida4", 4)
    assert not EulerIntegrator().symplectic
    assert VerletIntegrator().symplectic
    assert YoshidaIntegrator().symplectic


def test_free_body_moves_in_straight_line():
    """Test that a lone body drifts at constant velocity under every scheme."""
    for integrator in (EulerIntegrator(), VerletIntegrator(), YoshidaIntegrator()):
        body = Body("Lonely", 1.0, (1.0, 2.0), (0.5, -1.0))
        for _ in range(10):
            integrator.advance([body], 0.1)
        assert np.allclose(body.position, [1.5, 1.0])
        assert np.allclose(body.velocity, [0.5, -1.0])


def test_euler_step():
    """Test Euler step: v += a*dt, then r += v_new*dt."""
    a = Body("A", 1.0, (0.0, 0.0), (0.0, 0.3))
    b = Body("B", 2.0, (1.0, 0.0), (0.0, -0.1))
    bodies = [a, b]
    dt = 0.01
    acc = ForceCalculator().compute_accelerations(bodies)
    v_expected = np.array([a.velocity, b.velocity]) + acc * dt
    r_expected = np.array([a.position, b.position]) + v_expected * dt

    EulerIntegrator().advance(bodies, dt)

    assert np.allclose([a.velocity, b.velocity], v_expected)
    assert np.allclose([a.position, b.position], r_expected)
    assert np.allclose([a.acceleration, b.acceleration], acc)


def test_verlet_step():
    """Test Velocity Verlet against the textbook formulas."""
    a = Body("A", 1.0, (0.0, 0.0), (0.0, 0.3))
    b = Body("B", 2.0, (1.0, 0.0), (0.0, -0.1))
    bodies = [a, b]
    dt = 0.01
    calculator = ForceCalculator()
    r0 = np.array([a.position, b.position])
    v0 = np.array([a.velocity, b.velocity])
    a_old = calculator.compute_accelerations(bodies)
    r_new = r0 + v0 * dt + 0.5 * a_old * dt ** 2

    VerletIntegrator(calculator).advance(bodies, dt)

    a_new = calculator.compute_accelerations(bodies)
    assert np.allclose([a.position, b.position], r_new)
    assert np.allclose([a.previous_acceleration, b.previous_acceleration], a_old)
    assert np.allclose([a.acceleration, b.acceleration], a_new)
    assert np.allclose([a.velocity, b.velocity], v0 + 0.5 * (a_old + a_new) * dt)


def test_verlet_result_independent_of_body_order():
    """Test that forces come from one snapshot, not a half-updated list."""
    def make():
        return [
            Body("A", 1.0, (0.0, 0.0), (0.0, 1.0)),
            Body("B", 3.0, (1.0, 0.5), (-1.0, 0.0)),
            Body("C", 2.0, (-0.5, 1.0), (0.5, -0.5)),
        ]

    forward = make()
    backward = list(reversed(make()))
    integrator = VerletIntegrator()
    for _ in range(20):
        integrator.advance(forward, 0.005)
        integrator.advance(backward, 0.005)

    for body in forward:
        twin = next(b for b in backward if b.name == body.name)
        assert np.allclose(body.position, twin.position, rtol=1e-10, atol=1e-12)
        assert np.allclose(body.velocity, twin.velocity, rtol=1e-10, atol=1e-12)


def test_verlet_conserves_momentum():
    bodies = [
        Body("A", 1.0, (0.0, 0.0), (0.0, 1.0)),
        Body("B", 3.0, (1.0, 0.5), (-1.0, 0.0)),
        Body("C", 2.0, (-0.5, 1.0), (0.5, -0.5)),
    ]
    diagnostics = Diagnostics()
    p0 = diagnostics.compute_momentum(bodies)
    integrator = VerletIntegrator()
    for _ in range(200):
        integrator.advance(bodies, 0.001)

    assert np.allclose(diagnostics.compute_momentum(bodies), p0, atol=1e-9)


def test_yoshida_coefficients():
    """Test the triple-jump weights sum to one with a backward middle step."""
    cbrt2 = 2.0 ** (1.0 / 3.0)
    assert math.isclose(2 * YOSHIDA_W1 + YOSHIDA_W0, 1.0)
    assert YOSHIDA_W0 < 0
    assert math.isclose(YOSHIDA_W1, 1.0 / (2.0 - cbrt2))
    assert math.isclose(YOSHIDA_W0, -cbrt2 / (2.0 - cbrt2))


def test_yoshida_step_spans_exactly_dt():
    """Test one Yoshida step moves a free body by v*dt, no more."""
    body = Body("Lonely", 1.0, (0.0, 0.0), (0.5, -1.0))
    YoshidaIntegrator().advance([body], 0.1)

    assert np.allclose(body.position, [0.05, -0.1], atol=1e-12)


@pytest.mark.parametrize("integrator_class", [EulerIntegrator, VerletIntegrator])
def test_trail_records_pre_step_position(integrator_class):
    bodies = circular_binary()
    start = [body.position.copy() for body in bodies]

    integrator_class().advance(bodies, 0.01, record_trail=True)

    for body, position in zip(bodies, start):
        assert len(body.trail) == 1
        assert np.allclose(body.trail[0], position)


@pytest.mark.parametrize("integrator_class", [EulerIntegrator, VerletIntegrator, YoshidaIntegrator])
def test_no_trail_unless_requested(integrator_class):
    bodies = circular_binary()
    integrator_class().advance(bodies, 0.01)
    assert all(len(body.trail) == 0 for body in bodies)


def test_yoshida_records_at_most_one_point_per_step():
    """Test that intermediate Yoshida sub-steps never reach the trail."""
    bodies = circular_binary()
    integrator = YoshidaIntegrator()

    integrator.advance(bodies, 0.01, record_trail=True)
    assert all(len(body.trail) == 1 for body in bodies)

    integrator.advance(bodies, 0.01, record_trail=True)
    assert all(len(body.trail) == 2 for body in bodies)


def test_energy_drift_ordering():
    """Test drift(Euler) > drift(Verlet) > drift(Yoshida4) over 10 orbits."""
    dt = 0.001
    # Vis-viva: 1/a = 2 - f^2 for r = 1 AU
    semi_major_axis = 1.0 / (2.0 - 0.8 ** 2)
    period = math.sqrt(semi_major_axis ** 3 / 1.001)
    n_steps = int(round(10 * period / dt))

    euler = max_energy_drift(EulerIntegrator(), eccentric_binary(), dt, n_steps)
    verlet = max_energy_drift(VerletIntegrator(), eccentric_binary(), dt, n_steps)
    yoshida = max_energy_drift(YoshidaIntegrator(), eccentric_binary(), dt, n_steps)

    assert euler > verlet > yoshida
    # Symplectic schemes stay bounded and small
    assert verlet < 1e-2
    assert yoshida < 1e-4


@pytest.mark.parametrize("integrator_class", [VerletIntegrator, YoshidaIntegrator])
def test_kepler_period(integrator_class):
    """Test return to the start after T = sqrt(a^3 / M) years."""
    a, M, m = 1.0, 1.0, 1e-3
    period = math.sqrt(a ** 3 / (M + m))
    n_steps = 1000
    dt = period / n_steps
    bodies = circular_binary(M=M, m=m, a=a)
    start = [body.position.copy() for body in bodies]

    integrator = integrator_class()
    for _ in range(n_steps):
        integrator.advance(bodies, dt)

    for body, position in zip(bodies, start):
        assert np.linalg.norm(body.position - position) < 1e-3


def test_kepler_wider_orbit():
    """Test Kepler's third law at a = 2 AU around 2 Msun with Yoshida."""
    a, M = 2.0, 2.0
    bodies = circular_binary(M=M, m=1e-6, a=a)
    period = math.sqrt(a ** 3 / (M + 1e-6))
    n_steps = 2000
    start = bodies[1].position.copy()

    integrator = YoshidaIntegrator()
    for _ in range(n_steps):
        integrator.advance(bodies, period / n_steps)

    assert np.linalg.norm(bodies[1].position - start) < 1e-3
    # Halfway is the opposite side of the orbit
    for _ in range(n_steps // 2):
        integrator.advance(bodies, period / n_steps)
    assert np.allclose(bodies[1].position, -start, atol=1e-3)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
