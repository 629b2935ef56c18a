import math

import pytest

from orbital_genesis.models.orbit import (
    KEPLER_MAX_ITERATIONS,
    Orbit,
    OrbitError,
    orbit_path,
    particle_position,
    position_on_orbit,
    solve_kepler,
)
from orbital_genesis.models.system import AsteroidParticle


@pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7, 0.9])
def test_kepler_residual_small(e):
    for k in range(64):
        M = math.tau * k / 64
        E = solve_kepler(M, e)
        assert abs(E - e * math.sin(E) - M) < 1e-5


def test_kepler_zero_eccentricity_is_identity():
    for M in [0.0, 0.5, 1.0, 2.0, 5.0]:
        assert solve_kepler(M, 0.0) == M


def test_kepler_iteration_cap_returns_finite():
    E = solve_kepler(0.01, 0.99, max_iterations=KEPLER_MAX_ITERATIONS)
    assert math.isfinite(E)


def test_circular_orbit_quarter_period():
    orbit = Orbit(a=100.0, e=0.0, omega=0.0, period=10.0, mean_anomaly0=0.0)
    x, y = position_on_orbit(orbit, 0.0)
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(0.0, abs=1e-9)

    x, y = position_on_orbit(orbit, 2.5)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(100.0)


def test_circular_orbit_radius_constant():
    orbit = Orbit(a=42.0, e=0.0, omega=1.3, period=7.0, mean_anomaly0=0.4)
    for t in [-50.0, -1.0, 0.0, 0.3, 3.3, 123.4, 1e5]:
        x, y = position_on_orbit(orbit, t)
        assert math.hypot(x, y) == pytest.approx(42.0)


@pytest.mark.parametrize("e", [0.0, 0.05, 0.2, 0.6, 0.9])
def test_positions_finite_and_between_apsides(e):
    orbit = Orbit(a=250.0, e=e, omega=2.0, period=33.0, mean_anomaly0=1.0)
    for k in range(200):
        x, y = position_on_orbit(orbit, k * 0.37 - 20.0)
        assert math.isfinite(x) and math.isfinite(y)
        r = math.hypot(x, y)
        assert orbit.perihelion - 1e-6 <= r <= orbit.aphelion + 1e-6


def test_periodicity():
    orbit = Orbit(a=180.0, e=0.15, omega=0.7, period=12.5, mean_anomaly0=2.2)
    for t in [0.0, 1.1, 4.0, 9.9, 77.0]:
        x1, y1 = position_on_orbit(orbit, t)
        x2, y2 = position_on_orbit(orbit, t + orbit.period)
        assert x1 == pytest.approx(x2, abs=1e-6)
        assert y1 == pytest.approx(y2, abs=1e-6)


def test_periapsis_lies_along_omega():
    orbit = Orbit(a=100.0, e=0.5, omega=math.pi / 2, period=10.0)
    x, y = position_on_orbit(orbit, 0.0)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(orbit.perihelion)


def test_apsides_and_semi_minor_axis():
    orbit = Orbit(a=200.0, e=0.1, omega=0.0, period=1.0)
    assert orbit.perihelion == pytest.approx(180.0)
    assert orbit.aphelion == pytest.approx(220.0)
    assert orbit.semi_minor_axis == pytest.approx(200.0 * math.sqrt(0.99))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"a": 0.0, "e": 0.1, "period": 1.0},
        {"a": -5.0, "e": 0.1, "period": 1.0},
        {"a": 10.0, "e": 1.0, "period": 1.0},
        {"a": 10.0, "e": -0.1, "period": 1.0},
        {"a": 10.0, "e": 0.1, "period": 0.0},
    ],
)
def test_invalid_orbit_rejected(kwargs):
    with pytest.raises(OrbitError):
        Orbit(omega=0.0, **kwargs)


def test_orbit_error_is_value_error():
    with pytest.raises(ValueError):
        Orbit(a=1.0, e=2.0, omega=0.0, period=1.0)


def test_orbit_path_traces_ellipse():
    orbit = Orbit(a=100.0, e=0.3, omega=0.4, period=5.0)
    points = orbit_path(orbit, samples=64)
    assert len(points) == 64
    radii = [math.hypot(x, y) for x, y in points]
    assert min(radii) == pytest.approx(orbit.perihelion)
    assert max(radii) == pytest.approx(orbit.aphelion)


def test_particle_position_circular():
    particle = AsteroidParticle(angle=0.0, radius=50.0, speed=0.5, size=1.0)
    assert particle_position(particle, 0.0) == pytest.approx((50.0, 0.0))
    x, y = particle_position(particle, math.pi)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(50.0)
    for t in [0.3, 10.0, 1000.0]:
        assert math.hypot(*particle_position(particle, t)) == pytest.approx(50.0)
