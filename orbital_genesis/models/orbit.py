"""Keplerian orbit evaluation for planets, moons and belt particles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .system import AsteroidParticle

KEPLER_TOLERANCE = 1e-6
KEPLER_MAX_ITERATIONS = 30


class OrbitError(ValueError):
    """Raised when orbital elements do not describe a closed ellipse."""


@dataclass(frozen=True)
class Orbit:
    """An elliptical path around a focus at the origin."""

    a: float  # Semi-major axis
    e: float  # Eccentricity, 0 <= e < 1
    omega: float  # Argument of periapsis (radians)
    period: float
    mean_anomaly0: float = 0.0  # Mean anomaly at t=0 (radians)

    def __post_init__(self) -> None:
        if not self.a > 0:
            raise OrbitError(f"semi-major axis must be positive, got {self.a}")
        if not 0 <= self.e < 1:
            raise OrbitError(f"eccentricity must be in [0, 1), got {self.e}")
        if not self.period > 0:
            raise OrbitError(f"period must be positive, got {self.period}")

    @property
    def perihelion(self) -> float:
        return self.a * (1 - self.e)

    @property
    def aphelion(self) -> float:
        return self.a * (1 + self.e)

    @property
    def semi_minor_axis(self) -> float:
        return self.a * math.sqrt(1 - self.e * self.e)

    @property
    def mean_motion(self) -> float:
        return math.tau / self.period

    def mean_anomaly(self, time: float) -> float:
        """Mean anomaly at ``time``, reduced to [0, 2π)."""
        return (self.mean_anomaly0 + self.mean_motion * time) % math.tau


def solve_kepler(
    mean_anomaly: float,
    e: float,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> float:
    """Solve M = E - e*sin(E) for the eccentric anomaly E.

    Newton-Raphson starting from E = M. Stops once the step drops to
    ``tolerance`` or after ``max_iterations`` steps, whichever comes first,
    and returns the last estimate.
    """
    ecc_anomaly = mean_anomaly
    for _ in range(max_iterations):
        delta = (ecc_anomaly - e * math.sin(ecc_anomaly) - mean_anomaly) / (
            1 - e * math.cos(ecc_anomaly)
        )
        ecc_anomaly -= delta
        if abs(delta) <= tolerance:
            break
    return ecc_anomaly


def _rotate(p: float, q: float, omega: float) -> tuple[float, float]:
    cos_w = math.cos(omega)
    sin_w = math.sin(omega)
    return p * cos_w - q * sin_w, p * sin_w + q * cos_w


def _point_at_eccentric_anomaly(orbit: Orbit, ecc_anomaly: float) -> tuple[float, float]:
    # Orbital plane: P towards periapsis, Q perpendicular
    p = orbit.a * (math.cos(ecc_anomaly) - orbit.e)
    q = orbit.semi_minor_axis * math.sin(ecc_anomaly)
    return _rotate(p, q, orbit.omega)


def position_on_orbit(orbit: Orbit, time: float) -> tuple[float, float]:
    """Position relative to the orbit's focus at simulated ``time``.

    Moons return an offset from their parent planet; composing the two is
    up to the caller.
    """
    ecc_anomaly = solve_kepler(orbit.mean_anomaly(time), orbit.e)
    return _point_at_eccentric_anomaly(orbit, ecc_anomaly)


def orbit_path(orbit: Orbit, samples: int = 96) -> list[tuple[float, float]]:
    """Points along the full ellipse, evenly spaced in eccentric anomaly."""
    samples = max(samples, 3)
    return [
        _point_at_eccentric_anomaly(orbit, math.tau * i / samples)
        for i in range(samples)
    ]


def particle_position(particle: AsteroidParticle, time: float) -> tuple[float, float]:
    """Circular belt motion: the angle advances linearly with time."""
    angle = particle.angle + particle.speed * time
    return math.cos(angle) * particle.radius, math.sin(angle) * particle.radius
