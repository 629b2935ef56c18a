"""Procedural planetary system generation.

Systems are built in stages: star, planets placed outward with
non-overlapping orbits, moons, then asteroid belts in the free gaps between
neighbouring orbits plus one belt beyond the outermost planet.

Only ``rng.random()`` is ever called on the random source, so anything with
that method can drive generation (a seeded ``random.Random`` or a scripted
stub).
"""

from __future__ import annotations

import colorsys
import logging
import math
import random
from typing import Sequence, TypeVar

from .orbit import Orbit
from .system import (
    AsteroidBelt,
    AsteroidParticle,
    Color,
    Moon,
    Planet,
    PlanetType,
    SolarSystem,
    Star,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Tuning constants
# ---------------------------------------------------------------------------

STAR_RADIUS_RANGE = (5.0, 8.0)
STAR_CLEARANCE = 5.0  # First orbit boundary sits this far outside the star

PLANET_COUNT_RANGE = (7, 12)
INNER_SYSTEM_SIZE = 4  # Planets with index below this use the inner gaps
INNER_GAP_RANGE = (20.0, 60.0)
OUTER_GAP_RANGE = (80.0, 200.0)
ECCENTRICITY_RANGE = (0.01, 0.2)

FROST_LINE = 400.0
FROST_LINE_INDEX = 4  # Planets past this index count as beyond the frost line

PLANET_PERIOD_SCALE = 0.005  # period = a**1.5 * scale

_PLANET_RADIUS_RANGES: dict[PlanetType, tuple[float, float]] = {
    PlanetType.GAS_GIANT: (10.0, 16.0),
    PlanetType.ICE_GIANT: (7.0, 11.0),
    PlanetType.DWARF: (1.5, 2.5),
    PlanetType.ROCKY: (3.0, 6.0),
}

_MOON_COUNT_RANGES: dict[PlanetType, tuple[int, int]] = {
    PlanetType.GAS_GIANT: (3, 8),
    PlanetType.ICE_GIANT: (2, 5),
    PlanetType.ROCKY: (0, 2),
    PlanetType.DWARF: (0, 0),
}

MOON_BASE_DISTANCE_RANGE = (5.0, 15.0)
MOON_SPACING_RANGE = (4.0, 8.0)
MOON_RADIUS_RANGE = (0.8, 1.8)
MOON_ECCENTRICITY_MAX = 0.1
MOON_PERIOD_SCALE = 0.15
MOON_COLOR: Color = (204, 204, 204)

BELT_SAFETY_MARGIN = 15.0
BELT_MIN_WIDTH = 20.0
BELT_DENSITY = 20  # Particles per unit of radial width
BELT_SPEED_SCALE = 5.0  # speed = scale / sqrt(r)
BELT_PARTICLE_SIZE_RANGE = (0.5, 1.5)

# Belt count rolls: below the first threshold 3 belts, below the second 2, else 1
THREE_BELT_CHANCE = 0.05
TWO_BELT_CHANCE = 0.25

OUTER_BELT_CLEARANCE = 40.0
OUTER_BELT_WIDTH_RANGE = (80.0, 150.0)
OUTER_BELT_PARTICLES = 2500

# ---------------------------------------------------------------------------
# Random helpers (all built on rng.random())
# ---------------------------------------------------------------------------


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return rng.random() * (high - low) + low


def _randint(rng: random.Random, low: int, high: int) -> int:
    """Integer in [low, high], both ends inclusive."""
    return math.floor(rng.random() * (high - low + 1)) + low


def _choice(rng: random.Random, items: Sequence[T]) -> T:
    return items[_randint(rng, 0, len(items) - 1)]


def _shuffle(rng: random.Random, items: list) -> None:
    """Fisher-Yates shuffle in place."""
    for i in range(len(items) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        items[i], items[j] = items[j], items[i]


# ---------------------------------------------------------------------------
# Names and colours
# ---------------------------------------------------------------------------

_PREFIXES = ["Kep", "Gliese", "Trappist", "Proxima", "Sol", "Vega", "Altair", "Deneb", "K2", "HD"]

_SUFFIXES = ["Prime", "Major", "Minor", "b", "c", "d", "x", "Zeta", "I", "II", "III"]

_ROMAN = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]


def _generate_planet_name(rng: random.Random) -> str:
    """Catalogue-style name, e.g. "Gliese-581 Prime". Not guaranteed unique."""
    prefix = _choice(rng, _PREFIXES)
    number = _randint(rng, 10, 999)
    suffix = _choice(rng, _SUFFIXES)
    return f"{prefix}-{number} {suffix}"


def to_roman(num: int) -> str:
    if 1 <= num <= len(_ROMAN):
        return _ROMAN[num - 1]
    return str(num)


def _hsl(rng: random.Random, hue: tuple[int, int], sat: tuple[int, int], light: tuple[int, int]) -> Color:
    h = _randint(rng, *hue)
    s = _randint(rng, *sat)
    lig = _randint(rng, *light)
    r, g, b = colorsys.hls_to_rgb(h / 360.0, lig / 100.0, s / 100.0)
    return round(r * 255), round(g * 255), round(b * 255)


def _planet_color(rng: random.Random, planet_type: PlanetType) -> Color:
    """Colour drawn from the hue/saturation/lightness band of the type."""
    if planet_type == PlanetType.ROCKY:
        if rng.random() > 0.5:
            return _hsl(rng, (100, 220), (40, 80), (30, 60))  # Earth-like
        return _hsl(rng, (0, 40), (50, 90), (40, 70))  # Mars-like
    if planet_type == PlanetType.GAS_GIANT:
        return _hsl(rng, (20, 50), (60, 90), (50, 80))
    if planet_type == PlanetType.ICE_GIANT:
        return _hsl(rng, (180, 260), (60, 90), (60, 85))
    return _hsl(rng, (0, 0), (0, 10), (40, 80))  # Dwarf


def _star_color(rng: random.Random) -> Color:
    return _hsl(rng, (30, 60), (80, 100), (50, 80))


# ---------------------------------------------------------------------------
# Planets and moons
# ---------------------------------------------------------------------------


def classify_planet(roll: float, semi_major_axis: float, index: int) -> PlanetType:
    """Map a roll in [0, 1) to a planet type.

    Beyond the frost line giants dominate; inside it worlds are rocky with
    the odd dwarf.
    """
    if semi_major_axis > FROST_LINE or index > FROST_LINE_INDEX:
        if roll > 0.55:
            return PlanetType.GAS_GIANT
        if roll > 0.25:
            return PlanetType.ICE_GIANT
        if roll > 0.1:
            return PlanetType.ROCKY
        return PlanetType.DWARF
    if roll < 0.15:
        return PlanetType.DWARF
    return PlanetType.ROCKY


def planet_period(semi_major_axis: float) -> float:
    return semi_major_axis ** 1.5 * PLANET_PERIOD_SCALE


def moon_period(distance: float) -> float:
    return distance ** 1.5 * MOON_PERIOD_SCALE


def _generate_moons(
    rng: random.Random, planet_id: str, planet_name: str, planet_type: PlanetType,
    planet_radius: float, index: int,
) -> tuple[Moon, ...]:
    if planet_type == PlanetType.DWARF:
        return ()

    moons: list[Moon] = []
    num_moons = _randint(rng, *_MOON_COUNT_RANGES[planet_type])
    distance = planet_radius + _uniform(rng, *MOON_BASE_DISTANCE_RANGE)
    for m in range(num_moons):
        # Each moon sits strictly further out than the one before
        if m > 0:
            distance += _uniform(rng, *MOON_SPACING_RANGE)
        moons.append(
            Moon(
                id=f"moon-{index}-{m}",
                name=f"{planet_name} {to_roman(m + 1)}",
                parent_id=planet_id,
                radius=_uniform(rng, *MOON_RADIUS_RANGE),
                color=MOON_COLOR,
                orbit=Orbit(
                    a=distance,
                    e=_uniform(rng, 0.0, MOON_ECCENTRICITY_MAX),
                    omega=_uniform(rng, 0.0, math.tau),
                    period=moon_period(distance),
                    mean_anomaly0=_uniform(rng, 0.0, math.tau),
                ),
            )
        )
    return tuple(moons)


def generate_planets(rng: random.Random, star_radius: float) -> list[Planet]:
    """Place planets outward from the star.

    Each perihelion lies a drawn gap beyond the previous aphelion, so no two
    orbits cross or touch.
    """
    planets: list[Planet] = []
    num_planets = _randint(rng, *PLANET_COUNT_RANGE)
    previous_aphelion = star_radius + STAR_CLEARANCE

    for i in range(num_planets):
        gap_range = INNER_GAP_RANGE if i < INNER_SYSTEM_SIZE else OUTER_GAP_RANGE
        gap = _uniform(rng, *gap_range)
        eccentricity = _uniform(rng, *ECCENTRICITY_RANGE)

        perihelion = previous_aphelion + gap
        semi_major_axis = perihelion / (1 - eccentricity)

        planet_type = classify_planet(rng.random(), semi_major_axis, i)
        radius = _uniform(rng, *_PLANET_RADIUS_RANGES[planet_type])
        color = _planet_color(rng, planet_type)

        planet_id = f"planet-{i}"
        name = _generate_planet_name(rng)
        orbit = Orbit(
            a=semi_major_axis,
            e=eccentricity,
            omega=_uniform(rng, 0.0, math.tau),
            period=planet_period(semi_major_axis),
            mean_anomaly0=_uniform(rng, 0.0, math.tau),
        )
        assert orbit.perihelion > previous_aphelion, "planet orbits overlap"
        previous_aphelion = orbit.aphelion

        planets.append(
            Planet(
                id=planet_id,
                name=name,
                radius=radius,
                color=color,
                orbit=orbit,
                type=planet_type,
                description=f"A {planet_type.value} planet.",
                moons=_generate_moons(rng, planet_id, name, planet_type, radius, i),
            )
        )

    logger.debug("Placed %d planets out to aphelion %.1f", len(planets), previous_aphelion)
    return planets


# ---------------------------------------------------------------------------
# Asteroid belts
# ---------------------------------------------------------------------------


def find_belt_gaps(planets: Sequence[Planet]) -> list[int]:
    """Indices i where a belt fits between planets i and i+1 with margin on both sides."""
    gaps: list[int] = []
    for i, (inner, outer) in enumerate(zip(planets, planets[1:])):
        free_space = outer.orbit.perihelion - inner.orbit.aphelion
        if free_space > BELT_SAFETY_MARGIN * 2 + BELT_MIN_WIDTH:
            gaps.append(i)
    return gaps


def belt_count(roll: float) -> int:
    """Number of inner belts wanted for a roll in [0, 1)."""
    if roll < THREE_BELT_CHANCE:
        return 3
    if roll < TWO_BELT_CHANCE:
        return 2
    return 1


def _generate_particles(
    rng: random.Random, min_radius: float, max_radius: float, count: int,
) -> tuple[AsteroidParticle, ...]:
    particles: list[AsteroidParticle] = []
    for _ in range(count):
        radius = _uniform(rng, min_radius, max_radius)
        particles.append(
            AsteroidParticle(
                angle=_uniform(rng, 0.0, math.tau),
                radius=radius,
                speed=BELT_SPEED_SCALE / math.sqrt(radius),
                size=_uniform(rng, *BELT_PARTICLE_SIZE_RANGE),
            )
        )
    return tuple(particles)


def generate_inner_belts(rng: random.Random, planets: Sequence[Planet]) -> list[AsteroidBelt]:
    """Belts placed in randomly chosen free gaps between neighbouring orbits."""
    gaps = find_belt_gaps(planets)
    wanted = belt_count(rng.random())
    num_belts = min(wanted, len(gaps))
    _shuffle(rng, gaps)

    belts: list[AsteroidBelt] = []
    for idx in gaps[:num_belts]:
        min_radius = planets[idx].orbit.aphelion + BELT_SAFETY_MARGIN
        max_radius = planets[idx + 1].orbit.perihelion - BELT_SAFETY_MARGIN
        count = math.floor((max_radius - min_radius) * BELT_DENSITY)
        belts.append(
            AsteroidBelt(
                min_radius=min_radius,
                max_radius=max_radius,
                particles=_generate_particles(rng, min_radius, max_radius, count),
            )
        )

    logger.debug(
        "%d valid belt gaps, %d belts wanted, %d placed", len(gaps), wanted, len(belts),
    )
    return belts


def generate_outer_belt(rng: random.Random, planets: Sequence[Planet]) -> AsteroidBelt:
    """Kuiper-style belt just beyond the outermost planet's aphelion."""
    min_radius = planets[-1].orbit.aphelion + OUTER_BELT_CLEARANCE
    max_radius = min_radius + _uniform(rng, *OUTER_BELT_WIDTH_RANGE)
    return AsteroidBelt(
        min_radius=min_radius,
        max_radius=max_radius,
        particles=_generate_particles(rng, min_radius, max_radius, OUTER_BELT_PARTICLES),
    )


def generate_asteroid_belts(rng: random.Random, planets: Sequence[Planet]) -> list[AsteroidBelt]:
    """Inner belts (possibly none) followed by the outer belt, which is always present."""
    belts = generate_inner_belts(rng, planets)
    belts.append(generate_outer_belt(rng, planets))
    return belts


# ---------------------------------------------------------------------------
# System generation
# ---------------------------------------------------------------------------


def generate_solar_system(rng: random.Random | None = None, seed: int | None = None) -> SolarSystem:
    """Build a complete system from ``rng`` (a fresh unseeded Random if omitted)."""
    if rng is None:
        rng = random.Random(seed)

    star = Star(radius=_uniform(rng, *STAR_RADIUS_RANGE), color=_star_color(rng))
    planets = generate_planets(rng, star.radius)
    belts = generate_asteroid_belts(rng, planets)

    system = SolarSystem(
        star=star, planets=tuple(planets), asteroid_belts=tuple(belts), seed=seed,
    )
    logger.info(
        "Generated system (seed=%s): %d planets, %d moons, %d asteroid belts",
        seed, len(system.planets), system.moon_count, len(system.asteroid_belts),
    )
    return system


class SystemGenerator:
    """Seeded system factory. The same seed always rebuilds the same system."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed if seed is not None else random.randint(0, 2**32)

    def generate(self) -> SolarSystem:
        return generate_solar_system(random.Random(self.seed), seed=self.seed)

    def regenerate(self, seed: int | None = None) -> SolarSystem:
        """Reseed (randomly unless ``seed`` is given) and generate."""
        self.seed = seed if seed is not None else random.randint(0, 2**32)
        return self.generate()
