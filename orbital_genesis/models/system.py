"""Data model for a generated planetary system."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .orbit import Orbit, position_on_orbit

Color = tuple[int, int, int]


class PlanetType(enum.Enum):
    """Planet classifications."""

    ROCKY = "Rocky"
    GAS_GIANT = "Gas Giant"
    ICE_GIANT = "Ice Giant"
    DWARF = "Dwarf"


@dataclass(frozen=True)
class Star:
    """The central star. Mass is a placeholder kept at 1."""

    radius: float
    color: Color
    mass: float = 1.0


@dataclass(frozen=True)
class Moon:
    """A moon orbiting a planet. ``parent_id`` is resolved via SolarSystem.get_planet."""

    id: str
    name: str
    radius: float
    color: Color
    orbit: Orbit
    parent_id: str


@dataclass(frozen=True)
class Planet:
    """A planet and the moons it owns."""

    id: str
    name: str
    radius: float
    color: Color
    orbit: Orbit
    type: PlanetType
    description: str
    moons: tuple[Moon, ...] = ()


@dataclass(frozen=True)
class AsteroidParticle:
    """One belt particle on a circular path."""

    angle: float  # Initial phase (radians)
    radius: float
    speed: float  # Angular rate multiplier
    size: float


@dataclass(frozen=True)
class AsteroidBelt:
    """An annulus of particles between ``min_radius`` and ``max_radius``."""

    min_radius: float
    max_radius: float
    particles: tuple[AsteroidParticle, ...] = ()

    def __post_init__(self) -> None:
        if not 0 < self.min_radius < self.max_radius:
            raise ValueError(
                f"belt bounds must satisfy 0 < min < max, got "
                f"{self.min_radius} and {self.max_radius}"
            )

    @property
    def count(self) -> int:
        return len(self.particles)

    @property
    def width(self) -> float:
        return self.max_radius - self.min_radius


@dataclass(frozen=True)
class SolarSystem:
    """A complete generated system. Planets are ordered by orbital distance."""

    star: Star
    planets: tuple[Planet, ...]
    asteroid_belts: tuple[AsteroidBelt, ...] = ()
    seed: int | None = None
    _planets_by_id: dict[str, Planet] = field(
        init=False, repr=False, compare=False, default_factory=dict,
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: fill the lookup table in place
        self._planets_by_id.update({p.id: p for p in self.planets})

    @property
    def moon_count(self) -> int:
        return sum(len(p.moons) for p in self.planets)

    def get_planet(self, planet_id: str) -> Planet:
        """Resolve a planet by id (e.g. a moon's ``parent_id``)."""
        try:
            return self._planets_by_id[planet_id]
        except KeyError:
            raise KeyError(f"no planet with id {planet_id!r}") from None

    def bodies(self) -> list[Planet | Moon]:
        """Planets and moons in draw order: each planet followed by its moons."""
        result: list[Planet | Moon] = []
        for planet in self.planets:
            result.append(planet)
            result.extend(planet.moons)
        return result

    def positions_at(self, time: float) -> dict[str, tuple[float, float]]:
        """Star-centred positions of every planet and moon at ``time``.

        A moon's position is its parent's position plus its own orbital
        offset. A new dict is built on every call.
        """
        positions: dict[str, tuple[float, float]] = {}
        for planet in self.planets:
            px, py = position_on_orbit(planet.orbit, time)
            positions[planet.id] = (px, py)
            for moon in planet.moons:
                mx, my = position_on_orbit(moon.orbit, time)
                positions[moon.id] = (px + mx, py + my)
        return positions
