import math
import random

import pytest

from orbital_genesis.models.generator import generate_solar_system
from orbital_genesis.models.orbit import Orbit, position_on_orbit
from orbital_genesis.models.system import (
    AsteroidBelt,
    AsteroidParticle,
    Moon,
    Planet,
    PlanetType,
    SolarSystem,
    Star,
)


@pytest.fixture
def small_system():
    moon = Moon(
        id="moon-0-0",
        name="Vega-12 b I",
        radius=1.0,
        color=(204, 204, 204),
        orbit=Orbit(a=10.0, e=0.0, omega=0.0, period=2.0),
        parent_id="planet-0",
    )
    planet = Planet(
        id="planet-0",
        name="Vega-12 b",
        radius=4.0,
        color=(80, 160, 90),
        orbit=Orbit(a=100.0, e=0.0, omega=0.0, period=10.0),
        type=PlanetType.ROCKY,
        description="A Rocky planet.",
        moons=(moon,),
    )
    return SolarSystem(star=Star(radius=6.0, color=(255, 200, 80)), planets=(planet,))


def test_get_planet_resolves_moon_parent(small_system):
    moon = small_system.planets[0].moons[0]
    assert small_system.get_planet(moon.parent_id) is small_system.planets[0]


def test_get_planet_unknown_id(small_system):
    with pytest.raises(KeyError):
        small_system.get_planet("planet-99")


def test_bodies_and_moon_count(small_system):
    bodies = small_system.bodies()
    assert [b.id for b in bodies] == ["planet-0", "moon-0-0"]
    assert small_system.moon_count == 1


def test_moon_position_composes_with_parent(small_system):
    positions = small_system.positions_at(0.0)
    assert positions["planet-0"] == pytest.approx((100.0, 0.0))
    assert positions["moon-0-0"] == pytest.approx((110.0, 0.0))

    # Quarter of the planet's period: planet at (0, 100), moon has done 1.25 turns
    positions = small_system.positions_at(2.5)
    assert positions["planet-0"][0] == pytest.approx(0.0, abs=1e-9)
    assert positions["planet-0"][1] == pytest.approx(100.0)
    assert positions["moon-0-0"][0] == pytest.approx(0.0, abs=1e-9)
    assert positions["moon-0-0"][1] == pytest.approx(110.0)


def test_positions_are_fresh_each_call(small_system):
    first = small_system.positions_at(1.0)
    first["planet-0"] = (0.0, 0.0)
    second = small_system.positions_at(1.0)
    assert second["planet-0"] != (0.0, 0.0)


def test_generated_positions_cover_every_body():
    system = generate_solar_system(random.Random(7))
    positions = system.positions_at(12.34)
    assert set(positions) == {b.id for b in system.bodies()}
    for planet in system.planets:
        assert positions[planet.id] == pytest.approx(position_on_orbit(planet.orbit, 12.34))
        for moon in planet.moons:
            offset = (
                positions[moon.id][0] - positions[planet.id][0],
                positions[moon.id][1] - positions[planet.id][1],
            )
            assert math.hypot(*offset) == pytest.approx(
                math.hypot(*position_on_orbit(moon.orbit, 12.34))
            )


def test_belt_rejects_bad_bounds():
    with pytest.raises(ValueError):
        AsteroidBelt(min_radius=50.0, max_radius=50.0)
    with pytest.raises(ValueError):
        AsteroidBelt(min_radius=0.0, max_radius=10.0)


def test_belt_count_and_width():
    particles = tuple(AsteroidParticle(angle=0.0, radius=55.0, speed=1.0, size=1.0) for _ in range(3))
    belt = AsteroidBelt(min_radius=50.0, max_radius=60.0, particles=particles)
    assert belt.count == 3
    assert belt.width == pytest.approx(10.0)


def test_planet_type_labels():
    assert [t.value for t in PlanetType] == ["Rocky", "Gas Giant", "Ice Giant", "Dwarf"]
