"""System view: animate a generated system with pan, zoom and hover."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from ..constants import (
    ASTEROID_GREY,
    BELT_TIME_SCALE,
    CYAN,
    LIGHT_GREY,
    MOON_ORBIT_COLOR,
    MOON_ORBIT_MIN_ZOOM,
    PANEL_BG,
    PANEL_BORDER,
    PIXELS_PER_AU,
    PLANET_ORBIT_COLOR,
    SPEED_OPTIONS,
    TIME_SCALE,
    WHITE,
    WHEEL_ZOOM_FACTOR,
    ZOOM_STEP,
)
from ..models.generator import SystemGenerator
from ..models.orbit import orbit_path, particle_position
from ..models.system import Moon, Planet, SolarSystem
from ..ui.camera import Camera, hit_test

logger = logging.getLogger(__name__)

_MOON_HOVER_RADIUS = 6

_SPEED_KEYS = {
    pygame.K_1: SPEED_OPTIONS[0],
    pygame.K_2: SPEED_OPTIONS[1],
    pygame.K_3: SPEED_OPTIONS[2],
    pygame.K_4: SPEED_OPTIONS[3],
}


@dataclass
class SimulationClock:
    """Accumulated simulated time; pausing simply stops it advancing."""

    time: float = 0.0
    speed: float = 1.0
    paused: bool = False

    def advance(self, dt: float) -> float:
        if not self.paused:
            self.time += dt * TIME_SCALE * self.speed
        return self.time

    def reset(self) -> None:
        self.time = 0.0


class SystemViewScreen:
    """Draws the star, belts, orbits, planets and moons of one system."""

    def __init__(self, generator: SystemGenerator, width: int, height: int) -> None:
        self.generator = generator
        self.camera = Camera(width, height)
        self.clock = SimulationClock()
        self.show_orbits = True

        self.font_name = pygame.font.Font(None, 26)
        self.font_info = pygame.font.Font(None, 20)

        self.system: SolarSystem = generator.generate()
        self._orbit_paths: dict[str, list[tuple[float, float]]] = {}
        self._positions: dict[str, tuple[float, float]] = {}
        self._build_orbit_paths()

        self.hovered: Planet | Moon | None = None
        self._hover_pos: tuple[float, float] = (0.0, 0.0)
        self._dragging = False

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._dragging = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.camera.pan(*event.rel)
        elif event.type == pygame.MOUSEWHEEL:
            mx, my = pygame.mouse.get_pos()
            self.camera.zoom_at(self.camera.zoom * (1 + WHEEL_ZOOM_FACTOR * event.y), mx, my)
        elif event.type == pygame.WINDOWLEAVE:
            self._dragging = False

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_r:
            self.regenerate()
        elif key == pygame.K_SPACE:
            self.clock.paused = not self.clock.paused
        elif key in _SPEED_KEYS:
            self.clock.speed = _SPEED_KEYS[key]
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.camera.set_zoom(self.camera.zoom + ZOOM_STEP)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.camera.set_zoom(self.camera.zoom - ZOOM_STEP)
        elif key == pygame.K_f:
            self.camera.fit_to(self.system)
        elif key == pygame.K_o:
            self.show_orbits = not self.show_orbits

    def regenerate(self, seed: int | None = None) -> None:
        """Discard the current system and build a fresh one."""
        self.system = self.generator.regenerate(seed)
        self._build_orbit_paths()
        self.clock.reset()
        self.camera.reset()
        self.hovered = None
        logger.info("Regenerated system with seed %s", self.generator.seed)

    def resize(self, width: int, height: int) -> None:
        self.camera.resize(width, height)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        time = self.clock.advance(dt)
        self._positions = self.system.positions_at(time)

        if self._dragging:
            self.hovered = None
        else:
            mx, my = pygame.mouse.get_pos()
            self.hovered = self._body_at(mx, my)

    def _body_at(self, mx: int, my: int) -> Planet | Moon | None:
        zoom = self.camera.zoom
        planets = (
            (p, *self.camera.world_to_screen(*self._positions[p.id]), p.radius * zoom)
            for p in self.system.planets
        )
        found = hit_test(planets, mx, my)
        if found is None:
            moons = (
                (m, *self.camera.world_to_screen(*self._positions[m.id]), m.radius * zoom)
                for p in self.system.planets
                for m in p.moons
            )
            found = hit_test(moons, mx, my, min_radius=_MOON_HOVER_RADIUS)
        if found is not None:
            self._hover_pos = self.camera.world_to_screen(*self._positions[found.id])
        return found

    def _build_orbit_paths(self) -> None:
        self._orbit_paths = {p.id: orbit_path(p.orbit) for p in self.system.planets}
        self._positions = self.system.positions_at(self.clock.time)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_star(surface)
        self._draw_belts(surface)
        if self.show_orbits:
            self._draw_orbits(surface)
        self._draw_bodies(surface)
        if self.hovered is not None:
            self._draw_tooltip(surface, self.hovered)

    def _draw_star(self, surface: pygame.Surface) -> None:
        star = self.system.star
        sx, sy = self.camera.world_to_screen(0.0, 0.0)
        radius = max(int(star.radius * self.camera.zoom), 1)

        glow_r = radius * 3
        glow_surf = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for i in range(3):
            alpha = 60 - i * 20
            pygame.draw.circle(glow_surf, (*star.color, alpha), (glow_r, glow_r), int(glow_r * (1 - i * 0.3)))
        surface.blit(glow_surf, (sx - glow_r, sy - glow_r))

        pygame.draw.circle(surface, star.color, (sx, sy), radius)
        pygame.draw.circle(surface, WHITE, (sx, sy), max(int(radius * 0.8), 1))

    def _draw_belts(self, surface: pygame.Surface) -> None:
        zoom = self.camera.zoom
        belt_time = self.clock.time * BELT_TIME_SCALE
        for belt in self.system.asteroid_belts:
            for particle in belt.particles:
                sx, sy = self.camera.world_to_screen(*particle_position(particle, belt_time))
                size = particle.size * zoom
                if size < 1:
                    surface.set_at((int(sx), int(sy)), ASTEROID_GREY)
                else:
                    pygame.draw.circle(surface, ASTEROID_GREY, (sx, sy), size)

    def _draw_orbits(self, surface: pygame.Surface) -> None:
        for planet in self.system.planets:
            points = [self.camera.world_to_screen(x, y) for x, y in self._orbit_paths[planet.id]]
            pygame.draw.lines(surface, PLANET_ORBIT_COLOR, True, points)

    def _draw_bodies(self, surface: pygame.Surface) -> None:
        zoom = self.camera.zoom
        draw_moon_orbits = self.show_orbits and zoom > MOON_ORBIT_MIN_ZOOM
        for planet in self.system.planets:
            px, py = self.camera.world_to_screen(*self._positions[planet.id])
            for moon in planet.moons:
                if draw_moon_orbits:
                    pygame.draw.circle(surface, MOON_ORBIT_COLOR, (px, py), moon.orbit.a * zoom, 1)
                mx, my = self.camera.world_to_screen(*self._positions[moon.id])
                pygame.draw.circle(surface, moon.color, (mx, my), max(moon.radius * zoom, 1))

            pygame.draw.circle(surface, planet.color, (px, py), max(planet.radius * zoom, 1.5))
            if planet is self.hovered:
                pygame.draw.circle(surface, CYAN, (px, py), max(planet.radius * zoom, 1.5) + 4, 1)

    def _tooltip_lines(self, body: Planet | Moon) -> list[tuple[str, str]]:
        if isinstance(body, Planet):
            return [
                ("Type", body.type.value),
                ("Moons", str(len(body.moons))),
                ("Orbit Radius", f"{body.orbit.a / PIXELS_PER_AU:.2f} AU"),
                ("Orbital Period", f"{body.orbit.period:.1f} units"),
                ("Eccentricity", f"{body.orbit.e:.3f}"),
            ]
        try:
            parent_name = self.system.get_planet(body.parent_id).name
        except KeyError:
            parent_name = "Unknown"
        return [
            ("Type", "Moon"),
            ("Orbiting", parent_name),
            ("Distance", f"{body.orbit.a:.1f} units"),
            ("Orbital Period", f"{body.orbit.period:.1f} units"),
        ]

    def _draw_tooltip(self, surface: pygame.Surface, body: Planet | Moon) -> None:
        lines = self._tooltip_lines(body)
        panel_w = 240
        panel_h = 40 + len(lines) * 18
        hx, hy = self._hover_pos
        px = int(min(max(hx - panel_w / 2, 8), surface.get_width() - panel_w - 8))
        py = int(max(hy - panel_h - 18, 8))

        bg = pygame.Surface((panel_w, panel_h), pygame.SRCALPHA)
        bg.fill(PANEL_BG)
        surface.blit(bg, (px, py))
        pygame.draw.rect(surface, PANEL_BORDER, (px, py, panel_w, panel_h), 1, border_radius=4)

        pygame.draw.circle(surface, body.color, (px + 16, py + 17), 6)
        name_surf = self.font_name.render(body.name, True, WHITE)
        surface.blit(name_surf, (px + 28, py + 8))

        for i, (label, value) in enumerate(lines):
            y = py + 34 + i * 18
            label_surf = self.font_info.render(f"{label}:", True, LIGHT_GREY)
            value_surf = self.font_info.render(value, True, WHITE)
            surface.blit(label_surf, (px + 12, y))
            surface.blit(value_surf, (px + panel_w - value_surf.get_width() - 12, y))
