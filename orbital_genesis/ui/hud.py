"""HUD overlay: title, control bar and system statistics."""

from __future__ import annotations

import pygame

from ..constants import (
    APP_SUBTITLE,
    APP_TITLE,
    APP_TITLE_ACCENT,
    CYAN,
    LIGHT_GREY,
    MID_GREY,
    PANEL_BG,
    PANEL_BORDER,
    SPEED_OPTIONS,
    WHITE,
)
from ..models.system import SolarSystem

_CONTROLS_HINT = "R new system   SPACE pause   1-4 speed   +/- zoom   F fit   O orbits"


class HUD:
    """Overlay drawn on top of the system view."""

    def __init__(self) -> None:
        self.font_title = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)

    def draw(
        self,
        surface: pygame.Surface,
        system: SolarSystem,
        speed: float,
        paused: bool,
        zoom: float,
        show_orbits: bool,
    ) -> None:
        self._draw_title(surface)
        self._draw_stats(surface, system)
        self._draw_controls(surface, speed, paused, zoom, show_orbits)

    def _draw_title(self, surface: pygame.Surface) -> None:
        title = self.font_title.render(APP_TITLE, True, CYAN)
        accent = self.font_title.render(APP_TITLE_ACCENT, True, WHITE)
        surface.blit(title, (24, 24))
        surface.blit(accent, (24 + title.get_width(), 24))
        subtitle = self.font_small.render(APP_SUBTITLE, True, MID_GREY)
        surface.blit(subtitle, (24, 24 + title.get_height() + 2))

    def _draw_stats(self, surface: pygame.Surface, system: SolarSystem) -> None:
        lines = [
            ("SYSTEM STATS", MID_GREY),
            (f"{len(system.planets)} Planets", WHITE),
            (f"{system.moon_count} Moons", WHITE),
            (f"{len(system.asteroid_belts)} Asteroid Belts", WHITE),
        ]
        if system.seed is not None:
            lines.append((f"Seed {system.seed}", MID_GREY))

        panel_w = 190
        panel_h = 14 + 22 * len(lines)
        px = surface.get_width() - panel_w - 24
        py = 24
        self._draw_panel(surface, px, py, panel_w, panel_h)
        for i, (text, color) in enumerate(lines):
            surf = self.font.render(text, True, color)
            surface.blit(surf, (px + panel_w - surf.get_width() - 12, py + 10 + i * 22))

    def _draw_controls(
        self, surface: pygame.Surface, speed: float, paused: bool, zoom: float, show_orbits: bool,
    ) -> None:
        parts: list[tuple[str, tuple[int, int, int]]] = [
            ("PAUSED" if paused else "RUNNING", CYAN if paused else LIGHT_GREY),
            ("SPEED", MID_GREY),
        ]
        for option in SPEED_OPTIONS:
            parts.append((f"{option:g}x", CYAN if option == speed else MID_GREY))
        parts.append((f"ZOOM {zoom * 100:.0f}%", LIGHT_GREY))
        parts.append(("ORBITS ON" if show_orbits else "ORBITS OFF", CYAN if show_orbits else MID_GREY))

        rendered = [self.font.render(text, True, color) for text, color in parts]
        gap = 14
        bar_w = sum(s.get_width() for s in rendered) + gap * (len(rendered) + 1)
        bar_h = 40
        bx = (surface.get_width() - bar_w) // 2
        by = surface.get_height() - bar_h - 36
        self._draw_panel(surface, bx, by, bar_w, bar_h)

        x = bx + gap
        for surf in rendered:
            surface.blit(surf, (x, by + (bar_h - surf.get_height()) // 2))
            x += surf.get_width() + gap

        hint = self.font_small.render(_CONTROLS_HINT, True, MID_GREY)
        surface.blit(hint, ((surface.get_width() - hint.get_width()) // 2, by + bar_h + 8))

    def _draw_panel(self, surface: pygame.Surface, x: int, y: int, w: int, h: int) -> None:
        bg = pygame.Surface((w, h), pygame.SRCALPHA)
        bg.fill(PANEL_BG)
        surface.blit(bg, (x, y))
        pygame.draw.rect(surface, PANEL_BORDER, (x, y, w, h), 1, border_radius=6)
