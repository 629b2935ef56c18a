"""Orbital Genesis — main application module."""

from __future__ import annotations

import logging

import pygame

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, SPACE_BLACK, TITLE
from .models.generator import SystemGenerator
from .screens.system_view import SystemViewScreen
from .ui.hud import HUD
from .ui.starfield import StarField

logger = logging.getLogger(__name__)


class App:
    """Owns the window and main loop; routes events to the system view."""

    def __init__(self, seed: int | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.starfield = StarField()
        self.hud = HUD()
        self.system_view = SystemViewScreen(SystemGenerator(seed), SCREEN_WIDTH, SCREEN_HEIGHT)
        logger.info("Started with seed %s", self.system_view.generator.seed)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.system_view.update(dt)
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return
            if event.type == pygame.VIDEORESIZE:
                self.system_view.resize(event.w, event.h)
                continue
            self.system_view.handle_events(event)

    def _draw(self) -> None:
        self.screen.fill(SPACE_BLACK)
        view = self.system_view
        self.starfield.draw(self.screen, view.camera)
        view.draw(self.screen)
        self.hud.draw(
            self.screen,
            view.system,
            speed=view.clock.speed,
            paused=view.clock.paused,
            zoom=view.camera.zoom,
            show_orbits=view.show_orbits,
        )
        pygame.display.flip()
