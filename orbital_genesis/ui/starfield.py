"""Static background stars with a faint parallax against the camera pan."""

from __future__ import annotations

import pygame

from ..constants import NUM_BACKGROUND_STARS, STAR_PARALLAX, STAR_WHITE
from .camera import Camera


class StarField:
    """Background star dots, placed by a fixed hash so they never jump."""

    def __init__(self, count: int = NUM_BACKGROUND_STARS) -> None:
        self.stars: list[dict] = []
        for i in range(count):
            self.stars.append(
                {
                    "x": i * 1337,
                    "y": i * 7331,
                    "brightness": ((i * 997) % 100) / 100 * 0.5,
                }
            )

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        width, height = surface.get_size()
        for star in self.stars:
            x = int(star["x"] + camera.pan_x * STAR_PARALLAX) % width
            y = int(star["y"] + camera.pan_y * STAR_PARALLAX) % height
            color = tuple(int(c * star["brightness"]) for c in STAR_WHITE)
            surface.set_at((x, y), color)
