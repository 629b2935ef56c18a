"""Pan/zoom transform between system space and screen pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, TypeVar

from ..constants import DEFAULT_ZOOM, HOVER_RADIUS, MAX_ZOOM, MIN_ZOOM
from ..models.system import SolarSystem

T = TypeVar("T")


@dataclass
class Camera:
    """Screen = centre + pan + world * zoom."""

    width: int
    height: int
    zoom: float = DEFAULT_ZOOM
    pan_x: float = 0.0
    pan_y: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        cx, cy = self.center
        return cx + self.pan_x + x * self.zoom, cy + self.pan_y + y * self.zoom

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        cx, cy = self.center
        return (sx - cx - self.pan_x) / self.zoom, (sy - cy - self.pan_y) / self.zoom

    def pan(self, dx: float, dy: float) -> None:
        self.pan_x += dx
        self.pan_y += dy

    def set_zoom(self, zoom: float) -> None:
        self.zoom = min(max(zoom, MIN_ZOOM), MAX_ZOOM)

    def zoom_at(self, zoom: float, sx: float, sy: float) -> None:
        """Change zoom while keeping the world point under (sx, sy) fixed."""
        world_x, world_y = self.screen_to_world(sx, sy)
        self.set_zoom(zoom)
        cx, cy = self.center
        self.pan_x = sx - cx - world_x * self.zoom
        self.pan_y = sy - cy - world_y * self.zoom

    def reset(self, zoom: float = DEFAULT_ZOOM) -> None:
        self.pan_x = 0.0
        self.pan_y = 0.0
        self.set_zoom(zoom)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def fit_to(self, system: SolarSystem, margin: float = 0.9) -> float:
        """Zoom so the outermost belt fits the shorter screen side."""
        extent = max((b.max_radius for b in system.asteroid_belts), default=0.0)
        if extent <= 0:
            return self.zoom
        self.reset(margin * min(self.width, self.height) / (2 * extent))
        return self.zoom


def hit_test(
    candidates: Iterable[tuple[T, float, float, float]],
    sx: float,
    sy: float,
    min_radius: float = HOVER_RADIUS,
) -> T | None:
    """First candidate ``(item, screen_x, screen_y, screen_radius)`` covering (sx, sy)."""
    for item, x, y, r in candidates:
        if math.hypot(sx - x, sy - y) < max(r, min_radius):
            return item
    return None
