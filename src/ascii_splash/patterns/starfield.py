"""Starfield - 3D star flight with mouse repulsion and click bursts."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.core.size import Size
from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset
from ascii_splash.themes import Theme

STAR_CHARS = ('.', '·', '*', '✦', '✧', '★')

# (min depth, char index, color intensity), nearest first
DEPTH_BANDS = (
    (0.9, 5, 1.0),
    (0.7, 4, 0.85),
    (0.5, 3, 0.65),
    (0.3, 2, 0.45),
    (0.15, 1, 0.25),
)

EXPLOSION_LIFETIME_MS = 1000
EXPLOSION_PARTICLES = 12


@dataclass
class Star:
    x: float
    y: float
    z: float
    speed: float


@dataclass
class Explosion:
    x: int
    y: int
    time: float


class StarfieldPattern(Pattern):
    """Stars fly toward the viewer; the cursor pushes them aside."""

    name = "starfield"
    display_name = "Starfield"
    defaults = {"star_count": 100, "speed": 1.0, "repel_radius": 5}
    presets = (
        Preset(1, "Deep Space", "Sparse, slow-moving stars", {"star_count": 50, "speed": 0.5, "repel_radius": 8}),
        Preset(2, "Warp Speed", "Hyperspace jump effect", {"star_count": 200, "speed": 3.0, "repel_radius": 3}),
        Preset(3, "Asteroid Field", "Dense, medium-speed navigation", {"star_count": 150, "speed": 1.5, "repel_radius": 10}),
        Preset(4, "Milky Way", "Balanced cosmic view", {"star_count": 120, "speed": 0.8, "repel_radius": 6}),
        Preset(5, "Nebula Drift", "Slow, dense starfield", {"star_count": 180, "speed": 0.4, "repel_radius": 12}),
        Preset(6, "Photon Torpedo", "Fast, sparse streaks", {"star_count": 80, "speed": 2.5, "repel_radius": 4}),
    )

    def __init__(self, theme: Theme, rng: random.Random | None = None, **options: Any) -> None:
        super().__init__(theme, **options)
        self.rng = rng or random.Random()
        self.stars: list[Star] = []
        self.explosions: list[Explosion] = []
        self._time = 0.0

    def _new_star(self, size: Size) -> Star:
        rng = self.rng
        return Star(
            x=rng.random() * size.width - size.width / 2,
            y=rng.random() * size.height - size.height / 2,
            z=rng.random() * 10 + 1,
            speed=rng.random() * 0.5 + 0.5,
        )

    def render(
        self,
        surface: CellSurface,
        time_ms: float,
        size: Size,
        mouse: Point | None = None,
    ) -> None:
        self._time = time_ms
        width, height = size.width, size.height
        speed = self.config["speed"]
        radius = self.config["repel_radius"]

        if not self.stars:
            self.stars = [self._new_star(size) for _ in range(self.config["star_count"])]

        for i, star in enumerate(self.stars):
            star.z -= speed * star.speed * 0.02
            if star.z <= 0.1:
                self.stars[i] = self._new_star(size)
                continue

            scale = 10 / star.z
            sx = math.floor(star.x * scale + width / 2)
            sy = math.floor(star.y * scale + height / 2)

            if mouse is not None:
                dx = sx - mouse.x
                dy = sy - mouse.y
                dist = math.hypot(dx, dy)
                if 0 < dist < radius:
                    force = (radius - dist) / radius
                    sx += math.floor(dx / dist * force * 3)
                    sy += math.floor(dy / dist * force * 3)

            depth = 1 / star.z
            char_index, intensity = 0, 0.0
            for threshold, index, band_intensity in DEPTH_BANDS:
                if depth > threshold:
                    char_index, intensity = index, band_intensity
                    break

            # Stars drifting off screen are refused by the surface
            surface.set_cell(sx, sy, Cell(STAR_CHARS[char_index], self.theme.color_at(intensity)))

        self._render_explosions(surface, time_ms)

    def _render_explosions(self, surface: CellSurface, time_ms: float) -> None:
        alive: list[Explosion] = []
        for explosion in self.explosions:
            age = time_ms - explosion.time
            if age >= EXPLOSION_LIFETIME_MS:
                continue
            alive.append(explosion)
            progress = max(0.0, age / EXPLOSION_LIFETIME_MS)
            spread = progress * 10
            brightness = int(255 * (1 - progress))
            color = Color(brightness, brightness, brightness)
            for k in range(EXPLOSION_PARTICLES):
                angle = k / EXPLOSION_PARTICLES * math.tau
                px = math.floor(explosion.x + math.cos(angle) * spread)
                py = math.floor(explosion.y + math.sin(angle) * spread)
                surface.set_cell(px, py, Cell('*', color))
        self.explosions = alive

    def on_mouse_click(self, pos: Point) -> None:
        self.explosions.append(Explosion(pos.x, pos.y, self._time))

    def reset(self) -> None:
        self.stars = []
        self.explosions = []

    def metrics(self) -> dict[str, float]:
        depths = [star.z for star in self.stars]
        return {
            "stars": len(self.stars),
            "explosions": len(self.explosions),
            "avg_depth": round(sum(depths) / len(depths), 2) if depths else 0,
            "speed": self.config["speed"],
        }
