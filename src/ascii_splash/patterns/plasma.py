"""Plasma - overlapping sine fields."""

from __future__ import annotations

import math

from ascii_splash.core.cell import Cell
from ascii_splash.core.size import Size
from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset

PLASMA_CHARS = ('█', '▓', '▒', '░', '▪', '▫', '·', ' ')


class PlasmaPattern(Pattern):
    """Four summed sine waves (horizontal, vertical, diagonal, radial)."""

    name = "plasma"
    display_name = "Plasma"
    defaults = {"frequency": 0.1, "speed": 1.0, "complexity": 3}
    presets = (
        Preset(1, "Lava Flow", "Slow, broad swirls", {"frequency": 0.06, "speed": 0.5, "complexity": 2}),
        Preset(2, "Electric", "Fast, busy interference", {"frequency": 0.15, "speed": 2.0, "complexity": 5}),
        Preset(3, "Aurora", "Gentle shimmering bands", {"frequency": 0.08, "speed": 0.8, "complexity": 3}),
    )

    def render(
        self,
        surface: CellSurface,
        time_ms: float,
        size: Size,
        mouse: Point | None = None,
    ) -> None:
        width, height = size.width, size.height
        if width == 0 or height == 0:
            return
        frequency = self.config["frequency"]
        complexity = self.config["complexity"]
        t = time_ms * self.config["speed"] / 1000
        last = len(PLASMA_CHARS) - 1

        for y in range(height):
            ny = y / height
            for x in range(width):
                nx = x / width
                value = math.sin((nx * 10 * frequency + t) * complexity)
                value += math.sin((ny * 10 * frequency + t * 0.8) * complexity)
                value += math.sin(((nx + ny) * 7 * frequency + t * 1.2) * complexity)
                dist = math.hypot(nx - 0.5, ny - 0.5)
                value += math.sin((dist * 15 * frequency - t * 1.5) * complexity)

                # value is in [-4, 4]
                intensity = (value / 4 + 1) / 2
                char = PLASMA_CHARS[int(intensity * last)]
                surface.set_cell(x, y, Cell(char, self.theme.color_at(intensity)))

    def metrics(self) -> dict[str, float]:
        return {"waves": 4, "complexity": self.config["complexity"]}
