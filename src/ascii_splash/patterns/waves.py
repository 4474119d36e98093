"""Waves - layered sine swell with mouse ripples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ascii_splash.core.cell import Cell
from ascii_splash.core.size import Size
from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset
from ascii_splash.themes import Theme

WAVE_CHARS = ('~', '≈', '∼', '-', '.', ' ')
FOAM_CHARS = ('◦', '∘', '°', '·')

RIPPLE_LIFETIME_MS = 2000
MAX_MOVE_RIPPLES = 8


@dataclass
class Ripple:
    x: int
    y: int
    time: float
    radius: float


def _band(distance: float) -> tuple[str, float]:
    """Map distance from the wave line to (char, color intensity)."""
    if distance < 0.5:
        return WAVE_CHARS[0], 1.0
    if distance < 1.5:
        return WAVE_CHARS[1], 1.0 - (distance - 0.5) * 0.2
    if distance < 2.5:
        return WAVE_CHARS[2], 0.8 - (distance - 1.5) * 0.2
    if distance < 4:
        return WAVE_CHARS[3], 0.6 - (distance - 2.5) / 1.5 * 0.2
    if distance < 6:
        return WAVE_CHARS[4], 0.4 - (distance - 4) / 2.0 * 0.2
    return WAVE_CHARS[5], 0.0


class WavePattern(Pattern):
    """
    Horizontal swell built from several sine layers.

    Moving the mouse leaves small ripples, clicking drops a big one.
    Ripples fade out after two seconds.
    """

    name = "waves"
    display_name = "Waves"
    defaults = {
        "speed": 1.0,
        "amplitude": 5,
        "frequency": 0.1,
        "layers": 3,
        "foam_enabled": False,
        "foam_threshold": 0.0,
        "foam_density": 0.0,
    }
    presets = (
        Preset(1, "Calm Seas", "Gentle, slow-moving waves",
               {"speed": 0.5, "amplitude": 3, "frequency": 0.08, "layers": 2}),
        Preset(2, "Ocean Storm", "Turbulent, high-energy waves",
               {"speed": 2.0, "amplitude": 8, "frequency": 0.15, "layers": 5}),
        Preset(3, "Ripple Tank", "Physics lab interference patterns",
               {"speed": 0.8, "amplitude": 4, "frequency": 0.2, "layers": 4}),
        Preset(4, "Glass Lake", "Barely perceptible movement",
               {"speed": 0.3, "amplitude": 2, "frequency": 0.05, "layers": 1}),
        Preset(5, "Tsunami", "Massive, powerful waves",
               {"speed": 1.5, "amplitude": 12, "frequency": 0.06, "layers": 3}),
        Preset(6, "Choppy Waters", "Irregular, textured surface",
               {"speed": 1.2, "amplitude": 6, "frequency": 0.25, "layers": 6}),
        Preset(7, "Stormy Seas", "High waves with crashing foam",
               {"speed": 1.8, "amplitude": 10, "frequency": 0.12, "layers": 4,
                "foam_enabled": True, "foam_threshold": 0.7, "foam_density": 0.6}),
        Preset(8, "Gentle Surf", "Soft waves with light foam",
               {"speed": 0.8, "amplitude": 5, "frequency": 0.1, "layers": 3,
                "foam_enabled": True, "foam_threshold": 0.8, "foam_density": 0.3}),
    )

    def __init__(self, theme: Theme, **options: Any) -> None:
        super().__init__(theme, **options)
        self.ripples: list[Ripple] = []
        self._time = 0.0

    def _swell(self, x: int, time_ms: float) -> float:
        total = 0.0
        frequency = self.config["frequency"]
        amplitude = self.config["amplitude"]
        speed = self.config["speed"]
        for layer in range(self.config["layers"]):
            layer_freq = frequency * (layer + 1) * 0.5
            layer_amp = amplitude / (layer + 1)
            layer_speed = speed * (layer + 1) * 0.3
            total += math.sin(x * layer_freq + time_ms * layer_speed * 0.001) * layer_amp
            total += math.sin(x * layer_freq * 1.3 + time_ms * layer_speed * 0.0008) * layer_amp * 0.5
        return total

    def _ripple_offset(self, x: int, y: int, time_ms: float) -> float:
        offset = 0.0
        for ripple in self.ripples:
            dx = x - ripple.x
            dy = y - ripple.y
            dist_sq = dx * dx + dy * dy
            if dist_sq < ripple.radius * ripple.radius:
                dist = math.sqrt(dist_sq)
                age = time_ms - ripple.time
                offset += math.sin(dist * 0.5 - age * 0.01) * (1 - dist / ripple.radius) * 3
        return offset

    def render(
        self,
        surface: CellSurface,
        time_ms: float,
        size: Size,
        mouse: Point | None = None,
    ) -> None:
        self._time = time_ms
        amplitude = self.config["amplitude"] or 1
        foam = self.config["foam_enabled"]
        theme = self.theme

        for x in range(size.width):
            swell = self._swell(x, time_ms)
            for y in range(size.height):
                total = swell + self._ripple_offset(x, y, time_ms) if self.ripples else swell
                distance = abs(y - (size.height / 2 + total))
                char, intensity = _band(distance)

                if foam and distance < 0.5 and abs(total) / amplitude > self.config["foam_threshold"]:
                    noise = math.sin(x * 0.5 + time_ms * 0.003) * 0.5 + 0.5
                    density = self.config["foam_density"]
                    if noise < density:
                        index = int(noise * len(FOAM_CHARS) / density)
                        char = FOAM_CHARS[min(index, len(FOAM_CHARS) - 1)]
                        intensity = 0.9

                surface.set_cell(x, y, Cell(char, theme.color_at(intensity)))

        self.ripples = [r for r in self.ripples if time_ms - r.time < RIPPLE_LIFETIME_MS]

    def on_mouse_move(self, pos: Point) -> None:
        self.ripples.append(Ripple(pos.x, pos.y, self._time, 20))
        if len(self.ripples) > MAX_MOVE_RIPPLES:
            self.ripples.pop(0)

    def on_mouse_click(self, pos: Point) -> None:
        self.ripples.append(Ripple(pos.x, pos.y, self._time, 35))

    def reset(self) -> None:
        self.ripples = []
        self._time = 0.0

    def metrics(self) -> dict[str, float]:
        ages = [self._time - r.time for r in self.ripples]
        return {
            "active_ripples": len(self.ripples),
            "avg_ripple_age": round(sum(ages) / len(ages)) if ages else 0,
            "layers": self.config["layers"],
            "speed": self.config["speed"],
            "amplitude": self.config["amplitude"],
        }
