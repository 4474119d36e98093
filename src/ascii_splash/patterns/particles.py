"""Particles - bouncing motes with trails, pushed or pulled by the cursor."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any

from ascii_splash.core.cell import Cell
from ascii_splash.core.size import Size
from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset
from ascii_splash.themes import Theme

PARTICLE_CHARS = ('●', '◉', '○', '◐', '◑', '◒', '◓', '•', '∘', '·', '.')
TRAIL_CHAR = '·'
TRAIL_LENGTH = 8

MOUSE_RADIUS = 10
FRICTION = 0.99
BOUNCE = 0.8
LIFE_DECAY = 0.002
BURST_SIZE = 20
MAX_PARTICLES = 500


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float = 1.0
    size: float = 0.0
    trail: list[tuple[float, float]] = field(default_factory=list)


class ParticlePattern(Pattern):
    """
    Free particles under gravity that bounce off the screen edges.

    The cursor repels particles within ten cells; each click flips
    between repel and attract and fires a ring of twenty new particles.
    Particles age out slowly and are replaced to keep the count up.
    """

    name = "particles"
    display_name = "Particles"
    defaults = {"particle_count": 100, "speed": 1.0, "gravity": 0.02, "mouse_force": 0.5}
    presets = (
        Preset(1, "Gentle Float", "Slow particles with minimal gravity",
               {"particle_count": 80, "speed": 0.8, "gravity": 0.01, "mouse_force": 0.3}),
        Preset(2, "Standard Physics", "Balanced particle simulation",
               {"particle_count": 100, "speed": 1.0, "gravity": 0.02, "mouse_force": 0.5}),
        Preset(3, "Heavy Rain", "Strong gravity, falling particles",
               {"particle_count": 150, "speed": 1.2, "gravity": 0.05, "mouse_force": 0.4}),
        Preset(4, "Zero Gravity", "Weightless particles in space",
               {"particle_count": 120, "speed": 1.5, "gravity": 0.0, "mouse_force": 0.8}),
        Preset(5, "Particle Storm", "High density, fast-moving chaos",
               {"particle_count": 200, "speed": 1.8, "gravity": 0.03, "mouse_force": 0.6}),
        Preset(6, "Minimal Drift", "Few particles, subtle movement",
               {"particle_count": 50, "speed": 0.5, "gravity": 0.005, "mouse_force": 0.2}),
    )

    def __init__(self, theme: Theme, rng: random.Random | None = None, **options: Any) -> None:
        super().__init__(theme, **options)
        config = self.config
        config["particle_count"] = max(0, min(MAX_PARTICLES, int(config["particle_count"])))
        config["speed"] = max(0.1, min(5.0, float(config["speed"])))
        config["gravity"] = max(-0.5, min(0.5, float(config["gravity"])))
        config["mouse_force"] = max(0.0, min(2.0, float(config["mouse_force"])))
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.attract = False

    def _spawn(self, size: Size) -> Particle:
        rng = self.rng
        speed = self.config["speed"]
        return Particle(
            x=rng.random() * size.width,
            y=rng.random() * size.height,
            vx=(rng.random() - 0.5) * 2 * speed,
            vy=(rng.random() - 0.5) * 2 * speed,
            size=rng.random() * 3,
        )

    def _push(self, p: Particle, mouse: Point) -> None:
        dx = mouse.x - p.x
        dy = mouse.y - p.y
        dist = math.hypot(dx, dy)
        if dist >= MOUSE_RADIUS:
            return
        force = (1 - dist / MOUSE_RADIUS) * self.config["mouse_force"]
        angle = math.atan2(dy, dx)
        sign = 1 if self.attract else -1
        p.vx += sign * math.cos(angle) * force
        p.vy += sign * math.sin(angle) * force

    def _step(self, p: Particle, width: int, height: int) -> None:
        p.trail.append((p.x, p.y))
        del p.trail[:-TRAIL_LENGTH]
        p.x += p.vx
        p.y += p.vy
        p.vx *= FRICTION
        p.vy *= FRICTION
        p.life -= LIFE_DECAY

        if p.x < 0:
            p.x, p.vx = 0, abs(p.vx) * BOUNCE
        elif p.x >= width:
            p.x, p.vx = width - 1, -abs(p.vx) * BOUNCE
        if p.y < 0:
            p.y, p.vy = 0, abs(p.vy) * BOUNCE
        elif p.y >= height:
            p.y, p.vy = height - 1, -abs(p.vy) * BOUNCE

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
        while len(self.particles) < self.config["particle_count"]:
            self.particles.append(self._spawn(size))

        gravity = self.config["gravity"] * self.config["speed"]
        for p in self.particles:
            p.vy += gravity
            if mouse is not None:
                self._push(p, mouse)
            self._step(p, width, height)
        self.particles = [p for p in self.particles if p.life > 0]

        # Trails first so particles draw on top
        for p in self.particles:
            count = len(p.trail)
            for i, (tx, ty) in enumerate(p.trail):
                intensity = (i / count) * p.life * 0.5
                surface.set_cell(math.floor(tx), math.floor(ty),
                                 Cell(TRAIL_CHAR, self.theme.color_at(intensity)))

        last = len(PARTICLE_CHARS) - 1
        for p in self.particles:
            char = PARTICLE_CHARS[min(last, math.floor(p.size))]
            intensity = min(1.0, math.hypot(p.vx, p.vy) / 5 * p.life)
            surface.set_cell(math.floor(p.x), math.floor(p.y), Cell(char, self.theme.color_at(intensity)))

    def on_mouse_click(self, pos: Point) -> None:
        self.attract = not self.attract
        for i in range(BURST_SIZE):
            angle = math.tau * i / BURST_SIZE
            speed = 2 + self.rng.random() * 2
            self.particles.append(Particle(
                x=pos.x, y=pos.y,
                vx=math.cos(angle) * speed, vy=math.sin(angle) * speed,
                size=self.rng.random() * 3,
            ))

    def reset(self) -> None:
        self.particles = []
        self.attract = False

    def metrics(self) -> dict[str, float]:
        return {"particles": len(self.particles), "attract": int(self.attract)}
