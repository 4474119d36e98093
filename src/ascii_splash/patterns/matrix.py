"""Matrix - falling glyph columns."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.core.size import Size
from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset
from ascii_splash.themes import Theme

CHARSETS = {
    "katakana": 'ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜｦﾝ',
    "numbers": '0123456789',
    "mixed": 'ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜｦﾝ0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ',
}

DISTORTION_RADIUS = 5
DISTORTION_LIFETIME_MS = 500
AGE_FADE_FRAMES = 500
GLYPH_MUTATION_RATE = 0.05


@dataclass
class Column:
    x: int
    y: float
    speed: float
    chars: list[str] = field(default_factory=list)
    age: int = 0

    @property
    def length(self) -> int:
        return len(self.chars)


class MatrixPattern(Pattern):
    """
    Digital rain. Each column has a white head, a bright green neck and
    a tail that dims with distance from the head and with column age.
    The cursor scrambles nearby glyphs; clicks spawn extra columns.
    """

    name = "matrix"
    display_name = "Matrix"
    defaults = {"density": 0.3, "speed": 1.0, "charset": "katakana"}
    presets = (
        Preset(1, "Classic Matrix", "The iconic falling code effect", {"density": 0.3, "speed": 1.0, "charset": "katakana"}),
        Preset(2, "Binary Rain", "Falling numbers, digital downpour", {"density": 0.4, "speed": 1.2, "charset": "numbers"}),
        Preset(3, "Code Storm", "Dense, fast-moving characters", {"density": 0.5, "speed": 1.8, "charset": "mixed"}),
        Preset(4, "Sparse Glyphs", "Minimal, slow-falling characters", {"density": 0.15, "speed": 0.6, "charset": "katakana"}),
        Preset(5, "Firewall", "Ultra-dense security screen", {"density": 0.7, "speed": 2.0, "charset": "mixed"}),
        Preset(6, "Zen Code", "Peaceful, meditative flow", {"density": 0.2, "speed": 0.5, "charset": "katakana"}),
    )

    def __init__(self, theme: Theme, rng: random.Random | None = None, **options: Any) -> None:
        super().__init__(theme, **options)
        if self.config["charset"] not in CHARSETS:
            raise ValueError(f"Unknown charset {self.config['charset']!r}")
        self.config["density"] = max(0.0, min(1.0, float(self.config["density"])))
        self.config["speed"] = max(0.1, min(5.0, float(self.config["speed"])))
        self.rng = rng or random.Random()
        self.columns: list[Column] = []
        self.distortion: Point | None = None
        self._distortion_ms = 0.0
        self._time = 0.0
        self._width = 0

    def _glyph(self) -> str:
        return self.rng.choice(CHARSETS[self.config["charset"]])

    def _new_column(self, width: int) -> Column:
        rng = self.rng
        length = rng.randint(5, 19)
        return Column(
            x=rng.randrange(width) if width > 0 else 0,
            y=-length,
            speed=(rng.random() * 0.5 + 0.5) * self.config["speed"],
            chars=[self._glyph() for _ in range(length)],
        )

    def _sync_columns(self, size: Size) -> None:
        target = int(size.width * self.config["density"])
        # Drop columns stranded by a shrinking terminal
        self.columns = [col for col in self.columns if col.x < size.width]
        while len(self.columns) < target:
            self.columns.append(self._new_column(size.width))

    def render(
        self,
        surface: CellSurface,
        time_ms: float,
        size: Size,
        mouse: Point | None = None,
    ) -> None:
        self._time = time_ms
        self._width = size.width
        self._sync_columns(size)
        # Scrambling follows the cursor only while it keeps moving
        if self.distortion is not None and time_ms - self._distortion_ms > DISTORTION_LIFETIME_MS:
            self.distortion = None

        for i, col in enumerate(self.columns):
            col.y += col.speed * 0.3
            col.age += 1
            if col.y > size.height + col.length:
                self.columns[i] = self._new_column(size.width)
                continue

            age_fade = max(0.0, 1 - col.age / AGE_FADE_FRAMES)
            for j in range(col.length):
                y = math.floor(col.y - j)
                if not 0 <= y < size.height:
                    continue
                char = col.chars[j]
                if self._distorted(col.x, y):
                    char = self._glyph()
                surface.set_cell(col.x, y, Cell(char, self._shade(j, col.length, age_fade)))
                if self.rng.random() < GLYPH_MUTATION_RATE:
                    col.chars[j] = self._glyph()

    def _distorted(self, x: int, y: int) -> bool:
        if self.distortion is None:
            return False
        dx = x - self.distortion.x
        dy = y - self.distortion.y
        return dx * dx + dy * dy < DISTORTION_RADIUS * DISTORTION_RADIUS

    def _shade(self, j: int, length: int, age_fade: float) -> Color:
        if j == 0:
            white = int(255 * age_fade)
            return Color(white, white, white)
        if j < 3:
            return Color(0, int(255 * age_fade), int(70 * age_fade))
        brightness = int((1 - j / length) * age_fade * 200)
        return Color(0, brightness, int(brightness * 0.3))

    def on_mouse_move(self, pos: Point) -> None:
        self.distortion = pos
        self._distortion_ms = self._time

    def on_mouse_click(self, pos: Point) -> None:
        for _ in range(3):
            col = self._new_column(max(self._width, 1))
            col.x = pos.x + self.rng.randint(-3, 2)
            col.y = pos.y - col.length
            self.columns.append(col)

    def reset(self) -> None:
        self.columns = []
        self.distortion = None
        self._distortion_ms = 0.0

    def metrics(self) -> dict[str, float]:
        speeds = [col.speed for col in self.columns]
        return {
            "columns": len(self.columns),
            "total_chars": sum(col.length for col in self.columns),
            "avg_speed": round(sum(speeds) / len(speeds), 2) if speeds else 0,
            "density": self.config["density"],
        }
