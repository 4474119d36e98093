"""Status bar drawn into the bottom row through the overlay layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.render.buffer import FrameBuffer

BACKGROUND = Color(20, 25, 35)
SEPARATOR = Color(60, 70, 90)
PATTERN_COLOR = Color(100, 180, 255)
THEME_COLOR = Color(180, 140, 255)
FPS_GOOD = Color(100, 220, 120)
FPS_WARN = Color(255, 200, 100)
FPS_BAD = Color(255, 100, 100)
PAUSED_COLOR = Color(255, 150, 100)
HINT_COLOR = Color(120, 130, 150)


@dataclass
class StatusState:
    """What the status bar shows."""
    pattern: str = "Waves"
    preset: int | None = None
    theme: str = "Ocean"
    fps: float = 0.0
    target_fps: int = 30
    paused: bool = False


@dataclass
class Segment:
    text: str
    color: Color


@dataclass
class StatusBar:
    """Bottom-row status line: pattern, preset, theme, FPS, pause marker."""

    state: StatusState = field(default_factory=StatusState)
    hint: str = "q quit · space pause · n/p pattern · t theme · h help"

    def update(self, **changes: object) -> None:
        for key, value in changes.items():
            setattr(self.state, key, value)

    def _fps_color(self) -> Color:
        ratio = self.state.fps / self.state.target_fps if self.state.target_fps else 0
        if ratio >= 0.9:
            return FPS_GOOD
        if ratio >= 0.6:
            return FPS_WARN
        return FPS_BAD

    def segments(self) -> list[Segment]:
        state = self.state
        pattern = state.pattern if state.preset is None else f"{state.pattern} #{state.preset}"
        segments = [
            Segment(pattern, PATTERN_COLOR),
            Segment(state.theme, THEME_COLOR),
            Segment(f"{state.fps:.0f}/{state.target_fps} fps", self._fps_color()),
        ]
        if state.paused:
            segments.append(Segment("PAUSED", PAUSED_COLOR))
        return segments

    def draw(self, buffer: FrameBuffer) -> None:
        """Replace the bottom row's overlay with the current status line."""
        width, height = buffer.size.width, buffer.size.height
        if height == 0 or width == 0:
            return
        y = height - 1
        buffer.clear_overlay_row(y)
        for x in range(width):
            buffer.set_overlay(x, y, Cell(' ', background=BACKGROUND))

        x = 1
        for i, segment in enumerate(self.segments()):
            if i > 0:
                buffer.set_overlay(x, y, Cell('|', SEPARATOR, BACKGROUND))
                x += 2
            x += buffer.set_overlay_text(x, y, segment.text, segment.color, BACKGROUND)
            x += 1

        hint_x = width - len(self.hint) - 1
        if hint_x > x + 1:
            buffer.set_overlay_text(hint_x, y, self.hint, HINT_COLOR, BACKGROUND)
