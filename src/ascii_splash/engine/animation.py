"""The render loop: one tick per frame."""

from __future__ import annotations

import logging
import time
from collections import Counter

from ascii_splash.core.grid import GridSnapshot
from ascii_splash.core.size import Size
from ascii_splash.engine.performance import PerformanceMonitor
from ascii_splash.patterns.base import Pattern, Point
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.render.terminal import TerminalRenderer
from ascii_splash.themes import Theme
from ascii_splash.ui.help import HelpOverlay
from ascii_splash.ui.panel import OverlayPanel
from ascii_splash.ui.status_bar import StatusBar
from ascii_splash.ui.toast import ToastManager

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.perf_counter() * 1000


class FrameScheduler:
    """
    Fixed-interval frame timer.

    due() reports whether a frame should run at now_ms. A late frame runs
    once and the schedule restarts from it, so an overrun coalesces into a
    single frame instead of a catch-up burst.
    """

    def __init__(self, fps: int) -> None:
        self.set_fps(fps)
        self._next: float | None = None

    def set_fps(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.interval = 1000 / fps

    def due(self, now_ms: float) -> bool:
        if self._next is None:
            self._next = now_ms + self.interval
            return True
        if now_ms < self._next:
            return False
        self._next += self.interval
        if self._next <= now_ms:
            self._next = now_ms + self.interval
        return True

    def wait_time(self, now_ms: float) -> float:
        """Seconds until the next frame is due."""
        if self._next is None:
            return 0.0
        return max(0.0, (self._next - now_ms) / 1000)


class AnimationEngine:
    """
    Drives one pattern through the frame buffer.

    Each tick clears the current frame, lets the pattern draw into it,
    draws the status bar, toasts and help overlays, then hands the
    changes to the renderer, which swaps generations. While paused the
    last pattern frame is held and the pattern is not called, so
    overlays and resizes still repaint. The engine never sleeps; callers
    decide when a tick happens (see FrameScheduler).
    """

    def __init__(
        self,
        buffer: FrameBuffer,
        renderer: TerminalRenderer,
        pattern: Pattern,
        fps: int = 30,
        status_bar: StatusBar | None = None,
        toasts: ToastManager | None = None,
        help_overlay: HelpOverlay | None = None,
    ) -> None:
        self.buffer = buffer
        self.renderer = renderer
        self.pattern = pattern
        self.status_bar = status_bar
        self.toasts = toasts
        self.help_overlay = help_overlay
        self.fps = fps
        self.perf = PerformanceMonitor(fps)
        self.paused = False
        self.mouse: Point | None = None
        self.frame_number = 0
        self.pattern_errors: Counter[str] = Counter()
        self._start_ms: float | None = None
        self._held: GridSnapshot | None = None
        self._sync_status()

    def pattern_size(self) -> Size:
        """Area available to the pattern (the status bar takes the last row)."""
        size = self.buffer.size
        if self.status_bar is None:
            return size
        return Size(size.width, max(0, size.height - 1))

    def tick(self, now_ms: float | None = None, size: Size | None = None) -> int:
        """Render one frame. Returns the number of cells written to the terminal."""
        now = _now_ms() if now_ms is None else now_ms
        if self._start_ms is None:
            self._start_ms = now
        self.frame_number += 1
        self.perf.start_frame(now)

        if size is not None and size != self.buffer.size:
            logger.debug(
                "terminal resized %dx%d -> %dx%d",
                self.buffer.size.width, self.buffer.size.height, size.width, size.height,
            )
            self.buffer.resize(size)
            self.pattern.reset()

        update_start = _now_ms()
        self.buffer.clear()
        if not (self.paused and self._restore_held()):
            self._render_pattern(now - self._start_ms)
            self._held = self.buffer.snapshot()
        if self.status_bar is not None:
            self._sync_status()
            self.status_bar.draw(self.buffer)
        self._draw_panels(now)
        self.perf.record_update(_now_ms() - update_start)

        render_start = _now_ms()
        changed = self.renderer.render(self.buffer)
        self.perf.record_render(_now_ms() - render_start, changed)
        return changed

    def _render_pattern(self, elapsed_ms: float) -> None:
        start = _now_ms()
        try:
            self.pattern.render(self.buffer, elapsed_ms, self.pattern_size(), self.mouse)
        except Exception:
            # A broken pattern costs one frame, not the session
            self.pattern_errors[self.pattern.name] += 1
            if self.pattern_errors[self.pattern.name] == 1:
                logger.exception("pattern %r failed to render", self.pattern.name)
            else:
                logger.debug("pattern %r failed again (%d)", self.pattern.name,
                             self.pattern_errors[self.pattern.name])
        self.perf.record_pattern(_now_ms() - start)

    def _restore_held(self) -> bool:
        """Put the last pattern frame back. False if there is none for this size."""
        return self._held is not None and self.buffer.restore(self._held)

    def _panels(self) -> list[OverlayPanel]:
        return [p for p in (self.toasts, self.help_overlay) if p is not None]

    def _draw_panels(self, now_ms: float) -> None:
        if self.toasts is not None:
            self.toasts.update(now_ms)
        panels = self._panels()
        # Erase everything first so overlapping panels keep their cells
        for panel in panels:
            panel.erase(self.buffer)
        for panel in panels:
            panel.draw(self.buffer)

    def _sync_status(self) -> None:
        if self.status_bar is None:
            return
        self.status_bar.update(
            pattern=self.pattern.display_name,
            preset=self.pattern.preset_id,
            theme=self.pattern.theme.display_name,
            fps=self.perf.metrics.fps,
            target_fps=self.fps,
            paused=self.paused,
        )

    # Controls

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.debug("paused" if self.paused else "resumed")
        return self.paused

    def set_pattern(self, pattern: Pattern) -> None:
        """Switch patterns and repaint the screen from scratch."""
        logger.debug("pattern %s -> %s", self.pattern.name, pattern.name)
        logger.debug("pattern %s metrics: %s", self.pattern.name, self.pattern.metrics())
        self.pattern.reset()
        self.pattern = pattern
        self._held = None
        self.pattern.reset()
        self.renderer.clear_screen(self.buffer)

    def set_theme(self, theme: Theme) -> None:
        self.pattern.theme = theme
        self._held = None

    def set_fps(self, fps: int) -> None:
        self.fps = fps
        self.perf.set_target_fps(fps)

    def apply_preset(self, preset_id: int) -> bool:
        applied = self.pattern.apply_preset(preset_id)
        if applied:
            self._held = None
        else:
            logger.debug("pattern %r has no preset %d", self.pattern.name, preset_id)
        return applied

    def mouse_move(self, pos: Point) -> None:
        self.mouse = pos
        self.pattern.on_mouse_move(pos)

    def mouse_click(self, pos: Point) -> None:
        self.mouse = pos
        self.pattern.on_mouse_click(pos)
