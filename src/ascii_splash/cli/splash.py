"""Interactive full-screen animation session."""

from __future__ import annotations

import logging
import time
from typing import Optional

from ascii_splash.cli.core.input import InputEvent, InputReader, Key, KeyEvent, MouseAction, MouseEvent
from ascii_splash.cli.core.terminal import Terminal
from ascii_splash.config import MAX_FPS, MIN_FPS, AppConfig
from ascii_splash.engine.animation import AnimationEngine, FrameScheduler
from ascii_splash.patterns import create_pattern, pattern_names
from ascii_splash.patterns.base import Pattern, Point
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.render.terminal import TerminalRenderer
from ascii_splash.themes import get_theme, next_theme_name
from ascii_splash.ui.help import HelpOverlay
from ascii_splash.ui.status_bar import StatusBar
from ascii_splash.ui.toast import ToastManager

logger = logging.getLogger(__name__)

FPS_STEP = 5


class SplashApp:
    """
    Full-screen animation with keyboard and mouse controls.

    Keys: q/Esc quit, space pause, n/p next/previous pattern, t next
    theme, 1-9 preset, +/- FPS, h or ? help. While help is open Esc
    closes it and Tab cycles its tabs. Changes are confirmed by a toast.
    """

    def __init__(self, config: AppConfig, renderer: Optional[TerminalRenderer] = None,
                 input_reader: Optional[InputReader] = None) -> None:
        self.config = config
        self.running = False
        self.input = input_reader or InputReader()
        self.theme_name = get_theme(config.theme).name
        pattern = self._make_pattern(config.pattern)
        self.pattern_index = pattern_names().index(pattern.name)

        fps = config.effective_fps()
        self.scheduler = FrameScheduler(fps)
        self.toasts = ToastManager()
        self.help = HelpOverlay()
        self.engine = AnimationEngine(
            buffer=FrameBuffer(Terminal.size()),
            renderer=renderer or TerminalRenderer(),
            pattern=pattern,
            fps=fps,
            status_bar=StatusBar(),
            toasts=self.toasts,
            help_overlay=self.help,
        )

    def _make_pattern(self, name: str) -> Pattern:
        return create_pattern(name, get_theme(self.theme_name), self.config.pattern_options(name))

    def run(self) -> None:
        """Main loop: tick when a frame is due, otherwise wait for input."""
        self.running = True
        logger.info("starting %s at %d fps", self.config.pattern, self.scheduler.fps)
        with Terminal.managed_mode(mouse=self.config.mouse):
            while self.running:
                now = time.perf_counter() * 1000
                if self.scheduler.due(now):
                    self.engine.tick(now, Terminal.size())
                timeout = self.scheduler.wait_time(time.perf_counter() * 1000)
                event = self.input.read(timeout=timeout)
                if event is not None:
                    self.handle_event(event)

        stats = self.engine.perf.stats()
        logger.info(
            "stopped after %d frames (avg %.1f fps, %d dropped)",
            stats.total_frames, stats.avg_fps, stats.total_dropped,
        )

    def stop(self) -> None:
        self.running = False

    def handle_event(self, event: InputEvent) -> None:
        if isinstance(event, MouseEvent):
            self._handle_mouse(event)
        else:
            self._handle_key(event)

    def _handle_mouse(self, event: MouseEvent) -> None:
        if not self.config.mouse:
            return
        pos = Point(event.x, event.y)
        if event.action is MouseAction.PRESS:
            self.engine.mouse_click(pos)
        elif event.action is MouseAction.MOVE:
            self.engine.mouse_move(pos)

    def _handle_key(self, event: KeyEvent) -> None:
        if self.help.visible and self._handle_help_key(event):
            return
        if event.char == 'q' or event.key == Key.ESCAPE:
            self.stop()
        elif event.char in ('h', '?'):
            self.help.toggle()
        elif event.char == ' ':
            paused = self.engine.toggle_pause()
            self.toasts.info("Paused" if paused else "Resumed", duration=1500)
        elif event.char == 'n':
            self.switch_pattern(1)
        elif event.char == 'p':
            self.switch_pattern(-1)
        elif event.char == 't':
            self.theme_name = next_theme_name(self.theme_name)
            theme = get_theme(self.theme_name)
            self.engine.set_theme(theme)
            self.toasts.info(f"Theme: {theme.display_name}")
        elif event.char in ('+', '='):
            self.change_fps(FPS_STEP)
        elif event.char in ('-', '_'):
            self.change_fps(-FPS_STEP)
        elif event.char is not None and event.char in '123456789':
            self.apply_preset(int(event.char))

    def _handle_help_key(self, event: KeyEvent) -> bool:
        """Keys the open help panel consumes. Anything else falls through."""
        if event.key == Key.ESCAPE or event.char in ('h', '?'):
            self.help.hide()
        elif event.key == Key.TAB or event.key == Key.RIGHT:
            self.help.next_tab()
        elif event.key == Key.LEFT:
            self.help.prev_tab()
        else:
            return False
        return True

    def switch_pattern(self, step: int) -> None:
        names = pattern_names()
        self.pattern_index = (self.pattern_index + step) % len(names)
        pattern = self._make_pattern(names[self.pattern_index])
        self.engine.set_pattern(pattern)
        self.toasts.info(f"Pattern: {pattern.display_name}")

    def apply_preset(self, preset_id: int) -> None:
        if self.engine.apply_preset(preset_id):
            preset = self.engine.pattern.get_preset(preset_id)
            self.toasts.success(f"Preset {preset_id}: {preset.name}")
        else:
            self.toasts.warning(f"No preset {preset_id} for {self.engine.pattern.display_name}")

    def change_fps(self, delta: int) -> None:
        fps = max(MIN_FPS, min(MAX_FPS, self.scheduler.fps + delta))
        self.scheduler.set_fps(fps)
        self.engine.set_fps(fps)
        self.toasts.info(f"FPS: {fps}", duration=1500)


def run_splash(config: AppConfig) -> None:
    """Launch the animation session."""
    SplashApp(config).run()
