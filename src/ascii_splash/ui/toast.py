"""Short-lived notifications in the top-right corner."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from enum import Enum

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.ui.panel import OverlayPanel

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 3000
MAX_TOASTS = 3
FADE_MS = 500
TOAST_HEIGHT = 3
MAX_WIDTH = 40


class ToastKind(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class ToastStyle:
    background: Color
    text: Color
    border: Color


STYLES: dict[ToastKind, ToastStyle] = {
    ToastKind.SUCCESS: ToastStyle(Color(20, 40, 30), Color(100, 220, 120), Color(60, 140, 80)),
    ToastKind.ERROR: ToastStyle(Color(45, 20, 20), Color(255, 120, 120), Color(180, 60, 60)),
    ToastKind.INFO: ToastStyle(Color(20, 30, 45), Color(120, 180, 255), Color(60, 100, 160)),
    ToastKind.WARNING: ToastStyle(Color(45, 35, 20), Color(255, 200, 100), Color(160, 120, 60)),
}


@dataclass
class Toast:
    id: int
    message: str
    kind: ToastKind
    duration: float
    elapsed: float = 0.0

    @property
    def remaining(self) -> float:
        """Fraction of the lifetime still left, 1.0 when fresh."""
        return max(0.0, 1 - self.elapsed / self.duration)


class ToastManager(OverlayPanel):
    """
    Stack of up to three notifications that dismiss themselves.

    update() advances every toast by the time since the previous call;
    a toast is dropped once its duration has passed. Showing a fourth
    toast pushes out the oldest one. Text fades out over the last half
    second, and a bar along the bottom border shows the time left.
    """

    def __init__(self, default_duration: float = DEFAULT_DURATION_MS) -> None:
        super().__init__()
        self.default_duration = default_duration
        self.toasts: list[Toast] = []
        self._ids = itertools.count(1)
        self._last_ms: float | None = None

    def show(self, message: str, kind: ToastKind = ToastKind.INFO,
             duration: float | None = None) -> int:
        toast = Toast(next(self._ids), message, kind,
                      duration if duration is not None else self.default_duration)
        self.toasts.append(toast)
        del self.toasts[:-MAX_TOASTS]
        logger.debug("toast %d (%s): %s", toast.id, kind.value, message)
        return toast.id

    def success(self, message: str, duration: float | None = None) -> int:
        return self.show(message, ToastKind.SUCCESS, duration)

    def error(self, message: str, duration: float | None = None) -> int:
        return self.show(message, ToastKind.ERROR, duration)

    def info(self, message: str, duration: float | None = None) -> int:
        return self.show(message, ToastKind.INFO, duration)

    def warning(self, message: str, duration: float | None = None) -> int:
        return self.show(message, ToastKind.WARNING, duration)

    def dismiss(self, toast_id: int) -> None:
        self.toasts = [t for t in self.toasts if t.id != toast_id]

    def clear(self) -> None:
        self.toasts = []

    def update(self, now_ms: float) -> None:
        """Age toasts by the time since the last update and drop expired ones."""
        if self._last_ms is None:
            self._last_ms = now_ms
            return
        delta = max(0.0, now_ms - self._last_ms)
        self._last_ms = now_ms
        for toast in self.toasts:
            toast.elapsed += delta
        self.toasts = [t for t in self.toasts if t.elapsed < t.duration]

    def draw(self, buffer: FrameBuffer) -> None:
        width, height = buffer.size.width, buffer.size.height
        box_width = min(MAX_WIDTH, width - 4)
        if box_width < 5:
            return
        x = width - box_width - 2
        y = 2
        for toast in self.toasts:
            # Keep clear of the status bar row
            if y + TOAST_HEIGHT >= height - 1:
                break
            self._draw_toast(buffer, toast, x, y, box_width)
            y += TOAST_HEIGHT + 1

    def _draw_toast(self, buffer: FrameBuffer, toast: Toast, x: int, y: int, width: int) -> None:
        style = STYLES[toast.kind]
        bg = style.background
        self.fill(buffer, x, y, width, TOAST_HEIGHT, bg)
        self.box(buffer, x, y, width, TOAST_HEIGHT, '-', style.border, bg)

        room = width - 4
        message = toast.message
        if len(message) > room:
            message = message[:max(0, room - 3)] + '...'
        fade = min(1.0, toast.remaining * toast.duration / FADE_MS)
        self.put_text(buffer, x + 2, y + 1, message, style.text.scaled(fade), bg)

        bar = int((width - 2) * toast.remaining)
        self.put_text(buffer, x + 1, y + TOAST_HEIGHT - 1, '=' * bar, style.text, bg)
