"""Frame timing statistics."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

HISTORY_SIZE = 60
DROP_FACTOR = 1.5


@dataclass
class FrameMetrics:
    """Timings (milliseconds) of the most recent frame."""
    fps: float = 0.0
    target_fps: int = 30
    frame_time: float = 0.0
    update_time: float = 0.0
    pattern_time: float = 0.0
    render_time: float = 0.0
    changed_cells: int = 0
    frame_drops: int = 0


@dataclass(frozen=True)
class FrameStats:
    avg_fps: float
    min_fps: float
    max_fps: float
    avg_frame_time: float
    total_frames: int
    total_dropped: int


class PerformanceMonitor:
    """
    Rolling frame statistics over the last 60 frames.

    A frame counts as dropped when it starts more than 1.5x the target
    interval after the previous one.
    """

    def __init__(self, target_fps: int) -> None:
        self.metrics = FrameMetrics(target_fps=target_fps)
        self._fps_history: deque[float] = deque(maxlen=HISTORY_SIZE)
        self._frame_times: deque[float] = deque(maxlen=HISTORY_SIZE)
        self._last_start: float | None = None
        self.total_frames = 0
        self.total_dropped = 0

    def start_frame(self, now_ms: float) -> None:
        """Mark the start of a frame at now_ms."""
        if self._last_start is not None:
            delta = now_ms - self._last_start
            self.metrics.frame_time = delta
            if delta > 0:
                self._fps_history.append(1000 / delta)
                self._frame_times.append(delta)
                self.metrics.fps = sum(self._fps_history) / len(self._fps_history)
            if delta > 1000 / self.metrics.target_fps * DROP_FACTOR:
                self.metrics.frame_drops += 1
                self.total_dropped += 1
        self._last_start = now_ms
        self.total_frames += 1

    def record_update(self, ms: float) -> None:
        self.metrics.update_time = ms

    def record_pattern(self, ms: float) -> None:
        self.metrics.pattern_time = ms

    def record_render(self, ms: float, changed_cells: int) -> None:
        self.metrics.render_time = ms
        self.metrics.changed_cells = changed_cells

    def set_target_fps(self, fps: int) -> None:
        self.metrics.target_fps = fps

    def stats(self) -> FrameStats:
        history = self._fps_history
        times = self._frame_times
        return FrameStats(
            avg_fps=self.metrics.fps,
            min_fps=min(history) if history else 0.0,
            max_fps=max(history) if history else 0.0,
            avg_frame_time=sum(times) / len(times) if times else 0.0,
            total_frames=self.total_frames,
            total_dropped=self.total_dropped,
        )

    def percentile(self, p: float) -> float:
        """FPS at percentile p (0-100) of the recorded history."""
        if not self._fps_history:
            return 0.0
        ordered = sorted(self._fps_history)
        index = min(int(p / 100 * len(ordered)), len(ordered) - 1)
        return ordered[index]

    def reset(self) -> None:
        self._fps_history.clear()
        self._frame_times.clear()
        self._last_start = None
        self.total_frames = 0
        self.total_dropped = 0
        self.metrics.frame_drops = 0
