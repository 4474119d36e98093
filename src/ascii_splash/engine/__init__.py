"""Render loop and frame timing."""

from ascii_splash.engine.animation import AnimationEngine, FrameScheduler
from ascii_splash.engine.performance import PerformanceMonitor

__all__ = ["AnimationEngine", "FrameScheduler", "PerformanceMonitor"]
