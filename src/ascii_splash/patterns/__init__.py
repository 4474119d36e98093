"""Animated patterns and the pattern registry."""

from __future__ import annotations

from typing import Any

from ascii_splash.patterns.base import CellSurface, Pattern, Point, Preset
from ascii_splash.patterns.matrix import MatrixPattern
from ascii_splash.patterns.particles import ParticlePattern
from ascii_splash.patterns.plasma import PlasmaPattern
from ascii_splash.patterns.starfield import StarfieldPattern
from ascii_splash.patterns.waves import WavePattern
from ascii_splash.themes import Theme

PATTERNS: dict[str, type[Pattern]] = {
    cls.name: cls for cls in (WavePattern, StarfieldPattern, MatrixPattern, ParticlePattern, PlasmaPattern)
}


def pattern_names() -> list[str]:
    """Pattern names in cycling order."""
    return list(PATTERNS)


def create_pattern(name: str, theme: Theme, options: dict[str, Any] | None = None) -> Pattern:
    """Instantiate a registered pattern by name."""
    try:
        cls = PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r} (available: {', '.join(PATTERNS)})") from None
    return cls(theme, **(options or {}))


__all__ = [
    "CellSurface",
    "Pattern",
    "Point",
    "Preset",
    "PATTERNS",
    "MatrixPattern",
    "ParticlePattern",
    "PlasmaPattern",
    "StarfieldPattern",
    "WavePattern",
    "create_pattern",
    "pattern_names",
]
