"""Color themes mapping intensity to color."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_splash.core.color import Color


@dataclass(frozen=True)
class Theme:
    """
    A named palette of color stops.

    Intensities between stops are linearly interpolated, so a palette
    with N stops divides [0, 1] into N-1 equal segments.
    """
    name: str
    display_name: str
    colors: tuple[Color, ...]

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError(f"Theme {self.name!r} needs at least one color")

    def color_at(self, intensity: float) -> Color:
        """Return the palette color for an intensity in [0, 1]."""
        t = max(0.0, min(1.0, intensity))
        last = len(self.colors) - 1
        index = t * last
        i1 = int(index)
        i2 = min(i1 + 1, last)
        blend = index - i1

        c1 = self.colors[i1]
        c2 = self.colors[i2]
        return Color.clamped(
            c1.r + (c2.r - c1.r) * blend,
            c1.g + (c2.g - c1.g) * blend,
            c1.b + (c2.b - c1.b) * blend,
        )


def _palette(*stops: tuple[int, int, int]) -> tuple[Color, ...]:
    return tuple(Color(*rgb) for rgb in stops)


OCEAN = Theme("ocean", "Ocean", _palette(
    (0, 32, 64),        # Deep blue
    (0, 64, 128),
    (0, 128, 192),
    (0, 192, 255),      # Cyan
    (128, 224, 255),
    (200, 240, 255),    # Very light blue
))

MATRIX = Theme("matrix", "Matrix", _palette(
    (0, 32, 0),
    (0, 64, 0),
    (0, 128, 0),
    (0, 192, 0),
    (64, 255, 64),      # Lime
    (200, 255, 200),
))

STARLIGHT = Theme("starlight", "Starlight", _palette(
    (16, 0, 48),        # Deep purple
    (48, 0, 96),
    (64, 32, 128),
    (96, 64, 192),      # Violet
    (128, 128, 255),
    (200, 200, 255),
))

FIRE = Theme("fire", "Fire", _palette(
    (64, 0, 0),         # Dark red
    (128, 0, 0),
    (192, 32, 0),
    (255, 96, 0),       # Orange
    (255, 192, 0),
    (255, 255, 128),    # Light yellow
))

MONOCHROME = Theme("monochrome", "Monochrome", _palette(
    (0, 0, 0),
    (64, 64, 64),
    (128, 128, 128),
    (192, 192, 192),
    (224, 224, 224),
    (255, 255, 255),
))

THEMES: dict[str, Theme] = {
    theme.name: theme for theme in (OCEAN, MATRIX, STARLIGHT, FIRE, MONOCHROME)
}

# Cycling order
THEME_NAMES: tuple[str, ...] = tuple(THEMES)

DEFAULT_THEME = OCEAN.name


def get_theme(name: str | None = None) -> Theme:
    """Get a theme by name, falling back to the default theme."""
    if not name or name not in THEMES:
        return THEMES[DEFAULT_THEME]
    return THEMES[name]


def next_theme_name(current: str) -> str:
    """Get the theme name that follows current in the cycle."""
    try:
        index = THEME_NAMES.index(current)
    except ValueError:
        index = -1
    return THEME_NAMES[(index + 1) % len(THEME_NAMES)]
