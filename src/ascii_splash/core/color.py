"""Color representation for rendered cells."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


@dataclass(frozen=True, slots=True)
class Color:
    """
    A 24-bit RGB color.

    Opaque to the frame buffer, which only compares colors by value.
    """
    r: int
    g: int
    b: int

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> Color:
        """Create a Color from arbitrary numbers, clamping into 0-255."""
        return cls(_clamp(r), _clamp(g), _clamp(b))

    def scaled(self, factor: float) -> Color:
        """Return this color with every channel multiplied by factor."""
        return Color.clamped(self.r * factor, self.g * factor, self.b * factor)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this foreground color."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this background color."""
        return f"48;2;{self.r};{self.g};{self.b}"
