"""Size - grid dimensions."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidSizeError(ValueError):
    """Raised for negative or non-integer grid dimensions."""


@dataclass(frozen=True, slots=True)
class Size:
    """Grid dimensions in character cells."""
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            # bool is an int subclass but never a valid dimension
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSizeError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidSizeError(f"{name} must be >= 0, got {value}")

    def contains(self, x: int, y: int) -> bool:
        """
        Check whether (x, y) lies inside these dimensions.

        Only real ints qualify. Pattern math can hand over floats, NaN or
        None, and those address no cell.
        """
        return (
            type(x) is int and type(y) is int
            and 0 <= x < self.width and 0 <= y < self.height
        )
