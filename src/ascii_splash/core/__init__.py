"""Core data structures for frame representation."""

from ascii_splash.core.cell import BLANK, Cell
from ascii_splash.core.color import Color
from ascii_splash.core.grid import GridSnapshot
from ascii_splash.core.size import InvalidSizeError, Size

__all__ = ["BLANK", "Cell", "Color", "GridSnapshot", "InvalidSizeError", "Size"]
