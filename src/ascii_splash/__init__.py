"""
ascii-splash: animated ASCII-art patterns for the terminal

Quick Start:
    >>> from ascii_splash import FrameBuffer, Cell, Size
    >>> buffer = FrameBuffer(Size(80, 24))
    >>> buffer.set_cell(1, 0, Cell('A'))
    True
    >>> buffer.get_changes()
    [Change(x=1, y=0, cell=Cell(char='A', color=None, background=None, bold=None))]

The frame buffer keeps two generations of cells and reports only what
changed, so the terminal is never fully redrawn.
"""

__version__ = "0.1.0"

# Core types
from ascii_splash.core.cell import BLANK, Cell
from ascii_splash.core.color import Color
from ascii_splash.core.grid import GridSnapshot
from ascii_splash.core.size import InvalidSizeError, Size

# Rendering
from ascii_splash.render.buffer import Change, FrameBuffer
from ascii_splash.render.terminal import TerminalRenderer

# Themes and patterns
from ascii_splash.themes import THEMES, Theme, get_theme
from ascii_splash.patterns import PATTERNS, Pattern, create_pattern

__all__ = [
    "__version__",
    # Core types
    "BLANK",
    "Cell",
    "Color",
    "GridSnapshot",
    "InvalidSizeError",
    "Size",
    # Rendering
    "Change",
    "FrameBuffer",
    "TerminalRenderer",
    # Themes and patterns
    "THEMES",
    "Theme",
    "get_theme",
    "PATTERNS",
    "Pattern",
    "create_pattern",
]
