"""Cell - atomic unit of the frame buffer."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_splash.core.color import Color


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with optional styling.

    Unset attributes are None, which compares unequal to every explicit
    value (``bold=None`` is not ``bold=False``). The generated __eq__
    compares all fields, so the diff never reports a cell as changed
    unless something really differs.
    """
    char: str = ' '
    color: Color | None = None
    background: Color | None = None
    bold: bool | None = None


BLANK = Cell()
