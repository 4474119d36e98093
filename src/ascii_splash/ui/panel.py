"""Base class for UI drawn into the frame buffer's overlay layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.render.buffer import FrameBuffer


class OverlayPanel(ABC):
    """
    A piece of UI that owns some overlay cells.

    Overlays persist until cleared, so a panel remembers every cell it
    placed and erase() takes exactly those back off. The render loop
    erases all panels before drawing any of them, which lets panels
    overlap without one clearing the other's cells.
    """

    def __init__(self) -> None:
        self._cells: set[tuple[int, int]] = set()

    @abstractmethod
    def draw(self, buffer: FrameBuffer) -> None:
        """Place this panel's cells for the coming frame."""

    def erase(self, buffer: FrameBuffer) -> None:
        for x, y in self._cells:
            buffer.clear_overlay_cell(x, y)
        self._cells.clear()

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def put(self, buffer: FrameBuffer, x: int, y: int, cell: Cell) -> None:
        if buffer.set_overlay(x, y, cell):
            self._cells.add((x, y))

    def put_text(
        self,
        buffer: FrameBuffer,
        x: int,
        y: int,
        text: str,
        color: Color | None = None,
        background: Color | None = None,
    ) -> None:
        if buffer.set_overlay_text(x, y, text, color, background):
            size = buffer.size
            self._cells.update(
                (x + i, y) for i in range(len(text)) if size.contains(x + i, y)
            )

    def fill(self, buffer: FrameBuffer, x: int, y: int, width: int, height: int,
             background: Color) -> None:
        blank = Cell(' ', background=background)
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.put(buffer, col, row, blank)

    def box(self, buffer: FrameBuffer, x: int, y: int, width: int, height: int,
            horizontal: str, color: Color, background: Color) -> None:
        """Draw a border with '+' corners and '|' sides."""
        right, bottom = x + width - 1, y + height - 1
        for col in range(x + 1, right):
            self.put(buffer, col, y, Cell(horizontal, color, background))
            self.put(buffer, col, bottom, Cell(horizontal, color, background))
        for row in range(y + 1, bottom):
            self.put(buffer, x, row, Cell('|', color, background))
            self.put(buffer, right, row, Cell('|', color, background))
        for corner in ((x, y), (right, y), (x, bottom), (right, bottom)):
            self.put(buffer, *corner, Cell('+', color, background))
