"""Double-buffered frame storage with change detection."""

from __future__ import annotations

import logging
from typing import NamedTuple

from ascii_splash.core.cell import Cell
from ascii_splash.core.color import Color
from ascii_splash.core.grid import GridSnapshot
from ascii_splash.core.size import Size

logger = logging.getLogger(__name__)


def _as_size(size: Size | tuple[int, int]) -> Size:
    # Size validates on construction, so bad dimensions fail before any reallocation
    if isinstance(size, Size):
        return size
    width, height = size
    return Size(width, height)


class Change(NamedTuple):
    """A cell that differs from what is currently on screen."""
    x: int
    y: int
    cell: Cell


class FrameBuffer:
    """
    Two frame generations plus a sparse overlay layer.

    "current" is the frame being drawn this tick, "previous" is what the
    terminal shows right now. Patterns write into "current" through
    set_cell(); get_changes() reports every position where the frame to
    emit differs from "previous"; swap() retires "current" into
    "previous" and starts a fresh blank "current".

    Overlays are persistent UI cells (status bar, messages) that sit on
    top of the pattern layer until cleared.
    """

    def __init__(self, size: Size | tuple[int, int]) -> None:
        size = _as_size(size)
        self._size = size
        self._current = GridSnapshot(size)
        self._previous = GridSnapshot(size)
        self._overlays: dict[int, dict[int, Cell]] = {}

    @property
    def size(self) -> Size:
        return self._size

    def resize(self, size: Size | tuple[int, int]) -> None:
        """
        Reallocate both generations at the new size, all blank.

        Always reallocates, even for an unchanged size, so callers can use
        it to force a full repaint. Overlays are dropped too.
        """
        size = _as_size(size)
        self._size = size
        self._current = GridSnapshot(size)
        self._previous = GridSnapshot(size)
        self._overlays.clear()
        logger.debug("frame buffer resized to %dx%d", size.width, size.height)

    def clear(self) -> None:
        """Blank every cell of the current frame. "previous" is untouched."""
        self._current.fill()

    def set_cell(self, x: int, y: int, cell: Cell) -> bool:
        """Write a cell into the current frame. Returns False if out of bounds."""
        return self._current.set(x, y, cell)

    def get_cell(self, x: int, y: int) -> Cell | None:
        """Read a cell from the current frame, or None if out of bounds."""
        return self._current.get(x, y)

    def snapshot(self) -> GridSnapshot:
        """Copy of the pattern layer of the current frame (no overlays)."""
        return self._current.copy()

    def restore(self, snapshot: GridSnapshot) -> bool:
        """
        Load a copy of snapshot as the current frame.

        Returns False, leaving the frame alone, when the snapshot was taken
        at a different size.
        """
        if snapshot.size != self._size:
            return False
        self._current = snapshot.copy()
        return True

    def get_changes(self) -> list[Change]:
        """
        Return the cells that differ from the previous frame.

        Overlay cells take precedence over pattern cells. The result is in
        row-major order (y, then x). Neither generation is modified, so
        repeated calls without swap() return equal lists.
        """
        changes: list[Change] = []
        overlays = self._overlays
        current_rows = self._current._rows
        previous_rows = self._previous._rows

        for y in range(self._size.height):
            current = current_rows[y]
            row_overlay = overlays.get(y)
            if row_overlay:
                current = self._composite_row(current, row_overlay)
            previous = previous_rows[y]
            if current == previous:
                continue
            for x, cell in enumerate(current):
                if cell != previous[x]:
                    changes.append(Change(x, y, cell))

        return changes

    def swap(self) -> None:
        """
        Promote the emitted frame to "previous" and start a fresh "current".

        The retired frame carries any overlay cells, since that is what was
        written to the terminal. The new "current" is a new blank snapshot,
        never the old "previous".
        """
        retired = self._current
        for y, row_overlay in self._overlays.items():
            for x, cell in row_overlay.items():
                retired.set(x, y, cell)
        self._previous = retired
        self._current = GridSnapshot(self._size)

    @staticmethod
    def _composite_row(row: list[Cell], row_overlay: dict[int, Cell]) -> list[Cell]:
        composed = list(row)
        for x, cell in row_overlay.items():
            composed[x] = cell
        return composed

    # Overlay management

    def set_overlay(self, x: int, y: int, cell: Cell) -> bool:
        """Place a persistent overlay cell. Returns False if out of bounds."""
        if not self._size.contains(x, y):
            return False
        self._overlays.setdefault(y, {})[x] = cell
        return True

    def set_overlay_text(
        self,
        x: int,
        y: int,
        text: str,
        color: Color | None = None,
        background: Color | None = None,
        bold: bool | None = None,
    ) -> int:
        """Place a run of overlay text. Returns the number of cells placed."""
        placed = 0
        for i, char in enumerate(text):
            if self.set_overlay(x + i, y, Cell(char, color, background, bold)):
                placed += 1
        return placed

    def get_overlay(self, x: int, y: int) -> Cell | None:
        row_overlay = self._overlays.get(y)
        if row_overlay is None:
            return None
        return row_overlay.get(x)

    def clear_overlay_cell(self, x: int, y: int) -> None:
        row_overlay = self._overlays.get(y)
        if row_overlay is None:
            return
        row_overlay.pop(x, None)
        if not row_overlay:
            del self._overlays[y]

    def clear_overlay_row(self, y: int) -> None:
        """Remove every overlay cell in row y."""
        self._overlays.pop(y, None)

    def clear_all_overlays(self) -> None:
        self._overlays.clear()

    @property
    def overlay_count(self) -> int:
        return sum(len(row) for row in self._overlays.values())
