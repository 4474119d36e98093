"""GridSnapshot - one frame generation of cells."""

from __future__ import annotations

from typing import Iterator

from ascii_splash.core.cell import BLANK, Cell
from ascii_splash.core.size import Size


class GridSnapshot:
    """
    A fixed-size 2D grid of Cells for a single frame.

    Cells are immutable values, so a snapshot only ever replaces entries.
    Coordinates outside the grid are never clamped: reads return None
    and writes are refused without touching any cell.
    """

    __slots__ = ("size", "_rows")

    def __init__(self, size: Size) -> None:
        self.size = size
        self._rows: list[list[Cell]] = [
            [BLANK] * size.width for _ in range(size.height)
        ]

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        return self.size.contains(x, y)

    def get(self, x: int, y: int) -> Cell | None:
        """Get the cell at (x, y), or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._rows[y][x]

    def set(self, x: int, y: int, cell: Cell) -> bool:
        """Set the cell at (x, y). Returns False when out of bounds."""
        if not self.in_bounds(x, y):
            return False
        self._rows[y][x] = cell
        return True

    def fill(self, cell: Cell = BLANK) -> None:
        """Reset every cell to the given value."""
        width = self.size.width
        for y in range(self.size.height):
            self._rows[y] = [cell] * width

    def row(self, y: int) -> list[Cell]:
        """Return a copy of row y."""
        return list(self._rows[y])

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows (top to bottom)."""
        for row in self._rows:
            yield list(row)

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) in row-major order."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def copy(self) -> GridSnapshot:
        """Return an independent snapshot with the same cells."""
        clone = GridSnapshot.__new__(GridSnapshot)
        clone.size = self.size
        clone._rows = [list(row) for row in self._rows]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridSnapshot):
            return NotImplemented
        return self.size == other.size and self._rows == other._rows

    def __repr__(self) -> str:
        return f"GridSnapshot({self.size.width}x{self.size.height})"
