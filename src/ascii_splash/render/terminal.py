"""Render frame changes to terminal escape sequences."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from ascii_splash.core.cell import Cell
from ascii_splash.render.buffer import Change, FrameBuffer

ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR_SCREEN = f"{CSI}2J{CSI}H"


def sgr_for(cell: Cell) -> str:
    """Build the SGR sequence that selects a cell's style."""
    parts: list[str] = ['1' if cell.bold else '22']
    parts.append(cell.color.to_sgr_fg() if cell.color is not None else '39')
    parts.append(cell.background.to_sgr_bg() if cell.background is not None else '49')
    return f"{CSI}{';'.join(parts)}m"


class TerminalRenderer:
    """
    Write frame buffer changes to a terminal stream.

    The buffer decides what changed; this class only decides how each
    change is spelled. A frame is always emitted with a single write so a
    partial escape sequence never reaches the terminal.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    @staticmethod
    def encode(changes: Iterable[Change]) -> str:
        """Encode a change-list as one ANSI string."""
        parts: list[str] = []
        for x, y, cell in changes:
            # Cursor addressing is 1-based
            parts.append(f"{CSI}{y + 1};{x + 1}H")
            parts.append(sgr_for(cell))
            parts.append(cell.char)
            # Reset after each cell to prevent style bleed
            parts.append(RESET)
        return ''.join(parts)

    def render(self, buffer: FrameBuffer) -> int:
        """Emit the pending changes, swap generations, return the change count."""
        changes = buffer.get_changes()
        if changes:
            self.stream.write(self.encode(changes))
            self.stream.flush()
        buffer.swap()
        return len(changes)

    def clear_screen(self, buffer: FrameBuffer) -> None:
        """Erase the terminal and make the next frame a full repaint."""
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()
        buffer.resize(buffer.size)
