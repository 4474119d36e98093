"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator

from ascii_splash.core.size import Size

FALLBACK_SIZE = Size(80, 24)


class Terminal:
    """Terminal I/O abstraction for the animation screen."""

    @staticmethod
    def size() -> Size:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return Size(size.columns, size.lines)
        except OSError:
            return FALLBACK_SIZE

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write('\x1b[2J\x1b[H')

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write('\x1b[0m')

    @staticmethod
    def hide_cursor() -> None:
        Terminal.write('\x1b[?25l')

    @staticmethod
    def show_cursor() -> None:
        Terminal.write('\x1b[?25h')

    @staticmethod
    def enable_mouse() -> None:
        """Report all mouse motion, SGR-encoded."""
        Terminal.write('\x1b[?1003h\x1b[?1006h')

    @staticmethod
    def disable_mouse() -> None:
        Terminal.write('\x1b[?1006l\x1b[?1003l')

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        if sys.platform == "win32" or not sys.stdin.isatty():
            yield
            return
        import termios
        import tty
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write('\x1b[?1049h')
        try:
            yield
        finally:
            Terminal.write('\x1b[?1049l')

    @staticmethod
    @contextmanager
    def managed_mode(mouse: bool = True) -> Iterator[None]:
        """Full-screen mode: alternate screen, hidden cursor, raw input, optional mouse."""
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            Terminal.clear()
            if mouse:
                Terminal.enable_mouse()
            try:
                with Terminal.raw_mode():
                    yield
            finally:
                if mouse:
                    Terminal.disable_mouse()
                Terminal.show_cursor()
                Terminal.reset()
