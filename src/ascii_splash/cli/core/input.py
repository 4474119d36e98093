"""Keyboard and SGR mouse input for the animation screen."""

from __future__ import annotations

import os
import re
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """Named keys the splash screen distinguishes."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()


class MouseAction(Enum):
    MOVE = auto()
    PRESS = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key, a printable character, or an unrecognized sequence."""
    key: Optional[Key] = None
    char: Optional[str] = None
    raw: str = ""

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report, with 0-based cell coordinates."""
    x: int
    y: int
    action: MouseAction
    button: int = 0


InputEvent = Union[KeyEvent, MouseEvent]

# SGR mouse report body (after ESC): [<button;col;row then M (press/move) or m (release)
_SGR_MOUSE = re.compile(r'\[<(\d+);(\d+);(\d+)([Mm])')
# A complete CSI or SS3 sequence body: parameters then one final byte
_SEQUENCE = re.compile(r'(\[[\d;<?]*|O)[A-Za-z~]')

_MOTION_FLAG = 32
_WHEEL_FLAG = 64

ESCAPE_TIMEOUT = 0.05

ARROWS: dict[str, Key] = {'A': Key.UP, 'B': Key.DOWN, 'C': Key.RIGHT, 'D': Key.LEFT}


def parse_mouse(seq: str) -> Optional[MouseEvent]:
    """Parse an SGR mouse sequence (without the leading ESC)."""
    match = _SGR_MOUSE.fullmatch(seq)
    if match is None:
        return None
    code, col, row, final = int(match[1]), int(match[2]), int(match[3]), match[4]
    if code & _WHEEL_FLAG:
        return None
    if code & _MOTION_FLAG:
        action = MouseAction.MOVE
    elif final == 'M':
        action = MouseAction.PRESS
    else:
        action = MouseAction.RELEASE
    return MouseEvent(x=col - 1, y=row - 1, action=action, button=code & 3)


def _sequence_event(seq: str) -> InputEvent:
    """Turn a complete escape sequence body into an event."""
    if seq.startswith('[<'):
        mouse = parse_mouse(seq)
        if mouse is not None:
            return mouse
    elif len(seq) == 2 and seq[1] in ARROWS:
        return KeyEvent(key=ARROWS[seq[1]], raw='\x1b' + seq)
    return KeyEvent(raw='\x1b' + seq)


class InputReader:
    """
    Non-blocking reader for raw-mode stdin.

    Bytes are read with os.read() so nothing sits in Python's buffers
    while select() reports the fd idle. Pending text is kept between
    calls: mouse motion arrives in bursts, and a report split across two
    reads is completed on the next one. Tests drive the parser through
    feed() without touching a file descriptor.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._pending = ""
        self._fd = fd

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def feed(self, text: str) -> None:
        """Queue raw input for the next read()."""
        self._pending += text

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """Return the next event, waiting at most timeout seconds for input."""
        if not self._pending:
            if not self._wait(timeout):
                return None
            self._fill()
        if self._pending == '\x1b':
            # Might be the first byte of a sequence still in flight
            if self._wait(ESCAPE_TIMEOUT):
                self._fill()
        return self._next_event()

    def _next_event(self) -> Optional[InputEvent]:
        pending = self._pending
        if not pending:
            return None
        head = pending[0]

        if head == '\x1b':
            match = _SEQUENCE.match(pending, 1)
            if match is None:
                self._pending = pending[1:]
                return KeyEvent(key=Key.ESCAPE, raw='\x1b')
            self._pending = pending[match.end():]
            return _sequence_event(match.group())

        self._pending = pending[1:]
        if head in '\r\n':
            return KeyEvent(key=Key.ENTER, raw=head)
        if head == '\t':
            return KeyEvent(key=Key.TAB, raw=head)
        if head.isprintable():
            return KeyEvent(char=head, raw=head)
        # Other control characters carry no meaning here
        return None

    def _fill(self) -> None:
        try:
            data = os.read(self.fd, 1024)
        except OSError:
            return
        self.feed(data.decode('utf-8', errors='replace'))

    def _wait(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
        except (ValueError, OSError):
            # No usable descriptor (e.g. stdin replaced); behave as idle
            time.sleep(max(0.0, timeout))
            return False
        return bool(ready)
