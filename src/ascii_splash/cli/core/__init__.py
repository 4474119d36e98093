"""Terminal infrastructure - screen control and input handling."""

from ascii_splash.cli.core.input import InputReader, Key, KeyEvent, MouseAction, MouseEvent
from ascii_splash.cli.core.terminal import Terminal

__all__ = [
    "Terminal",
    "InputReader",
    "Key",
    "KeyEvent",
    "MouseAction",
    "MouseEvent",
]
