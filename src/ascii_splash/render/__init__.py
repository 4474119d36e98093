"""Frame buffering and terminal output."""

from ascii_splash.render.buffer import Change, FrameBuffer
from ascii_splash.render.terminal import TerminalRenderer

__all__ = ["Change", "FrameBuffer", "TerminalRenderer"]
