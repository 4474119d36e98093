"""Shared pytest fixtures."""

import io
import logging
import random

import pytest

from ascii_splash.core.size import Size
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.render.terminal import TerminalRenderer
from ascii_splash.themes import get_theme


@pytest.fixture
def buffer() -> FrameBuffer:
    """A fresh 3x2 frame buffer."""
    return FrameBuffer(Size(3, 2))


@pytest.fixture
def screen() -> FrameBuffer:
    """A fresh 80x24 frame buffer."""
    return FrameBuffer(Size(80, 24))


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(stream: io.StringIO) -> TerminalRenderer:
    """A renderer writing into an in-memory stream."""
    return TerminalRenderer(stream)


@pytest.fixture
def theme():
    return get_theme("ocean")


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for patterns."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any handler setup done by the CLI during a test."""
    logger = logging.getLogger("ascii_splash")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers[:], logger.level, logger.propagate = saved
