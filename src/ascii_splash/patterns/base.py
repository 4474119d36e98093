"""Base pattern protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

from ascii_splash.core.cell import Cell
from ascii_splash.core.size import Size
from ascii_splash.themes import Theme


@dataclass(frozen=True)
class Point:
    """A cell position on screen."""
    x: int
    y: int


@dataclass(frozen=True)
class Preset:
    """A named configuration a pattern can switch to."""
    id: int
    name: str
    description: str
    config: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class CellSurface(Protocol):
    """The write access a pattern gets to the frame being drawn."""

    @property
    def size(self) -> Size:
        ...

    def set_cell(self, x: int, y: int, cell: Cell) -> bool:
        """Write a cell. Returns False if (x, y) is out of bounds."""
        ...

    def get_cell(self, x: int, y: int) -> Cell | None:
        """Read a cell, or None if (x, y) is out of bounds."""
        ...


class Pattern(ABC):
    """
    Base class for animated patterns.

    Each tick the render loop hands the pattern a blank surface and the
    elapsed time in milliseconds; the pattern writes whatever cells it
    wants. Patterns never see the previous frame.
    """

    name: ClassVar[str] = "pattern"
    display_name: ClassVar[str] = "Pattern"
    defaults: ClassVar[dict[str, Any]] = {}
    presets: ClassVar[tuple[Preset, ...]] = ()

    def __init__(self, theme: Theme, **options: Any) -> None:
        unknown = sorted(set(options) - set(self.defaults))
        if unknown:
            raise TypeError(f"{self.name}: unknown option(s): {', '.join(unknown)}")
        self.theme = theme
        self.config: dict[str, Any] = {**self.defaults, **options}
        self.preset_id: int | None = None

    @abstractmethod
    def render(
        self,
        surface: CellSurface,
        time_ms: float,
        size: Size,
        mouse: Point | None = None,
    ) -> None:
        """Draw one frame onto surface."""

    def on_mouse_move(self, pos: Point) -> None:
        """Default: ignore mouse movement."""

    def on_mouse_click(self, pos: Point) -> None:
        """Default: ignore clicks."""

    def reset(self) -> None:
        """Drop any simulation state. Stateless patterns need nothing."""

    def metrics(self) -> dict[str, float]:
        return {}

    @classmethod
    def get_preset(cls, preset_id: int) -> Preset | None:
        for preset in cls.presets:
            if preset.id == preset_id:
                return preset
        return None

    def apply_preset(self, preset_id: int) -> bool:
        """Switch to a preset configuration. Returns False for unknown ids."""
        preset = self.get_preset(preset_id)
        if preset is None:
            return False
        self.config = {**self.defaults, **preset.config}
        self.preset_id = preset_id
        self.reset()
        return True
