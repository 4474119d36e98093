"""Centered help panel listing controls, patterns and themes."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_splash.core.color import Color
from ascii_splash.patterns import PATTERNS
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.themes import THEMES
from ascii_splash.ui.panel import OverlayPanel

BACKGROUND = Color(20, 20, 30)
BORDER = Color(80, 120, 180)
TITLE = Color(100, 180, 255)
KEY = Color(255, 200, 100)
TEXT = Color(180, 180, 180)
ACTIVE_TAB = Color(100, 180, 255)
INACTIVE_TAB = Color(80, 80, 100)

TABS = ("controls", "patterns", "themes")
KEY_COLUMN = 12


@dataclass(frozen=True)
class HelpSection:
    title: str
    items: tuple[tuple[str, str], ...]


def _sections(tab: str) -> list[HelpSection]:
    if tab == "controls":
        return [
            HelpSection("QUICK CONTROLS", (
                ("n / p", "Next/Previous pattern"),
                ("1-9", "Apply preset"),
                ("t", "Cycle themes"),
                ("+ / -", "Faster/slower"),
                ("SPACE", "Pause/Resume"),
                ("h / ?", "Toggle help"),
                ("q / ESC", "Quit"),
            )),
            HelpSection("MOUSE", (
                ("Move", "Interactive effects"),
                ("Click", "Ripple/burst/interact"),
            )),
        ]
    if tab == "patterns":
        return [HelpSection(f"PATTERNS ({len(PATTERNS)})", tuple(
            (cls.display_name, f"{len(cls.presets)} presets") for cls in PATTERNS.values()
        ))]
    return [HelpSection(f"THEMES ({len(THEMES)})", tuple(
        (theme.display_name, name) for name, theme in THEMES.items()
    ))]


class HelpOverlay(OverlayPanel):
    """Toggled with h or ?; TAB switches tabs, ESC closes."""

    def __init__(self) -> None:
        super().__init__()
        self.visible = False
        self.tab = TABS[0]

    def toggle(self) -> bool:
        if self.visible:
            self.hide()
        else:
            self.show()
        return self.visible

    def show(self) -> None:
        self.visible = True
        self.tab = TABS[0]

    def hide(self) -> None:
        self.visible = False

    def next_tab(self) -> None:
        self.tab = TABS[(TABS.index(self.tab) + 1) % len(TABS)]

    def prev_tab(self) -> None:
        self.tab = TABS[(TABS.index(self.tab) - 1) % len(TABS)]

    def draw(self, buffer: FrameBuffer) -> None:
        if not self.visible:
            return
        size = buffer.size
        width = min(62, size.width - 4)
        height = min(22, size.height - 4)
        if width < 20 or height < 8:
            return
        x = (size.width - width) // 2
        y = (size.height - height) // 2

        self.fill(buffer, x, y, width, height, BACKGROUND)
        self.box(buffer, x, y, width, height, '=', BORDER, BACKGROUND)

        title = " ascii-splash Help "
        self.put_text(buffer, x + (width - len(title)) // 2, y, title, TITLE, BACKGROUND)
        self._draw_tabs(buffer, x + 2, y + 2)
        self._draw_sections(buffer, x + 2, y + 4, width - 4, height - 6)

        footer = "[TAB: next] [ESC/h: close]"
        self.put_text(buffer, x + (width - len(footer)) // 2, y + height - 1, footer, TEXT, BACKGROUND)

    def _draw_tabs(self, buffer: FrameBuffer, x: int, y: int) -> None:
        for tab in TABS:
            label = tab.capitalize()
            if tab == self.tab:
                self.put_text(buffer, x, y, '[', BORDER, BACKGROUND)
                self.put_text(buffer, x + 1, y, label, ACTIVE_TAB, BACKGROUND)
                self.put_text(buffer, x + 1 + len(label), y, ']', BORDER, BACKGROUND)
            else:
                self.put_text(buffer, x + 1, y, label, INACTIVE_TAB, BACKGROUND)
            x += len(label) + 3

    def _draw_sections(self, buffer: FrameBuffer, x: int, y: int, width: int, height: int) -> None:
        bottom = y + height - 1
        for section in _sections(self.tab):
            if y >= bottom:
                break
            self.put_text(buffer, x, y, section.title, TITLE, BACKGROUND)
            self.put_text(buffer, x, y + 1, '-' * min(len(section.title) + 4, width), BORDER, BACKGROUND)
            y += 2
            room = width - KEY_COLUMN - 2
            for key, description in section.items:
                if y >= bottom:
                    break
                if len(description) > room:
                    description = description[:max(0, room - 3)] + '...'
                self.put_text(buffer, x, y, key, KEY, BACKGROUND)
                self.put_text(buffer, x + KEY_COLUMN, y, description, TEXT, BACKGROUND)
                y += 1
            y += 1
