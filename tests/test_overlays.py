"""Tests for the toast and help overlay panels."""

import pytest

from ascii_splash.core.cell import BLANK, Cell
from ascii_splash.core.size import Size
from ascii_splash.render.buffer import FrameBuffer
from ascii_splash.ui.help import TABS, HelpOverlay
from ascii_splash.ui.toast import MAX_TOASTS, STYLES, ToastKind, ToastManager


def _row_text(buffer: FrameBuffer, y: int) -> str:
    return "".join(
        (buffer.get_overlay(x, y) or BLANK).char for x in range(buffer.size.width)
    )


def _all_text(buffer: FrameBuffer) -> str:
    return "\n".join(_row_text(buffer, y) for y in range(buffer.size.height))


@pytest.fixture
def toasts() -> ToastManager:
    return ToastManager()


class TestToastLifetime:
    def test_ids_increase(self, toasts) -> None:
        first = toasts.info("a")
        second = toasts.success("b")
        assert second > first
        assert [t.kind for t in toasts.toasts] == [ToastKind.INFO, ToastKind.SUCCESS]

    def test_keeps_newest_three(self, toasts) -> None:
        for i in range(5):
            toasts.info(f"toast {i}")
        assert len(toasts.toasts) == MAX_TOASTS
        assert [t.message for t in toasts.toasts] == ["toast 2", "toast 3", "toast 4"]

    def test_expires_after_duration(self, toasts) -> None:
        toasts.info("bye")
        toasts.update(1000.0)
        toasts.update(3999.0)
        assert len(toasts.toasts) == 1
        toasts.update(4000.0)
        assert toasts.toasts == []

    def test_custom_duration(self, toasts) -> None:
        toasts.warning("quick", duration=100)
        toasts.info("slow")
        toasts.update(0.0)
        toasts.update(150.0)
        assert [t.message for t in toasts.toasts] == ["slow"]

    def test_clock_going_backwards_does_not_revive(self, toasts) -> None:
        toasts.info("x")
        toasts.update(5000.0)
        toasts.update(6000.0)
        toasts.update(2000.0)
        assert toasts.toasts[0].elapsed == 1000.0

    def test_dismiss_and_clear(self, toasts) -> None:
        keep = toasts.info("keep")
        drop = toasts.error("drop")
        toasts.dismiss(drop)
        assert [t.id for t in toasts.toasts] == [keep]
        toasts.clear()
        assert toasts.toasts == []


class TestToastDraw:
    def test_top_right_box(self, toasts, screen: FrameBuffer) -> None:
        toasts.success("Saved")
        toasts.draw(screen)
        # 40 wide, two columns in from the right edge
        assert screen.get_overlay(38, 2).char == '+'
        assert screen.get_overlay(77, 4).char == '+'
        assert screen.get_overlay(78, 2) is None
        assert _row_text(screen, 3)[40:45] == "Saved"
        assert screen.get_overlay(40, 3).background == STYLES[ToastKind.SUCCESS].background
        assert toasts.cell_count == 40 * 3

    def test_long_message_truncated(self, toasts, screen: FrameBuffer) -> None:
        toasts.info("x" * 60)
        toasts.draw(screen)
        assert _row_text(screen, 3)[40:76] == "x" * 33 + "..."

    def test_stack_stops_above_status_row(self, toasts) -> None:
        buffer = FrameBuffer(Size(80, 10))
        for i in range(3):
            toasts.info(f"t{i}")
        toasts.draw(buffer)
        assert buffer.get_overlay(38, 2) is not None
        assert buffer.get_overlay(38, 6) is None

    def test_too_narrow(self, toasts) -> None:
        buffer = FrameBuffer(Size(8, 10))
        toasts.info("hi")
        toasts.draw(buffer)
        assert buffer.overlay_count == 0

    def test_text_fades_near_expiry(self, toasts, screen: FrameBuffer) -> None:
        full = STYLES[ToastKind.INFO].text
        toasts.info("fade")
        toasts.draw(screen)
        assert screen.get_overlay(40, 3).color == full

        toasts.update(0.0)
        toasts.update(2900.0)
        toasts.erase(screen)
        toasts.draw(screen)
        faded = screen.get_overlay(40, 3).color
        assert faded.r < full.r and faded.b < full.b

    def test_erase_takes_back_only_own_cells(self, toasts, screen: FrameBuffer) -> None:
        screen.set_overlay(0, 23, Cell('S'))
        toasts.info("one")
        toasts.draw(screen)
        toasts.erase(screen)
        assert screen.overlay_count == 1
        assert toasts.cell_count == 0

    def test_expired_toast_leaves_no_cells(self, toasts, screen: FrameBuffer) -> None:
        toasts.info("gone", duration=10)
        toasts.update(0.0)
        toasts.draw(screen)
        toasts.update(20.0)
        toasts.erase(screen)
        toasts.draw(screen)
        assert screen.overlay_count == 0


class TestHelpOverlay:
    def test_toggle(self) -> None:
        help_overlay = HelpOverlay()
        assert help_overlay.toggle() is True
        assert help_overlay.toggle() is False

    def test_hidden_draws_nothing(self, screen: FrameBuffer) -> None:
        HelpOverlay().draw(screen)
        assert screen.overlay_count == 0

    def test_centered_panel(self, screen: FrameBuffer) -> None:
        help_overlay = HelpOverlay()
        help_overlay.show()
        help_overlay.draw(screen)
        # 62x20 panel centered in 80x24
        assert screen.get_overlay(9, 2).char == '+'
        assert screen.get_overlay(70, 21).char == '+'
        assert screen.get_overlay(8, 2) is None
        assert "ascii-splash Help" in _row_text(screen, 2)
        assert "[TAB: next] [ESC/h: close]" in _row_text(screen, 21)
        assert help_overlay.cell_count == 62 * 20

    def test_controls_tab_lists_keys(self, screen: FrameBuffer) -> None:
        help_overlay = HelpOverlay()
        help_overlay.show()
        help_overlay.draw(screen)
        text = _all_text(screen)
        assert "[Controls]" in text
        assert "Toggle help" in text
        assert "MOUSE" in text

    def test_patterns_tab(self, screen: FrameBuffer) -> None:
        help_overlay = HelpOverlay()
        help_overlay.show()
        help_overlay.next_tab()
        help_overlay.draw(screen)
        text = _all_text(screen)
        assert "[Patterns]" in text
        assert "Particles" in text
        assert "6 presets" in text

    def test_tabs_wrap(self) -> None:
        help_overlay = HelpOverlay()
        for _ in TABS:
            help_overlay.next_tab()
        assert help_overlay.tab == "controls"
        help_overlay.prev_tab()
        assert help_overlay.tab == "themes"

    def test_show_starts_on_first_tab(self) -> None:
        help_overlay = HelpOverlay()
        help_overlay.next_tab()
        help_overlay.show()
        assert help_overlay.tab == TABS[0]

    @pytest.mark.parametrize("width,height", [(20, 24), (80, 10), (0, 0)])
    def test_too_small(self, width, height) -> None:
        buffer = FrameBuffer(Size(width, height))
        help_overlay = HelpOverlay()
        help_overlay.show()
        help_overlay.draw(buffer)
        assert buffer.overlay_count == 0

    def test_erase_after_hide(self, screen: FrameBuffer) -> None:
        help_overlay = HelpOverlay()
        help_overlay.show()
        help_overlay.draw(screen)
        help_overlay.hide()
        help_overlay.erase(screen)
        help_overlay.draw(screen)
        assert screen.overlay_count == 0
