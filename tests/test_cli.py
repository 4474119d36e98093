"""Tests for the command line and the interactive session's controls."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ascii_splash.cli.app import create_app
from ascii_splash.cli.core.input import InputReader, Key, KeyEvent, MouseAction, MouseEvent
from ascii_splash.cli.core.terminal import Terminal
from ascii_splash.cli.splash import FPS_STEP, SplashApp
from ascii_splash.config import MAX_FPS, AppConfig
from ascii_splash.core.size import Size
from ascii_splash.patterns import MatrixPattern, StarfieldPattern, WavePattern
from ascii_splash.patterns.base import Point
from ascii_splash.render.terminal import TerminalRenderer
from ascii_splash.ui.toast import ToastKind

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def splash(monkeypatch, stream):
    monkeypatch.setattr(Terminal, "size", staticmethod(lambda: Size(40, 12)))

    def make(**config):
        return SplashApp(AppConfig(**config), renderer=TerminalRenderer(stream),
                         input_reader=InputReader())
    return make


class TestCommands:
    def test_patterns(self, app) -> None:
        result = runner.invoke(app, ["patterns"])
        assert result.exit_code == 0
        for name in ("waves", "starfield", "matrix", "particles", "plasma"):
            assert name in result.output

    def test_themes(self, app) -> None:
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        assert "monochrome" in result.output
        assert "medium=30fps" in result.output

    def test_unknown_pattern(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["run", "--pattern", "fractal", "--config", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Unknown pattern" in result.output

    def test_bad_fps(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["run", "--fps", "500", "--config", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_broken_config_file(self, app, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{oops")
        result = runner.invoke(app, ["run", "--config", str(path)])
        assert result.exit_code == 1

    def test_bad_pattern_options(self, app, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(Terminal, "size", staticmethod(lambda: Size(40, 12)))
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"pattern": "matrix", "patterns": {"matrix": {"charset": "runes"}}}))
        result = runner.invoke(app, ["run", "--config", str(path)])
        assert result.exit_code == 1
        assert "runes" in result.output


class TestSplashControls:
    def test_initial_state(self, splash) -> None:
        app = splash(pattern="starfield", quality="low")
        assert isinstance(app.engine.pattern, StarfieldPattern)
        assert app.scheduler.fps == 15
        assert app.engine.buffer.size == Size(40, 12)

    def test_quit(self, splash) -> None:
        app = splash()
        app.running = True
        app.handle_event(KeyEvent(char='q'))
        assert app.running is False
        app.running = True
        app.handle_event(KeyEvent(key=Key.ESCAPE))
        assert app.running is False

    def test_pause(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char=' '))
        assert app.engine.paused is True

    def test_cycle_patterns(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='n'))
        assert isinstance(app.engine.pattern, StarfieldPattern)
        app.handle_event(KeyEvent(char='p'))
        app.handle_event(KeyEvent(char='p'))
        assert app.engine.pattern.name == "plasma"
        app.handle_event(KeyEvent(char='n'))
        assert isinstance(app.engine.pattern, WavePattern)

    def test_pattern_options_follow_switch(self, splash) -> None:
        app = splash(patterns={"matrix": {"density": 0.9}})
        app.switch_pattern(2)
        assert isinstance(app.engine.pattern, MatrixPattern)
        assert app.engine.pattern.config["density"] == 0.9

    def test_theme_cycle(self, splash) -> None:
        app = splash(theme="ocean")
        app.handle_event(KeyEvent(char='t'))
        assert app.engine.pattern.theme.name == "matrix"
        # The new theme survives a pattern switch
        app.handle_event(KeyEvent(char='n'))
        assert app.engine.pattern.theme.name == "matrix"

    def test_preset_keys(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='3'))
        assert app.engine.pattern.preset_id == 3

    def test_fps_keys(self, splash) -> None:
        app = splash(fps=MAX_FPS - 2)
        app.handle_event(KeyEvent(char='+'))
        assert app.scheduler.fps == MAX_FPS
        assert app.engine.fps == MAX_FPS
        app.handle_event(KeyEvent(char='-'))
        assert app.scheduler.fps == MAX_FPS - FPS_STEP

    def test_fps_floor(self, splash) -> None:
        app = splash(fps=2)
        app.handle_event(KeyEvent(char='-'))
        assert app.scheduler.fps == 1

    def test_mouse(self, splash) -> None:
        app = splash()
        app.handle_event(MouseEvent(4, 5, MouseAction.PRESS))
        assert app.engine.mouse == Point(4, 5)
        app.handle_event(MouseEvent(6, 7, MouseAction.MOVE))
        assert app.engine.mouse == Point(6, 7)
        assert len(app.engine.pattern.ripples) == 2
        app.handle_event(MouseEvent(1, 1, MouseAction.RELEASE))
        assert app.engine.mouse == Point(6, 7)

    def test_mouse_disabled(self, splash) -> None:
        app = splash(mouse=False)
        app.handle_event(MouseEvent(4, 5, MouseAction.PRESS))
        assert app.engine.mouse is None

    def test_unknown_pattern(self, splash) -> None:
        with pytest.raises(KeyError):
            splash(pattern="fractal")


class TestHelpKeys:
    def test_h_toggles_help(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='h'))
        assert app.help.visible is True
        app.handle_event(KeyEvent(char='h'))
        assert app.help.visible is False
        app.handle_event(KeyEvent(char='?'))
        assert app.help.visible is True

    def test_escape_closes_help_without_quitting(self, splash) -> None:
        app = splash()
        app.running = True
        app.handle_event(KeyEvent(char='h'))
        app.handle_event(KeyEvent(key=Key.ESCAPE))
        assert app.help.visible is False
        assert app.running is True
        app.handle_event(KeyEvent(key=Key.ESCAPE))
        assert app.running is False

    def test_tab_and_arrows_change_tab(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='h'))
        app.handle_event(KeyEvent(key=Key.TAB))
        assert app.help.tab == "patterns"
        app.handle_event(KeyEvent(key=Key.RIGHT))
        assert app.help.tab == "themes"
        app.handle_event(KeyEvent(key=Key.LEFT))
        assert app.help.tab == "patterns"

    def test_other_keys_still_work_with_help_open(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='h'))
        app.handle_event(KeyEvent(char='n'))
        assert isinstance(app.engine.pattern, StarfieldPattern)
        assert app.help.visible is True

    def test_help_reaches_the_screen(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='h'))
        app.engine.tick(0.0)
        assert app.engine.help_overlay.cell_count > 0


class TestToasts:
    def test_pattern_switch(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='n'))
        assert app.toasts.toasts[-1].message == "Pattern: Starfield"

    def test_theme_change(self, splash) -> None:
        app = splash(theme="ocean")
        app.handle_event(KeyEvent(char='t'))
        assert app.toasts.toasts[-1].message.startswith("Theme: ")

    def test_preset(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='1'))
        toast = app.toasts.toasts[-1]
        assert toast.kind is ToastKind.SUCCESS
        assert toast.message.startswith("Preset 1: ")

    def test_missing_preset_warns(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='9'))
        assert app.toasts.toasts[-1].kind is ToastKind.WARNING
        assert app.engine.pattern.preset_id is None

    def test_fps_and_pause(self, splash) -> None:
        app = splash(fps=30)
        app.handle_event(KeyEvent(char='+'))
        app.handle_event(KeyEvent(char=' '))
        assert [t.message for t in app.toasts.toasts] == ["FPS: 35", "Paused"]

    def test_toast_drawn_on_tick(self, splash) -> None:
        app = splash()
        app.handle_event(KeyEvent(char='n'))
        app.engine.tick(0.0)
        assert app.toasts.cell_count > 0
