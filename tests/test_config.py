"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from ascii_splash.config import AppConfig, ConfigError, load_config


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.pattern == "waves"
        assert config.theme == "ocean"
        assert config.mouse is True
        assert config.effective_fps() == 30

    @pytest.mark.parametrize("quality,fps", [("low", 15), ("medium", 30), ("high", 60)])
    def test_quality_presets(self, quality, fps) -> None:
        assert AppConfig(quality=quality).effective_fps() == fps

    def test_explicit_fps_wins(self) -> None:
        assert AppConfig(quality="low", fps=45).effective_fps() == 45

    @pytest.mark.parametrize("fps", [0, 121, -5, 2.5, True])
    def test_invalid_fps(self, fps) -> None:
        with pytest.raises(ConfigError):
            AppConfig(fps=fps)

    def test_invalid_quality(self) -> None:
        with pytest.raises(ConfigError):
            AppConfig(quality="ultra")

    def test_merged_ignores_none(self) -> None:
        config = AppConfig(theme="fire").merged(theme=None, pattern="plasma", fps=None)
        assert config.theme == "fire"
        assert config.pattern == "plasma"

    def test_merged_validates(self) -> None:
        with pytest.raises(ConfigError):
            AppConfig().merged(fps=500)

    def test_pattern_options(self) -> None:
        config = AppConfig(patterns={"waves": {"speed": 2.0}})
        assert config.pattern_options("waves") == {"speed": 2.0}
        assert config.pattern_options("matrix") == {}


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "nope.json") == AppConfig()

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "pattern": "matrix",
            "quality": "high",
            "theme": "matrix",
            "mouse": False,
            "patterns": {"matrix": {"density": 0.5}},
        }))
        config = load_config(path)
        assert config.pattern == "matrix"
        assert config.effective_fps() == 60
        assert config.mouse is False
        assert config.pattern_options("matrix") == {"density": 0.5}

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "fire", "favorites": {}}))
        assert load_config(path).theme == "fire"

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fps": 1000}))
        with pytest.raises(ConfigError):
            load_config(path)
