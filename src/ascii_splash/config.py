"""Application configuration: defaults, quality presets, JSON config file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "ascii-splash" / "config.json"

QUALITY_PRESETS: dict[str, int] = {
    "low": 15,
    "medium": 30,
    "high": 60,
}

MIN_FPS = 1
MAX_FPS = 120


class ConfigError(ValueError):
    """Raised for an unreadable or invalid configuration."""


@dataclass(frozen=True)
class AppConfig:
    """
    Settings for a splash session.

    ``fps`` overrides the quality preset when set. ``patterns`` holds
    per-pattern option dicts keyed by pattern name, passed through to the
    pattern constructors.
    """
    pattern: str = "waves"
    quality: str = "medium"
    fps: int | None = None
    theme: str = "ocean"
    mouse: bool = True
    patterns: dict[str, dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.quality not in QUALITY_PRESETS:
            raise ConfigError(
                f"Unknown quality {self.quality!r} (expected one of: {', '.join(QUALITY_PRESETS)})"
            )
        if self.fps is not None:
            if isinstance(self.fps, bool) or not isinstance(self.fps, int):
                raise ConfigError(f"fps must be an integer, got {self.fps!r}")
            if not MIN_FPS <= self.fps <= MAX_FPS:
                raise ConfigError(f"fps must be between {MIN_FPS} and {MAX_FPS}, got {self.fps}")
        if not isinstance(self.patterns, dict):
            raise ConfigError("patterns must be an object keyed by pattern name")

    def effective_fps(self) -> int:
        """Explicit FPS if set, otherwise the quality preset's rate."""
        if self.fps is not None:
            return self.fps
        return QUALITY_PRESETS[self.quality]

    def pattern_options(self, name: str) -> dict[str, Any]:
        return dict(self.patterns.get(name, {}))

    def merged(self, **overrides: Any) -> AppConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        """Build a config from a parsed JSON object, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("ignoring unknown config keys: %s", ", ".join(unknown))
        try:
            return cls(**{key: value for key, value in data.items() if key in known})
        except TypeError as e:
            raise ConfigError(str(e)) from e


def load_config(path: str | Path | None = None) -> AppConfig:
    """
    Load configuration from a JSON file.

    A missing file yields the defaults. Malformed JSON or invalid values
    raise ConfigError.
    """
    config_path = Path(path).expanduser() if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug("no config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_path}: invalid JSON ({e})") from e
    except OSError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a JSON object")

    logger.debug("loaded config from %s", config_path)
    return AppConfig.from_dict(data)
