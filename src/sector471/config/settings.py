"""Configuration and settings persistence."""

import json
import logging
from pathlib import Path
from typing import Any

from sector471.config.paths import get_paths
from sector471.runtime.clock import DEFAULT_TICK_SECONDS

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the sector471 config directory, creating if needed.

    Returns XDG-compliant path: ~/.config/sector471/
    """
    config_dir = get_paths().global_config_dir
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for Sector 471."""

    _defaults: dict[str, Any] = {
        "time_scale": 1.0,
        "tick_seconds": DEFAULT_TICK_SECONDS,
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                self._data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                self._data = {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            get_config_dir()
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    def _positive_float(self, key: str) -> float:
        default = float(self._defaults[key])
        try:
            value = float(self._data.get(key, default))
        except (TypeError, ValueError):
            return default
        return value if value > 0 else default

    @property
    def time_scale(self) -> float:
        """Multiplier applied to every timing (0.5 plays twice as fast)."""
        return self._positive_float("time_scale")

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"time_scale must be positive, got {value}")
        self.set("time_scale", float(value))

    @property
    def tick_seconds(self) -> float:
        """PauseClock tick length; bounds pause latency."""
        return self._positive_float("tick_seconds")

    @tick_seconds.setter
    def tick_seconds(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"tick_seconds must be positive, got {value}")
        self.set("tick_seconds", float(value))

    @property
    def scripts_path(self) -> Path | None:
        """Configured Scripts.json, or the first one found on the search path."""
        saved = self._data.get("scripts_path")
        if saved:
            return Path(saved).expanduser().resolve()
        return get_paths().scripts_file()

    @scripts_path.setter
    def scripts_path(self, value: str | Path | None) -> None:
        self.set("scripts_path", str(value) if value else None)


# Global settings instance
settings = Settings()
