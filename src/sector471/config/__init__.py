"""Configuration management for Sector 471."""
from __future__ import annotations

from sector471.config.paths import Sector471Paths, get_paths, reset_paths
from sector471.config.settings import Settings, get_settings_path, settings

__all__ = [
    "Sector471Paths",
    "Settings",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
