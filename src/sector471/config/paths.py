"""Centralized path management for Sector 471.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/sector471 (default: ~/.config/sector471)
- Data: $XDG_DATA_HOME/sector471 (default: ~/.local/share/sector471)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from sector471.models.script_store import SCRIPTS_FILENAME


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_data_home() -> Path:
    """Get XDG_DATA_HOME, defaulting to ~/.local/share."""
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


@dataclass
class Sector471Paths:
    """Centralized path management following XDG spec."""

    workspace: Path  # Current working directory

    _config_home: Path = field(default_factory=_xdg_config_home)
    _data_home: Path = field(default_factory=_xdg_data_home)

    # === WORKSPACE PATHS ===

    @property
    def workspace_config(self) -> Path:
        """Workspace .sector471/ directory."""
        return self.workspace / ".sector471"

    @property
    def debug_log(self) -> Path:
        """Debug log: .sector471/debug.log"""
        return self.workspace_config / "debug.log"

    @property
    def workspace_scripts(self) -> Path:
        """Scripts.json in the workspace root."""
        return self.workspace / SCRIPTS_FILENAME

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/sector471/"""
        return self._config_home / "sector471"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/sector471/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_data_dir(self) -> Path:
        """Global data: ~/.local/share/sector471/"""
        return self._data_home / "sector471"

    @property
    def global_scripts(self) -> Path:
        """Installed scripts: ~/.local/share/sector471/Scripts.json"""
        return self.global_data_dir / SCRIPTS_FILENAME

    # === CONFIG RESOLUTION ===

    def scripts_file(self) -> Path | None:
        """Resolve Scripts.json: workspace > global data dir."""
        for candidate in (self.workspace_scripts, self.global_scripts):
            if candidate.exists():
                return candidate
        return None


# Singleton instance
_paths: Sector471Paths | None = None


def get_paths(workspace: Path | None = None) -> Sector471Paths:
    """Get the paths singleton.

    On first call, optionally set the workspace directory.
    Subsequent calls return the same instance.
    """
    global _paths
    if _paths is None:
        _paths = Sector471Paths(workspace=workspace or Path.cwd())
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
