"""Shared context helpers for CLI command modules."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sector471.config import settings
from sector471.models.script_store import ScriptStore
from sector471.models.timings import TimingProfile


def load_text_provider(path: str | Path | None) -> ScriptStore:
    """Load scripts from ``path`` or the configured location.

    A missing file is not fatal: the store falls back to placeholder text
    and a warning is printed.
    """
    resolved = Path(path).expanduser() if path else settings.scripts_path
    store = ScriptStore(resolved)
    if store.error_message:
        print(f"Warning: {store.error_message}", file=sys.stderr)
    return store


def resolve_time_scale(args: argparse.Namespace) -> float | None:
    """Time scale from args or settings. None (after an error message) if invalid."""
    scale = getattr(args, "time_scale", None)
    if scale is None:
        return settings.time_scale
    if scale <= 0:
        print("Error: --time-scale must be positive", file=sys.stderr)
        return None
    return float(scale)


def profile_for_scale(scale: float) -> TimingProfile:
    profile = TimingProfile()
    return profile if scale == 1.0 else profile.scaled(scale)
