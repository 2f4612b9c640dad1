"""Terminal player launch command."""

from __future__ import annotations

import argparse

from sector471.cli.context import load_text_provider, profile_for_scale, resolve_time_scale
from sector471.config import settings
from sector471.tui.app import PlayerApp


def cmd_play(args: argparse.Namespace) -> int:
    """Launch the terminal player."""
    scale = resolve_time_scale(args)
    if scale is None:
        return 1
    provider = load_text_provider(getattr(args, "scripts", None))
    app = PlayerApp(provider, profile_for_scale(scale), tick=settings.tick_seconds)
    app.run()
    return 0
