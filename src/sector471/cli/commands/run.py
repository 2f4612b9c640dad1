"""Headless flow command."""

from __future__ import annotations

import argparse
import asyncio

from sector471.cli.context import load_text_provider, profile_for_scale, resolve_time_scale
from sector471.config import settings
from sector471.runners.run_flow import run_flow
from sector471.scenes import Choice


def cmd_run(args: argparse.Namespace) -> int:
    """Play the flow without a UI, printing JSONL events."""
    scale = resolve_time_scale(args)
    if scale is None:
        return 1
    provider = load_text_provider(args.scripts)
    choice = Choice(args.choice) if args.choice else None
    return asyncio.run(
        run_flow(
            provider,
            profile_for_scale(scale),
            tick=settings.tick_seconds,
            choice=choice,
        )
    )
